"""Resolved identity attached to authenticated requests.

UserInformation is the flattened view of a user and their RBAC graph:
all role names and the union of every permission those roles grant. It
is what the identity cache stores (as JSON under ``user:<id>``) and what
the authorization guard evaluates.
"""

from dataclasses import asdict, dataclass, field
from typing import Any
from uuid import UUID

from src.domain.enums import SUPERUSER_ROLE


@dataclass(frozen=True, slots=True, kw_only=True)
class UserInformation:
    """Resolved identity (roles + flattened permissions).

    Roles and permissions are stored sorted with duplicates removed so
    two resolutions of the same graph compare and serialize identically.

    Attributes:
        id: User identifier
        name: Display name
        email: Email address
        roles: Role names held by the user
        permissions: Union of permission names across all roles
    """

    id: UUID
    name: str
    email: str
    roles: tuple[str, ...] = field(default_factory=tuple)
    permissions: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def build(
        cls,
        *,
        id: UUID,
        name: str,
        email: str,
        roles: list[str] | tuple[str, ...],
        permissions: list[str] | tuple[str, ...],
    ) -> "UserInformation":
        """Create a normalized identity (sorted, de-duplicated names)."""
        return cls(
            id=id,
            name=name,
            email=email,
            roles=tuple(sorted(set(roles))),
            permissions=tuple(sorted(set(permissions))),
        )

    @property
    def is_superuser(self) -> bool:
        """True if the identity holds the superuser sentinel role."""
        return SUPERUSER_ROLE in self.roles

    def has_role(self, role: str) -> bool:
        """Check a single role by name."""
        return role in self.roles

    def has_permission(self, permission: str) -> bool:
        """Check a single permission by name (no superuser bypass)."""
        return permission in self.permissions

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-compatible dict (cache wire format)."""
        data = asdict(self)
        data["id"] = str(self.id)
        data["roles"] = list(self.roles)
        data["permissions"] = list(self.permissions)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserInformation":
        """Deserialize from the cache wire format.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If the id is not a valid UUID.
        """
        return cls.build(
            id=UUID(data["id"]),
            name=data["name"],
            email=data["email"],
            roles=list(data.get("roles", [])),
            permissions=list(data.get("permissions", [])),
        )
