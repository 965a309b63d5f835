"""Role administration commands (settings/roles)."""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.types import Name


@dataclass(frozen=True, kw_only=True)
class CreateRole:
    """Create a role with a permission set.

    Attributes:
        name: Unique role name; "superuser" is reserved.
        permission_ids: Permissions to grant; every id must exist.
    """

    name: Name
    permission_ids: list[UUID] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class UpdateRole:
    """Rename a role and replace its permission set."""

    role_id: UUID
    name: Name
    permission_ids: list[UUID] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class DeleteRole:
    """Delete a role. Holders lose it immediately."""

    role_id: UUID
