"""Role and Permission domain entities.

A role groups permissions; users hold roles. The "superuser" role is a
sentinel that never carries permissions of its own.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.enums import SUPERUSER_ROLE


@dataclass
class Permission:
    """Named capability, grouped for display.

    Attributes:
        id: Unique permission identifier
        name: Unique permission name (e.g. "user edit")
        group: Group label used to organize permissions in the UI
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: UUID
    name: str
    group: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Role:
    """Named set of permissions.

    Attributes:
        id: Unique role identifier
        name: Unique role name
        permissions: Permissions granted by this role (loaded on detail views
            and by the identity resolver)
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: UUID
    name: str
    permissions: list[Permission] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_superuser(self) -> bool:
        """True for the reserved superuser sentinel role."""
        return self.name == SUPERUSER_ROLE

    @property
    def permission_names(self) -> list[str]:
        """Names of the permissions granted by this role."""
        return [permission.name for permission in self.permissions]
