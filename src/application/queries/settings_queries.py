"""Settings queries (CQRS read operations) for users, roles and permissions.

Queries represent requests for data. They are immutable and never change
state.
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.value_objects import PageQuery


@dataclass(frozen=True, kw_only=True)
class ListUsers:
    """Paged user listing (search on name and email)."""

    page: PageQuery = field(default_factory=PageQuery)


@dataclass(frozen=True, kw_only=True)
class GetUser:
    """Single user with role ids."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListRoles:
    """Paged role listing (superuser never listed)."""

    page: PageQuery = field(default_factory=PageQuery)


@dataclass(frozen=True, kw_only=True)
class GetRole:
    """Single role with its permissions."""

    role_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListRoleOptions:
    """All assignable roles (superuser excluded), for select inputs."""


@dataclass(frozen=True, kw_only=True)
class ListPermissions:
    """Paged permission listing (search on name and group)."""

    page: PageQuery = field(default_factory=PageQuery)


@dataclass(frozen=True, kw_only=True)
class GetPermission:
    """Single permission."""

    permission_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListPermissionOptions:
    """All permissions grouped by group label, for select inputs."""
