"""Permission administration commands (settings/permissions)."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.types import Name


@dataclass(frozen=True, kw_only=True)
class CreatePermissions:
    """Create several permissions under one group.

    Attributes:
        group: Group label (e.g. "user").
        names: Permission names; must be non-empty.
    """

    group: Name
    names: list[str]


@dataclass(frozen=True, kw_only=True)
class UpdatePermission:
    """Rename or regroup a permission."""

    permission_id: UUID
    name: Name
    group: Name


@dataclass(frozen=True, kw_only=True)
class DeletePermission:
    """Delete a permission (removed from every role)."""

    permission_id: UUID
