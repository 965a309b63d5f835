"""Settings DTOs for select-option queries."""

from dataclasses import dataclass, field

from src.domain.entities.role import Permission


@dataclass(frozen=True, kw_only=True)
class PermissionGroupOptions:
    """Permissions of one group, for grouped select inputs."""

    group: str
    permissions: list[Permission] = field(default_factory=list)
