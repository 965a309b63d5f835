"""Permission naming components for RBAC authorization.

Permission names are plain strings stored in the permissions table and
follow the "{group} {action}" convention, e.g. "user edit". The enums
below describe the built-in groups and actions used by the settings
endpoints and the RBAC seeder; administrators may create permissions
outside this vocabulary.

Usage:
    from src.domain.enums import PermissionAction, PermissionGroup, permission_name

    permission_name(PermissionGroup.USER, PermissionAction.EDIT)  # "user edit"
"""

from enum import Enum


class PermissionGroup(str, Enum):
    """Built-in permission groups (one per settings resource)."""

    USER = "user"
    ROLE = "role"
    PERMISSION = "permission"

    @classmethod
    def values(cls) -> list[str]:
        """Get all group values as strings."""
        return [group.value for group in cls]


class PermissionAction(str, Enum):
    """Built-in actions on a settings resource."""

    LIST = "list"
    CREATE = "create"
    DETAIL = "detail"
    EDIT = "edit"
    DELETE = "delete"

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings."""
        return [action.value for action in cls]


def permission_name(group: PermissionGroup | str, action: PermissionAction | str) -> str:
    """Build a permission name from its group and action.

    Args:
        group: Permission group (e.g. "user").
        action: Action on the group (e.g. "edit").

    Returns:
        Permission name such as "user edit".
    """
    group_value = group.value if isinstance(group, PermissionGroup) else group
    action_value = action.value if isinstance(action, PermissionAction) else action
    return f"{group_value} {action_value}"
