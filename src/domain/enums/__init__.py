"""Domain enums for business logic.

Available Enums:
    - UserStatus: Account lifecycle status (active, inactive, suspended, blocked)
    - UserRole: Built-in role names (superuser sentinel, admin)
    - PermissionGroup / PermissionAction: "{group} {action}" permission vocabulary
"""

from src.domain.enums.permission import (
    PermissionAction,
    PermissionGroup,
    permission_name,
)
from src.domain.enums.user_role import SUPERUSER_ROLE, UserRole
from src.domain.enums.user_status import UserStatus

__all__ = [
    "PermissionAction",
    "PermissionGroup",
    "SUPERUSER_ROLE",
    "UserRole",
    "UserStatus",
    "permission_name",
]
