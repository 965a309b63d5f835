"""Query handlers for the settings endpoints (read-only, no side effects)."""

from src.application.queries.handlers.permission_query_handlers import (
    GetPermissionHandler,
    ListPermissionOptionsHandler,
    ListPermissionsHandler,
)
from src.application.queries.handlers.role_query_handlers import (
    GetRoleHandler,
    ListRoleOptionsHandler,
    ListRolesHandler,
)
from src.application.queries.handlers.user_query_handlers import (
    GetUserHandler,
    ListUsersHandler,
)

__all__ = [
    "GetPermissionHandler",
    "GetRoleHandler",
    "GetUserHandler",
    "ListPermissionOptionsHandler",
    "ListPermissionsHandler",
    "ListRoleOptionsHandler",
    "ListRolesHandler",
    "ListUsersHandler",
]
