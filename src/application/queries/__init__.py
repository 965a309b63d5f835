"""Queries - Read operations that never change state."""

from src.application.queries.settings_queries import (
    GetPermission,
    GetRole,
    GetUser,
    ListPermissionOptions,
    ListPermissions,
    ListRoleOptions,
    ListRoles,
    ListUsers,
)

__all__ = [
    "GetPermission",
    "GetRole",
    "GetUser",
    "ListPermissionOptions",
    "ListPermissions",
    "ListRoleOptions",
    "ListRoles",
    "ListUsers",
]
