"""Select-option handlers for settings forms (authentication only)."""

from fastapi import Depends

from src.application.queries.handlers import (
    ListPermissionOptionsHandler,
    ListRoleOptionsHandler,
)
from src.application.queries.settings_queries import (
    ListPermissionOptions,
    ListRoleOptions,
)
from src.core.container import (
    get_list_permission_options_handler,
    get_list_role_options_handler,
)
from src.core.result import Success
from src.schemas.settings_schemas import PermissionGroupOption, RoleOption


async def list_role_options(
    handler: ListRoleOptionsHandler = Depends(get_list_role_options_handler),
) -> list[RoleOption]:
    """GET /api/v1/settings/select/roles → 200 OK (superuser excluded)"""
    match await handler.handle(ListRoleOptions()):
        case Success(value=roles):
            return [RoleOption(id=role.id, name=role.name) for role in roles]
    return []


async def list_permission_options(
    handler: ListPermissionOptionsHandler = Depends(
        get_list_permission_options_handler
    ),
) -> list[PermissionGroupOption]:
    """GET /api/v1/settings/select/permissions → 200 OK (grouped by group)"""
    match await handler.handle(ListPermissionOptions()):
        case Success(value=groups):
            return [PermissionGroupOption.from_dto(group) for group in groups]
    return []
