"""Settings permissions resource handlers."""

from uuid import UUID

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.create_permissions_handler import (
    CreatePermissionsHandler,
)
from src.application.commands.handlers.delete_permission_handler import (
    DeletePermissionHandler,
)
from src.application.commands.handlers.update_permission_handler import (
    UpdatePermissionHandler,
)
from src.application.commands.permission_commands import (
    CreatePermissions,
    DeletePermission,
    UpdatePermission,
)
from src.application.queries.handlers import (
    GetPermissionHandler,
    ListPermissionsHandler,
)
from src.application.queries.settings_queries import GetPermission, ListPermissions
from src.core.container import (
    get_create_permissions_handler,
    get_delete_permission_handler,
    get_get_permission_handler,
    get_list_permissions_handler,
    get_update_permission_handler,
)
from src.core.result import Failure, Success
from src.domain.value_objects import PageQuery
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.pagination import get_page_query
from src.schemas.settings_schemas import (
    PermissionCreateRequest,
    PermissionCreateResponse,
    PermissionListResponse,
    PermissionResponse,
    PermissionUpdateRequest,
)


async def list_permissions(
    request: Request,
    page: PageQuery = Depends(get_page_query),
    handler: ListPermissionsHandler = Depends(get_list_permissions_handler),
) -> PermissionListResponse | JSONResponse:
    """GET /api/v1/settings/permissions → 200 OK"""
    match await handler.handle(ListPermissions(page=page)):
        case Success(value=result):
            return PermissionListResponse.from_page(result)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def create_permissions(
    request: Request,
    data: PermissionCreateRequest,
    handler: CreatePermissionsHandler = Depends(get_create_permissions_handler),
) -> PermissionCreateResponse | JSONResponse:
    """POST /api/v1/settings/permissions → 201 Created"""
    command = CreatePermissions(group=data.group, names=data.names)

    match await handler.handle(command):
        case Success(value=permissions):
            return PermissionCreateResponse(
                items=[PermissionResponse.from_entity(p) for p in permissions]
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def get_permission(
    request: Request,
    permission_id: UUID,
    handler: GetPermissionHandler = Depends(get_get_permission_handler),
) -> PermissionResponse | JSONResponse:
    """GET /api/v1/settings/permissions/{permission_id} → 200 OK"""
    match await handler.handle(GetPermission(permission_id=permission_id)):
        case Success(value=permission):
            return PermissionResponse.from_entity(permission)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def update_permission(
    request: Request,
    permission_id: UUID,
    data: PermissionUpdateRequest,
    handler: UpdatePermissionHandler = Depends(get_update_permission_handler),
) -> PermissionResponse | JSONResponse:
    """PATCH /api/v1/settings/permissions/{permission_id} → 200 OK"""
    command = UpdatePermission(
        permission_id=permission_id, name=data.name, group=data.group
    )

    match await handler.handle(command):
        case Success(value=permission):
            return PermissionResponse.from_entity(permission)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def delete_permission(
    request: Request,
    permission_id: UUID,
    handler: DeletePermissionHandler = Depends(get_delete_permission_handler),
) -> None | JSONResponse:
    """DELETE /api/v1/settings/permissions/{permission_id} → 204 No Content"""
    match await handler.handle(DeletePermission(permission_id=permission_id)):
        case Success():
            return None
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
