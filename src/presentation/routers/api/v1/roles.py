"""Settings roles resource handlers.

The superuser sentinel never appears here: it is excluded from listings,
reads of it return 404 and writes to it return 422.
"""

from uuid import UUID

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.create_role_handler import CreateRoleHandler
from src.application.commands.handlers.delete_role_handler import DeleteRoleHandler
from src.application.commands.handlers.update_role_handler import UpdateRoleHandler
from src.application.commands.role_commands import CreateRole, DeleteRole, UpdateRole
from src.application.queries.handlers import GetRoleHandler, ListRolesHandler
from src.application.queries.settings_queries import GetRole, ListRoles
from src.core.container import (
    get_create_role_handler,
    get_delete_role_handler,
    get_get_role_handler,
    get_list_roles_handler,
    get_update_role_handler,
)
from src.core.result import Failure, Success
from src.domain.value_objects import PageQuery
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.pagination import get_page_query
from src.schemas.settings_schemas import (
    RoleCreateRequest,
    RoleListResponse,
    RoleResponse,
    RoleUpdateRequest,
)


async def list_roles(
    request: Request,
    page: PageQuery = Depends(get_page_query),
    handler: ListRolesHandler = Depends(get_list_roles_handler),
) -> RoleListResponse | JSONResponse:
    """GET /api/v1/settings/roles → 200 OK"""
    match await handler.handle(ListRoles(page=page)):
        case Success(value=result):
            return RoleListResponse.from_page(result)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def create_role(
    request: Request,
    data: RoleCreateRequest,
    handler: CreateRoleHandler = Depends(get_create_role_handler),
) -> RoleResponse | JSONResponse:
    """POST /api/v1/settings/roles → 201 Created"""
    command = CreateRole(name=data.name, permission_ids=data.permission_ids)

    match await handler.handle(command):
        case Success(value=role):
            return RoleResponse.from_entity(role)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def get_role(
    request: Request,
    role_id: UUID,
    handler: GetRoleHandler = Depends(get_get_role_handler),
) -> RoleResponse | JSONResponse:
    """GET /api/v1/settings/roles/{role_id} → 200 OK"""
    match await handler.handle(GetRole(role_id=role_id)):
        case Success(value=role):
            return RoleResponse.from_entity(role)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def update_role(
    request: Request,
    role_id: UUID,
    data: RoleUpdateRequest,
    handler: UpdateRoleHandler = Depends(get_update_role_handler),
) -> RoleResponse | JSONResponse:
    """PATCH /api/v1/settings/roles/{role_id} → 200 OK"""
    command = UpdateRole(
        role_id=role_id, name=data.name, permission_ids=data.permission_ids
    )

    match await handler.handle(command):
        case Success(value=role):
            return RoleResponse.from_entity(role)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def delete_role(
    request: Request,
    role_id: UUID,
    handler: DeleteRoleHandler = Depends(get_delete_role_handler),
) -> None | JSONResponse:
    """DELETE /api/v1/settings/roles/{role_id} → 204 No Content"""
    match await handler.handle(DeleteRole(role_id=role_id)):
        case Success():
            return None
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
