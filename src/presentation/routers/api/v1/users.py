"""Settings users resource handlers.

Permission requirements are declared in routes/registry.py; handlers
here only translate between HTTP and commands/queries.

Handlers:
    list_users, create_user, get_user, update_user, delete_user,
    set_user_password, send_user_verification_email
"""

from uuid import UUID

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.create_user_handler import CreateUserHandler
from src.application.commands.handlers.delete_user_handler import DeleteUserHandler
from src.application.commands.handlers.send_user_verification_email_handler import (
    SendUserVerificationEmailHandler,
)
from src.application.commands.handlers.set_user_password_handler import (
    SetUserPasswordHandler,
)
from src.application.commands.handlers.update_user_handler import UpdateUserHandler
from src.application.commands.user_commands import (
    CreateUser,
    DeleteUser,
    SendUserVerificationEmail,
    SetUserPassword,
    UpdateUser,
)
from src.application.queries.handlers import GetUserHandler, ListUsersHandler
from src.application.queries.settings_queries import GetUser, ListUsers
from src.core.container import (
    get_create_user_handler,
    get_delete_user_handler,
    get_get_user_handler,
    get_list_users_handler,
    get_send_user_verification_email_handler,
    get_set_user_password_handler,
    get_update_user_handler,
)
from src.core.result import Failure, Success
from src.domain.value_objects import PageQuery
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.pagination import get_page_query
from src.schemas.common_schemas import MessageResponse
from src.schemas.settings_schemas import (
    UserCreateRequest,
    UserListResponse,
    UserPasswordRequest,
    UserResponse,
    UserUpdateRequest,
)


async def list_users(
    request: Request,
    page: PageQuery = Depends(get_page_query),
    handler: ListUsersHandler = Depends(get_list_users_handler),
) -> UserListResponse | JSONResponse:
    """GET /api/v1/settings/users → 200 OK"""
    match await handler.handle(ListUsers(page=page)):
        case Success(value=result):
            return UserListResponse.from_page(result)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def create_user(
    request: Request,
    data: UserCreateRequest,
    handler: CreateUserHandler = Depends(get_create_user_handler),
) -> UserResponse | JSONResponse:
    """POST /api/v1/settings/users → 201 Created"""
    command = CreateUser(
        name=data.name,
        email=data.email,
        password=data.password,
        status=data.status,
        remark=data.remark,
        role_ids=data.role_ids,
        verified=data.verified,
    )

    match await handler.handle(command):
        case Success(value=user):
            return UserResponse.from_entity(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def get_user(
    request: Request,
    user_id: UUID,
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> UserResponse | JSONResponse:
    """GET /api/v1/settings/users/{user_id} → 200 OK"""
    match await handler.handle(GetUser(user_id=user_id)):
        case Success(value=user):
            return UserResponse.from_entity(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def update_user(
    request: Request,
    user_id: UUID,
    data: UserUpdateRequest,
    handler: UpdateUserHandler = Depends(get_update_user_handler),
) -> UserResponse | JSONResponse:
    """PATCH /api/v1/settings/users/{user_id} → 200 OK"""
    command = UpdateUser(
        user_id=user_id,
        name=data.name,
        email=data.email,
        status=data.status,
        remark=data.remark,
        role_ids=data.role_ids,
    )

    match await handler.handle(command):
        case Success(value=user):
            return UserResponse.from_entity(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def delete_user(
    request: Request,
    user_id: UUID,
    handler: DeleteUserHandler = Depends(get_delete_user_handler),
) -> None | JSONResponse:
    """DELETE /api/v1/settings/users/{user_id} → 204 No Content (soft delete)"""
    match await handler.handle(DeleteUser(user_id=user_id)):
        case Success():
            return None
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def set_user_password(
    request: Request,
    user_id: UUID,
    data: UserPasswordRequest,
    handler: SetUserPasswordHandler = Depends(get_set_user_password_handler),
) -> MessageResponse | JSONResponse:
    """PATCH /api/v1/settings/users/{user_id}/password → 200 OK"""
    command = SetUserPassword(
        user_id=user_id,
        password=data.password,
        password_confirmation=data.password_confirmation,
    )

    match await handler.handle(command):
        case Success():
            return MessageResponse(message="Password updated")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def send_user_verification_email(
    request: Request,
    user_id: UUID,
    handler: SendUserVerificationEmailHandler = Depends(
        get_send_user_verification_email_handler
    ),
) -> MessageResponse | JSONResponse:
    """POST /api/v1/settings/users/{user_id}/verification-email → 202 Accepted"""
    match await handler.handle(SendUserVerificationEmail(user_id=user_id)):
        case Success():
            return MessageResponse(message="Verification email sent")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
