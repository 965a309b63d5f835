"""Profile resource handlers (the caller's own account).

Handlers:
    get_profile - Resolved identity of the caller
    update_profile - Change name and email
    change_password - Change password (current password required)
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.change_password_handler import (
    ChangePasswordHandler,
)
from src.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)
from src.application.commands.profile_commands import ChangePassword, UpdateProfile
from src.core.container import get_change_password_handler, get_update_profile_handler
from src.core.result import Failure, Success
from src.domain.entities.user_information import UserInformation
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_identity,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import UserInformationResponse
from src.schemas.common_schemas import MessageResponse
from src.schemas.profile_schemas import PasswordChangeRequest, ProfileUpdateRequest


async def get_profile(
    identity: UserInformation = Depends(get_current_identity),
) -> UserInformationResponse:
    """GET /api/v1/profile → 200 OK"""
    return UserInformationResponse.from_identity(identity)


async def update_profile(
    request: Request,
    data: ProfileUpdateRequest,
    identity: UserInformation = Depends(get_current_identity),
    handler: UpdateProfileHandler = Depends(get_update_profile_handler),
) -> UserInformationResponse | JSONResponse:
    """PATCH /api/v1/profile → 200 OK with the freshly resolved identity."""
    command = UpdateProfile(user_id=identity.id, name=data.name, email=data.email)

    match await handler.handle(command):
        case Success(value=updated):
            return UserInformationResponse.from_identity(updated)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def change_password(
    request: Request,
    data: PasswordChangeRequest,
    identity: UserInformation = Depends(get_current_identity),
    handler: ChangePasswordHandler = Depends(get_change_password_handler),
) -> MessageResponse | JSONResponse:
    """PATCH /api/v1/profile/password → 200 OK"""
    command = ChangePassword(
        user_id=identity.id,
        current_password=data.current_password,
        password=data.password,
        password_confirmation=data.password_confirmation,
    )

    match await handler.handle(command):
        case Success():
            return MessageResponse(message="Password changed successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
