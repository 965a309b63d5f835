"""Auth resource handlers (public).

Handler functions for registration, login, email verification and
password reset. Routes are registered via ROUTE_REGISTRY in
routes/registry.py.

Handlers:
    register - Create an unverified account and send a verification link
    login - Exchange credentials for a bearer token
    verify_email - Consume a verification token
    resend_verification_email - Issue a new verification token
    forgot_password - Issue a password reset token
    reset_password - Consume a reset token and set a new password
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    ForgotPassword,
    LoginUser,
    RegisterUser,
    ResendVerificationEmail,
    ResetPassword,
    VerifyEmail,
)
from src.application.commands.handlers.forgot_password_handler import (
    ForgotPasswordHandler,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.application.commands.handlers.resend_verification_email_handler import (
    ResendVerificationEmailHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)
from src.core.container import (
    get_forgot_password_handler,
    get_login_user_handler,
    get_register_user_handler,
    get_resend_verification_email_handler,
    get_reset_password_handler,
    get_verify_email_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import (
    EmailRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    ResetPasswordRequest,
    UserInformationResponse,
    VerifyEmailRequest,
)
from src.schemas.common_schemas import MessageResponse


async def register(
    request: Request,
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> RegisterResponse | JSONResponse:
    """Register a new account.

    POST /api/v1/auth/register → 201 Created

    The account cannot log in until the emailed link is followed.
    """
    command = RegisterUser(name=data.name, email=data.email, password=data.password)

    match await handler.handle(command):
        case Success(value=user):
            return RegisterResponse(id=user.id, name=user.name, email=user.email)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> LoginResponse | JSONResponse:
    """Authenticate and return a bearer token plus the resolved identity.

    POST /api/v1/auth/login → 200 OK
    """
    command = LoginUser(email=data.email, password=data.password)

    match await handler.handle(command):
        case Success(value=result):
            return LoginResponse(
                user_information=UserInformationResponse.from_identity(
                    result.user_information
                ),
                access_token=result.access_token,
                token_type=result.token_type,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def verify_email(
    request: Request,
    data: VerifyEmailRequest,
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> MessageResponse | JSONResponse:
    """POST /api/v1/auth/verify-email → 200 OK"""
    match await handler.handle(VerifyEmail(token=data.token)):
        case Success():
            return MessageResponse(message="Email verified successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def resend_verification_email(
    request: Request,
    data: EmailRequest,
    handler: ResendVerificationEmailHandler = Depends(
        get_resend_verification_email_handler
    ),
) -> MessageResponse | JSONResponse:
    """POST /api/v1/auth/resend-verification-email → 200 OK

    Unknown addresses get the same response as known ones.
    """
    match await handler.handle(ResendVerificationEmail(email=data.email)):
        case Success():
            return MessageResponse(
                message="If the account exists, a verification email has been sent"
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def forgot_password(
    request: Request,
    data: EmailRequest,
    handler: ForgotPasswordHandler = Depends(get_forgot_password_handler),
) -> MessageResponse | JSONResponse:
    """POST /api/v1/auth/forgot-password → 200 OK

    Unknown addresses get the same response as known ones.
    """
    match await handler.handle(ForgotPassword(email=data.email)):
        case Success():
            return MessageResponse(
                message="If the account exists, a password reset email has been sent"
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


async def reset_password(
    request: Request,
    data: ResetPasswordRequest,
    handler: ResetPasswordHandler = Depends(get_reset_password_handler),
) -> MessageResponse | JSONResponse:
    """POST /api/v1/auth/reset-password → 200 OK"""
    command = ResetPassword(
        token=data.token,
        password=data.password,
        password_confirmation=data.password_confirmation,
    )

    match await handler.handle(command):
        case Success():
            return MessageResponse(message="Password has been reset")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
