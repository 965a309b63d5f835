"""Authentication and profile handler dependency factories.

Request-scoped handler instances for:
- Registration, login, email verification (and resend)
- Forgot/reset password
- Profile update and password change
"""

from fastapi import Depends

from src.application.commands.handlers.change_password_handler import (
    ChangePasswordHandler,
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
from src.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)
from src.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)
from src.application.services import IdentityResolver, VerificationEmailSender
from src.core.config import settings
from src.core.container.infrastructure import (
    get_email_service,
    get_identity_cache,
    get_logger,
    get_password_reset_token_service,
    get_password_service,
    get_token_service,
)
from src.core.container.repositories import (
    get_email_verification_token_repository,
    get_password_reset_token_repository,
    get_user_repository,
)
from src.core.container.services import (
    get_identity_resolver,
    get_verification_email_sender,
)
from src.domain.protocols import (
    EmailProtocol,
    EmailVerificationTokenRepository,
    IdentityCache,
    LoggerProtocol,
    PasswordHashingProtocol,
    PasswordResetTokenRepository,
    SecureTokenProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


async def get_register_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    password_service: PasswordHashingProtocol = Depends(get_password_service),
    verification_sender: VerificationEmailSender = Depends(
        get_verification_email_sender
    ),
    logger: LoggerProtocol = Depends(get_logger),
) -> RegisterUserHandler:
    """Get RegisterUser command handler (request-scoped).

    Usage:
        @router.post("/auth/register")
        async def register(
            handler: RegisterUserHandler = Depends(get_register_user_handler)
        ):
            result = await handler.handle(command)
    """
    return RegisterUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        verification_sender=verification_sender,
        logger=logger,
    )


async def get_login_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    password_service: PasswordHashingProtocol = Depends(get_password_service),
    identity_resolver: IdentityResolver = Depends(get_identity_resolver),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    token_service: TokenGenerationProtocol = Depends(get_token_service),
    logger: LoggerProtocol = Depends(get_logger),
) -> LoginUserHandler:
    """Get LoginUser command handler (request-scoped)."""
    return LoginUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        identity_resolver=identity_resolver,
        identity_cache=identity_cache,
        token_service=token_service,
        logger=logger,
    )


async def get_verify_email_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    verification_token_repo: EmailVerificationTokenRepository = Depends(
        get_email_verification_token_repository
    ),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    logger: LoggerProtocol = Depends(get_logger),
) -> VerifyEmailHandler:
    """Get VerifyEmail command handler (request-scoped)."""
    return VerifyEmailHandler(
        user_repo=user_repo,
        verification_token_repo=verification_token_repo,
        identity_cache=identity_cache,
        logger=logger,
    )


async def get_resend_verification_email_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    verification_sender: VerificationEmailSender = Depends(
        get_verification_email_sender
    ),
    logger: LoggerProtocol = Depends(get_logger),
) -> ResendVerificationEmailHandler:
    """Get ResendVerificationEmail command handler (request-scoped)."""
    return ResendVerificationEmailHandler(
        user_repo=user_repo,
        verification_sender=verification_sender,
        logger=logger,
    )


async def get_forgot_password_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    reset_token_repo: PasswordResetTokenRepository = Depends(
        get_password_reset_token_repository
    ),
    token_service: SecureTokenProtocol = Depends(get_password_reset_token_service),
    email_service: EmailProtocol = Depends(get_email_service),
    logger: LoggerProtocol = Depends(get_logger),
) -> ForgotPasswordHandler:
    """Get ForgotPassword command handler (request-scoped)."""
    return ForgotPasswordHandler(
        user_repo=user_repo,
        reset_token_repo=reset_token_repo,
        token_service=token_service,
        email_service=email_service,
        logger=logger,
        client_url=settings.client_url,
    )


async def get_reset_password_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    reset_token_repo: PasswordResetTokenRepository = Depends(
        get_password_reset_token_repository
    ),
    password_service: PasswordHashingProtocol = Depends(get_password_service),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    email_service: EmailProtocol = Depends(get_email_service),
    logger: LoggerProtocol = Depends(get_logger),
) -> ResetPasswordHandler:
    """Get ResetPassword command handler (request-scoped)."""
    return ResetPasswordHandler(
        user_repo=user_repo,
        reset_token_repo=reset_token_repo,
        password_service=password_service,
        identity_cache=identity_cache,
        email_service=email_service,
        logger=logger,
    )


async def get_update_profile_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    identity_resolver: IdentityResolver = Depends(get_identity_resolver),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    logger: LoggerProtocol = Depends(get_logger),
) -> UpdateProfileHandler:
    """Get UpdateProfile command handler (request-scoped)."""
    return UpdateProfileHandler(
        user_repo=user_repo,
        identity_resolver=identity_resolver,
        identity_cache=identity_cache,
        logger=logger,
    )


async def get_change_password_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    password_service: PasswordHashingProtocol = Depends(get_password_service),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    email_service: EmailProtocol = Depends(get_email_service),
    logger: LoggerProtocol = Depends(get_logger),
) -> ChangePasswordHandler:
    """Get ChangePassword command handler (request-scoped)."""
    return ChangePasswordHandler(
        user_repo=user_repo,
        password_service=password_service,
        identity_cache=identity_cache,
        email_service=email_service,
        logger=logger,
    )
