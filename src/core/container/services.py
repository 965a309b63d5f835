"""Application service factories (request-scoped).

Services composed from repositories share the request session.
"""

from fastapi import Depends

from src.application.services import IdentityResolver, VerificationEmailSender
from src.core.config import settings
from src.core.container.infrastructure import (
    get_email_service,
    get_logger,
    get_verification_token_service,
)
from src.core.container.repositories import (
    get_email_verification_token_repository,
    get_role_repository,
    get_user_repository,
)
from src.domain.protocols import (
    EmailProtocol,
    EmailVerificationTokenRepository,
    LoggerProtocol,
    RoleRepository,
    SecureTokenProtocol,
    UserRepository,
)


async def get_identity_resolver(
    user_repo: UserRepository = Depends(get_user_repository),
    role_repo: RoleRepository = Depends(get_role_repository),
    logger: LoggerProtocol = Depends(get_logger),
) -> IdentityResolver:
    """Get the identity resolver over the request's repositories."""
    return IdentityResolver(user_repo=user_repo, role_repo=role_repo, logger=logger)


async def get_verification_email_sender(
    token_repo: EmailVerificationTokenRepository = Depends(
        get_email_verification_token_repository
    ),
    token_service: SecureTokenProtocol = Depends(get_verification_token_service),
    email_service: EmailProtocol = Depends(get_email_service),
    logger: LoggerProtocol = Depends(get_logger),
) -> VerificationEmailSender:
    """Get the verification email sender (links point at ``settings.client_url``)."""
    return VerificationEmailSender(
        token_repo=token_repo,
        token_service=token_service,
        email_service=email_service,
        logger=logger,
        client_url=settings.client_url,
    )
