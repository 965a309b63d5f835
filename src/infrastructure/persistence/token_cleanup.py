"""Removal of expired email verification and password reset tokens.

Run once per application start. A failure is logged and does not stop the
application from booting.
"""

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.repositories import (
    EmailVerificationTokenRepository,
    PasswordResetTokenRepository,
)

logger = structlog.get_logger(__name__)


async def purge_expired_tokens(session: AsyncSession) -> int:
    """Delete every expired verification and reset token.

    Args:
        session: Async database session.

    Returns:
        Number of tokens deleted, 0 when the purge failed.
    """
    try:
        verification = await EmailVerificationTokenRepository(
            session
        ).delete_expired_tokens()
        reset = await PasswordResetTokenRepository(session).delete_expired_tokens()
    except SQLAlchemyError as e:
        await session.rollback()
        logger.warning("expired_token_purge_failed", error=str(e))
        return 0

    logger.info(
        "expired_tokens_purged",
        verification_tokens=verification,
        reset_tokens=reset,
    )
    return verification + reset
