# mypy: disable-error-code="arg-type"
"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Cache (Redis) and cache key construction
- Database (PostgreSQL, SQLite in tests)
- Password hashing (bcrypt)
- Token generation (JWT, hex verification/reset tokens)
- Email (stub)
- Logging (console, structlog)

Request-scoped factories (sessions, the identity cache) receive their
singletons through ``Depends`` so tests can swap them with
``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.enums import Environment
from src.domain.services.authorization_guard import AuthorizationGuard
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols import (
        CacheProtocol,
        EmailProtocol,
        IdentityCache,
        LoggerProtocol,
        PasswordHashingProtocol,
        SecureTokenProtocol,
        TokenGenerationProtocol,
    )
    from src.infrastructure.cache import CacheKeys


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Returns RedisAdapter with connection pooling. The pool is shared
    across the entire application.

    Usage:
        # Presentation Layer (FastAPI Depends)
        cache: CacheProtocol = Depends(get_cache)
    """
    from redis.asyncio import ConnectionPool, Redis

    from src.infrastructure.cache import RedisAdapter

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return RedisAdapter(redis_client=Redis(connection_pool=pool))


@lru_cache()
def get_cache_keys() -> "CacheKeys":
    """Get cache key builder singleton (app-scoped)."""
    from src.infrastructure.cache import CacheKeys

    return CacheKeys()


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON lines)
    """
    from src.infrastructure.logging import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, log_level=settings.log_level)


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Usage:
        @router.post("/users")
        async def create_user(
            session: AsyncSession = Depends(get_db_session)
        ):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


def get_identity_cache(
    cache: "CacheProtocol" = Depends(get_cache),
    logger: "LoggerProtocol" = Depends(get_logger),
) -> "IdentityCache":
    """Get the identity cache over the shared cache client.

    Entries live under ``user:<id>`` for
    ``settings.identity_cache_ttl_seconds``.
    """
    from src.infrastructure.cache import RedisIdentityCache

    return RedisIdentityCache(
        cache=cache,
        logger=logger,
        ttl_seconds=settings.identity_cache_ttl_seconds,
        keys=get_cache_keys(),
    )


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Cost factor comes from ``settings.bcrypt_rounds`` (12 = ~250ms per hash).
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped)."""
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_verification_token_service() -> "SecureTokenProtocol":
    """Get email verification token generator singleton (app-scoped)."""
    from src.infrastructure.security import EmailVerificationTokenService

    return EmailVerificationTokenService(
        expiration_hours=settings.verification_token_expire_hours
    )


@lru_cache()
def get_password_reset_token_service() -> "SecureTokenProtocol":
    """Get password reset token generator singleton (app-scoped)."""
    from src.infrastructure.security import PasswordResetTokenService

    return PasswordResetTokenService(
        expiration_minutes=settings.password_reset_token_expire_minutes
    )


@lru_cache()
def get_authorization_guard() -> AuthorizationGuard:
    """Get the stateless authorization guard singleton."""
    return AuthorizationGuard()


# ============================================================================
# Email Service (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Every environment uses StubEmailService, which logs each message
    (with its link) and keeps nothing in memory.
    """
    from src.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger())
