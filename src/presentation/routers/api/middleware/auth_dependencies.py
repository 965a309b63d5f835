"""Authentication and authorization dependencies.

Resolution pipeline for every protected request:

    Authorization: Bearer <jwt>
        -> JWTService.validate_access_token -> user id
        -> IdentityCache.get(user id)
        -> on miss: IdentityResolver.resolve -> IdentityCache.set
        -> AuthorizationGuard (roles ANY-of, permissions ALL-of, superuser bypass)

Every token or resolution failure collapses to "no identity", which
becomes one uniform 401. The 401 check always runs before any role or
permission check, so unauthenticated callers never see a 403.

Usage:
    # Any authenticated user
    @router.get("/profile")
    async def profile(
        identity: UserInformation = Depends(get_current_identity),
    ): ...

    # Permission-guarded (ALL listed permissions required)
    _: UserInformation = Depends(require_permissions("user edit"))

    # Role-guarded (ANY listed role suffices)
    _: UserInformation = Depends(require_roles("admin"))
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.application.services import IdentityResolver
from src.core.container import (
    get_authorization_guard,
    get_identity_cache,
    get_identity_resolver,
    get_logger,
    get_token_service,
)
from src.core.errors import AuthenticationError, AuthorizationError
from src.core.result import Failure, Result, Success
from src.domain.entities.user_information import UserInformation
from src.domain.errors import AccountError
from src.domain.protocols import IdentityCache, LoggerProtocol, TokenGenerationProtocol
from src.domain.services.authorization_guard import AuthorizationGuard

# auto_error=False: a missing header is reported by get_current_identity
# with the same 401 as a bad token.
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=AccountError.AUTHENTICATION_REQUIRED,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_identity_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
    identity_cache: Annotated[IdentityCache, Depends(get_identity_cache)],
    identity_resolver: Annotated[IdentityResolver, Depends(get_identity_resolver)],
    logger: Annotated[LoggerProtocol, Depends(get_logger)],
) -> UserInformation | None:
    """Resolve the caller's identity, or None when unauthenticated.

    Token failures and non-authenticatable users yield None. Database
    errors propagate (500).
    """
    if credentials is None:
        return None

    match token_service.validate_access_token(credentials.credentials):
        case Failure(error=reason):
            logger.debug("access_token_rejected", reason=reason)
            return None
        case Success(value=user_id):
            pass

    cached = await identity_cache.get(user_id)
    if cached is not None:
        return cached

    match await identity_resolver.resolve(user_id):
        case Failure():
            return None
        case Success(value=identity):
            await identity_cache.set(user_id, identity)
            return identity

    return None


async def get_current_identity(
    identity: Annotated[
        UserInformation | None, Depends(get_current_identity_optional)
    ],
) -> UserInformation:
    """Require an authenticated caller.

    Raises:
        HTTPException 401: "Authentication required" with
            ``WWW-Authenticate: Bearer``.
    """
    if identity is None:
        raise _unauthorized()
    return identity


def _enforce(
    decision: Result[None, AuthenticationError | AuthorizationError],
) -> None:
    match decision:
        case Failure(error=AuthenticationError()):
            raise _unauthorized()
        case Failure(error=AuthorizationError(message=message)):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=message)


def require_permissions(
    *permission_names: str,
) -> Callable[..., Awaitable[UserInformation]]:
    """Build a dependency that requires ALL of ``permission_names``.

    Superusers pass every check.
    """

    async def dependency(
        identity: Annotated[
            UserInformation | None, Depends(get_current_identity_optional)
        ],
        guard: Annotated[AuthorizationGuard, Depends(get_authorization_guard)],
    ) -> UserInformation:
        _enforce(guard.require_permissions(identity, permission_names))
        assert identity is not None
        return identity

    return dependency


def require_roles(*role_names: str) -> Callable[..., Awaitable[UserInformation]]:
    """Build a dependency that requires ANY of ``role_names``.

    Superusers pass every check.
    """

    async def dependency(
        identity: Annotated[
            UserInformation | None, Depends(get_current_identity_optional)
        ],
        guard: Annotated[AuthorizationGuard, Depends(get_authorization_guard)],
    ) -> UserInformation:
        _enforce(guard.require_roles(identity, role_names))
        assert identity is not None
        return identity

    return dependency
