"""Authorization guard: allow/deny decisions over a resolved identity.

Policy:
    - No identity -> AuthenticationError (401). Evaluated before anything
      else so unauthenticated callers never learn what a route requires.
    - "superuser" in roles -> allow every check.
    - Roles: ANY-of. The identity needs at least one of the listed roles.
    - Permissions: ALL-of. The identity needs every listed permission.
    - An empty requirement list allows any authenticated identity.

Denials return AuthorizationError (403) naming the capability class that
was missing, never the identity's own grants.

Usage:
    guard = AuthorizationGuard()
    match guard.require_permissions(identity, ["user edit"]):
        case Success():
            ...
        case Failure(error=AuthorizationError()):
            ...  # 403
"""

from collections.abc import Iterable

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, AuthorizationError
from src.core.result import Failure, Result, Success
from src.domain.entities.user_information import UserInformation
from src.domain.errors import AccountError


class AuthorizationGuard:
    """Stateless role and permission checks."""

    def require_identity(
        self, identity: UserInformation | None
    ) -> Result[UserInformation, AuthenticationError]:
        """Reject a missing identity.

        Returns:
            Success(identity) or Failure(AuthenticationError).
        """
        if identity is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message=AccountError.AUTHENTICATION_REQUIRED,
                )
            )
        return Success(value=identity)

    def require_roles(
        self,
        identity: UserInformation | None,
        role_names: Iterable[str],
    ) -> Result[None, AuthenticationError | AuthorizationError]:
        """Allow if the identity holds ANY of ``role_names`` (or is superuser).

        Args:
            identity: Resolved identity, or None when unauthenticated.
            role_names: Acceptable roles.

        Returns:
            Success(None), Failure(AuthenticationError) when no identity,
            or Failure(AuthorizationError) when no listed role is held.
        """
        match self.require_identity(identity):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=resolved):
                pass

        required = list(role_names)
        if not required or resolved.is_superuser:
            return Success(value=None)

        if any(resolved.has_role(role) for role in required):
            return Success(value=None)

        return Failure(
            error=AuthorizationError(
                code=ErrorCode.ROLE_REQUIRED,
                message="You do not have the role required for this action",
                required_role=", ".join(required),
            )
        )

    def require_permissions(
        self,
        identity: UserInformation | None,
        permission_names: Iterable[str],
    ) -> Result[None, AuthenticationError | AuthorizationError]:
        """Allow if the identity holds ALL of ``permission_names`` (or is superuser).

        Args:
            identity: Resolved identity, or None when unauthenticated.
            permission_names: Required permissions.

        Returns:
            Success(None), Failure(AuthenticationError) when no identity,
            or Failure(AuthorizationError) naming the first missing permission.
        """
        match self.require_identity(identity):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=resolved):
                pass

        if resolved.is_superuser:
            return Success(value=None)

        missing = [
            name for name in permission_names if not resolved.has_permission(name)
        ]
        if not missing:
            return Success(value=None)

        return Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message=f"Permission '{missing[0]}' required",
                required_permission=missing[0],
            )
        )
