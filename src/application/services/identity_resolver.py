"""Identity resolver: user id -> UserInformation.

Joins the credential store and the RBAC graph into the flattened identity
the guard evaluates and the identity cache stores.

Algorithm:
    1. Fetch the user (soft-deleted users are invisible)
    2. Reject unless authenticatable (active, verified, not deleted)
    3. Fetch the user's roles
    4. Fetch each role's permissions
    5. Union role names and permission names (sorted, de-duplicated)

Resolution has no side effects: the same graph always yields an equal
UserInformation. Repository exceptions propagate (500) and nothing is
cached on failure.
"""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.entities.user_information import UserInformation
from src.domain.errors import AccountError
from src.domain.protocols import LoggerProtocol, RoleRepository, UserRepository


class IdentityResolver:
    """Builds UserInformation from the credential store and RBAC graph.

    Example:
        >>> resolver = IdentityResolver(user_repo, role_repo, logger)
        >>> match await resolver.resolve(user_id):
        ...     case Success(value=identity):
        ...         identity.permissions
        ...     case Failure(error=AuthenticationError()):
        ...         ...  # 401
    """

    def __init__(
        self,
        user_repo: UserRepository,
        role_repo: RoleRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._role_repo = role_repo
        self._logger = logger

    async def resolve(
        self, user_id: UUID
    ) -> Result[UserInformation, AuthenticationError]:
        """Resolve a user's identity.

        Args:
            user_id: Subject of a verified bearer token.

        Returns:
            Success(UserInformation), or Failure(AuthenticationError) when
            the user is missing or not authenticatable. The failure
            message is uniform so callers cannot tell the cases apart.
        """
        # Step 1: Fetch user
        user = await self._user_repo.find_by_id(user_id)

        # Step 2: Authenticatable predicate
        if user is None or not user.is_authenticatable():
            self._logger.info(
                "identity_resolution_rejected",
                user_id=str(user_id),
                reason="not_found" if user is None else "not_authenticatable",
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message=AccountError.AUTHENTICATION_REQUIRED,
                )
            )

        # Step 3: Roles
        roles = await self._role_repo.roles_for_user(user.id)

        # Step 4: Permissions per role
        permission_names: list[str] = []
        for role in roles:
            permissions = await self._role_repo.permissions_for_role(role.id)
            permission_names.extend(permission.name for permission in permissions)

        # Step 5: Flatten
        identity = UserInformation.build(
            id=user.id,
            name=user.name,
            email=user.email,
            roles=[role.name for role in roles],
            permissions=permission_names,
        )
        self._logger.debug(
            "identity_resolved",
            user_id=str(user.id),
            role_count=len(identity.roles),
            permission_count=len(identity.permissions),
        )
        return Success(value=identity)
