"""Update profile handler (own name and email).

Flow:
1. Load the user
2. Check the new email is not owned by another live user
3. Save name and email
4. Invalidate the cached identity
5. Resolve and return the fresh identity
"""

from src.application.commands.profile_commands import UpdateProfile
from src.application.errors import (
    ApplicationError,
    from_domain_error,
    not_found_error,
    validation_error,
)
from src.application.services import IdentityResolver
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.user_information import UserInformation
from src.domain.errors import AccountError
from src.domain.protocols import IdentityCache, LoggerProtocol, UserRepository


class UpdateProfileHandler:
    """Handler for update profile command."""

    def __init__(
        self,
        user_repo: UserRepository,
        identity_resolver: IdentityResolver,
        identity_cache: IdentityCache,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._identity_resolver = identity_resolver
        self._identity_cache = identity_cache
        self._logger = logger

    async def handle(
        self, cmd: UpdateProfile
    ) -> Result[UserInformation, ApplicationError]:
        # Step 1: Load
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=not_found_error(
                    ErrorCode.USER_NOT_FOUND, "User", str(cmd.user_id)
                )
            )

        # Step 2: Email uniqueness (excluding self)
        if await self._user_repo.exists_by_email(cmd.email, exclude_user_id=user.id):
            return Failure(
                error=validation_error(
                    ErrorCode.EMAIL_ALREADY_EXISTS,
                    AccountError.EMAIL_ALREADY_EXISTS,
                    field="email",
                )
            )

        # Step 3: Save
        user.name = cmd.name
        user.email = cmd.email
        await self._user_repo.update(user)

        # Step 4: Invalidate
        await self._identity_cache.invalidate(user.id)

        self._logger.info("profile_updated", user_id=str(user.id))

        # Step 5: Fresh identity
        match await self._identity_resolver.resolve(user.id):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=identity):
                return Success(value=identity)
