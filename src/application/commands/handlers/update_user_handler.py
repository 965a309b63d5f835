"""Update user handler (settings/users).

Flow:
1. Load the user (404)
2. Check email uniqueness excluding the user
3. Validate role ids when a role set is submitted
4. Stage the role set, then save fields (one commit)
5. Invalidate the cached identity

A user who holds the superuser role keeps it when their role set is
replaced; that role is never granted or revoked here.
"""

from src.application.commands.user_commands import UpdateUser
from src.application.errors import ApplicationError, not_found_error, validation_error
from src.application.services import validate_assignable_roles
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums import SUPERUSER_ROLE
from src.domain.errors import AccountError
from src.domain.protocols import (
    IdentityCache,
    LoggerProtocol,
    RoleRepository,
    UserRepository,
)


class UpdateUserHandler:
    """Handler for update user command."""

    def __init__(
        self,
        user_repo: UserRepository,
        role_repo: RoleRepository,
        identity_cache: IdentityCache,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._role_repo = role_repo
        self._identity_cache = identity_cache
        self._logger = logger

    async def handle(self, cmd: UpdateUser) -> Result[User, ApplicationError]:
        # Step 1: Load
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=not_found_error(ErrorCode.USER_NOT_FOUND, "User", str(cmd.user_id))
            )

        # Step 2: Email uniqueness
        if await self._user_repo.exists_by_email(cmd.email, exclude_user_id=user.id):
            return Failure(
                error=validation_error(
                    ErrorCode.EMAIL_ALREADY_EXISTS,
                    AccountError.EMAIL_ALREADY_EXISTS,
                    field="email",
                )
            )

        # Step 3: Roles
        role_ids = None
        if cmd.role_ids is not None:
            match await validate_assignable_roles(self._role_repo, cmd.role_ids):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=roles):
                    role_ids = [role.id for role in roles]

            superuser = await self._role_repo.find_by_name(SUPERUSER_ROLE)
            if superuser is not None and superuser.id in user.role_ids:
                role_ids.append(superuser.id)

        # Step 4: Save
        user.name = cmd.name
        user.email = cmd.email
        user.status = cmd.status
        user.remark = cmd.remark
        if role_ids is not None:
            await self._user_repo.assign_roles(user.id, role_ids)
        user = await self._user_repo.update(user)

        # Step 5: Invalidate
        await self._identity_cache.invalidate(user.id)

        self._logger.info("user_updated", user_id=str(user.id))
        return Success(value=user)
