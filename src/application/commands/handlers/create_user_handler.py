"""Create user handler (settings/users).

Flow:
1. Check email uniqueness among live users
2. Validate role ids (all exist, superuser excluded)
3. Hash password, build the User entity
4. Save user and role assignments in one transaction
5. Send a verification email unless created as verified
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.user_commands import CreateUser
from src.application.errors import ApplicationError, validation_error
from src.application.services import VerificationEmailSender, validate_assignable_roles
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.errors import AccountError
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    RoleRepository,
    UserRepository,
)


class CreateUserHandler:
    """Handler for create user command."""

    def __init__(
        self,
        user_repo: UserRepository,
        role_repo: RoleRepository,
        password_service: PasswordHashingProtocol,
        verification_sender: VerificationEmailSender,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._role_repo = role_repo
        self._password_service = password_service
        self._verification_sender = verification_sender
        self._logger = logger

    async def handle(self, cmd: CreateUser) -> Result[User, ApplicationError]:
        # Step 1: Email uniqueness
        if await self._user_repo.exists_by_email(cmd.email):
            return Failure(
                error=validation_error(
                    ErrorCode.EMAIL_ALREADY_EXISTS,
                    AccountError.EMAIL_ALREADY_EXISTS,
                    field="email",
                )
            )

        # Step 2: Roles
        match await validate_assignable_roles(self._role_repo, cmd.role_ids):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=roles):
                pass

        # Step 3: Entity
        now = datetime.now(UTC)
        user = User(
            id=uuid7(),
            name=cmd.name,
            email=cmd.email,
            password_hash=self._password_service.hash_password(cmd.password),
            status=cmd.status,
            email_verified_at=now if cmd.verified else None,
            remark=cmd.remark,
            created_at=now,
            updated_at=now,
        )

        # Step 4: Save
        user = await self._user_repo.create(user, role_ids=[role.id for role in roles])

        # Step 5: Verification email
        if not user.is_verified:
            await self._verification_sender.send(user)

        self._logger.info(
            "user_created", user_id=str(user.id), role_count=len(user.role_ids)
        )
        return Success(value=user)
