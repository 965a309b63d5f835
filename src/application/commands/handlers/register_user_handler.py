"""Registration handler.

Flow:
1. Check email uniqueness among live users
2. Hash password
3. Create User entity (active, unverified, no roles)
4. Save user
5. Issue verification token and send verification email
6. Return Success(user)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterUser
from src.application.errors import ApplicationError, validation_error
from src.application.services import VerificationEmailSender
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums import UserStatus
from src.domain.errors import AccountError
from src.domain.protocols import LoggerProtocol, PasswordHashingProtocol, UserRepository


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        verification_sender: VerificationEmailSender,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence
            password_service: Password hashing service
            verification_sender: Issues the verification token and email
            logger: Structured logger
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._verification_sender = verification_sender
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[User, ApplicationError]:
        """Handle user registration command.

        Returns:
            Success(User) on successful registration.
            Failure(ApplicationError) with field ``email`` if the address is taken.
        """
        # Step 1: Check email uniqueness
        if await self._user_repo.exists_by_email(cmd.email):
            self._logger.info("registration_rejected", reason="email_exists")
            return Failure(
                error=validation_error(
                    ErrorCode.EMAIL_ALREADY_EXISTS,
                    AccountError.EMAIL_ALREADY_EXISTS,
                    field="email",
                )
            )

        # Step 2: Hash password
        password_hash = self._password_service.hash_password(cmd.password)

        # Step 3: Create User entity
        now = datetime.now(UTC)
        user = User(
            id=uuid7(),
            name=cmd.name,
            email=cmd.email,
            password_hash=password_hash,
            status=UserStatus.ACTIVE,
            email_verified_at=None,
            created_at=now,
            updated_at=now,
        )

        # Step 4: Save user
        user = await self._user_repo.create(user)

        # Step 5: Verification token + email
        await self._verification_sender.send(user)

        self._logger.info("user_registered", user_id=str(user.id))

        # Step 6: Return Success
        return Success(value=user)
