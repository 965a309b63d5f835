"""Login handler.

Flow:
1. Look up user by email
2. Verify password
3. Check email verified
4. Check account active
5. Resolve identity (roles + permissions) and cache it
6. Sign bearer token (user id only)
7. Return Success(LoginResult)

Unknown email and wrong password share one message so the response does
not reveal which addresses are registered.
"""

from src.application.commands.auth_commands import LoginUser
from src.application.dtos import LoginResult
from src.application.errors import ApplicationError, from_domain_error, validation_error
from src.application.services import IdentityResolver
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AccountError
from src.domain.protocols import (
    IdentityCache,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class LoginUserHandler:
    """Handler for login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        identity_resolver: IdentityResolver,
        identity_cache: IdentityCache,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._identity_resolver = identity_resolver
        self._identity_cache = identity_cache
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[LoginResult, ApplicationError]:
        """Handle login command.

        Returns:
            Success(LoginResult), or Failure(ApplicationError) with field
            ``email`` for bad credentials, unverified or inactive accounts.
        """
        # Step 1-2: Credentials
        user = await self._user_repo.find_by_email(cmd.email)
        if user is None or not self._password_service.verify_password(
            cmd.password, user.password_hash
        ):
            self._logger.info("login_failed", reason="invalid_credentials")
            return Failure(
                error=validation_error(
                    ErrorCode.INVALID_CREDENTIALS,
                    AccountError.INVALID_CREDENTIALS,
                    field="email",
                )
            )

        # Step 3: Email verified
        if not user.is_verified:
            self._logger.info("login_failed", user_id=str(user.id), reason="unverified")
            return Failure(
                error=validation_error(
                    ErrorCode.EMAIL_NOT_VERIFIED,
                    AccountError.EMAIL_NOT_VERIFIED,
                    field="email",
                )
            )

        # Step 4: Account active
        if not user.is_active:
            self._logger.info(
                "login_failed", user_id=str(user.id), reason=user.status.value
            )
            return Failure(
                error=validation_error(
                    ErrorCode.ACCOUNT_INACTIVE,
                    AccountError.ACCOUNT_NOT_ACTIVE,
                    field="email",
                )
            )

        # Step 5: Resolve identity and cache it
        match await self._identity_resolver.resolve(user.id):
            case Failure(error=error):
                return Failure(error=from_domain_error(error))
            case Success(value=identity):
                pass
        await self._identity_cache.set(user.id, identity)

        # Step 6: Sign token
        access_token = self._token_service.generate_access_token(user_id=user.id)

        self._logger.info("login_succeeded", user_id=str(user.id))

        # Step 7: Return Success
        return Success(
            value=LoginResult(user_information=identity, access_token=access_token)
        )
