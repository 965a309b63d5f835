"""Unit tests for auth and profile command handlers.

Tests cover:
- RegisterUserHandler: duplicate email, verification email sent
- LoginUserHandler: credential, verification and status checks; identity cached
- VerifyEmailHandler: token consumed in the user update's commit, once
- ForgotPasswordHandler / ResetPasswordHandler: silent unknown email, single use
  under concurrent consumption
- ChangePasswordHandler / UpdateProfileHandler: invalidation after the write

Architecture:
- Repositories and the identity cache are AsyncMocks
- Password hashing is FakePasswordService ("hashed:<password>")
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import (
    ForgotPassword,
    LoginUser,
    RegisterUser,
    ResendVerificationEmail,
    ResetPassword,
    VerifyEmail,
)
from src.application.commands.handlers.change_password_handler import (
    ChangePasswordHandler,
)
from src.application.commands.handlers.forgot_password_handler import (
    ForgotPasswordHandler,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.application.commands.handlers.resend_verification_email_handler import (
    ResendVerificationEmailHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)
from src.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)
from src.application.commands.profile_commands import ChangePassword, UpdateProfile
from src.application.dtos import LoginResult
from src.application.errors import ApplicationErrorCode
from src.application.services import VerificationEmailSender
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Success
from src.domain.enums import UserStatus
from src.domain.protocols import EmailVerificationTokenData, PasswordResetTokenData
from tests.conftest import (
    FakePasswordService,
    RecordingLogger,
    make_identity,
    make_user,
)

TOKEN = "ab" * 32


def _field(result) -> str | None:
    return result.error.domain_error.field


def _manager(**mocks) -> Mock:
    """Attach mocks to one parent so call order can be asserted."""
    manager = Mock()
    for name, mock in mocks.items():
        manager.attach_mock(mock, name)
    return manager


@pytest.mark.unit
class TestRegisterUserHandler:
    async def test_register_creates_unverified_user_and_sends_email(self):
        user_repo = AsyncMock()
        user_repo.exists_by_email.return_value = False
        user_repo.create.side_effect = lambda user: user
        sender = AsyncMock(spec=VerificationEmailSender)
        handler = RegisterUserHandler(
            user_repo, FakePasswordService(), sender, RecordingLogger()
        )

        result = await handler.handle(
            RegisterUser(name="Jane", email="jane@example.com", password="SecurePass123!")
        )

        assert isinstance(result, Success)
        user = result.value
        assert user.is_verified is False
        assert user.status == UserStatus.ACTIVE
        assert user.password_hash == "hashed:SecurePass123!"
        sender.send.assert_awaited_once_with(user)

    async def test_register_duplicate_email(self):
        user_repo = AsyncMock()
        user_repo.exists_by_email.return_value = True
        sender = AsyncMock(spec=VerificationEmailSender)
        handler = RegisterUserHandler(
            user_repo, FakePasswordService(), sender, RecordingLogger()
        )

        result = await handler.handle(
            RegisterUser(name="Jane", email="jane@example.com", password="SecurePass123!")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert _field(result) == "email"
        user_repo.create.assert_not_called()
        sender.send.assert_not_called()


@pytest.mark.unit
class TestLoginUserHandler:
    def _handler(self, user, resolver_result=None):
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = user
        resolver = AsyncMock()
        identity = make_identity(user_id=user.id if user else None, roles=["admin"])
        resolver.resolve.return_value = resolver_result or Success(value=identity)
        identity_cache = AsyncMock()
        token_service = Mock()
        token_service.generate_access_token.return_value = "signed.jwt.token"
        handler = LoginUserHandler(
            user_repo=user_repo,
            password_service=FakePasswordService(),
            identity_resolver=resolver,
            identity_cache=identity_cache,
            token_service=token_service,
            logger=RecordingLogger(),
        )
        return handler, identity_cache, token_service, identity

    async def test_login_success_caches_identity(self):
        user = make_user()
        handler, identity_cache, token_service, identity = self._handler(user)

        result = await handler.handle(
            LoginUser(email=user.email, password="SecurePass123!")
        )

        assert isinstance(result, Success)
        assert isinstance(result.value, LoginResult)
        assert result.value.access_token == "signed.jwt.token"
        assert result.value.token_type == "bearer"
        assert result.value.user_information == identity
        identity_cache.set.assert_awaited_once_with(user.id, identity)
        token_service.generate_access_token.assert_called_once_with(user_id=user.id)

    async def test_unknown_email_and_wrong_password_are_indistinguishable(self):
        handler, _, _, _ = self._handler(None)
        unknown = await handler.handle(
            LoginUser(email="nobody@example.com", password="SecurePass123!")
        )
        user = make_user()
        handler, _, token_service, _ = self._handler(user)
        wrong = await handler.handle(LoginUser(email=user.email, password="Wrong1!"))

        assert unknown.error.message == wrong.error.message
        assert _field(unknown) == _field(wrong) == "email"
        token_service.generate_access_token.assert_not_called()

    async def test_unverified_user_rejected(self):
        handler, identity_cache, _, _ = self._handler(make_user(verified=False))

        result = await handler.handle(
            LoginUser(email="test@example.com", password="SecurePass123!")
        )

        assert result.error.domain_error.code == ErrorCode.EMAIL_NOT_VERIFIED
        identity_cache.set.assert_not_called()

    @pytest.mark.parametrize(
        "status", [UserStatus.INACTIVE, UserStatus.SUSPENDED, UserStatus.BLOCKED]
    )
    async def test_inactive_user_rejected(self, status):
        handler, _, _, _ = self._handler(make_user(status=status))

        result = await handler.handle(
            LoginUser(email="test@example.com", password="SecurePass123!")
        )

        assert result.error.domain_error.code == ErrorCode.ACCOUNT_INACTIVE

    async def test_resolution_failure_maps_to_unauthorized(self):
        failure = Failure(
            error=AuthenticationError(
                code=ErrorCode.AUTHENTICATION_FAILED, message="Authentication required"
            )
        )
        handler, identity_cache, _, _ = self._handler(make_user(), failure)

        result = await handler.handle(
            LoginUser(email="test@example.com", password="SecurePass123!")
        )

        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        identity_cache.set.assert_not_called()


@pytest.mark.unit
class TestVerifyEmailHandler:
    def _token(self, user_id, expires_in=timedelta(hours=1)):
        return EmailVerificationTokenData(
            id=uuid7(),
            user_id=user_id,
            token=TOKEN,
            expires_at=datetime.now(UTC) + expires_in,
        )

    async def test_verifies_user_and_consumes_token_first(self):
        user = make_user(verified=False)
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        user_repo.update.side_effect = lambda u: u
        token_repo = AsyncMock()
        token_data = self._token(user.id)
        token_repo.find_by_token.return_value = token_data
        token_repo.consume.return_value = True
        identity_cache = AsyncMock()
        manager = _manager(
            token_consume=token_repo.consume,
            user_update=user_repo.update,
            invalidate=identity_cache.invalidate,
        )
        handler = VerifyEmailHandler(user_repo, token_repo, identity_cache, RecordingLogger())

        result = await handler.handle(VerifyEmail(token=TOKEN))

        assert isinstance(result, Success)
        assert result.value.is_verified
        call_names = [c[0] for c in manager.mock_calls]
        assert call_names == ["token_consume", "user_update", "invalidate"]
        token_repo.consume.assert_awaited_once_with(token_data.id)

    async def test_token_consumed_by_concurrent_request(self):
        user = make_user(verified=False)
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        token_repo = AsyncMock()
        token_repo.find_by_token.return_value = self._token(user.id)
        token_repo.consume.return_value = False
        identity_cache = AsyncMock()
        handler = VerifyEmailHandler(user_repo, token_repo, identity_cache, RecordingLogger())

        result = await handler.handle(VerifyEmail(token=TOKEN))

        assert _field(result) == "token"
        user_repo.update.assert_not_called()
        identity_cache.invalidate.assert_not_called()

    async def test_expired_token(self):
        user_repo = AsyncMock()
        token_repo = AsyncMock()
        token_repo.find_by_token.return_value = self._token(
            uuid7(), expires_in=timedelta(seconds=-1)
        )
        handler = VerifyEmailHandler(user_repo, token_repo, AsyncMock(), RecordingLogger())

        result = await handler.handle(VerifyEmail(token=TOKEN))

        assert isinstance(result, Failure)
        assert _field(result) == "token"
        user_repo.update.assert_not_called()

    async def test_unknown_token(self):
        token_repo = AsyncMock()
        token_repo.find_by_token.return_value = None
        handler = VerifyEmailHandler(AsyncMock(), token_repo, AsyncMock(), RecordingLogger())

        result = await handler.handle(VerifyEmail(token=TOKEN))

        assert result.error.domain_error.code == ErrorCode.TOKEN_INVALID


@pytest.mark.unit
class TestResendVerificationEmailHandler:
    async def test_unknown_email_is_silent(self):
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = None
        sender = AsyncMock(spec=VerificationEmailSender)
        handler = ResendVerificationEmailHandler(user_repo, sender, RecordingLogger())

        result = await handler.handle(ResendVerificationEmail(email="x@example.com"))

        assert isinstance(result, Success)
        sender.send.assert_not_called()

    async def test_already_verified(self):
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = make_user(verified=True)
        handler = ResendVerificationEmailHandler(
            user_repo, AsyncMock(spec=VerificationEmailSender), RecordingLogger()
        )

        result = await handler.handle(ResendVerificationEmail(email="test@example.com"))

        assert result.error.domain_error.code == ErrorCode.EMAIL_ALREADY_VERIFIED

    async def test_sends_for_unverified(self):
        user = make_user(verified=False)
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = user
        sender = AsyncMock(spec=VerificationEmailSender)
        handler = ResendVerificationEmailHandler(user_repo, sender, RecordingLogger())

        await handler.handle(ResendVerificationEmail(email=user.email))

        sender.send.assert_awaited_once_with(user)


@pytest.mark.unit
class TestPasswordResetHandlers:
    async def test_forgot_password_unknown_email_is_silent(self):
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = None
        token_repo = AsyncMock()
        email_service = AsyncMock()
        handler = ForgotPasswordHandler(
            user_repo, token_repo, Mock(), email_service, RecordingLogger(),
            client_url="http://client",
        )

        result = await handler.handle(ForgotPassword(email="x@example.com"))

        assert isinstance(result, Success)
        token_repo.replace_for_user.assert_not_called()
        email_service.send_password_reset_email.assert_not_called()

    async def test_forgot_password_sends_link(self):
        user = make_user()
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = user
        token_repo = AsyncMock()
        token_service = Mock()
        token_service.generate_token.return_value = TOKEN
        email_service = AsyncMock()
        handler = ForgotPasswordHandler(
            user_repo, token_repo, token_service, email_service, RecordingLogger(),
            client_url="http://client/",
        )

        await handler.handle(ForgotPassword(email=user.email))

        email_service.send_password_reset_email.assert_awaited_once_with(
            to_email=user.email,
            user_name=user.name,
            reset_url=f"http://client/reset-password?token={TOKEN}",
        )

    async def test_forgot_password_email_failure_still_succeeds(self):
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = make_user()
        email_service = AsyncMock()
        email_service.send_password_reset_email.side_effect = RuntimeError("smtp")
        logger = RecordingLogger()
        token_service = Mock()
        token_service.generate_token.return_value = TOKEN
        handler = ForgotPasswordHandler(
            user_repo, AsyncMock(), token_service, email_service, logger,
            client_url="http://client",
        )

        result = await handler.handle(ForgotPassword(email="test@example.com"))

        assert isinstance(result, Success)
        assert "password_reset_email_failed" in logger.events("error")

    def _reset_handler(self, user, token_data):
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        user_repo.update.side_effect = lambda u: u
        token_repo = AsyncMock()
        token_repo.find_by_token.return_value = token_data
        token_repo.consume.return_value = True
        identity_cache = AsyncMock()
        handler = ResetPasswordHandler(
            user_repo, token_repo, FakePasswordService(), identity_cache,
            AsyncMock(), RecordingLogger(),
        )
        return handler, user_repo, token_repo, identity_cache

    async def test_reset_password_success(self):
        user = make_user()
        token_data = PasswordResetTokenData(
            id=uuid7(), user_id=user.id, token=TOKEN,
            expires_at=datetime.now(UTC) + timedelta(minutes=30),
        )
        handler, user_repo, token_repo, identity_cache = self._reset_handler(
            user, token_data
        )

        result = await handler.handle(
            ResetPassword(
                token=TOKEN, password="NewSecure123!", password_confirmation="NewSecure123!"
            )
        )

        assert isinstance(result, Success)
        token_repo.consume.assert_awaited_once_with(token_data.id, user.id)
        assert user_repo.update.await_args.args[0].password_hash == "hashed:NewSecure123!"
        identity_cache.invalidate.assert_awaited_once_with(user.id)

    async def test_reset_password_token_already_consumed(self):
        user = make_user()
        token_data = PasswordResetTokenData(
            id=uuid7(), user_id=user.id, token=TOKEN,
            expires_at=datetime.now(UTC) + timedelta(minutes=30),
        )
        handler, user_repo, token_repo, identity_cache = self._reset_handler(
            user, token_data
        )
        token_repo.consume.return_value = False

        result = await handler.handle(
            ResetPassword(
                token=TOKEN, password="NewSecure123!", password_confirmation="NewSecure123!"
            )
        )

        assert _field(result) == "token"
        user_repo.update.assert_not_called()
        identity_cache.invalidate.assert_not_called()

    async def test_reset_password_mismatch(self):
        handler, _, token_repo, _ = self._reset_handler(make_user(), None)

        result = await handler.handle(
            ResetPassword(
                token=TOKEN, password="NewSecure123!", password_confirmation="Other123!"
            )
        )

        assert _field(result) == "password_confirmation"
        token_repo.find_by_token.assert_not_called()

    async def test_reset_password_expired_token(self):
        user = make_user()
        token_data = PasswordResetTokenData(
            id=uuid7(), user_id=user.id, token=TOKEN,
            expires_at=datetime.now(UTC) - timedelta(minutes=1),
        )
        handler, user_repo, _, _ = self._reset_handler(user, token_data)

        result = await handler.handle(
            ResetPassword(
                token=TOKEN, password="NewSecure123!", password_confirmation="NewSecure123!"
            )
        )

        assert _field(result) == "token"
        user_repo.update.assert_not_called()


@pytest.mark.unit
class TestProfileHandlers:
    async def test_change_password_requires_current_password(self):
        user = make_user()
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        identity_cache = AsyncMock()
        handler = ChangePasswordHandler(
            user_repo, FakePasswordService(), identity_cache, AsyncMock(), RecordingLogger()
        )

        result = await handler.handle(
            ChangePassword(
                user_id=user.id,
                current_password="WrongPass1!",
                password="NewSecure123!",
                password_confirmation="NewSecure123!",
            )
        )

        assert _field(result) == "current_password"
        user_repo.update.assert_not_called()
        identity_cache.invalidate.assert_not_called()

    async def test_change_password_success_notifies(self):
        user = make_user()
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        identity_cache = AsyncMock()
        email_service = AsyncMock()
        handler = ChangePasswordHandler(
            user_repo, FakePasswordService(), identity_cache, email_service,
            RecordingLogger(),
        )

        result = await handler.handle(
            ChangePassword(
                user_id=user.id,
                current_password="SecurePass123!",
                password="NewSecure123!",
                password_confirmation="NewSecure123!",
            )
        )

        assert isinstance(result, Success)
        identity_cache.invalidate.assert_awaited_once_with(user.id)
        email_service.send_password_changed_notification.assert_awaited_once()

    async def test_update_profile_returns_fresh_identity(self):
        user = make_user()
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        user_repo.exists_by_email.return_value = False
        identity_cache = AsyncMock()
        resolver = AsyncMock()
        fresh = make_identity(user_id=user.id)
        resolver.resolve.return_value = Success(value=fresh)
        manager = _manager(
            update=user_repo.update,
            invalidate=identity_cache.invalidate,
            resolve=resolver.resolve,
        )
        handler = UpdateProfileHandler(user_repo, resolver, identity_cache, RecordingLogger())

        result = await handler.handle(
            UpdateProfile(user_id=user.id, name="Renamed", email="renamed@example.com")
        )

        assert result == Success(value=fresh)
        assert [c[0] for c in manager.mock_calls] == ["update", "invalidate", "resolve"]
        assert user_repo.update.await_args.args[0].email == "renamed@example.com"

    async def test_update_profile_email_taken(self):
        user = make_user()
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        user_repo.exists_by_email.return_value = True
        handler = UpdateProfileHandler(
            user_repo, AsyncMock(), AsyncMock(), RecordingLogger()
        )

        result = await handler.handle(
            UpdateProfile(user_id=user.id, name="X", email="taken@example.com")
        )

        assert _field(result) == "email"
        user_repo.exists_by_email.assert_awaited_once_with(
            "taken@example.com", exclude_user_id=user.id
        )
