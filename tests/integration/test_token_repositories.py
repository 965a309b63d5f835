"""Integration tests for the email verification and password reset token stores."""

from datetime import UTC, datetime, timedelta

import pytest

from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.models import PasswordResetToken
from src.infrastructure.persistence.repositories import (
    EmailVerificationTokenRepository,
    PasswordResetTokenRepository,
    UserRepository,
)
from src.infrastructure.persistence.token_cleanup import purge_expired_tokens
from tests.conftest import make_user


def _in(**delta) -> datetime:
    return datetime.now(UTC) + timedelta(**delta)


@pytest.fixture
async def user(session):
    return await UserRepository(session).create(make_user(verified=False))


@pytest.mark.integration
class TestEmailVerificationTokenRepository:
    async def test_issuing_purges_previous_token(self, session, user):
        repo = EmailVerificationTokenRepository(session)
        await repo.replace_for_user(user.id, "a" * 64, _in(hours=24))
        await repo.replace_for_user(user.id, "b" * 64, _in(hours=24))

        assert await repo.find_by_token("a" * 64) is None
        current = await repo.find_by_token("b" * 64)
        assert current.user_id == user.id
        assert current.expires_at.tzinfo is not None
        assert not current.is_expired()

    async def test_consume_succeeds_once(self, session, user):
        repo = EmailVerificationTokenRepository(session)
        issued = await repo.replace_for_user(user.id, "a" * 64, _in(hours=24))

        assert await repo.consume(issued.id) is True
        await session.commit()

        assert await repo.find_by_token("a" * 64) is None
        assert await repo.consume(issued.id) is False

    async def test_consume_commits_with_user_update(self, session, user):
        repo = EmailVerificationTokenRepository(session)
        issued = await repo.replace_for_user(user.id, "a" * 64, _in(hours=24))

        await repo.consume(issued.id)
        await session.rollback()
        assert await repo.find_by_token("a" * 64) is not None

        await repo.consume(issued.id)
        user.mark_email_verified()
        await UserRepository(session).update(user)
        await session.rollback()
        assert await repo.find_by_token("a" * 64) is None

    async def test_delete_expired_tokens(self, session, user):
        repo = EmailVerificationTokenRepository(session)
        other = await UserRepository(session).create(make_user(email="other@example.com"))
        await repo.replace_for_user(user.id, "a" * 64, _in(minutes=-5))
        await repo.replace_for_user(other.id, "b" * 64, _in(hours=1))

        assert await repo.delete_expired_tokens() == 1
        assert await repo.find_by_token("b" * 64) is not None


@pytest.mark.integration
class TestPasswordResetTokenRepository:
    async def test_issuing_purges_previous_token(self, session, user):
        repo = PasswordResetTokenRepository(session)
        await repo.replace_for_user(user.id, "a" * 64, _in(minutes=60))
        await repo.replace_for_user(user.id, "b" * 64, _in(minutes=60))

        assert await repo.find_by_token("a" * 64) is None
        assert await repo.find_by_token("b" * 64) is not None

    async def test_expired_token_is_still_returned(self, session, user):
        repo = PasswordResetTokenRepository(session)
        await repo.replace_for_user(user.id, "a" * 64, _in(minutes=-1))

        token = await repo.find_by_token("a" * 64)

        assert token is not None
        assert token.is_expired()

    async def test_consume_removes_all_of_the_users_tokens(self, session, user):
        repo = PasswordResetTokenRepository(session)
        issued = await repo.replace_for_user(user.id, "a" * 64, _in(minutes=60))
        session.add(
            PasswordResetToken(user_id=user.id, token="c" * 64, expires_at=_in(minutes=60))
        )
        await session.commit()

        assert await repo.consume(issued.id, user.id) is True
        await session.commit()

        assert await repo.find_by_token("a" * 64) is None
        assert await repo.find_by_token("c" * 64) is None

    async def test_second_consumption_fails(self, session, user):
        repo = PasswordResetTokenRepository(session)
        issued = await repo.replace_for_user(user.id, "a" * 64, _in(minutes=60))

        assert await repo.consume(issued.id, user.id) is True
        await session.commit()

        assert await repo.consume(issued.id, user.id) is False

    async def test_delete_expired_tokens(self, session, user):
        repo = PasswordResetTokenRepository(session)
        other = await UserRepository(session).create(make_user(email="other@example.com"))
        await repo.replace_for_user(user.id, "a" * 64, _in(minutes=-5))
        await repo.replace_for_user(other.id, "b" * 64, _in(minutes=30))

        assert await repo.delete_expired_tokens() == 1
        assert await repo.find_by_token("a" * 64) is None
        assert await repo.find_by_token("b" * 64) is not None


@pytest.mark.integration
class TestPurgeExpiredTokens:
    async def test_purges_both_token_kinds(self, session, user):
        await EmailVerificationTokenRepository(session).replace_for_user(
            user.id, "a" * 64, _in(minutes=-1)
        )
        await PasswordResetTokenRepository(session).replace_for_user(
            user.id, "b" * 64, _in(minutes=-1)
        )

        assert await purge_expired_tokens(session) == 2

    async def test_missing_tables_do_not_raise(self, database_url):
        database = Database(database_url)
        try:
            async with database.get_session() as bare_session:
                assert await purge_expired_tokens(bare_session) == 0
        finally:
            await database.close()
