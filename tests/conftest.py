"""Shared pytest configuration and test doubles.

Environment variables are set before any ``src`` import so Settings can
load without a .env file. Integration and API tests run against a
throwaway SQLite database; the Redis cache is replaced by InMemoryCache.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-thirty-two-bytes")
os.environ.setdefault("BCRYPT_ROUNDS", "10")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("AUTO_CREATE_SCHEMA", "false")

import json  # noqa: E402
from dataclasses import dataclass  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from typing import Any  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.core.enums import ErrorCode  # noqa: E402
from src.core.result import Failure, Result, Success  # noqa: E402
from src.domain.entities.user import User  # noqa: E402
from src.domain.entities.user_information import UserInformation  # noqa: E402
from src.domain.enums import UserStatus  # noqa: E402
from src.infrastructure.enums import InfrastructureErrorCode  # noqa: E402
from src.infrastructure.errors import CacheError  # noqa: E402
from src.infrastructure.persistence.database import Database  # noqa: E402


# =============================================================================
# Test Doubles
# =============================================================================


class InMemoryCache:
    """CacheProtocol implementation backed by a dict.

    Set ``fail_reads`` / ``fail_writes`` to simulate a Redis outage.
    TTLs are recorded but never expire entries.
    """

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}
        self.fail_reads = False
        self.fail_writes = False

    def _failure(self, key: str) -> Failure[CacheError]:
        return Failure(
            error=CacheError(
                code=ErrorCode.CACHE_UNAVAILABLE,
                infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                message=f"Cache unavailable for '{key}'",
            )
        )

    async def get(self, key: str) -> Result[str | None, CacheError]:
        if self.fail_reads:
            return self._failure(key)
        return Success(value=self.store.get(key))

    async def get_json(self, key: str) -> Result[dict[str, Any] | None, CacheError]:
        if self.fail_reads:
            return self._failure(key)
        raw = self.store.get(key)
        return Success(value=json.loads(raw) if raw is not None else None)

    async def set(
        self, key: str, value: str, ttl: int | None = None
    ) -> Result[None, CacheError]:
        if self.fail_writes:
            return self._failure(key)
        self.store[key] = value
        self.ttls[key] = ttl
        return Success(value=None)

    async def set_json(
        self, key: str, value: dict[str, Any], ttl: int | None = None
    ) -> Result[None, CacheError]:
        return await self.set(key, json.dumps(value), ttl=ttl)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        if self.fail_writes:
            return self._failure(key)
        self.ttls.pop(key, None)
        return Success(value=self.store.pop(key, None) is not None)

    async def delete_many(self, keys: list[str]) -> Result[int, CacheError]:
        if self.fail_writes:
            return self._failure(",".join(keys))
        removed = 0
        for key in keys:
            if self.store.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
        return Success(value=removed)

    async def exists(self, key: str) -> Result[bool, CacheError]:
        return Success(value=key in self.store)

    async def ttl(self, key: str) -> Result[int | None, CacheError]:
        return Success(value=self.ttls.get(key))

    async def ping(self) -> Result[bool, CacheError]:
        return Success(value=not self.fail_reads)


class RecordingLogger:
    """LoggerProtocol double that keeps (level, event, context) tuples."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def _log(self, level: str, message: str, context: dict[str, Any]) -> None:
        self.records.append((level, message, context))

    def debug(self, message: str, /, **context: Any) -> None:
        self._log("debug", message, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._log("info", message, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._log("warning", message, context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._log("error", message, {"error": error, **context})

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._log("critical", message, {"error": error, **context})

    def bind(self, **context: Any) -> "RecordingLogger":
        return self

    def with_context(self, **context: Any) -> "RecordingLogger":
        return self

    def events(self, level: str | None = None) -> list[str]:
        return [event for lvl, event, _ in self.records if level in (None, lvl)]


@dataclass(frozen=True, slots=True)
class SentEmail:
    """An email captured by RecordingEmailService."""

    kind: str
    to_email: str
    user_name: str
    url: str | None = None


class RecordingEmailService:
    """EmailProtocol double that keeps every message, oldest first."""

    def __init__(self) -> None:
        self.sent: list[SentEmail] = []

    async def send_verification_email(
        self, to_email: str, user_name: str, verification_url: str
    ) -> None:
        self.sent.append(
            SentEmail("verification", to_email, user_name, verification_url)
        )

    async def send_password_reset_email(
        self, to_email: str, user_name: str, reset_url: str
    ) -> None:
        self.sent.append(SentEmail("password_reset", to_email, user_name, reset_url))

    async def send_password_changed_notification(
        self, to_email: str, user_name: str
    ) -> None:
        self.sent.append(SentEmail("password_changed", to_email, user_name))

    def last_sent(self, kind: str | None = None) -> SentEmail | None:
        """Most recent email, optionally of one kind."""
        for email in reversed(self.sent):
            if kind is None or email.kind == kind:
                return email
        return None


class FakePasswordService:
    """PasswordHashingProtocol double: "hashed:<password>"."""

    def hash_password(self, password: str) -> str:
        return f"hashed:{password}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


# =============================================================================
# Builders
# =============================================================================


def make_user(
    *,
    user_id: UUID | None = None,
    name: str = "Test User",
    email: str = "test@example.com",
    password_hash: str = "hashed:SecurePass123!",
    status: UserStatus = UserStatus.ACTIVE,
    verified: bool = True,
    deleted: bool = False,
    role_ids: list[UUID] | None = None,
) -> User:
    """Create a domain User with sensible defaults."""
    now = datetime.now(UTC)
    return User(
        id=user_id or uuid7(),
        name=name,
        email=email,
        password_hash=password_hash,
        status=status,
        email_verified_at=now if verified else None,
        created_at=now,
        updated_at=now,
        deleted_at=now if deleted else None,
        role_ids=list(role_ids or []),
    )


def make_identity(
    *,
    user_id: UUID | None = None,
    roles: list[str] | None = None,
    permissions: list[str] | None = None,
) -> UserInformation:
    """Create a resolved identity."""
    return UserInformation.build(
        id=user_id or uuid7(),
        name="Test User",
        email="test@example.com",
        roles=roles or [],
        permissions=permissions or [],
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def cache() -> InMemoryCache:
    return InMemoryCache()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def database_url(tmp_path) -> str:
    """Per-test SQLite file (shared across connections, unlike :memory:)."""
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest_asyncio.fixture
async def test_database(database_url):
    """Fresh database with all tables created."""
    database = Database(database_url)
    await database.create_all()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def session(test_database):
    """Session on the fresh test database."""
    async with test_database.get_session() as db_session:
        yield db_session
