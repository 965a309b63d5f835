"""User domain entity for authentication.

Pure business logic, no framework dependencies.

Authenticatable:
    A user may authenticate only while status is ACTIVE, the email
    address has been verified and the account has not been soft-deleted.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import UserStatus


@dataclass
class User:
    """User domain entity with authentication business rules.

    Attributes:
        id: Unique user identifier
        name: Display name
        email: User email address (unique among live users, case-insensitive)
        password_hash: Bcrypt hashed password (never plaintext)
        status: Account lifecycle status
        email_verified_at: When the email was verified (None if unverified)
        remark: Optional administrator note
        deleted_at: Soft-delete timestamp (None if live)
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated
        role_ids: Assigned role ids (populated by repositories when loaded
            for administration, empty otherwise)

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     name="Jane",
        ...     email="jane@example.com",
        ...     password_hash="$2b$12$...",
        ...     status=UserStatus.ACTIVE,
        ...     email_verified_at=None,
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> user.is_authenticatable()
        False
        >>> user.mark_email_verified()
        >>> user.is_authenticatable()
        True
    """

    id: UUID
    name: str
    email: str
    password_hash: str
    status: UserStatus
    email_verified_at: datetime | None
    created_at: datetime
    updated_at: datetime
    remark: str | None = None
    deleted_at: datetime | None = None
    role_ids: list[UUID] = field(default_factory=list)

    @property
    def is_verified(self) -> bool:
        """True once the email address has been verified."""
        return self.email_verified_at is not None

    @property
    def is_active(self) -> bool:
        """True while the account status is ACTIVE."""
        return self.status == UserStatus.ACTIVE

    @property
    def is_deleted(self) -> bool:
        """True once the account has been soft-deleted."""
        return self.deleted_at is not None

    def is_authenticatable(self) -> bool:
        """Check the active, verified and not-deleted predicate.

        Returns:
            bool: True if the user may authenticate.
        """
        return self.is_active and self.is_verified and not self.is_deleted

    def mark_email_verified(self) -> None:
        """Record email verification (idempotent)."""
        if self.email_verified_at is None:
            self.email_verified_at = datetime.now(UTC)
