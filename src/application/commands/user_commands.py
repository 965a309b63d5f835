"""User administration commands (settings/users)."""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.enums import UserStatus
from src.domain.types import Email, Name, Password


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Create a user on behalf of an administrator.

    Attributes:
        name: Display name.
        email: Email, unique among live users.
        password: Initial password.
        status: Initial account status.
        remark: Optional administrator note.
        role_ids: Roles to assign; every id must exist.
        verified: Mark the email verified immediately instead of sending
            a verification email.
    """

    name: Name
    email: Email
    password: Password
    status: UserStatus = UserStatus.ACTIVE
    remark: str | None = None
    role_ids: list[UUID] = field(default_factory=list)
    verified: bool = False


@dataclass(frozen=True, kw_only=True)
class UpdateUser:
    """Edit a user.

    ``role_ids=None`` leaves the role set untouched; a list (even empty)
    replaces it.
    """

    user_id: UUID
    name: Name
    email: Email
    status: UserStatus
    remark: str | None = None
    role_ids: list[UUID] | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Soft delete a user."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class SetUserPassword:
    """Administrator password reset (no current password required)."""

    user_id: UUID
    password: Password
    password_confirmation: str


@dataclass(frozen=True, kw_only=True)
class SendUserVerificationEmail:
    """Re-send the verification email for an unverified user."""

    user_id: UUID
