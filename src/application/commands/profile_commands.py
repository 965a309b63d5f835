"""Profile commands: the authenticated user editing their own account."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.types import Email, LoginPassword, Name, Password


@dataclass(frozen=True, kw_only=True)
class UpdateProfile:
    """Change own name and email.

    Attributes:
        user_id: Authenticated user's id (from the resolved identity).
        name: New display name.
        email: New email, unique among live users other than this one.
    """

    user_id: UUID
    name: Name
    email: Email


@dataclass(frozen=True, kw_only=True)
class ChangePassword:
    """Change own password after re-entering the current one."""

    user_id: UUID
    current_password: LoginPassword
    password: Password
    password_confirmation: str
