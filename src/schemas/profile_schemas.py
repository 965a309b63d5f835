"""Profile request schemas (the authenticated user's own account)."""

from pydantic import BaseModel, Field

from src.domain.types import Email, LoginPassword, Name, Password


class ProfileUpdateRequest(BaseModel):
    """PATCH /api/v1/profile"""

    name: Name
    email: Email


class PasswordChangeRequest(BaseModel):
    """PATCH /api/v1/profile/password"""

    current_password: LoginPassword
    password: Password
    password_confirmation: str = Field(..., description="Must equal password")
