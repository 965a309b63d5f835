"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/v1/auth/register                  - Register (public)
    POST /api/v1/auth/login                     - Login, returns bearer token
    POST /api/v1/auth/verify-email              - Consume verification token
    POST /api/v1/auth/resend-verification-email - Issue a new verification token
    POST /api/v1/auth/forgot-password           - Issue a password reset token
    POST /api/v1/auth/reset-password            - Consume reset token
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.user_information import UserInformation
from src.domain.types import Email, LoginPassword, Name, Password, VerificationToken


# =============================================================================
# Registration
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for registration.

    POST /api/v1/auth/register
    Returns: 201 Created
    """

    name: Name
    email: Email
    password: Password

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "user@example.com",
                "password": "SecurePass123!",
            }
        }
    )


class RegisterResponse(BaseModel):
    """Response schema for registration (201 Created).

    The account stays unable to log in until the email is verified.
    """

    id: UUID = Field(..., description="Created user's ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="User's email address")


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /api/v1/auth/login
    Returns: 200 OK
    """

    email: Email
    password: LoginPassword


class UserInformationResponse(BaseModel):
    """Resolved identity: the user plus role and permission names."""

    id: UUID
    name: str
    email: str
    roles: list[str] = Field(default_factory=list)
    permissions: list[str] = Field(default_factory=list)

    @classmethod
    def from_identity(cls, identity: UserInformation) -> "UserInformationResponse":
        """Build from a resolved identity."""
        return cls(
            id=identity.id,
            name=identity.name,
            email=identity.email,
            roles=list(identity.roles),
            permissions=list(identity.permissions),
        )


class LoginResponse(BaseModel):
    """Response schema for login (200 OK)."""

    user_information: UserInformationResponse
    access_token: str = Field(..., description="JWT bearer token")
    token_type: str = Field(
        default="bearer", description="Token type for Authorization header"
    )


# =============================================================================
# Email verification
# =============================================================================


class VerifyEmailRequest(BaseModel):
    """Request schema for email verification.

    POST /api/v1/auth/verify-email
    """

    token: VerificationToken


class EmailRequest(BaseModel):
    """Request schema carrying only an email address.

    Used by resend-verification-email and forgot-password.
    """

    email: Email


# =============================================================================
# Password reset
# =============================================================================


class ResetPasswordRequest(BaseModel):
    """Request schema for password reset.

    POST /api/v1/auth/reset-password
    """

    token: VerificationToken
    password: Password
    password_confirmation: str = Field(..., description="Must equal password")
