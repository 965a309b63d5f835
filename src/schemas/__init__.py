"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import LoginRequest, UserResponse
"""

from src.schemas.auth_schemas import (
    EmailRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    ResetPasswordRequest,
    UserInformationResponse,
    VerifyEmailRequest,
)
from src.schemas.common_schemas import MessageResponse, PaginatedMeta
from src.schemas.profile_schemas import PasswordChangeRequest, ProfileUpdateRequest
from src.schemas.settings_schemas import (
    PermissionCreateRequest,
    PermissionCreateResponse,
    PermissionGroupOption,
    PermissionListResponse,
    PermissionOption,
    PermissionResponse,
    PermissionUpdateRequest,
    RoleCreateRequest,
    RoleListResponse,
    RoleOption,
    RoleResponse,
    RoleUpdateRequest,
    UserCreateRequest,
    UserListResponse,
    UserPasswordRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    # Auth
    "EmailRequest",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "ResetPasswordRequest",
    "UserInformationResponse",
    "VerifyEmailRequest",
    # Profile
    "PasswordChangeRequest",
    "ProfileUpdateRequest",
    # Common
    "MessageResponse",
    "PaginatedMeta",
    # Settings
    "PermissionCreateRequest",
    "PermissionCreateResponse",
    "PermissionGroupOption",
    "PermissionListResponse",
    "PermissionOption",
    "PermissionResponse",
    "PermissionUpdateRequest",
    "RoleCreateRequest",
    "RoleListResponse",
    "RoleOption",
    "RoleResponse",
    "RoleUpdateRequest",
    "UserCreateRequest",
    "UserListResponse",
    "UserPasswordRequest",
    "UserResponse",
    "UserUpdateRequest",
]
