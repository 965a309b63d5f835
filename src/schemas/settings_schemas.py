"""Settings request/response schemas (users, roles, permissions, select options).

Response models are built from domain entities with ``from_entity`` so
routers never serialize entities directly.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos import PermissionGroupOptions
from src.domain.entities.role import Permission, Role
from src.domain.entities.user import User
from src.domain.enums import UserStatus
from src.domain.types import Email, Name, Password
from src.domain.value_objects import Page
from src.schemas.common_schemas import PaginatedMeta


# =============================================================================
# Users
# =============================================================================


class UserCreateRequest(BaseModel):
    """POST /api/v1/settings/users"""

    name: Name
    email: Email
    password: Password
    status: UserStatus = UserStatus.ACTIVE
    remark: str | None = Field(None, max_length=1000)
    role_ids: list[UUID] = Field(default_factory=list)
    verified: bool = Field(
        False, description="Mark the email as verified instead of sending a link"
    )


class UserUpdateRequest(BaseModel):
    """PATCH /api/v1/settings/users/{user_id}

    ``role_ids`` replaces the whole role set when present; omit it to
    leave roles untouched.
    """

    name: Name
    email: Email
    status: UserStatus
    remark: str | None = Field(None, max_length=1000)
    role_ids: list[UUID] | None = None


class UserPasswordRequest(BaseModel):
    """PATCH /api/v1/settings/users/{user_id}/password"""

    password: Password
    password_confirmation: str = Field(..., description="Must equal password")


class UserResponse(BaseModel):
    """User as shown to administrators (never includes the password hash)."""

    id: UUID
    name: str
    email: str
    status: UserStatus
    remark: str | None
    email_verified_at: datetime | None
    role_ids: list[UUID]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            status=user.status,
            remark=user.remark,
            email_verified_at=user.email_verified_at,
            role_ids=list(user.role_ids),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserListResponse(BaseModel):
    items: list[UserResponse]
    meta: PaginatedMeta

    @classmethod
    def from_page(cls, page: Page[User]) -> "UserListResponse":
        return cls(
            items=[UserResponse.from_entity(user) for user in page.items],
            meta=PaginatedMeta.from_page(page),
        )


# =============================================================================
# Permissions
# =============================================================================


class PermissionCreateRequest(BaseModel):
    """POST /api/v1/settings/permissions

    Creates one permission per entry in ``names``, all under ``group``.
    """

    group: Name
    names: list[str] = Field(..., examples=[["user list", "user edit"]])


class PermissionUpdateRequest(BaseModel):
    """PATCH /api/v1/settings/permissions/{permission_id}"""

    name: Name
    group: Name


class PermissionResponse(BaseModel):
    id: UUID
    name: str
    group: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, permission: Permission) -> "PermissionResponse":
        return cls(
            id=permission.id,
            name=permission.name,
            group=permission.group,
            created_at=permission.created_at,
            updated_at=permission.updated_at,
        )


class PermissionListResponse(BaseModel):
    items: list[PermissionResponse]
    meta: PaginatedMeta

    @classmethod
    def from_page(cls, page: Page[Permission]) -> "PermissionListResponse":
        return cls(
            items=[PermissionResponse.from_entity(p) for p in page.items],
            meta=PaginatedMeta.from_page(page),
        )


class PermissionCreateResponse(BaseModel):
    items: list[PermissionResponse]


# =============================================================================
# Roles
# =============================================================================


class RoleCreateRequest(BaseModel):
    """POST /api/v1/settings/roles"""

    name: Name
    permission_ids: list[UUID] = Field(default_factory=list)


class RoleUpdateRequest(BaseModel):
    """PATCH /api/v1/settings/roles/{role_id}

    The permission set is replaced, not merged.
    """

    name: Name
    permission_ids: list[UUID] = Field(default_factory=list)


class RoleResponse(BaseModel):
    id: UUID
    name: str
    permissions: list[PermissionResponse]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, role: Role) -> "RoleResponse":
        return cls(
            id=role.id,
            name=role.name,
            permissions=[PermissionResponse.from_entity(p) for p in role.permissions],
            created_at=role.created_at,
            updated_at=role.updated_at,
        )


class RoleListResponse(BaseModel):
    items: list[RoleResponse]
    meta: PaginatedMeta

    @classmethod
    def from_page(cls, page: Page[Role]) -> "RoleListResponse":
        return cls(
            items=[RoleResponse.from_entity(role) for role in page.items],
            meta=PaginatedMeta.from_page(page),
        )


# =============================================================================
# Select options
# =============================================================================


class RoleOption(BaseModel):
    id: UUID
    name: str


class PermissionOption(BaseModel):
    id: UUID
    name: str


class PermissionGroupOption(BaseModel):
    """Permissions of one group, for grouped select inputs."""

    group: str
    permissions: list[PermissionOption]

    @classmethod
    def from_dto(cls, options: PermissionGroupOptions) -> "PermissionGroupOption":
        return cls(
            group=options.group,
            permissions=[
                PermissionOption(id=p.id, name=p.name) for p in options.permissions
            ],
        )
