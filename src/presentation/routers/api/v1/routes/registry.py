"""API Route Registry - Single Source of Truth for all v1 routes.

Every endpoint under the v1 prefix is declared here with its handler,
response model and authorization policy. Settings routes are guarded by
"{group} {action}" permissions; select options only need a login.

Usage:
    router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.domain.enums import PermissionAction, PermissionGroup, permission_name
from src.presentation.routers.api.v1.auth import (
    forgot_password,
    login,
    register,
    resend_verification_email,
    reset_password,
    verify_email,
)
from src.presentation.routers.api.v1.permissions import (
    create_permissions,
    delete_permission,
    get_permission,
    list_permissions,
    update_permission,
)
from src.presentation.routers.api.v1.profile import (
    change_password,
    get_profile,
    update_profile,
)
from src.presentation.routers.api.v1.roles import (
    create_role,
    delete_role,
    get_role,
    list_roles,
    update_role,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)
from src.presentation.routers.api.v1.select_options import (
    list_permission_options,
    list_role_options,
)
from src.presentation.routers.api.v1.users import (
    create_user,
    delete_user,
    get_user,
    list_users,
    send_user_verification_email,
    set_user_password,
    update_user,
)
from src.schemas.auth_schemas import (
    LoginResponse,
    RegisterResponse,
    UserInformationResponse,
)
from src.schemas.common_schemas import MessageResponse
from src.schemas.settings_schemas import (
    PermissionCreateResponse,
    PermissionGroupOption,
    PermissionListResponse,
    PermissionResponse,
    RoleListResponse,
    RoleOption,
    RoleResponse,
    UserListResponse,
    UserResponse,
)

PUBLIC = AuthPolicy(level=AuthLevel.PUBLIC)
AUTHENTICATED = AuthPolicy(level=AuthLevel.AUTHENTICATED)

VALIDATION_ERROR = ErrorSpec(status=422, description="Validation error")


def _requires(group: PermissionGroup, action: PermissionAction) -> AuthPolicy:
    return AuthPolicy.permissions(permission_name(group, action))


def _not_found(resource: str) -> ErrorSpec:
    return ErrorSpec(status=404, description=f"{resource} not found")


# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Auth (6 endpoints, public)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/register",
        handler=register,
        resource="auth",
        tags=["Auth"],
        summary="Register",
        description="Create an unverified account and email a verification link.",
        operation_id="register",
        response_model=RegisterResponse,
        status_code=201,
        errors=[VALIDATION_ERROR],
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/login",
        handler=login,
        resource="auth",
        tags=["Auth"],
        summary="Login",
        description="Exchange credentials for a bearer token and the resolved identity.",
        operation_id="login",
        response_model=LoginResponse,
        errors=[VALIDATION_ERROR],
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/verify-email",
        handler=verify_email,
        resource="auth",
        tags=["Auth"],
        summary="Verify email",
        operation_id="verify_email",
        response_model=MessageResponse,
        errors=[VALIDATION_ERROR],
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/resend-verification-email",
        handler=resend_verification_email,
        resource="auth",
        tags=["Auth"],
        summary="Resend verification email",
        operation_id="resend_verification_email",
        response_model=MessageResponse,
        errors=[VALIDATION_ERROR],
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/forgot-password",
        handler=forgot_password,
        resource="auth",
        tags=["Auth"],
        summary="Request password reset",
        operation_id="forgot_password",
        response_model=MessageResponse,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/reset-password",
        handler=reset_password,
        resource="auth",
        tags=["Auth"],
        summary="Reset password",
        operation_id="reset_password",
        response_model=MessageResponse,
        errors=[VALIDATION_ERROR],
        auth_policy=PUBLIC,
    ),
    # =========================================================================
    # Profile (3 endpoints, authenticated)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/profile",
        handler=get_profile,
        resource="profile",
        tags=["Profile"],
        summary="Get profile",
        operation_id="get_profile",
        response_model=UserInformationResponse,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/profile",
        handler=update_profile,
        resource="profile",
        tags=["Profile"],
        summary="Update profile",
        operation_id="update_profile",
        response_model=UserInformationResponse,
        errors=[VALIDATION_ERROR],
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/profile/password",
        handler=change_password,
        resource="profile",
        tags=["Profile"],
        summary="Change password",
        operation_id="change_password",
        response_model=MessageResponse,
        errors=[VALIDATION_ERROR],
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Settings: Users (7 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/settings/users",
        handler=list_users,
        resource="users",
        tags=["Settings: Users"],
        summary="List users",
        operation_id="list_users",
        response_model=UserListResponse,
        auth_policy=_requires(PermissionGroup.USER, PermissionAction.LIST),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/settings/users",
        handler=create_user,
        resource="users",
        tags=["Settings: Users"],
        summary="Create user",
        operation_id="create_user",
        response_model=UserResponse,
        status_code=201,
        errors=[VALIDATION_ERROR, _not_found("Role")],
        auth_policy=_requires(PermissionGroup.USER, PermissionAction.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/settings/users/{user_id}",
        handler=get_user,
        resource="users",
        tags=["Settings: Users"],
        summary="Get user",
        operation_id="get_user",
        response_model=UserResponse,
        errors=[_not_found("User")],
        auth_policy=_requires(PermissionGroup.USER, PermissionAction.DETAIL),
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/settings/users/{user_id}",
        handler=update_user,
        resource="users",
        tags=["Settings: Users"],
        summary="Update user",
        description="Update fields and replace the role set atomically.",
        operation_id="update_user",
        response_model=UserResponse,
        errors=[VALIDATION_ERROR, _not_found("User or role")],
        auth_policy=_requires(PermissionGroup.USER, PermissionAction.EDIT),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/settings/users/{user_id}",
        handler=delete_user,
        resource="users",
        tags=["Settings: Users"],
        summary="Delete user",
        description="Soft delete. The user loses access immediately.",
        operation_id="delete_user",
        status_code=204,
        errors=[_not_found("User")],
        auth_policy=_requires(PermissionGroup.USER, PermissionAction.DELETE),
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/settings/users/{user_id}/password",
        handler=set_user_password,
        resource="users",
        tags=["Settings: Users"],
        summary="Set user password",
        operation_id="set_user_password",
        response_model=MessageResponse,
        errors=[VALIDATION_ERROR, _not_found("User")],
        auth_policy=_requires(PermissionGroup.USER, PermissionAction.EDIT),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/settings/users/{user_id}/verification-email",
        handler=send_user_verification_email,
        resource="users",
        tags=["Settings: Users"],
        summary="Send verification email",
        operation_id="send_user_verification_email",
        response_model=MessageResponse,
        status_code=202,
        errors=[VALIDATION_ERROR, _not_found("User")],
        auth_policy=_requires(PermissionGroup.USER, PermissionAction.EDIT),
    ),
    # =========================================================================
    # Settings: Roles (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/settings/roles",
        handler=list_roles,
        resource="roles",
        tags=["Settings: Roles"],
        summary="List roles",
        operation_id="list_roles",
        response_model=RoleListResponse,
        auth_policy=_requires(PermissionGroup.ROLE, PermissionAction.LIST),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/settings/roles",
        handler=create_role,
        resource="roles",
        tags=["Settings: Roles"],
        summary="Create role",
        operation_id="create_role",
        response_model=RoleResponse,
        status_code=201,
        errors=[VALIDATION_ERROR, _not_found("Permission")],
        auth_policy=_requires(PermissionGroup.ROLE, PermissionAction.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/settings/roles/{role_id}",
        handler=get_role,
        resource="roles",
        tags=["Settings: Roles"],
        summary="Get role",
        operation_id="get_role",
        response_model=RoleResponse,
        errors=[_not_found("Role")],
        auth_policy=_requires(PermissionGroup.ROLE, PermissionAction.DETAIL),
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/settings/roles/{role_id}",
        handler=update_role,
        resource="roles",
        tags=["Settings: Roles"],
        summary="Update role",
        description="Rename and replace the permission set. Holders are re-resolved.",
        operation_id="update_role",
        response_model=RoleResponse,
        errors=[VALIDATION_ERROR, _not_found("Role or permission")],
        auth_policy=_requires(PermissionGroup.ROLE, PermissionAction.EDIT),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/settings/roles/{role_id}",
        handler=delete_role,
        resource="roles",
        tags=["Settings: Roles"],
        summary="Delete role",
        operation_id="delete_role",
        status_code=204,
        errors=[VALIDATION_ERROR, _not_found("Role")],
        auth_policy=_requires(PermissionGroup.ROLE, PermissionAction.DELETE),
    ),
    # =========================================================================
    # Settings: Permissions (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/settings/permissions",
        handler=list_permissions,
        resource="permissions",
        tags=["Settings: Permissions"],
        summary="List permissions",
        operation_id="list_permissions",
        response_model=PermissionListResponse,
        auth_policy=_requires(PermissionGroup.PERMISSION, PermissionAction.LIST),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/settings/permissions",
        handler=create_permissions,
        resource="permissions",
        tags=["Settings: Permissions"],
        summary="Create permissions",
        description="Create one permission per name, all under the same group.",
        operation_id="create_permissions",
        response_model=PermissionCreateResponse,
        status_code=201,
        errors=[VALIDATION_ERROR],
        auth_policy=_requires(PermissionGroup.PERMISSION, PermissionAction.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/settings/permissions/{permission_id}",
        handler=get_permission,
        resource="permissions",
        tags=["Settings: Permissions"],
        summary="Get permission",
        operation_id="get_permission",
        response_model=PermissionResponse,
        errors=[_not_found("Permission")],
        auth_policy=_requires(PermissionGroup.PERMISSION, PermissionAction.DETAIL),
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/settings/permissions/{permission_id}",
        handler=update_permission,
        resource="permissions",
        tags=["Settings: Permissions"],
        summary="Update permission",
        operation_id="update_permission",
        response_model=PermissionResponse,
        errors=[VALIDATION_ERROR, _not_found("Permission")],
        auth_policy=_requires(PermissionGroup.PERMISSION, PermissionAction.EDIT),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/settings/permissions/{permission_id}",
        handler=delete_permission,
        resource="permissions",
        tags=["Settings: Permissions"],
        summary="Delete permission",
        operation_id="delete_permission",
        status_code=204,
        errors=[_not_found("Permission")],
        auth_policy=_requires(PermissionGroup.PERMISSION, PermissionAction.DELETE),
    ),
    # =========================================================================
    # Settings: Select options (2 endpoints, authenticated)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/settings/select/roles",
        handler=list_role_options,
        resource="select",
        tags=["Settings: Select"],
        summary="Role options",
        operation_id="list_role_options",
        response_model=list[RoleOption],
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/settings/select/permissions",
        handler=list_permission_options,
        resource="select",
        tags=["Settings: Select"],
        summary="Permission options",
        operation_id="list_permission_options",
        response_model=list[PermissionGroupOption],
        auth_policy=AUTHENTICATED,
    ),
]
