"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterUser, UpdateRole).

Each command has a corresponding handler in ``handlers/``.
"""

from src.application.commands.auth_commands import (
    ForgotPassword,
    LoginUser,
    RegisterUser,
    ResendVerificationEmail,
    ResetPassword,
    VerifyEmail,
)
from src.application.commands.permission_commands import (
    CreatePermissions,
    DeletePermission,
    UpdatePermission,
)
from src.application.commands.profile_commands import ChangePassword, UpdateProfile
from src.application.commands.role_commands import CreateRole, DeleteRole, UpdateRole
from src.application.commands.user_commands import (
    CreateUser,
    DeleteUser,
    SendUserVerificationEmail,
    SetUserPassword,
    UpdateUser,
)

__all__ = [
    # Auth
    "ForgotPassword",
    "LoginUser",
    "RegisterUser",
    "ResendVerificationEmail",
    "ResetPassword",
    "VerifyEmail",
    # Profile
    "ChangePassword",
    "UpdateProfile",
    # Users
    "CreateUser",
    "DeleteUser",
    "SendUserVerificationEmail",
    "SetUserPassword",
    "UpdateUser",
    # Roles
    "CreateRole",
    "DeleteRole",
    "UpdateRole",
    # Permissions
    "CreatePermissions",
    "DeletePermission",
    "UpdatePermission",
]
