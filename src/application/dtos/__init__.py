"""Application DTOs returned by handlers."""

from src.application.dtos.auth_dtos import LoginResult
from src.application.dtos.settings_dtos import PermissionGroupOptions

__all__ = [
    "LoginResult",
    "PermissionGroupOptions",
]
