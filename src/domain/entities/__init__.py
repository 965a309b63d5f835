"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.role import Permission, Role
from src.domain.entities.user import User
from src.domain.entities.user_information import UserInformation

__all__ = [
    "Permission",
    "Role",
    "User",
    "UserInformation",
]
