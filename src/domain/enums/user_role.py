"""Built-in role names.

Roles are rows in the roles table, so administrators may add more. Two
names are created by the seeder and carry meaning in code:

    - superuser: reserved sentinel. Holders pass every role and permission
      check. It never receives permissions and is hidden from role
      listings and select options.
    - admin: seeded with every built-in settings permission.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role names with special meaning to the authorization core."""

    SUPERUSER = "superuser"
    ADMIN = "admin"

    @classmethod
    def values(cls) -> list[str]:
        """Get all built-in role names."""
        return [role.value for role in cls]


SUPERUSER_ROLE = UserRole.SUPERUSER.value
