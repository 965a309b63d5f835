"""User account status.

Only ACTIVE users can authenticate. The other states are set by
administrators and immediately revoke access once the identity cache
entry for the user is invalidated.
"""

from enum import Enum


class UserStatus(str, Enum):
    """Lifecycle status of a user account.

    String Enum:
        Inherits from str for easy serialization in API payloads and
        database storage.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    BLOCKED = "blocked"

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings."""
        return [status.value for status in cls]
