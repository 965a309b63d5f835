"""Authentication DTOs (Data Transfer Objects).

Result dataclasses carried from handlers back to the presentation layer.
"""

from dataclasses import dataclass

from src.domain.entities.user_information import UserInformation


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Response from successful login.

    Attributes:
        user_information: Resolved identity (also written to the cache).
        access_token: Signed bearer token (subject = user id).
        token_type: Always "bearer".
    """

    user_information: UserInformation
    access_token: str
    token_type: str = "bearer"
