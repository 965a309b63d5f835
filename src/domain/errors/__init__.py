"""Domain errors package.

Usage:
    from src.domain.errors import AccountError, TokenError
"""

from src.domain.errors.account_error import AccountError
from src.domain.errors.token_error import TokenError

__all__ = [
    "AccountError",
    "TokenError",
]
