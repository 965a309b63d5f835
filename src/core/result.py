"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. Handlers,
the identity resolver, the authorization guard and the cache adapters all
speak this type so failures stay explicit and testable.

Usage:
    def verify(token: str) -> Result[UUID, str]:
        if not token:
            return Failure(error="Missing token")
        return Success(value=user_id)

    match verify(token):
        case Success(value=user_id):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
