"""Infrastructure layer error types.

Infrastructure adapters catch client exceptions (e.g. RedisError) and
return these errors inside a Failure instead of raising.

Architecture:
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode records the failing operation
- Used with Result types for error propagation
"""

from dataclasses import dataclass
from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Failing infrastructure operation.
        details: Additional context (key, original error).
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache-specific errors wrapping Redis exceptions."""

    pass
