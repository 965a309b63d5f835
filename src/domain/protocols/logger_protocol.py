"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logs: a snake_case event name plus
key-value context. Implementations must never emit secrets; callers never
pass passwords, bearer tokens or verification/reset tokens as context.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("identity_cache_miss", user_id=str(user_id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("authorization_denied", required="user edit")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level event."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level event."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level event (degraded behavior, denied access)."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level event.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level event (service-wide failure)."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return a new logger with ``context`` included in every event.

        The original logger is unchanged.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
