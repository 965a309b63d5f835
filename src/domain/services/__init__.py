"""Domain services (pure policy, no I/O)."""

from src.domain.services.authorization_guard import AuthorizationGuard

__all__ = ["AuthorizationGuard"]
