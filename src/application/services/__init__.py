"""Application services shared by handlers and the auth dependency."""

from src.application.services.identity_resolver import IdentityResolver
from src.application.services.role_assignment import validate_assignable_roles
from src.application.services.verification_email_sender import (
    VerificationEmailSender,
)

__all__ = [
    "IdentityResolver",
    "VerificationEmailSender",
    "validate_assignable_roles",
]
