"""Email service implementations.

- StubEmailService: Logs emails and their links
"""

from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "StubEmailService",
]
