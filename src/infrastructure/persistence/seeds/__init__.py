"""Database seeding package.

Idempotent seeders that run on startup when ``auto_create_schema`` is
enabled (development and testing).
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols import PasswordHashingProtocol
from src.infrastructure.persistence.seeds.rbac_seeder import seed_rbac, seed_users

logger = structlog.get_logger(__name__)


async def run_all_seeders(
    session: AsyncSession,
    password_service: PasswordHashingProtocol,
) -> None:
    """Run all database seeders.

    Args:
        session: Async database session.
        password_service: Used to hash bootstrap account passwords.
    """
    logger.info("seeding_started")

    await seed_rbac(session)
    await seed_users(session, password_service)

    logger.info("seeding_completed")


__all__ = ["run_all_seeders", "seed_rbac", "seed_users"]
