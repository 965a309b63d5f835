"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: SQLAlchemy models, repositories and seeders
- cache/: Redis adapter and the identity cache
- security/: bcrypt, JWT and one-time token services
- email/: Stub email delivery
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
