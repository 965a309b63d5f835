"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state
- Queries: Read operations that fetch data
- Services: Identity resolution and shared handler helpers

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- services/: IdentityResolver, verification email sender, role assignment checks
- dtos/: Handler result types

The application layer orchestrates domain logic but contains no business rules.
"""
