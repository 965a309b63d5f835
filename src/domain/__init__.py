"""Domain layer - Pure business logic.

Entities, value objects, protocols (ports) and the authorization guard.
No dependency on any framework or infrastructure.

Structure:
- entities/: User, Role, Permission, UserInformation
- value_objects/: Pagination
- protocols/: Repository and service interfaces
- services/: AuthorizationGuard (pure policy)
"""
