"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from src.core.container import get_cache, get_user_repository, ...

Organized by concern:
- infrastructure: cache, database, logging, security services, email
- repositories: repository factories (request-scoped)
- services: identity resolver, verification email sender
- auth_handlers: authentication and profile handler factories
- settings_handlers: users/roles/permissions handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_authorization_guard,
    get_cache,
    get_cache_keys,
    get_database,
    get_db_session,
    get_email_service,
    get_identity_cache,
    get_logger,
    get_password_reset_token_service,
    get_password_service,
    get_token_service,
    get_verification_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_email_verification_token_repository,
    get_password_reset_token_repository,
    get_permission_repository,
    get_role_repository,
    get_user_repository,
)

# Application services
from src.core.container.services import (
    get_identity_resolver,
    get_verification_email_sender,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_change_password_handler,
    get_forgot_password_handler,
    get_login_user_handler,
    get_register_user_handler,
    get_resend_verification_email_handler,
    get_reset_password_handler,
    get_update_profile_handler,
    get_verify_email_handler,
)

# Settings handlers
from src.core.container.settings_handlers import (
    get_create_permissions_handler,
    get_create_role_handler,
    get_create_user_handler,
    get_delete_permission_handler,
    get_delete_role_handler,
    get_delete_user_handler,
    get_get_permission_handler,
    get_get_role_handler,
    get_get_user_handler,
    get_list_permission_options_handler,
    get_list_permissions_handler,
    get_list_role_options_handler,
    get_list_roles_handler,
    get_list_users_handler,
    get_send_user_verification_email_handler,
    get_set_user_password_handler,
    get_update_permission_handler,
    get_update_role_handler,
    get_update_user_handler,
)

__all__ = [
    # Infrastructure
    "get_authorization_guard",
    "get_cache",
    "get_cache_keys",
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_identity_cache",
    "get_logger",
    "get_password_reset_token_service",
    "get_password_service",
    "get_token_service",
    "get_verification_token_service",
    # Repositories
    "get_email_verification_token_repository",
    "get_password_reset_token_repository",
    "get_permission_repository",
    "get_role_repository",
    "get_user_repository",
    # Services
    "get_identity_resolver",
    "get_verification_email_sender",
    # Auth handlers
    "get_change_password_handler",
    "get_forgot_password_handler",
    "get_login_user_handler",
    "get_register_user_handler",
    "get_resend_verification_email_handler",
    "get_reset_password_handler",
    "get_update_profile_handler",
    "get_verify_email_handler",
    # Settings handlers
    "get_create_permissions_handler",
    "get_create_role_handler",
    "get_create_user_handler",
    "get_delete_permission_handler",
    "get_delete_role_handler",
    "get_delete_user_handler",
    "get_get_permission_handler",
    "get_get_role_handler",
    "get_get_user_handler",
    "get_list_permission_options_handler",
    "get_list_permissions_handler",
    "get_list_role_options_handler",
    "get_list_roles_handler",
    "get_list_users_handler",
    "get_send_user_verification_email_handler",
    "get_set_user_password_handler",
    "get_update_permission_handler",
    "get_update_role_handler",
    "get_update_user_handler",
]
