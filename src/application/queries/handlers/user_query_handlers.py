"""User query handlers (settings/users).

Soft-deleted users are invisible to both handlers.
"""

from src.application.errors import ApplicationError, not_found_error
from src.application.queries.settings_queries import GetUser, ListUsers
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.protocols import UserRepository
from src.domain.value_objects import Page


class ListUsersHandler:
    """Paged user listing."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: ListUsers) -> Result[Page[User], ApplicationError]:
        return Success(value=await self._user_repo.list(query.page))


class GetUserHandler:
    """Single user with role ids, 404 when missing or deleted."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetUser) -> Result[User, ApplicationError]:
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(
                error=not_found_error(
                    ErrorCode.USER_NOT_FOUND, "User", str(query.user_id)
                )
            )
        return Success(value=user)
