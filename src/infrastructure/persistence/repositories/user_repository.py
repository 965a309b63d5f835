"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.

Soft-deleted rows (deleted_at IS NOT NULL) are invisible to every lookup.
"""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import Select, delete, func, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.domain.value_objects import Page, PageQuery, SortDirection
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.role import Role as RoleModel
from src.infrastructure.persistence.models.role import user_roles
from src.infrastructure.persistence.models.user import User as UserModel

_SORTABLE_COLUMNS = {
    "name": UserModel.name,
    "email": UserModel.email,
    "status": UserModel.status,
    "created_at": UserModel.created_at,
    "updated_at": UserModel.updated_at,
}


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find a live user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            Domain User entity (with role_ids) if found, None otherwise.
        """
        user_model = await self._get_model(user_id)
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find a live user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = (
            self._live()
            .where(func.lower(UserModel.email) == email.strip().lower())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def exists_by_email(
        self, email: str, exclude_user_id: UUID | None = None
    ) -> bool:
        """Check if a live user with email exists.

        Args:
            email: Email address to check (case-insensitive).
            exclude_user_id: Ignore this user's own row.

        Returns:
            True if another live user owns the address.
        """
        stmt = select(UserModel.id).where(
            UserModel.deleted_at.is_(None),
            func.lower(UserModel.email) == email.strip().lower(),
        )
        if exclude_user_id is not None:
            stmt = stmt.where(UserModel.id != exclude_user_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def create(self, user: User, role_ids: list[UUID] | None = None) -> User:
        """Create new user (and its role assignments) in one transaction.

        Args:
            user: Domain User entity to persist.
            role_ids: Roles to assign. Unknown ids are ignored; callers
                validate them first.

        Returns:
            The stored user, with database timestamps.

        Raises:
            IntegrityError: If a live user already owns the email.
        """
        user_model = UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            status=user.status,
            email_verified_at=user.email_verified_at,
            remark=user.remark,
        )
        if role_ids:
            user_model.roles = await self._load_roles(role_ids)

        self.session.add(user_model)
        await self.session.commit()
        return await self._reload(user.id)

    async def update(self, user: User) -> User:
        """Update an existing user and commit.

        Anything staged earlier in the session (assign_roles, a consumed
        token) is committed together with the user's fields.

        Args:
            user: Domain User entity with updated fields.

        Raises:
            NoResultFound: If the user doesn't exist or was deleted.
        """
        result = await self.session.execute(
            self._live().where(UserModel.id == user.id)
        )
        user_model = result.scalar_one()

        user_model.name = user.name
        user_model.email = user.email
        user_model.password_hash = user.password_hash
        user_model.status = user.status
        user_model.email_verified_at = user.email_verified_at
        user_model.remark = user.remark

        await self.session.commit()
        return await self._reload(user.id)

    async def assign_roles(self, user_id: UUID, role_ids: list[UUID]) -> None:
        """Replace the user's full role set: delete all, then insert all.

        Not committed here. The following update() commits the new set
        together with the user's fields, so a failure leaves the old set
        intact.
        """
        await self.session.execute(
            delete(user_roles).where(user_roles.c.user_id == user_id)
        )
        if role_ids:
            await self.session.execute(
                insert(user_roles),
                [
                    {"user_id": user_id, "role_id": role_id}
                    for role_id in dict.fromkeys(role_ids)
                ],
            )

    async def soft_delete(self, user_id: UUID) -> bool:
        """Soft delete a user (sets deleted_at).

        Returns:
            True if a live user was deleted, False if none matched.
        """
        user_model = await self._get_model(user_id)
        if user_model is None:
            return False

        user_model.deleted_at = datetime.now(UTC)
        await self.session.commit()
        return True

    async def list(self, query: PageQuery) -> Page[User]:
        """List live users.

        Search matches name or email (case-insensitive substring). Unknown
        sort columns fall back to created_at.
        """
        stmt = self._live()
        if query.search:
            term = query.search.strip().lower()
            stmt = stmt.where(
                or_(
                    func.lower(UserModel.name).contains(term, autoescape=True),
                    func.lower(UserModel.email).contains(term, autoescape=True),
                )
            )

        total_result = await self.session.execute(
            select(func.count()).select_from(stmt.subquery())
        )
        total = total_result.scalar_one()

        column = _SORTABLE_COLUMNS.get(query.sort, UserModel.created_at)
        order = column.desc() if query.sort_direction == SortDirection.DESC else column.asc()
        result = await self.session.execute(
            stmt.order_by(order, UserModel.id).offset(query.offset).limit(query.limit)
        )

        return Page(
            items=[self._to_domain(model) for model in result.scalars().all()],
            total=total,
            page=query.page,
            limit=query.limit,
        )

    def _live(self) -> Select[tuple[UserModel]]:
        return select(UserModel).where(UserModel.deleted_at.is_(None))

    async def _get_model(self, user_id: UUID) -> UserModel | None:
        stmt = (
            self._live()
            .where(UserModel.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _reload(self, user_id: UUID) -> User:
        user_model = await self._get_model(user_id)
        if user_model is None:
            raise LookupError(f"User {user_id} vanished after write")
        return self._to_domain(user_model)

    async def _load_roles(self, role_ids: list[UUID]) -> list[RoleModel]:
        if not role_ids:
            return []
        result = await self.session.execute(
            select(RoleModel).where(RoleModel.id.in_(set(role_ids)))
        )
        return list(result.scalars().all())

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=user_model.id,
            name=user_model.name,
            email=user_model.email,
            password_hash=user_model.password_hash,
            status=user_model.status,
            email_verified_at=ensure_utc(user_model.email_verified_at),
            remark=user_model.remark,
            deleted_at=ensure_utc(user_model.deleted_at),
            created_at=ensure_utc(user_model.created_at),  # type: ignore[arg-type]
            updated_at=ensure_utc(user_model.updated_at),  # type: ignore[arg-type]
            role_ids=[role.id for role in user_model.roles],
        )
