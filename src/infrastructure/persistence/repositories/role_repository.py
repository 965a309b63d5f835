"""RoleRepository - SQLAlchemy implementation of RoleRepository protocol.

Owns the role side of the RBAC graph: roles, their permission sets and
the user_roles join rows. Multi-row writes commit once.
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.role import Permission, Role
from src.domain.enums import SUPERUSER_ROLE
from src.domain.value_objects import Page, PageQuery, SortDirection
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.permission import (
    Permission as PermissionModel,
)
from src.infrastructure.persistence.models.role import Role as RoleModel
from src.infrastructure.persistence.models.role import role_permissions, user_roles

_SORTABLE_COLUMNS = {
    "name": RoleModel.name,
    "created_at": RoleModel.created_at,
    "updated_at": RoleModel.updated_at,
}


def _permission_to_domain(model: PermissionModel) -> Permission:
    return Permission(
        id=model.id,
        name=model.name,
        group=model.group,
        created_at=ensure_utc(model.created_at),
        updated_at=ensure_utc(model.updated_at),
    )


def _to_domain(model: RoleModel, with_permissions: bool = True) -> Role:
    """Convert database model to domain entity."""
    return Role(
        id=model.id,
        name=model.name,
        permissions=(
            [_permission_to_domain(p) for p in model.permissions]
            if with_permissions
            else []
        ),
        created_at=ensure_utc(model.created_at),
        updated_at=ensure_utc(model.updated_at),
    )


class RoleRepository:
    """SQLAlchemy implementation of RoleRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def roles_for_user(self, user_id: UUID) -> list[Role]:
        """Roles assigned to a user, ordered by name (permissions not loaded)."""
        stmt = (
            select(RoleModel)
            .join(user_roles, user_roles.c.role_id == RoleModel.id)
            .where(user_roles.c.user_id == user_id)
            .order_by(RoleModel.name)
        )
        result = await self.session.execute(stmt)
        return [_to_domain(m, with_permissions=False) for m in result.scalars().all()]

    async def permissions_for_role(self, role_id: UUID) -> list[Permission]:
        """Permissions granted by a role, ordered by name."""
        stmt = (
            select(PermissionModel)
            .join(
                role_permissions,
                role_permissions.c.permission_id == PermissionModel.id,
            )
            .where(role_permissions.c.role_id == role_id)
            .order_by(PermissionModel.name)
        )
        result = await self.session.execute(stmt)
        return [_permission_to_domain(m) for m in result.scalars().all()]

    async def find_by_id(self, role_id: UUID) -> Role | None:
        model = await self._get_model(role_id)
        return _to_domain(model) if model is not None else None

    async def find_by_name(self, name: str) -> Role | None:
        result = await self.session.execute(
            select(RoleModel).where(RoleModel.name == name)
        )
        model = result.scalar_one_or_none()
        return _to_domain(model, with_permissions=False) if model is not None else None

    async def find_by_ids(self, role_ids: list[UUID]) -> list[Role]:
        if not role_ids:
            return []
        result = await self.session.execute(
            select(RoleModel)
            .where(RoleModel.id.in_(set(role_ids)))
            .order_by(RoleModel.name)
        )
        return [_to_domain(m, with_permissions=False) for m in result.scalars().all()]

    async def list_excluding_superuser(self) -> list[Role]:
        result = await self.session.execute(
            select(RoleModel)
            .where(RoleModel.name != SUPERUSER_ROLE)
            .order_by(RoleModel.name)
        )
        return [_to_domain(m, with_permissions=False) for m in result.scalars().all()]

    async def list(self, query: PageQuery) -> Page[Role]:
        """Paged role listing. The superuser sentinel is never listed."""
        stmt = select(RoleModel).where(RoleModel.name != SUPERUSER_ROLE)
        if query.search:
            term = query.search.strip().lower()
            stmt = stmt.where(
                func.lower(RoleModel.name).contains(term, autoescape=True)
            )

        total_result = await self.session.execute(
            select(func.count()).select_from(stmt.subquery())
        )
        total = total_result.scalar_one()

        column = _SORTABLE_COLUMNS.get(query.sort, RoleModel.created_at)
        order = column.desc() if query.sort_direction == SortDirection.DESC else column.asc()
        result = await self.session.execute(
            stmt.order_by(order, RoleModel.id).offset(query.offset).limit(query.limit)
        )

        return Page(
            items=[_to_domain(m) for m in result.scalars().all()],
            total=total,
            page=query.page,
            limit=query.limit,
        )

    async def create(self, name: str, permission_ids: list[UUID]) -> Role:
        """Insert a role together with its permission set.

        Raises:
            IntegrityError: If the name is already taken.
        """
        role_model = RoleModel(name=name)
        role_model.permissions = await self._load_permissions(permission_ids)
        self.session.add(role_model)
        await self.session.commit()
        return await self._reload(role_model.id)

    async def update(
        self, role_id: UUID, name: str, permission_ids: list[UUID]
    ) -> Role:
        """Rename a role and replace its permission set in one transaction.

        Raises:
            NoResultFound: If the role doesn't exist.
        """
        result = await self.session.execute(
            select(RoleModel).where(RoleModel.id == role_id)
        )
        role_model = result.scalar_one()
        role_model.name = name
        role_model.permissions = await self._load_permissions(permission_ids)
        await self.session.commit()
        return await self._reload(role_id)

    async def delete(self, role_id: UUID) -> bool:
        """Delete a role and its join rows.

        Returns:
            True if a role was removed.
        """
        role_model = await self._get_model(role_id)
        if role_model is None:
            return False

        await self.session.execute(
            delete(user_roles).where(user_roles.c.role_id == role_id)
        )
        await self.session.delete(role_model)
        await self.session.commit()
        return True

    async def holder_ids(self, role_id: UUID) -> list[UUID]:
        """Ids of users currently holding the role."""
        result = await self.session.execute(
            select(user_roles.c.user_id).where(user_roles.c.role_id == role_id)
        )
        return list(result.scalars().all())

    async def _get_model(self, role_id: UUID) -> RoleModel | None:
        result = await self.session.execute(
            select(RoleModel)
            .where(RoleModel.id == role_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _reload(self, role_id: UUID) -> Role:
        model = await self._get_model(role_id)
        if model is None:
            raise LookupError(f"Role {role_id} vanished after write")
        return _to_domain(model)

    async def _load_permissions(self, permission_ids: list[UUID]) -> list[PermissionModel]:
        if not permission_ids:
            return []
        result = await self.session.execute(
            select(PermissionModel).where(PermissionModel.id.in_(set(permission_ids)))
        )
        return list(result.scalars().all())
