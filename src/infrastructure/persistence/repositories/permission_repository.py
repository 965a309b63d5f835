"""PermissionRepository - SQLAlchemy implementation of PermissionRepository protocol."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.role import Permission
from src.domain.value_objects import Page, PageQuery, SortDirection
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.permission import (
    Permission as PermissionModel,
)
from src.infrastructure.persistence.models.role import role_permissions, user_roles

_SORTABLE_COLUMNS = {
    "name": PermissionModel.name,
    "group": PermissionModel.group,
    "created_at": PermissionModel.created_at,
    "updated_at": PermissionModel.updated_at,
}


def _to_domain(model: PermissionModel) -> Permission:
    return Permission(
        id=model.id,
        name=model.name,
        group=model.group,
        created_at=ensure_utc(model.created_at),
        updated_at=ensure_utc(model.updated_at),
    )


class PermissionRepository:
    """SQLAlchemy implementation of PermissionRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, permission_id: UUID) -> Permission | None:
        model = await self._get_model(permission_id)
        return _to_domain(model) if model is not None else None

    async def find_by_ids(self, permission_ids: list[UUID]) -> list[Permission]:
        if not permission_ids:
            return []
        result = await self.session.execute(
            select(PermissionModel)
            .where(PermissionModel.id.in_(set(permission_ids)))
            .order_by(PermissionModel.name)
        )
        return [_to_domain(m) for m in result.scalars().all()]

    async def find_by_names(self, names: list[str]) -> list[Permission]:
        if not names:
            return []
        result = await self.session.execute(
            select(PermissionModel)
            .where(PermissionModel.name.in_(set(names)))
            .order_by(PermissionModel.name)
        )
        return [_to_domain(m) for m in result.scalars().all()]

    async def list_all(self) -> list[Permission]:
        result = await self.session.execute(
            select(PermissionModel).order_by(PermissionModel.group, PermissionModel.name)
        )
        return [_to_domain(m) for m in result.scalars().all()]

    async def list(self, query: PageQuery) -> Page[Permission]:
        """Paged listing. Search matches name or group."""
        stmt = select(PermissionModel)
        if query.search:
            term = query.search.strip().lower()
            stmt = stmt.where(
                or_(
                    func.lower(PermissionModel.name).contains(term, autoescape=True),
                    func.lower(PermissionModel.group).contains(term, autoescape=True),
                )
            )

        total_result = await self.session.execute(
            select(func.count()).select_from(stmt.subquery())
        )
        total = total_result.scalar_one()

        column = _SORTABLE_COLUMNS.get(query.sort, PermissionModel.created_at)
        order = column.desc() if query.sort_direction == SortDirection.DESC else column.asc()
        result = await self.session.execute(
            stmt.order_by(order, PermissionModel.id)
            .offset(query.offset)
            .limit(query.limit)
        )

        return Page(
            items=[_to_domain(m) for m in result.scalars().all()],
            total=total,
            page=query.page,
            limit=query.limit,
        )

    async def create_many(self, group: str, names: list[str]) -> list[Permission]:
        """Insert several permissions of one group.

        Raises:
            IntegrityError: If any name is already taken (nothing is stored).
        """
        models = [PermissionModel(name=name, group=group) for name in names]
        self.session.add_all(models)
        await self.session.commit()
        return await self.find_by_ids([m.id for m in models])

    async def update(self, permission_id: UUID, name: str, group: str) -> Permission:
        """Rename or regroup a permission.

        Raises:
            NoResultFound: If the permission doesn't exist.
        """
        result = await self.session.execute(
            select(PermissionModel).where(PermissionModel.id == permission_id)
        )
        model = result.scalar_one()
        model.name = name
        model.group = group
        await self.session.commit()

        reloaded = await self._get_model(permission_id)
        if reloaded is None:
            raise LookupError(f"Permission {permission_id} vanished after write")
        return _to_domain(reloaded)

    async def delete(self, permission_id: UUID) -> bool:
        """Delete a permission and its role_permissions rows.

        Returns:
            True if a permission was removed.
        """
        model = await self._get_model(permission_id)
        if model is None:
            return False

        await self.session.execute(
            delete(role_permissions).where(
                role_permissions.c.permission_id == permission_id
            )
        )
        await self.session.delete(model)
        await self.session.commit()
        return True

    async def holder_ids(self, permission_id: UUID) -> list[UUID]:
        """Ids of users holding the permission through any role."""
        stmt = (
            select(user_roles.c.user_id)
            .join(role_permissions, role_permissions.c.role_id == user_roles.c.role_id)
            .where(role_permissions.c.permission_id == permission_id)
            .distinct()
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _get_model(self, permission_id: UUID) -> PermissionModel | None:
        result = await self.session.execute(
            select(PermissionModel)
            .where(PermissionModel.id == permission_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
