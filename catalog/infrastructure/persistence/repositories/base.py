"""Generic SQLAlchemy implementation of LifecycleRepository.

Subclasses bind an ORM model and a domain entity type and may map extra
resource columns through _extra_to_domain / _extra_values.

Every write after the insert is a single conditional UPDATE:

    UPDATE <table> SET ..., lock_version = :new
     WHERE id = :id AND lock_version = :expected AND <state condition>

A rowcount of 0 means either the row is gone (NotFoundError) or another
writer got there first (OptimisticLockError).  The state condition keeps
update / soft_delete away from deleted rows and restore away from live ones.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.errors import NotFoundError, OptimisticLockError
from catalog.domain.models.audit import DetailInfo
from catalog.domain.models.enums import RecordStatus
from catalog.domain.models.lifecycle import LifecycleEntity
from catalog.domain.models.pagination import PaginatedResult, SearchCriteria
from catalog.domain.models.version import VersionStamp
from catalog.domain.repositories.base import LifecycleRepository
from catalog.infrastructure.persistence.models.resources import LifecycleColumns

T = TypeVar("T", bound=LifecycleEntity)

_DELETED = RecordStatus.DELETED.value


class SqlLifecycleRepository(LifecycleRepository[T], Generic[T]):
    orm_model: ClassVar[type[LifecycleColumns]]
    entity_type: ClassVar[type[LifecycleEntity]]
    exact_filters: ClassVar[tuple[str, ...]] = ("id", "status")

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    # --- mapping ---

    @classmethod
    def _to_domain(cls, row: Any) -> T:
        return cls.entity_type(  # type: ignore[return-value]
            id=row.id,
            name=row.name,
            status=RecordStatus(row.status),
            detail_info=DetailInfo.from_dict(row.detail_info),
            version=VersionStamp.from_int(row.lock_version),
            **cls._extra_to_domain(row),
        )

    @classmethod
    def _extra_to_domain(cls, row: Any) -> dict[str, Any]:
        return {}

    @classmethod
    def _values(cls, entity: T) -> dict[str, Any]:
        return {
            "name": entity.name,
            "status": entity.status.value,
            "detail_info": entity.detail_info.to_dict(),
            "lock_version": entity.version.value,
            **cls._extra_values(entity),
        }

    @classmethod
    def _extra_values(cls, entity: T) -> dict[str, Any]:
        return {}

    # --- reads ---

    async def find_by_id(self, id: int, *, include_deleted: bool = False) -> T | None:
        model = self.orm_model
        stmt = select(model).where(model.id == id)
        if not include_deleted:
            stmt = stmt.where(model.status != _DELETED)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row else None

    async def find_by_name(self, name: str) -> T | None:
        model = self.orm_model
        stmt = select(model).where(model.name == name, model.status != _DELETED).limit(1)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row else None

    async def list(self, criteria: SearchCriteria) -> PaginatedResult[T]:
        model = self.orm_model
        stmt = select(model).where(model.status != _DELETED)
        for column in self.exact_filters:
            value = criteria.filter.get(column)
            if value is not None:
                stmt = stmt.where(getattr(model, column) == value)
        name = criteria.filter.get("name")
        if name:
            stmt = stmt.where(model.name.ilike(f"%{name}%"))

        count = await self._session.execute(select(func.count()).select_from(stmt.subquery()))
        total = count.scalar_one()

        column, descending = criteria.order()
        order_col = getattr(model, column)
        stmt = (
            stmt.order_by(order_col.desc() if descending else order_col.asc())
            .limit(criteria.page_size)
            .offset(criteria.resolved_offset())
        )
        result = await self._session.execute(stmt)
        return PaginatedResult(
            items=[self._to_domain(row) for row in result.scalars()],
            total=total,
            page=criteria.page,
            page_size=criteria.page_size,
            filter=criteria.filter,
            sort={"by": criteria.sort_by, "dir": criteria.sort_dir.value},
        )

    # --- writes ---

    async def create(self, entity: T) -> T:
        row = self.orm_model(**{**self._values(entity), "lock_version": VersionStamp().value})
        self._session.add(row)
        await self._session.flush()
        return entity.with_identity(row.id, VersionStamp())

    async def update(self, entity: T, expected_version: VersionStamp | None) -> T:
        return await self._conditional_write(entity, expected_version, deleted=False)

    async def soft_delete(self, entity: T, expected_version: VersionStamp | None) -> T:
        return await self._conditional_write(entity, expected_version, deleted=False)

    async def restore(self, entity: T, expected_version: VersionStamp | None) -> T:
        return await self._conditional_write(entity, expected_version, deleted=True)

    async def _conditional_write(
        self, entity: T, expected_version: VersionStamp | None, *, deleted: bool
    ) -> T:
        """Write entity if the stored row is in the expected state and version.

        deleted selects which rows qualify: live rows (False) or soft-deleted
        rows (True).
        """
        model = self.orm_model
        state = model.status == _DELETED if deleted else model.status != _DELETED
        stmt = update(model).where(model.id == entity.id, state)
        if expected_version is not None:
            stmt = stmt.where(model.lock_version == expected_version.value)
        stmt = stmt.values(**self._values(entity))

        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            await self._raise_write_failure(entity, state)
        return entity

    async def _raise_write_failure(self, entity: T, state: Any) -> None:
        model = self.orm_model
        stmt = select(model.lock_version).where(model.id == entity.id, state)
        result = await self._session.execute(stmt)
        current = result.scalar_one_or_none()
        if current is None:
            raise NotFoundError(
                "resource.not_found",
                params={"resource": entity.RESOURCE, "field": "id", "value": entity.id},
            )
        raise OptimisticLockError(
            params={"resource": entity.RESOURCE, "id": entity.id, "current": current}
        )
