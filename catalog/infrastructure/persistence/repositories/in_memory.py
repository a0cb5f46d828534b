"""In-memory lifecycle repositories.

Same semantics as the SQL adapters (soft-delete visibility, conditional
writes, filtering, sorting, paging) over a dict keyed by id.  Used for local
development and service-level tests.  Access is guarded by a Lock so the
load-compare-write sequence of a conditional write is atomic.
"""

from __future__ import annotations

from itertools import count
from threading import Lock
from typing import Generic, TypeVar

from catalog.domain.errors import NotFoundError, OptimisticLockError
from catalog.domain.models.brand import Brand
from catalog.domain.models.example import Example
from catalog.domain.models.lifecycle import LifecycleEntity
from catalog.domain.models.pagination import PaginatedResult, SearchCriteria
from catalog.domain.models.version import VersionStamp
from catalog.domain.repositories.base import LifecycleRepository
from catalog.domain.repositories.brand import BrandRepository
from catalog.domain.repositories.example import ExampleRepository

T = TypeVar("T", bound=LifecycleEntity)


class InMemoryLifecycleRepository(LifecycleRepository[T], Generic[T]):
    exact_filters: tuple[str, ...] = ("id", "status")

    def __init__(self) -> None:
        self._lock = Lock()
        self._rows: dict[int, T] = {}
        self._ids = count(1)
        self.writes = 0  # successful writes, for asserting one write per use case

    async def find_by_id(self, id: int, *, include_deleted: bool = False) -> T | None:
        with self._lock:
            entity = self._rows.get(id)
        if entity is None or (entity.is_deleted and not include_deleted):
            return None
        return entity

    async def find_by_name(self, name: str) -> T | None:
        with self._lock:
            rows = list(self._rows.values())
        return next((e for e in rows if e.name == name and not e.is_deleted), None)

    async def list(self, criteria: SearchCriteria) -> PaginatedResult[T]:
        with self._lock:
            rows = [e for e in self._rows.values() if not e.is_deleted]

        def matches(entity: T) -> bool:
            for column in self.exact_filters:
                wanted = criteria.filter.get(column)
                if wanted is not None and getattr(entity, column) != wanted:
                    return False
            name = criteria.filter.get("name")
            return not name or name.lower() in entity.name.lower()

        column, descending = criteria.order()
        selected = sorted(
            (e for e in rows if matches(e)),
            key=lambda e: getattr(e, column),
            reverse=descending,
        )
        start = criteria.resolved_offset()
        return PaginatedResult(
            items=selected[start : start + criteria.page_size],
            total=len(selected),
            page=criteria.page,
            page_size=criteria.page_size,
            filter=criteria.filter,
            sort={"by": criteria.sort_by, "dir": criteria.sort_dir.value},
        )

    async def create(self, entity: T) -> T:
        with self._lock:
            stored = entity.with_identity(next(self._ids), VersionStamp())
            self._rows[stored.id] = stored  # type: ignore[index]
            self.writes += 1
        return stored

    async def update(self, entity: T, expected_version: VersionStamp | None) -> T:
        return self._conditional_write(entity, expected_version, deleted=False)

    async def soft_delete(self, entity: T, expected_version: VersionStamp | None) -> T:
        return self._conditional_write(entity, expected_version, deleted=False)

    async def restore(self, entity: T, expected_version: VersionStamp | None) -> T:
        return self._conditional_write(entity, expected_version, deleted=True)

    def _conditional_write(
        self, entity: T, expected_version: VersionStamp | None, *, deleted: bool
    ) -> T:
        with self._lock:
            current = self._rows.get(entity.id)  # type: ignore[arg-type]
            if current is None or current.is_deleted != deleted:
                raise NotFoundError(
                    "resource.not_found",
                    params={"resource": entity.RESOURCE, "field": "id", "value": entity.id},
                )
            if expected_version is not None and not current.version.equals(expected_version):
                raise OptimisticLockError(
                    params={
                        "resource": entity.RESOURCE,
                        "id": entity.id,
                        "current": current.version.value,
                    }
                )
            self._rows[entity.id] = entity  # type: ignore[index]
            self.writes += 1
        return entity

    def snapshot(self, id: int) -> T | None:
        """Stored value regardless of status (test helper)."""
        with self._lock:
            return self._rows.get(id)

    def seed(self, entity: T) -> T:
        """Store entity under a fresh id, keeping its status and version (test helper)."""
        with self._lock:
            stored = entity.with_identity(next(self._ids), entity.version)
            self._rows[stored.id] = stored  # type: ignore[index]
        return stored


class InMemoryBrandRepository(InMemoryLifecycleRepository[Brand], BrandRepository):
    exact_filters = ("id", "status", "sync_mdb")


class InMemoryExampleRepository(InMemoryLifecycleRepository[Example], ExampleRepository):
    pass