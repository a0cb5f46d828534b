"""Generic lifecycle repository interface.

LifecycleRepository[T] is the persistence contract the lifecycle core needs
from every resource.  Concrete implementations live in
catalog/infrastructure/persistence/ and are wired at the application
boundary via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the domain entity type (never an ORM row or DTO).
  - Writes after the first are conditional: update / soft_delete / restore
    receive the version the caller read and must fail with
    OptimisticLockError if the stored version has moved on.  Passing
    expected_version=None writes unconditionally.
  - Uniqueness lookups are exposed through unique_lookups(), resolved once
    by the service, instead of being looked up by method name at runtime.
  - Soft-deleted rows are invisible to every read except
    find_by_id(..., include_deleted=True).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Generic, TypeVar

from catalog.domain.models.lifecycle import LifecycleEntity
from catalog.domain.models.pagination import PaginatedResult, SearchCriteria
from catalog.domain.models.version import VersionStamp

T = TypeVar("T", bound=LifecycleEntity)

UniqueLookup = Callable[[Any], Awaitable[LifecycleEntity | None]]


class LifecycleRepository(ABC, Generic[T]):
    """Abstract persistence interface for a lifecycle-managed resource."""

    @abstractmethod
    async def find_by_id(self, id: int, *, include_deleted: bool = False) -> T | None:
        """Return the entity with the given id, or None if not found."""

    @abstractmethod
    async def find_by_name(self, name: str) -> T | None:
        """Return the live (not soft-deleted) entity with this exact name, or None."""

    async def exists_by_name(self, name: str) -> bool:
        return await self.find_by_name(name) is not None

    def unique_lookups(self) -> Mapping[str, UniqueLookup]:
        """Field name → lookup used by uniqueness checks."""
        return {"name": self.find_by_name}

    @abstractmethod
    async def list(self, criteria: SearchCriteria) -> PaginatedResult[T]:
        """Return one page of live entities matching criteria."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity; return it with id assigned and version 1."""

    @abstractmethod
    async def update(self, entity: T, expected_version: VersionStamp | None) -> T:
        """Overwrite a live entity if its stored version equals expected_version."""

    @abstractmethod
    async def soft_delete(self, entity: T, expected_version: VersionStamp | None) -> T:
        """Persist a soft deletion (status and audit updated, row retained)."""

    @abstractmethod
    async def restore(self, entity: T, expected_version: VersionStamp | None) -> T:
        """Persist the restoration of a soft-deleted entity."""
