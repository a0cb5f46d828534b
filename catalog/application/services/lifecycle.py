"""Generic lifecycle application service.

One LifecycleService subclass per resource orchestrates its use cases:

    create   uniqueness → build entity → stamp "created" → insert
    view     load → response (no mutation, no version change)
    update   load → lock_version check → state-machine guard → uniqueness
             (name only) → fields → status → stamp "updated" → version+1
             → conditional write
    delete   load → permission → deletability → status DELETED → stamp
             "deleted" → version+1 → conditional write
    restore  load incl. deleted → guard (status → restore target) → name
             still free → stamp "restored" → version+1 → conditional write
    list     repository page → responses

Every mutating use case performs exactly one repository write, after the
whole entity transformation has been computed in memory.  Conditional
writes use the version read at the start of the operation, so a concurrent
writer surfaces as OptimisticLockError; nothing is retried here.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, ClassVar, Generic, TypeVar

from catalog.application.audit import AuditTrailFactory
from catalog.application.commands import CreateCommand, UpdateCommand
from catalog.application.config import LockVersionConfig
from catalog.application.responses import LifecycleResponse
from catalog.domain.contracts import Authorizer
from catalog.domain.errors import BadRequestError, NotFoundError, OptimisticLockError
from catalog.domain.models.lifecycle import LifecycleEntity
from catalog.domain.models.pagination import PaginatedResult, SearchCriteria
from catalog.domain.models.version import VersionStamp
from catalog.domain.repositories.base import LifecycleRepository
from catalog.domain.services.validator import DomainValidator

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=LifecycleEntity)
R = TypeVar("R", bound=LifecycleResponse)

_Writer = Callable[[E, VersionStamp | None], Awaitable[E]]


class LifecycleService(Generic[E, R]):
    entity_type: ClassVar[type[LifecycleEntity]]
    response_type: ClassVar[type[LifecycleResponse]]

    def __init__(
        self,
        repository: LifecycleRepository[E],
        audit: AuditTrailFactory,
        authorizer: Authorizer,
        validator: DomainValidator | None = None,
        lock_config: LockVersionConfig | None = None,
    ) -> None:
        self._repository = repository
        self._audit = audit
        self._authorizer = authorizer
        self._validator = validator or DomainValidator()
        self._lock_enabled = (lock_config or LockVersionConfig()).is_enabled_for(self.resource)
        self._find_by_name = repository.unique_lookups()["name"]

    @property
    def resource(self) -> str:
        return self.entity_type.RESOURCE

    # --- reads ---

    async def list(self, criteria: SearchCriteria) -> PaginatedResult[R]:
        page = await self._repository.list(criteria)
        return PaginatedResult(
            items=[self._respond(e) for e in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            filter=page.filter,
            sort=page.sort,
        )

    async def view(self, id: int) -> R:
        return self._respond(await self._get_entity(id))

    async def get(self, id: int) -> R:
        return await self.view(id)

    # --- writes ---

    async def create(self, command: CreateCommand) -> R:
        name = self.entity_type.normalize_name(command.name)
        await self._validator.validate_unique_value(
            self._find_by_name, name, "name", self.resource, exclude_id=None
        )
        entity = self.entity_type.create(
            name=name,
            status=command.status,
            detail_info=self._audit.created(command.detail_info),
            **command.resource_fields(),
        )
        saved = await self._repository.create(entity)
        logger.info("%s %s created", self.resource, saved.id)
        return self._respond(saved)

    async def update(self, id: int, command: UpdateCommand) -> R:
        entity = await self._get_entity(id)
        if self._lock_enabled:
            self._verify_lock_version(entity, command.lock_version)

        changes = command.changed_fields()
        new_status = command.requested_status()
        has_field_changes = command.has_field_changes() or any(
            entity.would_clear(field) for field, value in changes.items() if value is None
        )
        entity.ensure_mutation_allowed(has_field_changes=has_field_changes, new_status=new_status)

        updated = entity
        if "name" in changes:
            name = self.entity_type.normalize_name(changes.pop("name"))
            await self._validator.validate_unique_value(
                self._find_by_name, name, "name", self.resource, exclude_id=id
            )
            updated = updated.rename(name)

        detail_info = updated.detail_info
        payload: dict[str, Any] | None = None
        if "detail_info" in changes:
            payload = changes.pop("detail_info")
            if payload is None:
                detail_info = detail_info.cleared()

        updated = updated.with_fields(**changes)
        if new_status is not None:
            updated = updated.transition_to(new_status)
        updated = updated.with_detail_info(self._audit.updated(detail_info, payload))
        updated = updated.next_version()

        saved = await self._write(self._repository.update, updated, entity.version)
        logger.info("%s %s updated to version %s", self.resource, id, saved.version.value)
        return self._respond(saved)

    async def delete(self, id: int) -> R:
        entity = await self._get_entity(id)
        self._validator.guard_permission(
            self._authorizer, f"{self.resource}.delete", self.resource, id
        )
        self._validator.validate_can_be_deleted(entity, self.resource)

        deleted = (
            entity.mark_deleted()
            .with_detail_info(self._audit.deleted(entity.detail_info))
            .next_version()
        )
        saved = await self._write(self._repository.soft_delete, deleted, entity.version)
        logger.info("%s %s soft-deleted", self.resource, id)
        return self._respond(saved)

    async def restore(self, id: int) -> R:
        entity = await self._repository.find_by_id(id, include_deleted=True)
        if entity is None or not entity.is_deleted:
            raise NotFoundError(
                "resource.not_found",
                params={"resource": self.resource, "field": "id", "value": id},
            )

        target = entity.status_policy.restore_target
        entity.ensure_mutation_allowed(has_field_changes=False, new_status=target)
        # the name may have been taken by a live entity since the deletion
        await self._validator.validate_unique_value(
            self._find_by_name, entity.name, "name", self.resource, exclude_id=id
        )
        restored = (
            entity.transition_to(target)
            .with_detail_info(self._audit.restored(entity.detail_info))
            .next_version()
        )
        saved = await self._write(self._repository.restore, restored, entity.version)
        logger.info("%s %s restored", self.resource, id)
        return self._respond(saved)

    # --- helpers ---

    async def _get_entity(self, id: int) -> E:
        entity = await self._repository.find_by_id(id)
        self._validator.validate_exists(entity, self.resource, id)
        return entity  # type: ignore[return-value]

    def _verify_lock_version(self, entity: E, lock_version: int | None) -> None:
        if lock_version is None:
            raise BadRequestError(
                "validation.lock_version_required",
                params={"resource": self.resource, "id": entity.id},
            )
        try:
            entity.verify_version(lock_version)
        except OptimisticLockError:
            logger.warning(
                "%s %s: stale lock_version %s (current %s)",
                self.resource,
                entity.id,
                lock_version,
                entity.version.value,
            )
            raise

    async def _write(self, write: _Writer[E], entity: E, read_version: VersionStamp) -> E:
        expected = read_version if self._lock_enabled else None
        try:
            return await write(entity, expected)
        except OptimisticLockError:
            logger.warning(
                "%s %s: concurrent write detected at version %s",
                self.resource,
                entity.id,
                read_version.value,
            )
            raise

    def _respond(self, entity: E) -> R:
        return self.response_type.from_entity(entity)  # type: ignore[return-value]
