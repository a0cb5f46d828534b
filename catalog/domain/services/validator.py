"""Cross-cutting domain guards shared by every resource service.

Each check fails fast with its own error kind and returns None on success.
"""

from __future__ import annotations

from typing import Any

from catalog.domain.contracts import Authorizer
from catalog.domain.errors import ConflictError, ForbiddenError, NotFoundError
from catalog.domain.models.lifecycle import LifecycleEntity
from catalog.domain.repositories.base import UniqueLookup


class DomainValidator:
    def guard_permission(
        self,
        authorizer: Authorizer,
        permission: str,
        resource: str,
        id: int | None = None,
    ) -> None:
        if not authorizer.can(permission):
            action = permission.split(".", 1)[1] if "." in permission else permission
            raise ForbiddenError(
                "validation.action_not_allowed",
                params={"action": action, "resource": resource, "id": id},
            )

    def validate_exists(self, entity: LifecycleEntity | None, resource: str, id: Any = None) -> None:
        if entity is None:
            raise NotFoundError(
                "resource.not_found",
                params={"resource": resource, "field": "id", "value": id},
            )

    async def validate_unique_value(
        self,
        lookup: UniqueLookup,
        value: Any,
        field: str,
        resource: str,
        exclude_id: int | None = None,
    ) -> None:
        """Raise ConflictError if another entity already holds value.

        exclude_id lets an entity keep its own value on update.
        """
        existing = await lookup(value)
        if existing is not None and (exclude_id is None or existing.id != exclude_id):
            raise ConflictError(
                "exists.already_exists",
                params={"resource": resource, "field": field, "value": value},
            )

    def validate_can_be_deleted(self, entity: LifecycleEntity | None, resource: str) -> None:
        self.validate_exists(entity, resource)
        if entity is not None and entity.status.is_locked():
            raise ConflictError(
                "status.deletion_restricted",
                params={"resource": resource, "id": entity.id, "status": entity.status.label},
            )
