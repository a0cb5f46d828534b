"""Read models returned by the application services.

Derived one-way from entities; never turned back into an entity.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from catalog.domain.models.brand import Brand
from catalog.domain.models.example import Example
from catalog.domain.models.lifecycle import LifecycleEntity


class LifecycleResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    status: int
    status_label: str
    detail_info: dict[str, Any]
    lock_version: int

    @classmethod
    def _common(cls, entity: LifecycleEntity) -> dict[str, Any]:
        if entity.id is None:
            raise ValueError(f"{entity.RESOURCE} has not been persisted")
        return {
            "id": entity.id,
            "name": entity.name,
            "status": entity.status.value,
            "status_label": entity.status.label,
            "detail_info": entity.detail_info.to_dict(),
            "lock_version": entity.version.value,
        }

    @classmethod
    def from_entity(cls, entity: LifecycleEntity) -> LifecycleResponse:
        return cls(**cls._common(entity))


class BrandResponse(LifecycleResponse):
    sync_mdb: bool

    @classmethod
    def from_entity(cls, entity: Brand) -> BrandResponse:  # type: ignore[override]
        return cls(**cls._common(entity), sync_mdb=entity.sync_mdb is not None)


class ExampleResponse(LifecycleResponse):
    @classmethod
    def from_entity(cls, entity: Example) -> ExampleResponse:  # type: ignore[override]
        return cls(**cls._common(entity))
