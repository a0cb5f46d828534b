"""SQLAlchemy implementation of BrandRepository."""

from __future__ import annotations

from typing import Any, ClassVar

from catalog.domain.models.brand import Brand as DomainBrand
from catalog.domain.repositories.brand import BrandRepository
from catalog.infrastructure.persistence.models.resources import Brand as OrmBrand

from .base import SqlLifecycleRepository


class SqlBrandRepository(SqlLifecycleRepository[DomainBrand], BrandRepository):
    orm_model: ClassVar[type[OrmBrand]] = OrmBrand
    entity_type: ClassVar[type[DomainBrand]] = DomainBrand
    exact_filters: ClassVar[tuple[str, ...]] = ("id", "status", "sync_mdb")

    @classmethod
    def _extra_to_domain(cls, row: Any) -> dict[str, Any]:
        return {"sync_mdb": row.sync_mdb}

    @classmethod
    def _extra_values(cls, entity: DomainBrand) -> dict[str, Any]:
        return {"sync_mdb": entity.sync_mdb}
