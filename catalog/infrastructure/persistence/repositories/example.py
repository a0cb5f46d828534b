"""SQLAlchemy implementation of ExampleRepository."""

from __future__ import annotations

from typing import ClassVar

from catalog.domain.models.example import Example as DomainExample
from catalog.domain.repositories.example import ExampleRepository
from catalog.infrastructure.persistence.models.resources import Example as OrmExample

from .base import SqlLifecycleRepository


class SqlExampleRepository(SqlLifecycleRepository[DomainExample], ExampleRepository):
    orm_model: ClassVar[type[OrmExample]] = OrmExample
    entity_type: ClassVar[type[DomainExample]] = DomainExample
