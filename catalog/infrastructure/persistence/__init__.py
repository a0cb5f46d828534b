"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports all repository implementations and the DI factory.
"""

from catalog.infrastructure.persistence.models import *  # noqa: F401, F403
from catalog.infrastructure.persistence.models import __all__ as _orm_all
from catalog.infrastructure.persistence.repositories import (
    InMemoryBrandRepository,
    InMemoryExampleRepository,
    Repositories,
    SqlBrandRepository,
    SqlExampleRepository,
    get_repositories,
)

__all__ = _orm_all + [
    "Repositories",
    "SqlBrandRepository",
    "SqlExampleRepository",
    "InMemoryBrandRepository",
    "InMemoryExampleRepository",
    "get_repositories",
]
