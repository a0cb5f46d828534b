"""Concrete repository implementations.

Exports the SqlRepository classes, the in-memory variants, and the
get_repositories() factory for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .base import SqlLifecycleRepository
from .brand import SqlBrandRepository
from .example import SqlExampleRepository
from .in_memory import (
    InMemoryBrandRepository,
    InMemoryExampleRepository,
    InMemoryLifecycleRepository,
)


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    brands: SqlBrandRepository
    examples: SqlExampleRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use as a request-scoped dependency:

        async def handler(session: AsyncSession = Depends(get_session)) -> ...:
            repos = get_repositories(session)
            brand = await repos.brands.find_by_id(brand_id)
    """
    return Repositories(
        brands=SqlBrandRepository(session),
        examples=SqlExampleRepository(session),
    )


__all__ = [
    "SqlLifecycleRepository",
    "SqlBrandRepository",
    "SqlExampleRepository",
    "InMemoryLifecycleRepository",
    "InMemoryBrandRepository",
    "InMemoryExampleRepository",
    "Repositories",
    "get_repositories",
]
