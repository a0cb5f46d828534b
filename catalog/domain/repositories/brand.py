"""Brand repository interface."""

from __future__ import annotations

from catalog.domain.models.brand import Brand

from .base import LifecycleRepository


class BrandRepository(LifecycleRepository[Brand]):
    """Read/write interface for Brand entities.

    list() filters: exact match on id, status and sync_mdb; case-insensitive
    substring match on name.
    """
