"""Example repository interface."""

from __future__ import annotations

from catalog.domain.models.example import Example

from .base import LifecycleRepository


class ExampleRepository(LifecycleRepository[Example]):
    """Read/write interface for Example entities.

    list() filters: exact match on id and status; case-insensitive substring
    match on name.
    """
