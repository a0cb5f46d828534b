"""Brand application service."""

from __future__ import annotations

from typing import ClassVar

from catalog.application.responses import BrandResponse
from catalog.domain.models.brand import Brand

from .lifecycle import LifecycleService


class BrandService(LifecycleService[Brand, BrandResponse]):
    entity_type: ClassVar[type[Brand]] = Brand
    response_type: ClassVar[type[BrandResponse]] = BrandResponse
