"""Example application service."""

from __future__ import annotations

from typing import ClassVar

from catalog.application.responses import ExampleResponse
from catalog.domain.models.example import Example

from .lifecycle import LifecycleService


class ExampleService(LifecycleService[Example, ExampleResponse]):
    entity_type: ClassVar[type[Example]] = Example
    response_type: ClassVar[type[ExampleResponse]] = ExampleResponse
