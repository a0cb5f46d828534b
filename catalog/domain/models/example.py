"""Example domain model — the placeholder resource new resources are cut from."""

from __future__ import annotations

from typing import ClassVar

from .lifecycle import LifecycleEntity


class Example(LifecycleEntity):
    RESOURCE: ClassVar[str] = "example"
