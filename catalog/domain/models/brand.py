"""Brand domain model."""

from __future__ import annotations

from typing import ClassVar

from .lifecycle import LifecycleEntity


class Brand(LifecycleEntity):
    """A product brand.

    sync_mdb marks whether the brand has been mirrored to the external
    document store: None means never synced, True/False the last outcome.
    """

    RESOURCE: ClassVar[str] = "brand"
    EDITABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"sync_mdb"})

    sync_mdb: bool | None = None
