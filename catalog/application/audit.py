"""AuditTrailFactory — binds the clock and actor source to the stamp functions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from catalog.domain.contracts import ActorSource, Clock
from catalog.domain.models.audit import DetailInfo
from catalog.domain.services.audit import (
    stamp_created,
    stamp_deleted,
    stamp_restored,
    stamp_updated,
)


class AuditTrailFactory:
    def __init__(self, clock: Clock, actors: ActorSource) -> None:
        self._clock = clock
        self._actors = actors

    def created(self, payload: Mapping[str, Any] | None = None) -> DetailInfo:
        return stamp_created(self._clock.now(), self._actors.current_actor(), payload)

    def updated(
        self, detail_info: DetailInfo, payload: Mapping[str, Any] | None = None
    ) -> DetailInfo:
        return stamp_updated(detail_info, self._clock.now(), self._actors.current_actor(), payload)

    def deleted(
        self, detail_info: DetailInfo, payload: Mapping[str, Any] | None = None
    ) -> DetailInfo:
        return stamp_deleted(detail_info, self._clock.now(), self._actors.current_actor(), payload)

    def restored(
        self, detail_info: DetailInfo, payload: Mapping[str, Any] | None = None
    ) -> DetailInfo:
        return stamp_restored(detail_info, self._clock.now(), self._actors.current_actor(), payload)
