"""Capabilities the lifecycle core consumes from outside the domain.

Time and identity are always injected, never read from global state, so
audit stamps are deterministic under test.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from catalog.domain.models.audit import Actor


@runtime_checkable
class Clock(Protocol):
    def now(self) -> datetime:
        """Current timezone-aware timestamp."""
        ...


@runtime_checkable
class ActorSource(Protocol):
    def current_actor(self) -> Actor:
        """The identity on whose behalf the current operation runs."""
        ...


@runtime_checkable
class Authorizer(Protocol):
    def can(self, permission: str) -> bool:
        """Whether the current actor holds permission (e.g. "brand.delete")."""
        ...
