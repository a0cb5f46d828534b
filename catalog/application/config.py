"""Per-resource optimistic-lock switch."""

from __future__ import annotations

import re
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def _normalize(name: str) -> str:
    # "Brand", "brand-service" and "BRAND_SERVICE" all name the same resource
    name = name.strip().lower().replace("service", "")
    return _NON_ALNUM.sub("", name)


class LockVersionConfig(BaseModel):
    """Optimistic locking is on globally unless switched off, per resource or entirely."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    disabled: frozenset[str] = Field(default_factory=frozenset)

    @classmethod
    def build(cls, enabled: bool = True, disabled: Iterable[str] = ()) -> LockVersionConfig:
        return cls(enabled=enabled, disabled=frozenset(_normalize(n) for n in disabled))

    def is_enabled_for(self, resource: str) -> bool:
        if not self.enabled:
            return False
        return _normalize(resource) not in self.disabled
