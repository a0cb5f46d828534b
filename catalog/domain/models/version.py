"""Optimistic-lock version stamp.

A VersionStamp is the revision counter persisted in each row's lock_version
column.  It starts at 1 when the entity is first stored and is incremented by
exactly one per successful write; it never decreases.  Stamps are immutable:
increment() returns a new stamp.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from catalog.domain.errors import InvalidValueError

INITIAL_VERSION = 1


class VersionStamp(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: int = Field(default=INITIAL_VERSION, ge=0)

    @classmethod
    def from_int(cls, value: int) -> VersionStamp:
        """Rebuild a stamp from a stored integer.  Raises InvalidValueError if negative."""
        if value < 0:
            raise InvalidValueError(
                "validation.lock_version_invalid", params={"version": value}
            )
        return cls(value=value)

    def equals(self, other: VersionStamp | int) -> bool:
        other_value = other.value if isinstance(other, VersionStamp) else other
        return self.value == other_value

    def increment(self) -> VersionStamp:
        return VersionStamp(value=self.value + 1)

    def __int__(self) -> int:
        return self.value
