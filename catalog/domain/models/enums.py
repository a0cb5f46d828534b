"""Domain enumerations for the catalog lifecycle core.

RecordStatus is stored as its integer code; the str-valued enums serialize
cleanly to JSON inside the detail_info blob.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class RecordStatus(IntEnum):
    """Lifecycle state shared by every catalog resource."""

    INACTIVE = 0
    ACTIVE = 1
    DRAFT = 2
    COMPLETED = 3
    DELETED = 4
    MAINTENANCE = 5
    APPROVED = 6
    REJECTED = 7
    LOCKED = 8

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def is_locked(self) -> bool:
        """True for states that forbid field edits and deletion."""
        return self in _LOCKED_STATES

    def is_deleted(self) -> bool:
        return self is RecordStatus.DELETED

    @classmethod
    def searchable(cls) -> list[RecordStatus]:
        """Every state a list query may filter on (soft-deleted rows never listed)."""
        return [s for s in cls if s is not cls.DELETED]

    @classmethod
    def labels(cls) -> dict[int, str]:
        return {s.value: s.label for s in cls}


_LOCKED_STATES = frozenset({RecordStatus.LOCKED, RecordStatus.COMPLETED})


class AuditAction(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    RESTORED = "restored"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
