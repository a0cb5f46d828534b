"""Domain services package."""

from .audit import stamp_created, stamp_deleted, stamp_restored, stamp_updated
from .validator import DomainValidator

__all__ = [
    "DomainValidator",
    "stamp_created",
    "stamp_updated",
    "stamp_deleted",
    "stamp_restored",
]
