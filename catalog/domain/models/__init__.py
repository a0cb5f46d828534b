"""Domain model package.

All domain objects are pure Pydantic models with no ORM or infrastructure
dependencies.  Import from this package to avoid coupling application code
to individual module paths.
"""

from .audit import AUDIT_KEY, Actor, AuditEvent, AuditTrail, DetailInfo
from .brand import Brand
from .enums import AuditAction, RecordStatus, SortDirection
from .example import Example
from .lifecycle import LifecycleEntity
from .pagination import PaginatedResult, SearchCriteria
from .status import DEFAULT_STATUS_POLICY, StatusPolicy
from .version import INITIAL_VERSION, VersionStamp

__all__ = [
    # enums
    "AuditAction",
    "RecordStatus",
    "SortDirection",
    # value objects
    "AUDIT_KEY",
    "Actor",
    "AuditEvent",
    "AuditTrail",
    "DetailInfo",
    "INITIAL_VERSION",
    "VersionStamp",
    "DEFAULT_STATUS_POLICY",
    "StatusPolicy",
    # entities
    "LifecycleEntity",
    "Brand",
    "Example",
    # listing
    "PaginatedResult",
    "SearchCriteria",
]
