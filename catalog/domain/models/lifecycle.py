"""Generic lifecycle entity.

LifecycleEntity is the shape every catalog resource shares: identity, a
unique name, a RecordStatus, DetailInfo (audit trail + resource map) and a
VersionStamp.  Resources subclass it, set RESOURCE, and declare any extra
scalar columns in EDITABLE_FIELDS.

Entities are frozen.  Every mutator returns a new instance, so a failed
use case never leaves a half-modified entity behind; the application
service applies mutations in order (fields, status, audit stamp, version)
and hands the final value to the repository in a single write.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.domain.errors import BadRequestError, ConflictError, OptimisticLockError

from .audit import DetailInfo
from .enums import RecordStatus
from .status import DEFAULT_STATUS_POLICY, StatusPolicy
from .version import VersionStamp


class LifecycleEntity(BaseModel):
    """Identifiable, auditable, optimistically locked aggregate root."""

    model_config = ConfigDict(frozen=True)

    RESOURCE: ClassVar[str] = "resource"
    EDITABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()
    status_policy: ClassVar[StatusPolicy] = DEFAULT_STATUS_POLICY

    id: int | None = None  # assigned by the repository on first save
    name: str
    status: RecordStatus = RecordStatus.DRAFT
    detail_info: DetailInfo
    version: VersionStamp = Field(default_factory=VersionStamp)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    # --- construction ---

    @classmethod
    def create(
        cls,
        name: str | None,
        detail_info: DetailInfo,
        status: RecordStatus = RecordStatus.DRAFT,
        **fields: Any,
    ) -> Self:
        """Named constructor for a not-yet-persisted entity."""
        cls._check_editable(fields)
        if status.is_deleted():
            raise BadRequestError(
                "status.invalid_initial",
                params={"resource": cls.RESOURCE, "status": status.label},
            )
        return cls(
            name=cls.normalize_name(name),
            status=status,
            detail_info=detail_info,
            **fields,
        )

    @classmethod
    def normalize_name(cls, name: str | None) -> str:
        """Trim name; raise BadRequestError if nothing is left."""
        normalized = name.strip() if name is not None else ""
        if not normalized:
            raise BadRequestError(
                "validation.name_required", params={"resource": cls.RESOURCE}
            )
        return normalized

    def with_identity(self, id: int, version: VersionStamp | None = None) -> Self:
        """Used by repositories once the store has assigned an id."""
        return self.model_copy(update={"id": id, "version": version or VersionStamp()})

    # --- queries ---

    @property
    def is_deleted(self) -> bool:
        return self.status.is_deleted()

    def would_clear(self, field: str) -> bool:
        """Whether setting field to null changes anything on this entity."""
        if field == "detail_info":
            return bool(self.detail_info.data)
        return getattr(self, field, None) is not None

    def verify_version(self, expected: VersionStamp | int) -> None:
        """Raise OptimisticLockError unless expected matches the current stamp."""
        if not self.version.equals(expected):
            raise OptimisticLockError(
                params={
                    "resource": self.RESOURCE,
                    "id": self.id,
                    "version": int(expected),
                    "current": self.version.value,
                }
            )

    def ensure_mutation_allowed(
        self, *, has_field_changes: bool, new_status: RecordStatus | None
    ) -> None:
        """State-machine guard for update and restore.

        1. Nothing requested → BadRequestError.
        2. Locked entity → ConflictError, unless the request is a status-only
           transition listed in the policy's unlock table.
        3. Requested status not reachable from the current one → BadRequestError.
        """
        if new_status is None and not has_field_changes:
            raise BadRequestError(
                "validation.no_changes", params={"resource": self.RESOURCE, "id": self.id}
            )

        policy = self.status_policy
        if self.status.is_locked():
            unlocking = (
                not has_field_changes
                and new_status is not None
                and policy.can_unlock(self.status, new_status)
            )
            if not unlocking:
                raise ConflictError(
                    "status.modification_restricted",
                    params={
                        "resource": self.RESOURCE,
                        "id": self.id,
                        "status": self.status.label,
                    },
                )

        if new_status is not None and not policy.allows(self.status, new_status):
            raise BadRequestError(
                "status.transition_not_allowed",
                params={
                    "resource": self.RESOURCE,
                    "from": self.status.label,
                    "to": new_status.label,
                },
            )

    # --- mutators (each returns a new entity) ---

    def rename(self, name: str | None) -> Self:
        normalized = self.normalize_name(name)
        if normalized == self.name:
            return self
        return self.model_copy(update={"name": normalized})

    def with_fields(self, **fields: Any) -> Self:
        """Apply resource-specific scalar changes (e.g. Brand.sync_mdb)."""
        self._check_editable(fields)
        if not fields:
            return self
        return self.model_copy(update=fields)

    def transition_to(self, status: RecordStatus) -> Self:
        return self.model_copy(update={"status": status})

    def mark_deleted(self) -> Self:
        return self.model_copy(update={"status": RecordStatus.DELETED})

    def with_detail_info(self, detail_info: DetailInfo) -> Self:
        return self.model_copy(update={"detail_info": detail_info})

    def next_version(self) -> Self:
        return self.model_copy(update={"version": self.version.increment()})

    @classmethod
    def _check_editable(cls, fields: dict[str, Any]) -> None:
        unknown = set(fields) - cls.EDITABLE_FIELDS
        if unknown:
            raise BadRequestError(
                "validation.field_not_editable",
                params={"resource": cls.RESOURCE, "fields": sorted(unknown)},
            )
