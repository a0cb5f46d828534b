"""Audit trail value objects.

Actor       — who is performing the current operation
AuditEvent  — one entry of the change log (action, when, who)
AuditTrail  — creation / update / deletion / restoration provenance
DetailInfo  — the entity's metadata: a fixed AuditTrail plus an open
              resource-specific map

In storage both halves live in a single JSON document (detail_info) with the
trail under the reserved "change_log" key.  In memory they are kept apart so
the resource map can never overwrite audit fields.

All objects here are frozen; every stamp returns a new value.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from catalog.domain.errors import InvalidValueError

from .enums import AuditAction

AUDIT_KEY = "change_log"


class Actor(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str = Field(min_length=1)
    display_name: str = ""


class AuditEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: AuditAction
    at: datetime
    by: str


class AuditTrail(BaseModel):
    """Provenance record embedded in every entity.

    created_at / created_by are set once by created() and carried unchanged
    through every later stamp.  deleted_at being set means the entity is
    soft-deleted; restored() clears both deletion fields.
    """

    model_config = ConfigDict(frozen=True)

    created_at: datetime
    created_by: str
    updated_at: datetime | None = None
    updated_by: str | None = None
    deleted_at: datetime | None = None
    deleted_by: str | None = None
    change_log: tuple[AuditEvent, ...] = ()

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @classmethod
    def created(cls, now: datetime, by: str) -> AuditTrail:
        return cls(
            created_at=now,
            created_by=by,
            change_log=(AuditEvent(action=AuditAction.CREATED, at=now, by=by),),
        )

    def updated(
        self,
        now: datetime,
        by: str,
        overrides: Mapping[str, Any] | None = None,
    ) -> AuditTrail:
        """Stamp an update.  Deletion fields are kept unless overrides names them.

        Overrides come from caller payloads, so the result is re-validated;
        a malformed value raises InvalidValueError.
        """
        overrides = overrides or {}
        fields = {
            **dict(self),
            "updated_at": now,
            "updated_by": by,
            "deleted_at": overrides.get("deleted_at", self.deleted_at),
            "deleted_by": overrides.get("deleted_by", self.deleted_by),
            "change_log": self._logged(AuditAction.UPDATED, now, by),
        }
        try:
            return AuditTrail.model_validate(fields)
        except ValidationError as exc:
            raise InvalidValueError(
                "validation.audit_override_invalid",
                params={"fields": sorted(overrides), "errors": exc.error_count()},
            ) from exc

    def deleted(self, now: datetime, by: str) -> AuditTrail:
        return self.model_copy(
            update={
                "updated_at": now,
                "updated_by": by,
                "deleted_at": now,
                "deleted_by": by,
                "change_log": self._logged(AuditAction.DELETED, now, by),
            }
        )

    def restored(self, now: datetime, by: str) -> AuditTrail:
        return self.model_copy(
            update={
                "updated_at": now,
                "updated_by": by,
                "deleted_at": None,
                "deleted_by": None,
                "change_log": self._logged(AuditAction.RESTORED, now, by),
            }
        )

    def _logged(self, action: AuditAction, now: datetime, by: str) -> tuple[AuditEvent, ...]:
        return self.change_log + (AuditEvent(action=action, at=now, by=by),)


class DetailInfo(BaseModel):
    """Entity metadata: the audit trail and the resource-specific map."""

    model_config = ConfigDict(frozen=True)

    audit: AuditTrail
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> DetailInfo:
        """Split a stored detail_info document into trail and resource map."""
        data = {k: v for k, v in raw.items() if k != AUDIT_KEY}
        trail = raw.get(AUDIT_KEY)
        if not isinstance(trail, Mapping):
            raise InvalidValueError(
                "validation.detail_info_missing_audit", params={"key": AUDIT_KEY}
            )
        try:
            audit = AuditTrail.model_validate(trail)
        except ValidationError as exc:
            raise InvalidValueError(
                "validation.detail_info_invalid_audit", params={"errors": exc.error_count()}
            ) from exc
        return cls(audit=audit, data=data)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready document with the trail under the reserved key."""
        return {**self.data, AUDIT_KEY: self.audit.model_dump(mode="json")}

    def cleared(self) -> DetailInfo:
        """Same trail, empty resource map."""
        return self.model_copy(update={"data": {}})
