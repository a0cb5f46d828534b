"""Typed command payloads delivered by the transport layer.

Commands arrive already structurally validated.  For update commands the
three states of a field are told apart through model_fields_set:

    absent         field not in model_fields_set   → leave unchanged
    explicit null  in the set, value None          → clear it
    value          in the set, value not None      → set it

name cannot be cleared (BadRequestError); a null detail_info empties the
resource map but keeps the audit trail; a null status is treated as absent.
has_field_changes() counts supplied values only; whether a null actually
clears something depends on the stored entity (LifecycleEntity.would_clear).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from catalog.domain.models.enums import RecordStatus

_CONTROL_FIELDS = frozenset({"status", "lock_version"})


class CreateCommand(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    status: RecordStatus = RecordStatus.DRAFT
    detail_info: dict[str, Any] | None = None

    def resource_fields(self) -> dict[str, Any]:
        """Resource-specific scalar columns (anything beyond the shared fields)."""
        return self.model_dump(exclude={"name", "status", "detail_info"})


class UpdateCommand(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    status: RecordStatus | None = None
    detail_info: dict[str, Any] | None = None
    lock_version: int | None = Field(default=None, ge=0)

    def requested_status(self) -> RecordStatus | None:
        return self.status if "status" in self.model_fields_set else None

    def changed_fields(self) -> dict[str, Any]:
        """Every non-status field the caller supplied, explicit nulls included."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name not in _CONTROL_FIELDS
        }

    def has_field_changes(self) -> bool:
        """Whether any non-status field carries a non-null value."""
        return any(value is not None for value in self.changed_fields().values())


class CreateBrandCommand(CreateCommand):
    sync_mdb: bool | None = None


class UpdateBrandCommand(UpdateCommand):
    sync_mdb: bool | None = None


class CreateExampleCommand(CreateCommand):
    pass


class UpdateExampleCommand(UpdateCommand):
    pass
