"""Status transition policy.

Each resource carries a StatusPolicy describing which status changes an
update may request.  The guard algorithm that consults it lives on the
entity (LifecycleEntity.ensure_mutation_allowed) and is the same for every
resource; only the tables below vary.

transitions     current status → statuses an update may move it to
unlock          status-only transitions still permitted while locked
restore_target  status a soft-deleted entity returns to on restore

DELETED is never an update target: soft deletion always goes through the
delete use case.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from .enums import RecordStatus

S = RecordStatus


class StatusPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    transitions: Mapping[RecordStatus, frozenset[RecordStatus]]
    unlock: Mapping[RecordStatus, frozenset[RecordStatus]] = {}
    restore_target: RecordStatus = RecordStatus.DRAFT

    def allows(self, current: RecordStatus, target: RecordStatus) -> bool:
        return target in self.transitions.get(current, frozenset())

    def can_unlock(self, current: RecordStatus, target: RecordStatus) -> bool:
        return target in self.unlock.get(current, frozenset())


DEFAULT_STATUS_POLICY = StatusPolicy(
    transitions={
        S.DRAFT: frozenset({S.DRAFT, S.INACTIVE, S.ACTIVE, S.MAINTENANCE}),
        S.INACTIVE: frozenset({S.INACTIVE, S.ACTIVE, S.DRAFT}),
        S.MAINTENANCE: frozenset({S.MAINTENANCE, S.INACTIVE, S.ACTIVE, S.DRAFT}),
        S.ACTIVE: frozenset(
            {S.ACTIVE, S.INACTIVE, S.LOCKED, S.COMPLETED, S.APPROVED, S.REJECTED}
        ),
        S.APPROVED: frozenset({S.APPROVED, S.COMPLETED, S.REJECTED}),
        S.REJECTED: frozenset({S.REJECTED, S.DRAFT}),
        S.LOCKED: frozenset({S.ACTIVE}),
        S.DELETED: frozenset({S.DRAFT}),
        S.COMPLETED: frozenset(),
    },
    unlock={S.LOCKED: frozenset({S.ACTIVE})},
    restore_target=S.DRAFT,
)
