"""Audit trail stamping.

Pure functions: given the current DetailInfo, a timestamp, an actor and a
free-form payload, return the next DetailInfo.  The payload is merged over
the existing resource map; its reserved "change_log" key never lands in the
map.  On stamp_updated a payload "change_log" mapping may carry explicit
deleted_at / deleted_by overrides, everything else in it is ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from catalog.domain.models.audit import AUDIT_KEY, Actor, AuditTrail, DetailInfo

_DELETION_FIELDS = ("deleted_at", "deleted_by")


def _merge(data: Mapping[str, Any], payload: Mapping[str, Any] | None) -> dict[str, Any]:
    merged = dict(data)
    for key, value in (payload or {}).items():
        if key != AUDIT_KEY:
            merged[key] = value
    return merged


def _deletion_overrides(payload: Mapping[str, Any] | None) -> dict[str, Any]:
    trail = (payload or {}).get(AUDIT_KEY)
    if not isinstance(trail, Mapping):
        return {}
    return {k: trail[k] for k in _DELETION_FIELDS if k in trail}


def stamp_created(
    now: datetime, actor: Actor, payload: Mapping[str, Any] | None = None
) -> DetailInfo:
    return DetailInfo(
        audit=AuditTrail.created(now, actor.identifier),
        data=_merge({}, payload),
    )


def stamp_updated(
    existing: DetailInfo,
    now: datetime,
    actor: Actor,
    payload: Mapping[str, Any] | None = None,
) -> DetailInfo:
    return DetailInfo(
        audit=existing.audit.updated(now, actor.identifier, _deletion_overrides(payload)),
        data=_merge(existing.data, payload),
    )


def stamp_deleted(
    existing: DetailInfo,
    now: datetime,
    actor: Actor,
    payload: Mapping[str, Any] | None = None,
) -> DetailInfo:
    return DetailInfo(
        audit=existing.audit.deleted(now, actor.identifier),
        data=_merge(existing.data, payload),
    )


def stamp_restored(
    existing: DetailInfo,
    now: datetime,
    actor: Actor,
    payload: Mapping[str, Any] | None = None,
) -> DetailInfo:
    return DetailInfo(
        audit=existing.audit.restored(now, actor.identifier),
        data=_merge(existing.data, payload),
    )
