"""Tests for catalog/domain/models/audit.py."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from catalog.domain.errors import InvalidValueError
from catalog.domain.models.audit import AUDIT_KEY, Actor, AuditTrail, DetailInfo
from catalog.domain.models.enums import AuditAction

T0 = datetime(2025, 1, 13, 11, 30, tzinfo=timezone.utc)
T1 = T0 + timedelta(hours=1)
T2 = T0 + timedelta(hours=2)


def _trail():
    return AuditTrail.created(T0, "alice")


# --- Actor ---

def test_actor_requires_identifier():
    with pytest.raises(ValidationError):
        Actor(identifier="")


# --- AuditTrail.created ---

def test_created_sets_creation_fields():
    trail = _trail()
    assert trail.created_at == T0
    assert trail.created_by == "alice"
    assert trail.updated_at is None
    assert not trail.is_deleted


def test_created_logs_one_event():
    (event,) = _trail().change_log
    assert event.action is AuditAction.CREATED
    assert event.by == "alice"


# --- updated ---

def test_updated_preserves_creation_fields():
    trail = _trail().updated(T1, "bob")
    assert trail.created_at == T0
    assert trail.created_by == "alice"
    assert trail.updated_at == T1
    assert trail.updated_by == "bob"


def test_updated_keeps_deletion_fields_without_overrides():
    trail = _trail().deleted(T1, "bob").updated(T2, "carol")
    assert trail.deleted_at == T1
    assert trail.deleted_by == "bob"


def test_updated_applies_deletion_overrides():
    trail = _trail().deleted(T1, "bob").updated(T2, "carol", {"deleted_at": None, "deleted_by": None})
    assert trail.deleted_at is None
    assert trail.deleted_by is None


def test_updated_does_not_mutate_original():
    trail = _trail()
    trail.updated(T1, "bob")
    assert trail.updated_at is None
    assert len(trail.change_log) == 1


# --- deleted / restored ---

def test_deleted_sets_deletion_and_update_fields():
    trail = _trail().deleted(T1, "bob")
    assert trail.is_deleted
    assert trail.deleted_by == "bob"
    assert trail.updated_at == T1


def test_restored_clears_deletion_fields():
    trail = _trail().deleted(T1, "bob").restored(T2, "carol")
    assert not trail.is_deleted
    assert trail.deleted_by is None
    assert trail.updated_by == "carol"


def test_change_log_accumulates_in_order():
    trail = _trail().updated(T1, "bob").deleted(T1, "bob").restored(T2, "carol")
    assert [e.action for e in trail.change_log] == [
        AuditAction.CREATED,
        AuditAction.UPDATED,
        AuditAction.DELETED,
        AuditAction.RESTORED,
    ]


# --- DetailInfo ---

def test_to_dict_puts_trail_under_reserved_key():
    doc = DetailInfo(audit=_trail(), data={"color": "red"}).to_dict()
    assert doc["color"] == "red"
    assert doc[AUDIT_KEY]["created_by"] == "alice"


def test_from_dict_splits_trail_and_data():
    doc = DetailInfo(audit=_trail(), data={"color": "red"}).to_dict()
    info = DetailInfo.from_dict(doc)
    assert info.data == {"color": "red"}
    assert info.audit == _trail()


def test_from_dict_rejects_missing_trail():
    with pytest.raises(InvalidValueError) as exc:
        DetailInfo.from_dict({"color": "red"})
    assert exc.value.key == "validation.detail_info_missing_audit"


def test_from_dict_rejects_malformed_trail():
    with pytest.raises(InvalidValueError) as exc:
        DetailInfo.from_dict({AUDIT_KEY: {"created_by": "alice"}})
    assert exc.value.key == "validation.detail_info_invalid_audit"


def test_cleared_keeps_trail():
    info = DetailInfo(audit=_trail(), data={"color": "red"}).cleared()
    assert info.data == {}
    assert info.audit.created_by == "alice"


def test_updated_rejects_malformed_override():
    with pytest.raises(InvalidValueError) as exc:
        _trail().updated(T1, "bob", {"deleted_at": "not-a-date"})
    assert exc.value.key == "validation.audit_override_invalid"


def test_updated_parses_iso_override():
    trail = _trail().updated(T1, "bob", {"deleted_at": "2025-01-13T12:00:00Z", "deleted_by": "bob"})
    assert trail.deleted_at == datetime(2025, 1, 13, 12, tzinfo=timezone.utc)
    assert DetailInfo.from_dict(DetailInfo(audit=trail).to_dict()).audit == trail
