"""Tests for catalog/domain/services/audit.py."""

from datetime import datetime, timedelta, timezone

from catalog.domain.models.audit import AUDIT_KEY, Actor
from catalog.domain.models.enums import AuditAction
from catalog.domain.services import stamp_created, stamp_deleted, stamp_restored, stamp_updated

T0 = datetime(2025, 1, 13, 11, 30, tzinfo=timezone.utc)
T1 = T0 + timedelta(minutes=5)
ALICE = Actor(identifier="alice")
BOB = Actor(identifier="bob")


def test_stamp_created_records_actor_and_time():
    info = stamp_created(T0, ALICE)
    assert info.audit.created_at == T0
    assert info.audit.created_by == "alice"
    assert info.data == {}


def test_stamp_created_keeps_payload_minus_reserved_key():
    info = stamp_created(T0, ALICE, {"color": "red", AUDIT_KEY: {"created_by": "mallory"}})
    assert info.data == {"color": "red"}
    assert info.audit.created_by == "alice"


def test_stamp_updated_merges_payload_over_data():
    info = stamp_updated(stamp_created(T0, ALICE, {"a": 1, "b": 2}), T1, BOB, {"b": 3})
    assert info.data == {"a": 1, "b": 3}


def test_stamp_updated_preserves_creation_fields():
    info = stamp_updated(stamp_created(T0, ALICE), T1, BOB)
    assert info.audit.created_by == "alice"
    assert info.audit.updated_by == "bob"
    assert info.audit.updated_at == T1


def test_stamp_updated_honours_explicit_deletion_overrides():
    deleted = stamp_deleted(stamp_created(T0, ALICE), T1, BOB)
    info = stamp_updated(deleted, T1, BOB, {AUDIT_KEY: {"deleted_at": None, "updated_by": "x"}})
    assert info.audit.deleted_at is None
    assert info.audit.deleted_by == "bob"
    assert info.audit.updated_by == "bob"


def test_stamp_updated_ignores_non_mapping_change_log():
    info = stamp_updated(stamp_created(T0, ALICE), T1, BOB, {AUDIT_KEY: "garbage"})
    assert AUDIT_KEY not in info.data


def test_stamp_deleted_marks_trail_deleted():
    info = stamp_deleted(stamp_created(T0, ALICE, {"a": 1}), T1, BOB)
    assert info.audit.is_deleted
    assert info.audit.deleted_by == "bob"
    assert info.data == {"a": 1}


def test_stamp_restored_clears_deletion():
    info = stamp_restored(stamp_deleted(stamp_created(T0, ALICE), T1, BOB), T1, ALICE)
    assert not info.audit.is_deleted
    assert info.audit.change_log[-1].action is AuditAction.RESTORED


def test_stamps_do_not_mutate_input():
    created = stamp_created(T0, ALICE, {"a": 1})
    stamp_updated(created, T1, BOB, {"a": 2})
    assert created.data == {"a": 1}
    assert created.audit.updated_at is None
