"""Tests for catalog/application/commands.py."""

import pytest
from pydantic import ValidationError

from catalog.application.commands import (
    CreateBrandCommand,
    CreateExampleCommand,
    UpdateBrandCommand,
    UpdateExampleCommand,
)
from catalog.domain.models.enums import RecordStatus


# --- create ---

def test_create_defaults_to_draft():
    assert CreateExampleCommand(name="Widget").status is RecordStatus.DRAFT


def test_create_accepts_integer_status():
    assert CreateExampleCommand(name="Widget", status=1).status is RecordStatus.ACTIVE


def test_create_rejects_unknown_status_code():
    with pytest.raises(ValidationError):
        CreateExampleCommand(name="Widget", status=42)


def test_create_rejects_unknown_field():
    with pytest.raises(ValidationError):
        CreateExampleCommand(name="Widget", sync_mdb=True)


def test_brand_resource_fields():
    assert CreateBrandCommand(name="Acme", sync_mdb=True).resource_fields() == {"sync_mdb": True}


def test_example_has_no_resource_fields():
    assert CreateExampleCommand(name="Widget", detail_info={"a": 1}).resource_fields() == {}


# --- update: absent / null / value ---

def test_empty_update_has_no_changes():
    command = UpdateExampleCommand(lock_version=1)
    assert command.changed_fields() == {}
    assert command.requested_status() is None
    assert not command.has_field_changes()


def test_lock_version_is_not_a_field_change():
    assert not UpdateExampleCommand(lock_version=3).has_field_changes()


def test_status_is_not_a_field_change():
    command = UpdateExampleCommand(status=RecordStatus.ACTIVE)
    assert not command.has_field_changes()
    assert command.requested_status() is RecordStatus.ACTIVE


def test_explicit_null_status_is_treated_as_absent():
    assert UpdateExampleCommand(status=None).requested_status() is None


def test_explicit_null_detail_info_is_a_change():
    assert UpdateExampleCommand(detail_info=None).changed_fields() == {"detail_info": None}


def test_supplied_name_is_a_change():
    assert UpdateExampleCommand(name="Gadget").changed_fields() == {"name": "Gadget"}


def test_brand_sync_mdb_is_a_change():
    assert UpdateBrandCommand(sync_mdb=False).changed_fields() == {"sync_mdb": False}


def test_model_validate_respects_fields_set():
    command = UpdateBrandCommand.model_validate({"name": "Acme", "lock_version": 2})
    assert set(command.changed_fields()) == {"name"}


def test_negative_lock_version_rejected():
    with pytest.raises(ValidationError):
        UpdateExampleCommand(lock_version=-1)


def test_null_only_update_has_no_field_changes():
    command = UpdateBrandCommand(sync_mdb=None, detail_info=None, lock_version=1)
    assert set(command.changed_fields()) == {"sync_mdb", "detail_info"}
    assert not command.has_field_changes()


def test_false_value_is_a_field_change():
    assert UpdateBrandCommand(sync_mdb=False).has_field_changes()
