"""Tests for ExampleService — the generic lifecycle on a resource with no extra fields."""

import pytest

from catalog.application.audit import AuditTrailFactory
from catalog.application.commands import CreateExampleCommand, UpdateExampleCommand
from catalog.application.responses import ExampleResponse
from catalog.application.services import ExampleService
from catalog.domain.errors import ConflictError, ForbiddenError
from catalog.domain.models.audit import Actor
from catalog.domain.models.enums import RecordStatus
from catalog.infrastructure.clock import FixedClock
from catalog.infrastructure.persistence.repositories import InMemoryExampleRepository
from catalog.infrastructure.security import AllowAllAuthorizer, PermissionMapAuthorizer, StaticActorSource

BOB = Actor(identifier="bob")


def _service(authorizer=None):
    repo = InMemoryExampleRepository()
    audit = AuditTrailFactory(FixedClock(), StaticActorSource(BOB))
    return ExampleService(repo, audit, authorizer or AllowAllAuthorizer()), repo


async def test_resource_name():
    service, _ = _service()
    assert service.resource == "example"


async def test_create_returns_example_response():
    service, _ = _service()
    example = await service.create(CreateExampleCommand(name="Widget"))
    assert isinstance(example, ExampleResponse)
    assert example.lock_version == 1


async def test_completed_example_is_immutable():
    service, _ = _service()
    example = await service.create(CreateExampleCommand(name="Widget", status=RecordStatus.ACTIVE))
    await service.update(
        example.id, UpdateExampleCommand(status=RecordStatus.COMPLETED, lock_version=1)
    )
    with pytest.raises(ConflictError):
        await service.update(
            example.id, UpdateExampleCommand(status=RecordStatus.ACTIVE, lock_version=2)
        )
    with pytest.raises(ConflictError):
        await service.delete(example.id)


async def test_delete_permission_is_resource_scoped():
    authorizer = PermissionMapAuthorizer(BOB, {"brand.delete": True})
    service, _ = _service(authorizer)
    example = await service.create(CreateExampleCommand(name="Widget"))
    with pytest.raises(ForbiddenError) as exc:
        await service.delete(example.id)
    assert exc.value.params["resource"] == "example"


async def test_delete_then_restore_versions():
    service, repo = _service()
    example = await service.create(CreateExampleCommand(name="Widget"))
    assert (await service.delete(example.id)).lock_version == 2
    assert (await service.restore(example.id)).lock_version == 3
    assert repo.writes == 3
