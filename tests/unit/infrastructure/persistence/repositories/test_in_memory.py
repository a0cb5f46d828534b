"""Tests for the in-memory lifecycle repositories."""

from datetime import datetime, timezone

import pytest

from catalog.domain.errors import NotFoundError, OptimisticLockError
from catalog.domain.models.audit import AuditTrail, DetailInfo
from catalog.domain.models.brand import Brand
from catalog.domain.models.enums import RecordStatus, SortDirection
from catalog.domain.models.pagination import SearchCriteria
from catalog.domain.models.version import VersionStamp
from catalog.domain.repositories import BrandRepository
from catalog.infrastructure.persistence.repositories import InMemoryBrandRepository


def _brand(name="Acme", **overrides):
    info = DetailInfo(audit=AuditTrail.created(datetime(2025, 1, 1, tzinfo=timezone.utc), "alice"))
    return Brand(name=name, detail_info=info, **overrides)


def test_is_a_brand_repository():
    assert isinstance(InMemoryBrandRepository(), BrandRepository)


async def test_create_assigns_sequential_ids_and_version_one():
    repo = InMemoryBrandRepository()
    first = await repo.create(_brand())
    second = await repo.create(_brand("Globex", version=VersionStamp.from_int(6)))
    assert (first.id, second.id) == (1, 2)
    assert second.version.value == 1


async def test_find_by_id_hides_deleted_unless_asked():
    repo = InMemoryBrandRepository()
    stored = repo.seed(_brand(status=RecordStatus.DELETED))
    assert await repo.find_by_id(stored.id) is None
    assert (await repo.find_by_id(stored.id, include_deleted=True)).is_deleted


async def test_find_by_name_ignores_deleted():
    repo = InMemoryBrandRepository()
    repo.seed(_brand(status=RecordStatus.DELETED))
    assert await repo.find_by_name("Acme") is None
    assert not await repo.exists_by_name("Acme")


async def test_update_checks_expected_version():
    repo = InMemoryBrandRepository()
    stored = await repo.create(_brand())
    with pytest.raises(OptimisticLockError):
        await repo.update(stored.rename("Globex").next_version(), VersionStamp.from_int(2))
    assert repo.snapshot(stored.id).name == "Acme"


async def test_unconditional_update_skips_version_check():
    repo = InMemoryBrandRepository()
    stored = await repo.create(_brand())
    await repo.update(stored.rename("Globex"), None)
    assert repo.snapshot(stored.id).name == "Globex"


async def test_update_of_deleted_row_raises_not_found():
    repo = InMemoryBrandRepository()
    stored = repo.seed(_brand(status=RecordStatus.DELETED))
    with pytest.raises(NotFoundError):
        await repo.update(stored.rename("Globex"), stored.version)


async def test_restore_of_live_row_raises_not_found():
    repo = InMemoryBrandRepository()
    stored = await repo.create(_brand())
    with pytest.raises(NotFoundError):
        await repo.restore(stored, stored.version)


async def test_writes_counts_successful_writes_only():
    repo = InMemoryBrandRepository()
    stored = await repo.create(_brand())
    with pytest.raises(OptimisticLockError):
        await repo.update(stored, VersionStamp.from_int(9))
    assert repo.writes == 1


async def test_list_filters_exactly_on_sync_mdb():
    repo = InMemoryBrandRepository()
    await repo.create(_brand("Acme", sync_mdb=True))
    await repo.create(_brand("Globex", sync_mdb=False))
    page = await repo.list(SearchCriteria(filter={"sync_mdb": False}))
    assert [b.name for b in page.items] == ["Globex"]


async def test_list_sorts_descending_and_pages():
    repo = InMemoryBrandRepository()
    for name in ("Alpha", "Bravo", "Charlie"):
        await repo.create(_brand(name))
    page = await repo.list(
        SearchCriteria(page=2, page_size=2, sort_by="name", sort_dir=SortDirection.DESC)
    )
    assert [b.name for b in page.items] == ["Alpha"]
    assert page.total == 3
    assert page.sort == {"by": "name", "dir": "desc"}


async def test_list_filters_on_status():
    repo = InMemoryBrandRepository()
    await repo.create(_brand("Acme"))
    await repo.create(_brand("Globex", status=RecordStatus.ACTIVE))
    page = await repo.list(SearchCriteria(filter={"status": RecordStatus.ACTIVE}))
    assert [b.name for b in page.items] == ["Globex"]
