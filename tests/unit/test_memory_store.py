"""Unit tests for the in-memory record store."""

import pytest
from libs.common.errors import NotFoundError, ValidationFailure, VersionConflict
from libs.db.stores import InMemoryRecordStore, InMemorySingletonStore
from services.employees_service.schemas import EmployeeResponse
from services.studio_service.schemas import StudioProfileResponse


def employee(**overrides) -> dict:
    data = {
        "name": "Alex Manager",
        "email": "alex@zenyoga.com",
        "role": "manager",
        "permissions": ["all"],
        "hire_date": "2023-01-01",
    }
    data.update(overrides)
    return data


@pytest.fixture
def store():
    return InMemoryRecordStore("employee", EmployeeResponse)


@pytest.mark.asyncio
@pytest.mark.unit
async def test_insert_assigns_unique_ids_and_version_one(store):
    first = await store.insert(employee())
    second = await store.insert(employee(email="jamie@zenyoga.com"))

    assert first.id != second.id
    assert first.version == second.version == 1
    assert [e.id for e in await store.list()] == [first.id, second.id]


@pytest.mark.asyncio
@pytest.mark.unit
async def test_returned_records_are_copies(store):
    created = await store.insert(employee())
    created.name = "Changed"

    assert (await store.get(created.id)).name == "Alex Manager"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_update_merges_and_bumps_version(store):
    created = await store.insert(employee())

    updated = await store.update(created.id, {"name": "Alex M."})

    assert updated.name == "Alex M."
    assert updated.email == created.email
    assert updated.version == 2


@pytest.mark.asyncio
@pytest.mark.unit
async def test_update_with_stale_version_conflicts(store):
    created = await store.insert(employee())
    await store.update(created.id, {"name": "Once"})

    with pytest.raises(VersionConflict) as exc_info:
        await store.update(created.id, {"name": "Twice"}, expected_version=1)

    assert exc_info.value.actual == 2
    assert (await store.get(created.id)).name == "Once"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_update_and_delete_missing_raise_not_found(store):
    with pytest.raises(NotFoundError):
        await store.update("missing", {"name": "x"})
    with pytest.raises(NotFoundError):
        await store.delete("missing")


@pytest.mark.asyncio
@pytest.mark.unit
async def test_invalid_values_are_rejected_without_writing(store):
    with pytest.raises(ValidationFailure) as exc_info:
        await store.insert(employee(email="not-an-email"))

    assert exc_info.value.code == "invalid_input"
    assert await store.list() == []


@pytest.mark.asyncio
@pytest.mark.unit
async def test_singleton_store_replaces_whole_record():
    store = InMemorySingletonStore("studio profile", StudioProfileResponse)
    assert await store.get() is None

    await store.replace({"name": "Zen Yoga Studio", "phone": "+1 (555) 987-6543"})
    replaced = await store.replace({"name": "Zen Flow"})

    assert replaced.name == "Zen Flow"
    assert replaced.phone == ""
