"""SQL store tests. Run only when TEST_DATABASE_URL points at a Postgres."""

import os
from datetime import date

import pytest
import pytest_asyncio
from libs.auth.permissions import SYSTEM_CALLER
from libs.common.errors import NotFoundError, ValidationFailure, VersionConflict
from libs.db.base import Base
from services.gateway_service.app.backends import build_sql_backend
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.fixtures import seed_fixtures
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = pytest.mark.skipif(
    not TEST_DATABASE_URL, reason="TEST_DATABASE_URL not set"
)


@pytest_asyncio.fixture
async def sql_db():
    url = TEST_DATABASE_URL.replace("postgresql://", "postgresql+psycopg://", 1)
    engine = create_async_engine(url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    except OperationalError:
        await engine.dispose()
        pytest.skip("Test database unreachable")

    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    backend = build_sql_backend(factory, engine=engine)
    yield StudioDatabase(backend, SYSTEM_CALLER)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await backend.close()


@pytest.mark.asyncio
@pytest.mark.integration
async def test_fixtures_round_trip_through_sql(sql_db):
    await seed_fixtures(sql_db)

    clients = await sql_db.clients.list()
    assert [c.name for c in clients] == ["Emma Wilson", "John Smith", "Lisa Chen"]
    assert clients[2].payment_amount == 1500.0

    classes = await sql_db.classes.list()
    assert classes[0].current_enrollment == 3

    payments = await sql_db.payments.list()
    assert [p.amount for p in payments] == [150.0, 400.0, 1500.0]

    assert (await sql_db.studio.get_profile()).name == "Zen Yoga Studio"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_version_check_on_update(sql_db):
    await seed_fixtures(sql_db)
    client = (await sql_db.clients.list())[0]

    updated = await sql_db.clients.update(client.id, {"notes": "x"}, expected_version=1)
    assert updated.version == 2

    with pytest.raises(VersionConflict):
        await sql_db.clients.update(client.id, {"notes": "y"}, expected_version=1)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_delete_then_get(sql_db):
    await seed_fixtures(sql_db)
    employee = (await sql_db.employees.list())[0]

    await sql_db.employees.delete(employee.id)

    with pytest.raises(NotFoundError):
        await sql_db.employees.get(employee.id)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_racing_duplicate_without_class_is_rejected(sql_db):
    await seed_fixtures(sql_db)
    client = (await sql_db.clients.list())[0]
    walk_in = {
        "person_id": client.id,
        "person_type": "client",
        "person_name": client.name,
        "class_id": None,
        "class_name": None,
        "date": date(2024, 2, 1),
        "status": "present",
    }
    # Two creates that both passed the repository's duplicate check.
    store = sql_db.backend.attendance
    await store.insert(walk_in)

    with pytest.raises(ValidationFailure) as exc_info:
        await store.insert(walk_in)

    assert exc_info.value.code == "duplicate_attendance"
