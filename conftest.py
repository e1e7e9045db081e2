import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Tests never pick up a developer's .env storage or seeding choices.
os.environ["ENVIRONMENT"] = "test"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["SEED_FIXTURES"] = "false"

from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.auth.permissions import SYSTEM_CALLER, Caller
from libs.common.config import get_settings
from services.gateway_service.app.backends import build_memory_backend
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.fixtures import seed_fixtures
from services.gateway_service.app.main import create_app

# Clear cached settings to reload with new env vars
get_settings.cache_clear()
settings = get_settings()

OWNER = AuthUser(user_id="owner-1", email="owner@zenyoga.com", role="owner")


@pytest.fixture
def backend():
    """A fresh, empty in-memory backend per test."""
    return build_memory_backend()


@pytest.fixture
def db(backend) -> StudioDatabase:
    """Facade bound to a caller holding every permission."""
    return StudioDatabase(backend, SYSTEM_CALLER)


@pytest_asyncio.fixture
async def seeded_db(db) -> StudioDatabase:
    await seed_fixtures(db)
    return db


@pytest.fixture
def read_only_db(db) -> StudioDatabase:
    """Same data as ``db``, but the caller holds no permissions."""
    return db.for_caller(Caller(user_id="viewer"))


@pytest.fixture
def app(backend):
    return create_app(backend=backend)


@pytest.fixture
def current_user(app):
    """
    Swap the authenticated user for the test. Defaults to the studio owner.

        current_user(AuthUser(user_id="u1", email="jamie@zenyoga.com"))
    """

    def _set(user: AuthUser = OWNER) -> AuthUser:
        app.dependency_overrides[get_current_user] = lambda: user
        return user

    _set()
    yield _set
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app, current_user) -> AsyncGenerator[AsyncClient, None]:
    """
    Yield an AsyncClient over the app with auth overridden to the owner.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def anonymous_client(backend) -> AsyncGenerator[AsyncClient, None]:
    """Client over an app with real bearer-token authentication."""
    app = create_app(backend=backend)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
