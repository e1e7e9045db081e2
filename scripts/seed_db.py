"""Seed the SQL database with the reference studio.

Run after `alembic upgrade head`:

    python scripts/seed_db.py
"""

import asyncio
import os
import sys

# Add backend root to path so we can import modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from dotenv import load_dotenv

load_dotenv()

from libs.auth.permissions import SYSTEM_CALLER
from libs.db.config import get_engine, get_session_factory
from services.gateway_service.app.backends import build_sql_backend
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.fixtures import seed_fixtures


async def seed_db():
    """Load fixtures through the SQL backend unless clients already exist."""
    backend = build_sql_backend(get_session_factory(), engine=get_engine())
    try:
        seeded = await seed_fixtures(StudioDatabase(backend, SYSTEM_CALLER))
        print("  Seeded reference studio" if seeded else "  Database already has data, skipping")
    finally:
        await backend.close()


if __name__ == "__main__":
    asyncio.run(seed_db())
