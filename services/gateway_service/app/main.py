"""FastAPI application entrypoint for the ZenFlow studio backend."""

from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from libs.auth.permissions import SYSTEM_CALLER
from libs.common.config import get_settings
from libs.common.error_handler import add_exception_handlers
from libs.common.logging import get_logger
from libs.common.middleware import add_observability_middleware
from services.attendance_service.router import router as attendance_router
from services.classes_service.router import router as classes_router
from services.clients_service.router import router as clients_router
from services.employees_service.router import router as employees_router
from services.gateway_service.app.backends import StorageBackend, build_backend
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.fixtures import seed_fixtures
from services.gateway_service.app.routers.dashboard import router as dashboard_router
from services.payments_service.router import router as payments_router
from services.studio_service.router import router as studio_router
from services.teachers_service.router import router as teachers_router

logger = get_logger(__name__)

API_PREFIX = "/api/v1"


def create_app(backend: Optional[StorageBackend] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.

    Pass ``backend`` to run over stores built elsewhere (tests, scripts);
    otherwise one is built from settings at startup.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_backend = getattr(app.state, "backend", None) is None
        if owns_backend:
            app.state.backend = build_backend(settings)
            if settings.SEED_FIXTURES:
                await seed_fixtures(StudioDatabase(app.state.backend, SYSTEM_CALLER))
        logger.info("Studio backend ready (%s storage)", app.state.backend.name)
        yield
        if owns_backend:
            await app.state.backend.close()

    app = FastAPI(
        title="ZenFlow Studio Service",
        version="0.1.0",
        description="Clients, teachers, classes, staff, attendance and payments for a studio.",
        lifespan=lifespan,
    )
    app.state.backend = backend

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability (structured logging + request tracing)
    add_observability_middleware(app)

    # Add global exception handlers for consistent error responses
    add_exception_handlers(app)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple readiness endpoint."""
        return {"status": "ok", "service": "studio"}

    for router in (
        clients_router,
        teachers_router,
        classes_router,
        employees_router,
        attendance_router,
        payments_router,
        studio_router,
        dashboard_router,
    ):
        app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()
