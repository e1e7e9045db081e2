"""Storage backend construction.

A backend is the bundle of stores the repositories work on. It is built once
per application (see ``create_app``) and never shared through module state.
"""

from dataclasses import dataclass
from typing import Optional

from libs.common.config import Settings
from libs.common.logging import get_logger
from libs.db.config import get_engine, get_session_factory
from libs.db.stores import (
    InMemoryRecordStore,
    InMemorySingletonStore,
    RecordStore,
    SingletonStore,
    SqlRecordStore,
    SqlSingletonStore,
)
from services.attendance_service.models import AttendanceRecord
from services.attendance_service.schemas import AttendanceResponse
from services.classes_service.models import StudioClass
from services.classes_service.schemas import ClassResponse
from services.clients_service.models import Client
from services.clients_service.schemas import ClientResponse
from services.employees_service.models import Employee
from services.employees_service.schemas import EmployeeResponse
from services.payments_service.models import PaymentRecord
from services.payments_service.schemas import PaymentRecordResponse
from services.studio_service.models import StudioProfile
from services.studio_service.schemas import StudioProfileResponse
from services.teachers_service.models import Teacher
from services.teachers_service.schemas import TeacherResponse
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

logger = get_logger(__name__)


@dataclass
class StorageBackend:
    name: str
    clients: RecordStore
    teachers: RecordStore
    classes: RecordStore
    employees: RecordStore
    attendance: RecordStore
    payment_records: RecordStore
    studio: SingletonStore
    engine: Optional[AsyncEngine] = None

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def build_memory_backend() -> StorageBackend:
    return StorageBackend(
        name="memory",
        clients=InMemoryRecordStore("client", ClientResponse),
        teachers=InMemoryRecordStore("teacher", TeacherResponse),
        classes=InMemoryRecordStore("class", ClassResponse),
        employees=InMemoryRecordStore("employee", EmployeeResponse),
        attendance=InMemoryRecordStore("attendance record", AttendanceResponse),
        payment_records=InMemoryRecordStore("payment record", PaymentRecordResponse),
        studio=InMemorySingletonStore("studio profile", StudioProfileResponse),
    )


def build_sql_backend(
    session_factory: async_sessionmaker[AsyncSession],
    engine: Optional[AsyncEngine] = None,
) -> StorageBackend:
    def store(entity, record_cls, model, money_fields=(), **kwargs):
        return SqlRecordStore(
            entity,
            record_cls,
            model,
            session_factory,
            money_fields=money_fields,
            **kwargs,
        )

    return StorageBackend(
        name="sql",
        clients=store("client", ClientResponse, Client, ("payment_amount",)),
        teachers=store("teacher", TeacherResponse, Teacher, ("hourly_rate",)),
        classes=store("class", ClassResponse, StudioClass, ("price",)),
        employees=store("employee", EmployeeResponse, Employee),
        attendance=store(
            "attendance record",
            AttendanceResponse,
            AttendanceRecord,
            conflict_code="duplicate_attendance",
        ),
        payment_records=store(
            "payment record", PaymentRecordResponse, PaymentRecord, ("amount",)
        ),
        studio=SqlSingletonStore(
            "studio profile", StudioProfileResponse, StudioProfile, session_factory
        ),
        engine=engine,
    )


def build_backend(settings: Settings) -> StorageBackend:
    """Build the backend selected by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "sql":
        logger.info("Using SQL storage backend")
        return build_sql_backend(get_session_factory(), engine=get_engine())

    logger.info("Using in-memory storage backend")
    return build_memory_backend()
