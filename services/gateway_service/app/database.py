"""The studio data facade.

``StudioDatabase`` groups every repository over one storage backend, bound to
the caller whose permissions guard mutations::

    db = StudioDatabase(backend, caller)
    client = await db.clients.create({"name": "Emma Wilson", "email": ...})
    summary = await db.payments.list()
"""

from libs.auth.permissions import Caller
from services.attendance_service.repository import AttendanceRepository
from services.classes_service.repository import ClassRepository
from services.clients_service.repository import ClientRepository
from services.employees_service.repository import EmployeeRepository
from services.gateway_service.app.backends import StorageBackend
from services.payments_service.repository import (
    PaymentRecordRepository,
    PaymentsSummaryView,
)
from services.studio_service.repository import StudioProfileRepository
from services.teachers_service.repository import TeacherRepository


class StudioDatabase:
    def __init__(self, backend: StorageBackend, caller: Caller):
        self.backend = backend
        self.caller = caller

        self.clients = ClientRepository(backend, caller)
        self.teachers = TeacherRepository(backend, caller)
        self.classes = ClassRepository(backend, caller)
        self.employees = EmployeeRepository(backend, caller)
        self.attendance = AttendanceRepository(backend, caller)
        self.payment_records = PaymentRecordRepository(backend, caller)
        self.payments = PaymentsSummaryView(self.payment_records)
        self.studio = StudioProfileRepository(backend, caller)

    def for_caller(self, caller: Caller) -> "StudioDatabase":
        """Same data, different permissions."""
        return StudioDatabase(self.backend, caller)
