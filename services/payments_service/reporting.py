"""Revenue and dashboard aggregations.

Everything here is a pure function of the records passed in, so the HTTP
layer and scripts compute the same numbers.
"""

from datetime import date
from typing import Iterable, List, Optional

from libs.common.currency import sum_amounts
from services.clients_service.billing import overdue_clients
from services.clients_service.schemas import ClientResponse
from services.payments_service.models.enums import PaymentMethod
from services.payments_service.schemas import (
    DashboardOverview,
    PaymentRecordResponse,
    PaymentStats,
    PaymentSummaryResponse,
)
from services.teachers_service.models.enums import TeacherStatus
from services.teachers_service.schemas import TeacherResponse

DEFAULT_DESCRIPTION = "Payment"


def summarize_payment(record: PaymentRecordResponse) -> PaymentSummaryResponse:
    return PaymentSummaryResponse(
        id=record.id,
        client_id=record.client_id,
        client_name=record.client_name,
        amount=record.amount,
        date=record.payment_date,
        description=record.notes or DEFAULT_DESCRIPTION,
    )


def total_revenue(records: Iterable[PaymentRecordResponse]) -> float:
    return sum_amounts(r.amount for r in records)


def monthly_revenue(records: Iterable[PaymentRecordResponse], today: date) -> float:
    """Revenue for the calendar month containing ``today``."""
    return sum_amounts(
        r.amount
        for r in records
        if r.payment_date.year == today.year and r.payment_date.month == today.month
    )


def search_payments(
    records: Iterable[PaymentRecordResponse],
    term: Optional[str] = None,
    method: Optional[PaymentMethod] = None,
) -> List[PaymentRecordResponse]:
    """Case-insensitive match on client name or notes, plus method filter."""
    needle = term.lower() if term else None
    return [
        r
        for r in records
        if (
            needle is None
            or needle in r.client_name.lower()
            or needle in (r.notes or "").lower()
        )
        and (method is None or r.payment_method == method)
    ]


def payment_stats(
    records: Iterable[PaymentRecordResponse],
    clients: Iterable[ClientResponse],
    today: date,
) -> PaymentStats:
    records = list(records)
    return PaymentStats(
        total_revenue=total_revenue(records),
        monthly_revenue=monthly_revenue(records, today),
        payment_count=len(records),
        overdue_clients=len(overdue_clients(clients, today)),
    )


def dashboard_overview(
    clients: Iterable[ClientResponse],
    teachers: Iterable[TeacherResponse],
    payments: Iterable[PaymentRecordResponse],
    today: date,
) -> DashboardOverview:
    clients = list(clients)
    payments = list(payments)
    return DashboardOverview(
        total_clients=len(clients),
        active_teachers=sum(1 for t in teachers if t.status == TeacherStatus.ACTIVE),
        monthly_revenue=monthly_revenue(payments, today),
        total_revenue=total_revenue(payments),
        payment_count=len(payments),
        overdue_clients=len(overdue_clients(clients, today)),
    )
