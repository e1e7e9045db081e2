"""Billing rules for clients.

Pure functions over client records. The stored ``payment_status`` is kept as
entered by staff; lateness is derived from ``next_payment_date`` on read.
"""

from datetime import date
from typing import Iterable, List, Optional

from libs.common.datetime_utils import add_months
from services.clients_service.models.enums import PaymentPlan, PaymentStatus
from services.clients_service.schemas import ClientResponse

PLAN_MONTHS = {
    PaymentPlan.MONTHLY: 1,
    PaymentPlan.QUARTERLY: 3,
    PaymentPlan.SEMESTER: 6,
    PaymentPlan.ANNUAL: 12,
}


def next_payment_after(start: date, plan: PaymentPlan) -> date:
    """Advance ``start`` by one billing period of ``plan``."""
    return add_months(start, PLAN_MONTHS[PaymentPlan(plan)])


def is_payment_overdue(client: ClientResponse, today: date) -> bool:
    """Overdue when staff flagged it, or when the due date has passed."""
    if client.payment_status == PaymentStatus.OVERDUE:
        return True
    return client.next_payment_date < today


def effective_payment_status(client: ClientResponse, today: date) -> PaymentStatus:
    if client.payment_status == PaymentStatus.SUSPENDED:
        return PaymentStatus.SUSPENDED
    if is_payment_overdue(client, today):
        return PaymentStatus.OVERDUE
    return PaymentStatus.ACTIVE


def overdue_clients(
    clients: Iterable[ClientResponse], today: date
) -> List[ClientResponse]:
    return [c for c in clients if is_payment_overdue(c, today)]


def search_clients(
    clients: Iterable[ClientResponse], term: Optional[str]
) -> List[ClientResponse]:
    """Case-insensitive substring match on name or email."""
    clients = list(clients)
    if not term:
        return clients
    needle = term.lower()
    return [
        c for c in clients if needle in c.name.lower() or needle in c.email.lower()
    ]
