"""Unit tests for client billing rules."""

from datetime import date, timedelta

import pytest
from services.clients_service.billing import (
    effective_payment_status,
    is_payment_overdue,
    next_payment_after,
    overdue_clients,
    search_clients,
)
from services.clients_service.models.enums import PaymentPlan, PaymentStatus
from services.clients_service.schemas import ClientResponse

TODAY = date(2024, 3, 10)


def make_client(**overrides) -> ClientResponse:
    data = {
        "id": "c-1",
        "name": "Emma Wilson",
        "email": "emma.wilson@mail.com",
        "join_date": date(2024, 1, 10),
        "next_payment_date": TODAY + timedelta(days=5),
        "payment_status": "active",
    }
    data.update(overrides)
    return ClientResponse(**data)


@pytest.mark.unit
class TestNextPaymentAfter:
    @pytest.mark.parametrize(
        "plan, expected",
        [
            (PaymentPlan.MONTHLY, date(2024, 2, 15)),
            (PaymentPlan.QUARTERLY, date(2024, 4, 15)),
            (PaymentPlan.SEMESTER, date(2024, 7, 15)),
            (PaymentPlan.ANNUAL, date(2025, 1, 15)),
        ],
    )
    def test_advances_by_plan_period(self, plan, expected):
        assert next_payment_after(date(2024, 1, 15), plan) == expected

    def test_clamps_to_month_end(self):
        assert next_payment_after(date(2024, 1, 31), PaymentPlan.MONTHLY) == date(
            2024, 2, 29
        )

    def test_accepts_plain_string_plan(self):
        assert next_payment_after(date(2024, 11, 30), "quarterly") == date(2025, 2, 28)


@pytest.mark.unit
class TestOverdue:
    def test_past_due_date_is_overdue_even_if_flag_active(self):
        client = make_client(next_payment_date=TODAY - timedelta(days=1))
        assert is_payment_overdue(client, TODAY)

    def test_flagged_overdue_with_future_date_is_overdue(self):
        client = make_client(payment_status="overdue")
        assert is_payment_overdue(client, TODAY)

    def test_due_today_is_not_overdue(self):
        client = make_client(next_payment_date=TODAY)
        assert not is_payment_overdue(client, TODAY)

    def test_overdue_clients_filters(self):
        late = make_client(id="late", next_payment_date=TODAY - timedelta(days=30))
        fine = make_client(id="fine")
        assert [c.id for c in overdue_clients([late, fine], TODAY)] == ["late"]


@pytest.mark.unit
class TestEffectivePaymentStatus:
    def test_suspended_wins(self):
        client = make_client(
            payment_status="suspended", next_payment_date=TODAY - timedelta(days=1)
        )
        assert effective_payment_status(client, TODAY) == PaymentStatus.SUSPENDED

    def test_late_active_reads_overdue(self):
        client = make_client(next_payment_date=TODAY - timedelta(days=1))
        assert effective_payment_status(client, TODAY) == PaymentStatus.OVERDUE

    def test_current_client_reads_active(self):
        assert effective_payment_status(make_client(), TODAY) == PaymentStatus.ACTIVE

    def test_stored_status_is_not_rewritten(self):
        client = make_client(next_payment_date=TODAY - timedelta(days=1))
        effective_payment_status(client, TODAY)
        assert client.payment_status == PaymentStatus.ACTIVE


@pytest.mark.unit
def test_search_clients_matches_name_or_email_case_insensitively():
    emma = make_client(id="1", name="Emma Wilson", email="emma.wilson@mail.com")
    john = make_client(id="2", name="John Smith", email="jsmith@mail.com")

    assert [c.id for c in search_clients([emma, john], "WILSON")] == ["1"]
    assert [c.id for c in search_clients([emma, john], "jsmith")] == ["2"]
    assert len(search_clients([emma, john], None)) == 2
