"""Unit tests for revenue and dashboard aggregations."""

from datetime import date

import pytest
from services.clients_service.schemas import ClientResponse
from services.payments_service.reporting import (
    dashboard_overview,
    monthly_revenue,
    search_payments,
    summarize_payment,
    total_revenue,
)
from services.payments_service.schemas import PaymentRecordResponse
from services.teachers_service.schemas import TeacherResponse

TODAY = date(2024, 1, 25)


def make_record(**overrides) -> PaymentRecordResponse:
    data = {
        "id": "p-1",
        "client_id": "c-1",
        "client_name": "Emma Wilson",
        "amount": 150.0,
        "payment_date": date(2024, 1, 15),
        "payment_method": "card",
    }
    data.update(overrides)
    return PaymentRecordResponse(**data)


@pytest.mark.unit
class TestSummarizePayment:
    def test_missing_notes_read_as_payment(self):
        item = summarize_payment(make_record(notes=None))
        assert item.description == "Payment"
        assert item.type == "membership"
        assert item.status == "completed"
        assert item.date == date(2024, 1, 15)

    def test_empty_notes_read_as_payment(self):
        assert summarize_payment(make_record(notes="")).description == "Payment"

    def test_notes_become_description(self):
        item = summarize_payment(make_record(notes="Monthly Premium Membership"))
        assert item.description == "Monthly Premium Membership"


@pytest.mark.unit
class TestRevenue:
    def test_total_revenue_sums_without_float_drift(self):
        records = [make_record(id=str(i), amount=0.1) for i in range(3)]
        assert total_revenue(records) == 0.3

    def test_monthly_revenue_only_counts_current_month_and_year(self):
        records = [
            make_record(id="1", amount=150, payment_date=date(2024, 1, 15)),
            make_record(id="2", amount=400, payment_date=date(2023, 1, 20)),
            make_record(id="3", amount=1500, payment_date=date(2023, 12, 31)),
        ]
        assert monthly_revenue(records, TODAY) == 150.0

    def test_empty_revenue_is_zero(self):
        assert total_revenue([]) == 0.0


@pytest.mark.unit
def test_search_payments_by_name_notes_and_method():
    records = [
        make_record(id="1", client_name="Emma Wilson", notes="Monthly"),
        make_record(id="2", client_name="John Smith", payment_method="transfer"),
    ]
    assert [r.id for r in search_payments(records, "monthly")] == ["1"]
    assert [r.id for r in search_payments(records, method="transfer")] == ["2"]
    assert [r.id for r in search_payments(records, "john", "card")] == []


@pytest.mark.unit
def test_dashboard_overview_counts():
    clients = [
        ClientResponse(
            id="c1",
            name="Emma",
            email="emma@mail.com",
            join_date=date(2023, 1, 15),
            next_payment_date=date(2024, 2, 15),
        ),
        ClientResponse(
            id="c2",
            name="John",
            email="john@mail.com",
            join_date=date(2023, 3, 20),
            next_payment_date=date(2024, 1, 20),
        ),
    ]
    teachers = [
        TeacherResponse(id="t1", name="Sarah", email="sarah@zenyoga.com"),
        TeacherResponse(id="t2", name="Mike", email="mike@zenyoga.com", status="inactive"),
    ]
    payments = [
        make_record(id="1", amount=150, payment_date=date(2024, 1, 15)),
        make_record(id="2", amount=400, payment_date=date(2023, 10, 20)),
    ]

    overview = dashboard_overview(clients, teachers, payments, TODAY)

    assert overview.total_clients == 2
    assert overview.active_teachers == 1
    assert overview.monthly_revenue == 150.0
    assert overview.total_revenue == 550.0
    assert overview.payment_count == 2
    assert overview.overdue_clients == 1
