"""Unit tests for date and currency helpers."""

from datetime import date

import pytest
from libs.common.currency import from_cents, sum_amounts, to_cents
from libs.common.datetime_utils import add_months, studio_today, weekday_name
from libs.common.middleware import resource_for
from libs.common.validators import ordered_unique, whole_cents


@pytest.mark.unit
class TestAddMonths:
    def test_crosses_year(self):
        assert add_months(date(2023, 11, 15), 3) == date(2024, 2, 15)

    def test_clamps_leap_february(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_clamps_common_february(self):
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_twelve_months(self):
        assert add_months(date(2024, 2, 29), 12) == date(2025, 2, 28)


@pytest.mark.unit
def test_weekday_name():
    assert weekday_name(date(2024, 1, 22)) == "Monday"
    assert weekday_name(date(2024, 1, 28)) == "Sunday"


@pytest.mark.unit
def test_studio_today_accepts_timezone_name():
    assert isinstance(studio_today("America/New_York"), date)


@pytest.mark.unit
def test_cents_conversion():
    assert to_cents(150.0) == 15000
    assert to_cents(19.99) == 1999
    assert from_cents(1999) == 19.99
    assert from_cents(None) == 0.0
    assert sum_amounts([0.1, 0.2]) == 0.3


@pytest.mark.unit
def test_ordered_unique_keeps_first_seen_order():
    assert ordered_unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


@pytest.mark.unit
class TestWholeCents:
    @pytest.mark.parametrize("amount", [0.01, 19.99, 150.0, 1500, None])
    def test_accepts_whole_cents(self, amount):
        assert whole_cents(amount) == amount

    @pytest.mark.parametrize("amount", [0.004, 10.005, 99.999])
    def test_rejects_fractions_of_a_cent(self, amount):
        with pytest.raises(ValueError):
            whole_cents(amount)


@pytest.mark.unit
@pytest.mark.parametrize(
    "path, resource",
    [
        ("/api/v1/clients/", "clients"),
        ("/api/v1/clients/abc-123", "clients"),
        ("/api/v1/studio-profile", "studio-profile"),
        ("/api/v1/", None),
        ("/health", None),
    ],
)
def test_resource_for(path, resource):
    assert resource_for(path) == resource
