"""Currency conversion utilities for ZenFlow.

Internal storage unit: cents (smallest unit, 100 cents = 1.00).
API / display unit: float amounts (e.g. 150.0 = 150.00).
"""

from __future__ import annotations

from typing import Iterable, Optional

# ─── constants ───────────────────────────────────────────────────────────────

CENTS_PER_UNIT: int = 100


# ─── conversion helpers ───────────────────────────────────────────────────────


def to_cents(amount: float) -> int:
    """Convert a display amount to integer cents, rounding to the nearest cent.

    Ties go to the even cent (``round``). Schemas only admit whole cents, so
    ties never reach storage.
    """
    return round(amount * CENTS_PER_UNIT)


def from_cents(cents: Optional[int]) -> float:
    """Convert integer cents to a display amount. ``None`` reads as 0.0."""
    return (cents or 0) / CENTS_PER_UNIT


def sum_amounts(amounts: Iterable[float]) -> float:
    """Sum display amounts through cents so float noise does not accumulate."""
    return from_cents(sum(to_cents(a) for a in amounts))
