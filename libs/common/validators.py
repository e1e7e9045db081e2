from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

# "HH:MM", 24-hour clock, zero padded so strings compare in time order.
TIME_OF_DAY_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


def ordered_unique(values: Iterable[Any]) -> List[Any]:
    """Drop repeats while keeping first-seen order (sets stored as lists)."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def error_details(exc: ValidationError) -> List[dict]:
    """JSON-safe summary of a pydantic validation error."""
    return [
        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


def whole_cents(amount: Optional[float]) -> Optional[float]:
    """Reject money amounts finer than one cent; money is stored as cents."""
    if amount is None:
        return amount
    cents = amount * 100
    if abs(cents - round(cents)) > 1e-6:
        raise ValueError("Amount must have at most 2 decimal places")
    return amount
