"""Enum definitions for payments service models."""

import enum


def enum_values(enum_cls):
    """Return persistent DB values for SAEnum mappings."""
    return [member.value for member in enum_cls]


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    CARD = "card"
    TRANSFER = "transfer"


# Fixed labels on payments summary items.
class PaymentType(str, enum.Enum):
    MEMBERSHIP = "membership"


class PaymentSummaryStatus(str, enum.Enum):
    COMPLETED = "completed"
