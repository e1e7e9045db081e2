"""Payments Service models package."""

from services.payments_service.models.core import PaymentRecord
from services.payments_service.models.enums import (
    PaymentMethod,
    PaymentSummaryStatus,
    PaymentType,
    enum_values,
)

__all__ = [
    "PaymentMethod",
    "PaymentRecord",
    "PaymentSummaryStatus",
    "PaymentType",
    "enum_values",
]
