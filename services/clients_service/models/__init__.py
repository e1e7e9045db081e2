"""Clients Service models package."""

from services.clients_service.models.core import Client
from services.clients_service.models.enums import (
    ClientStatus,
    PaymentPlan,
    PaymentStatus,
    enum_values,
)

__all__ = [
    "Client",
    "ClientStatus",
    "PaymentPlan",
    "PaymentStatus",
    "enum_values",
]
