import datetime as dt
from typing import Optional

from libs.common.validators import whole_cents
from pydantic import BaseModel, ConfigDict, Field, field_validator
from services.payments_service.models.enums import (
    PaymentMethod,
    PaymentSummaryStatus,
    PaymentType,
)


class PaymentRecordBase(BaseModel):
    client_id: str
    amount: float = Field(..., gt=0)
    payment_method: PaymentMethod
    notes: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def amount_in_cents(cls, v):
        return whole_cents(v)


class PaymentRecordCreate(PaymentRecordBase):
    payment_date: Optional[dt.date] = None  # defaults to today


class PaymentRecordResponse(PaymentRecordBase):
    id: str
    version: int = 1
    payment_date: dt.date
    client_name: str  # as it was when the payment was taken

    model_config = ConfigDict(from_attributes=True)


class PaymentSummaryResponse(BaseModel):
    """One line of the payments list, derived from a payment record."""

    id: str
    client_id: str
    client_name: str
    amount: float
    type: PaymentType = PaymentType.MEMBERSHIP
    status: PaymentSummaryStatus = PaymentSummaryStatus.COMPLETED
    date: dt.date
    description: str


class PaymentStats(BaseModel):
    total_revenue: float
    monthly_revenue: float
    payment_count: int
    overdue_clients: int


class DashboardOverview(BaseModel):
    total_clients: int
    active_teachers: int
    monthly_revenue: float
    total_revenue: float
    payment_count: int
    overdue_clients: int
