from datetime import date
from typing import Optional

from libs.common.validators import whole_cents
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from services.clients_service.models.enums import (
    ClientStatus,
    PaymentPlan,
    PaymentStatus,
)


class ClientBase(BaseModel):
    name: str
    email: EmailStr
    phone: str = ""
    membership_type: str = ""
    status: ClientStatus = ClientStatus.ACTIVE
    payment_plan: PaymentPlan = PaymentPlan.MONTHLY
    payment_amount: float = Field(default=0.0, ge=0)
    payment_status: PaymentStatus = PaymentStatus.ACTIVE
    notes: str = ""

    @field_validator("payment_amount")
    @classmethod
    def payment_amount_in_cents(cls, v):
        return whole_cents(v)


class ClientCreate(ClientBase):
    # Filled in on create: today, and one plan period after join_date.
    join_date: Optional[date] = None
    next_payment_date: Optional[date] = None


class ClientUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    membership_type: Optional[str] = None
    status: Optional[ClientStatus] = None
    join_date: Optional[date] = None
    payment_plan: Optional[PaymentPlan] = None
    payment_amount: Optional[float] = Field(default=None, ge=0)
    next_payment_date: Optional[date] = None
    payment_status: Optional[PaymentStatus] = None
    notes: Optional[str] = None

    @field_validator("payment_amount")
    @classmethod
    def payment_amount_in_cents(cls, v):
        return whole_cents(v)


class ClientResponse(ClientBase):
    id: str
    version: int = 1
    join_date: date
    next_payment_date: date

    model_config = ConfigDict(from_attributes=True)
