from datetime import date, datetime

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from services.clients_service.models.enums import (
    ClientStatus,
    PaymentPlan,
    PaymentStatus,
    enum_values,
)
from sqlalchemy import BigInteger, Date, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column


class Client(Base):
    __tablename__ = "clients"

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String, nullable=False, default="")
    membership_type: Mapped[str] = mapped_column(String, nullable=False, default="")
    status: Mapped[ClientStatus] = mapped_column(
        SAEnum(
            ClientStatus,
            name="client_status_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=ClientStatus.ACTIVE,
    )
    join_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Billing
    payment_plan: Mapped[PaymentPlan] = mapped_column(
        SAEnum(
            PaymentPlan,
            name="payment_plan_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=PaymentPlan.MONTHLY,
    )
    payment_amount: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)  # cents
    next_payment_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    payment_status: Mapped[PaymentStatus] = mapped_column(
        SAEnum(
            PaymentStatus,
            name="client_payment_status_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=PaymentStatus.ACTIVE,
    )

    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    def __repr__(self):
        return f"<Client {self.name} ({self.payment_plan})>"
