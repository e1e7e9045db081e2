from datetime import date, datetime
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from services.payments_service.models.enums import PaymentMethod, enum_values
from sqlalchemy import BigInteger, Date, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column


class PaymentRecord(Base):
    """A payment received from a client. Append-only."""

    __tablename__ = "payment_records"

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # No foreign key: the record outlives the client.
    client_id: Mapped[str] = mapped_column(UUID(as_uuid=False), nullable=False, index=True)
    client_name: Mapped[str] = mapped_column(String, nullable=False)

    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)  # cents
    payment_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    payment_method: Mapped[PaymentMethod] = mapped_column(
        SAEnum(
            PaymentMethod,
            name="payment_method_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        nullable=False,
    )
    notes: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    def __repr__(self):
        return f"<PaymentRecord {self.client_name} {self.amount} {self.payment_date}>"
