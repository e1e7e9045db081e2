from datetime import datetime
from typing import List

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from services.classes_service.models.enums import ClassStatus, Weekday, enum_values
from sqlalchemy import JSON, BigInteger, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column


class StudioClass(Base):
    """A weekly recurring class on the studio schedule."""

    __tablename__ = "classes"

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    name: Mapped[str] = mapped_column(String, nullable=False)
    teacher_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False), ForeignKey("teachers.id"), nullable=False, index=True
    )
    # Copy of Teacher.name, rewritten whenever the teacher is renamed.
    teacher_name: Mapped[str] = mapped_column(String, nullable=False)

    day: Mapped[Weekday] = mapped_column(
        SAEnum(
            Weekday,
            name="weekday_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        nullable=False,
        index=True,
    )
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)  # HH:MM
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)  # HH:MM

    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    current_enrollment: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    enrolled_clients: Mapped[List[str]] = mapped_column(
        JSON, default=list, server_default="[]"
    )

    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    type: Mapped[str] = mapped_column(String, nullable=False, default="")
    price: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)  # cents
    status: Mapped[ClassStatus] = mapped_column(
        SAEnum(
            ClassStatus,
            name="class_status_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=ClassStatus.ACTIVE,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    def __repr__(self):
        return f"<StudioClass {self.name} {self.day} {self.start_time}>"
