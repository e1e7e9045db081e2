import datetime as dt
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from services.attendance_service.models.enums import (
    AttendanceStatus,
    PersonType,
    enum_values,
)
from sqlalchemy import Date, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import Index, Integer, String, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column


class AttendanceRecord(Base):
    __tablename__ = "attendance_records"
    __table_args__ = (
        UniqueConstraint(
            "person_id",
            "person_type",
            "class_id",
            "date",
            name="uq_attendance_person_class_date",
        ),
        # NULL class_ids are distinct to the constraint above, so records not
        # tied to a class get their own one-per-day index.
        Index(
            "uq_attendance_person_date_no_class",
            "person_id",
            "person_type",
            "date",
            unique=True,
            postgresql_where=text("class_id IS NULL"),
        ),
    )

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # person_id points into the table chosen by person_type.
    person_id: Mapped[str] = mapped_column(UUID(as_uuid=False), nullable=False, index=True)
    person_type: Mapped[PersonType] = mapped_column(
        SAEnum(
            PersonType,
            name="attendance_person_type_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        nullable=False,
    )
    person_name: Mapped[str] = mapped_column(String, nullable=False)

    class_id: Mapped[Optional[str]] = mapped_column(
        UUID(as_uuid=False), nullable=True, index=True
    )
    class_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    status: Mapped[AttendanceStatus] = mapped_column(
        SAEnum(
            AttendanceStatus,
            name="attendance_status_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=AttendanceStatus.PRESENT,
    )
    notes: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    def __repr__(self):
        return f"<AttendanceRecord {self.person_type}:{self.person_id} {self.date} {self.status}>"
