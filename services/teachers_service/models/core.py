from datetime import datetime
from typing import List

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from services.teachers_service.models.enums import TeacherStatus, enum_values
from sqlalchemy import JSON, BigInteger, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column


class Teacher(Base):
    __tablename__ = "teachers"

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String, nullable=False, default="")
    specialties: Mapped[List[str]] = mapped_column(
        JSON, default=list, server_default="[]"
    )
    experience_level: Mapped[str] = mapped_column(String, nullable=False, default="")
    status: Mapped[TeacherStatus] = mapped_column(
        SAEnum(
            TeacherStatus,
            name="teacher_status_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=TeacherStatus.ACTIVE,
    )
    hourly_rate: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)  # cents
    color: Mapped[str] = mapped_column(String(7), nullable=False, default="#6366F1")
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    def __repr__(self):
        return f"<Teacher {self.name}>"
