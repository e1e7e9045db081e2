from datetime import date, datetime
from typing import List

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from services.employees_service.models.enums import (
    EmployeeRole,
    EmployeeStatus,
    enum_values,
)
from sqlalchemy import JSON, Date, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    name: Mapped[str] = mapped_column(String, nullable=False)
    # Matched against the identity provider's email claim.
    email: Mapped[str] = mapped_column(String, nullable=False, index=True)
    role: Mapped[EmployeeRole] = mapped_column(
        SAEnum(
            EmployeeRole,
            name="employee_role_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=EmployeeRole.EMPLOYEE,
    )
    # Permission tokens, e.g. ["clients", "schedule"] or ["all"].
    permissions: Mapped[List[str]] = mapped_column(
        JSON, default=list, server_default="[]"
    )
    status: Mapped[EmployeeStatus] = mapped_column(
        SAEnum(
            EmployeeStatus,
            name="employee_status_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=EmployeeStatus.ACTIVE,
    )
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    def __repr__(self):
        return f"<Employee {self.email} ({self.role})>"
