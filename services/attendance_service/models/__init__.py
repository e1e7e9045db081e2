"""Attendance Service models package."""

from services.attendance_service.models.core import AttendanceRecord
from services.attendance_service.models.enums import (
    AttendanceStatus,
    PersonType,
    enum_values,
)

__all__ = [
    "AttendanceRecord",
    "AttendanceStatus",
    "PersonType",
    "enum_values",
]
