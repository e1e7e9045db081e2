"""Teachers Service models package."""

from services.teachers_service.models.core import Teacher
from services.teachers_service.models.enums import TeacherStatus, enum_values

__all__ = [
    "Teacher",
    "TeacherStatus",
    "enum_values",
]
