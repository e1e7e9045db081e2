"""Classes Service models package."""

from services.classes_service.models.core import StudioClass
from services.classes_service.models.enums import ClassStatus, Weekday, enum_values

__all__ = [
    "ClassStatus",
    "StudioClass",
    "Weekday",
    "enum_values",
]
