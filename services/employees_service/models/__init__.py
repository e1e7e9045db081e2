"""Employees Service models package."""

from services.employees_service.models.core import Employee
from services.employees_service.models.enums import (
    EmployeeRole,
    EmployeeStatus,
    enum_values,
)

__all__ = [
    "Employee",
    "EmployeeRole",
    "EmployeeStatus",
    "enum_values",
]
