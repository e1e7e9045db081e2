"""Enum definitions for employees service models."""

import enum


def enum_values(enum_cls):
    """Return persistent DB values for SAEnum mappings."""
    return [member.value for member in enum_cls]


class EmployeeRole(str, enum.Enum):
    MANAGER = "manager"
    EMPLOYEE = "employee"


class EmployeeStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
