from datetime import date
from typing import List, Optional

from libs.auth.permissions import Permission
from libs.common.validators import ordered_unique
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from services.employees_service.models.enums import EmployeeRole, EmployeeStatus


class EmployeeBase(BaseModel):
    name: str
    email: EmailStr
    role: EmployeeRole = EmployeeRole.EMPLOYEE
    permissions: List[Permission] = Field(default_factory=list)
    status: EmployeeStatus = EmployeeStatus.ACTIVE

    @field_validator("permissions")
    @classmethod
    def dedupe_permissions(cls, v: List[Permission]) -> List[Permission]:
        return ordered_unique(v)


class EmployeeCreate(EmployeeBase):
    hire_date: Optional[date] = None  # defaults to today


class EmployeeUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    role: Optional[EmployeeRole] = None
    permissions: Optional[List[Permission]] = None
    status: Optional[EmployeeStatus] = None
    hire_date: Optional[date] = None

    @field_validator("permissions")
    @classmethod
    def dedupe_permissions(
        cls, v: Optional[List[Permission]]
    ) -> Optional[List[Permission]]:
        return ordered_unique(v) if v is not None else v


class EmployeeResponse(EmployeeBase):
    id: str
    version: int = 1
    hire_date: date

    model_config = ConfigDict(from_attributes=True)
