from typing import List, Optional

from libs.common.validators import TIME_OF_DAY_PATTERN, ordered_unique, whole_cents
from pydantic import BaseModel, ConfigDict, Field, field_validator
from services.classes_service.models.enums import ClassStatus, Weekday


class ClassBase(BaseModel):
    name: str
    teacher_id: str
    day: Weekday
    start_time: str = Field(..., pattern=TIME_OF_DAY_PATTERN)
    end_time: str = Field(..., pattern=TIME_OF_DAY_PATTERN)
    max_capacity: int = Field(..., gt=0)
    description: str = ""
    type: str = ""
    price: float = Field(default=0.0, ge=0)
    status: ClassStatus = ClassStatus.ACTIVE
    enrolled_clients: List[str] = Field(default_factory=list)

    @field_validator("price")
    @classmethod
    def price_in_cents(cls, v):
        return whole_cents(v)

    @field_validator("enrolled_clients")
    @classmethod
    def dedupe_clients(cls, v: List[str]) -> List[str]:
        return ordered_unique(v)


class ClassCreate(ClassBase):
    pass


class ClassUpdate(BaseModel):
    name: Optional[str] = None
    teacher_id: Optional[str] = None
    day: Optional[Weekday] = None
    start_time: Optional[str] = Field(default=None, pattern=TIME_OF_DAY_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_OF_DAY_PATTERN)
    max_capacity: Optional[int] = Field(default=None, gt=0)
    description: Optional[str] = None
    type: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    status: Optional[ClassStatus] = None
    enrolled_clients: Optional[List[str]] = None

    @field_validator("price")
    @classmethod
    def price_in_cents(cls, v):
        return whole_cents(v)

    @field_validator("enrolled_clients")
    @classmethod
    def dedupe_clients(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return ordered_unique(v) if v is not None else v


class ClassResponse(ClassBase):
    id: str
    version: int = 1
    teacher_name: str
    # Always len(enrolled_clients); never taken from input.
    current_enrollment: int = Field(default=0, ge=0)

    model_config = ConfigDict(from_attributes=True)
