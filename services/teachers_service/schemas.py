from typing import List, Optional

from libs.common.validators import HEX_COLOR_PATTERN, ordered_unique, whole_cents
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from services.teachers_service.models.enums import TeacherStatus

DEFAULT_TEACHER_COLOR = "#6366F1"

# Colors offered by the schedule's teacher picker.
TEACHER_COLOR_PALETTE = (
    "#10B981",  # green
    "#3B82F6",  # blue
    "#8B5CF6",  # purple
    "#F59E0B",  # amber
    "#EF4444",  # red
    "#06B6D4",  # cyan
    "#84CC16",  # lime
    "#F97316",  # orange
    "#EC4899",  # pink
    "#6366F1",  # indigo
)


class TeacherBase(BaseModel):
    name: str
    email: EmailStr
    phone: str = ""
    specialties: List[str] = Field(default_factory=list)
    experience_level: str = ""
    status: TeacherStatus = TeacherStatus.ACTIVE
    hourly_rate: float = Field(default=0.0, ge=0)
    color: str = Field(default=DEFAULT_TEACHER_COLOR, pattern=HEX_COLOR_PATTERN)
    bio: str = ""

    @field_validator("hourly_rate")
    @classmethod
    def hourly_rate_in_cents(cls, v):
        return whole_cents(v)

    @field_validator("specialties")
    @classmethod
    def dedupe_specialties(cls, v: List[str]) -> List[str]:
        return ordered_unique(v)


class TeacherCreate(TeacherBase):
    pass


class TeacherUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    specialties: Optional[List[str]] = None
    experience_level: Optional[str] = None
    status: Optional[TeacherStatus] = None
    hourly_rate: Optional[float] = Field(default=None, ge=0)
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    bio: Optional[str] = None

    @field_validator("hourly_rate")
    @classmethod
    def hourly_rate_in_cents(cls, v):
        return whole_cents(v)

    @field_validator("specialties")
    @classmethod
    def dedupe_specialties(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return ordered_unique(v) if v is not None else v


class TeacherResponse(TeacherBase):
    id: str
    version: int = 1

    model_config = ConfigDict(from_attributes=True)


class TeacherPaletteResponse(BaseModel):
    default: str = DEFAULT_TEACHER_COLOR
    colors: List[str] = list(TEACHER_COLOR_PALETTE)
