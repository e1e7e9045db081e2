import datetime as dt
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict
from services.attendance_service.models.enums import AttendanceStatus, PersonType


class AttendanceBase(BaseModel):
    person_id: str
    person_type: PersonType
    class_id: Optional[str] = None
    status: AttendanceStatus = AttendanceStatus.PRESENT
    notes: Optional[str] = None


class AttendanceCreate(AttendanceBase):
    date: Optional[dt.date] = None  # defaults to today


class AttendanceUpdate(BaseModel):
    date: Optional[dt.date] = None
    status: Optional[AttendanceStatus] = None
    notes: Optional[str] = None


class AttendanceResponse(AttendanceBase):
    id: str
    version: int = 1
    date: dt.date

    # Names as they were when attendance was taken.
    person_name: str
    class_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class AttendanceSummary(BaseModel):
    """Counts per status over a filtered set of records."""

    total: int
    by_status: Dict[AttendanceStatus, int]
    by_person_type: Dict[PersonType, int]
