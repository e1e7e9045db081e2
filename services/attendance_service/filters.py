"""Attendance queries."""

import datetime as dt
from typing import Iterable, List, Optional

from services.attendance_service.models.enums import AttendanceStatus, PersonType
from services.attendance_service.schemas import AttendanceResponse, AttendanceSummary


def filter_attendance(
    records: Iterable[AttendanceResponse],
    date: Optional[dt.date] = None,
    class_id: Optional[str] = None,
    person_type: Optional[PersonType] = None,
    status: Optional[AttendanceStatus] = None,
) -> List[AttendanceResponse]:
    """Keep records matching every filter that is given."""
    return [
        r
        for r in records
        if (date is None or r.date == date)
        and (class_id is None or r.class_id == class_id)
        and (person_type is None or r.person_type == person_type)
        and (status is None or r.status == status)
    ]


def summarize_attendance(records: Iterable[AttendanceResponse]) -> AttendanceSummary:
    records = list(records)
    return AttendanceSummary(
        total=len(records),
        by_status={s: sum(1 for r in records if r.status == s) for s in AttendanceStatus},
        by_person_type={
            p: sum(1 for r in records if r.person_type == p) for p in PersonType
        },
    )
