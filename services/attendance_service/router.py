import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from services.attendance_service.filters import filter_attendance, summarize_attendance
from services.attendance_service.models.enums import AttendanceStatus, PersonType
from services.attendance_service.schemas import (
    AttendanceCreate,
    AttendanceResponse,
    AttendanceSummary,
    AttendanceUpdate,
)
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.dependencies import get_expected_version, get_studio_db

router = APIRouter(prefix="/attendance", tags=["attendance"])


@router.get("/", response_model=List[AttendanceResponse])
async def list_attendance(
    date: Optional[dt.date] = None,
    class_id: Optional[str] = None,
    person_type: Optional[PersonType] = None,
    status_filter: Optional[AttendanceStatus] = Query(None, alias="status"),
    db: StudioDatabase = Depends(get_studio_db),
):
    return filter_attendance(
        await db.attendance.list(),
        date=date,
        class_id=class_id,
        person_type=person_type,
        status=status_filter,
    )


@router.get("/summary", response_model=AttendanceSummary)
async def get_attendance_summary(
    date: Optional[dt.date] = None,
    class_id: Optional[str] = None,
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    Present/absent/late counts for a day or a class.
    """
    records = filter_attendance(await db.attendance.list(), date=date, class_id=class_id)
    return summarize_attendance(records)


@router.get("/{record_id}", response_model=AttendanceResponse)
async def get_attendance(record_id: str, db: StudioDatabase = Depends(get_studio_db)):
    return await db.attendance.get(record_id)


@router.post(
    "/", response_model=AttendanceResponse, status_code=status.HTTP_201_CREATED
)
async def mark_attendance(
    attendance_in: AttendanceCreate,
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    Record attendance for a teacher, client or employee. At most one record
    per person, class and date.
    """
    return await db.attendance.create(attendance_in)


@router.patch("/{record_id}", response_model=AttendanceResponse)
async def update_attendance(
    record_id: str,
    attendance_in: AttendanceUpdate,
    expected_version: Optional[int] = Depends(get_expected_version),
    db: StudioDatabase = Depends(get_studio_db),
):
    return await db.attendance.update(record_id, attendance_in, expected_version)
