from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from services.classes_service.models.enums import ClassStatus, Weekday
from services.classes_service.schedule import (
    classes_for_teacher,
    classes_for_weekday,
    classes_on,
    weekly_schedule,
)
from services.classes_service.schemas import ClassCreate, ClassResponse, ClassUpdate
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.dependencies import get_expected_version, get_studio_db

router = APIRouter(prefix="/classes", tags=["classes"])


@router.get("/", response_model=List[ClassResponse])
async def list_classes(
    day: Optional[Weekday] = Query(None, description="Weekday name"),
    on: Optional[date] = Query(None, description="Classes meeting on this date"),
    teacher_id: Optional[str] = None,
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    List classes. Day and date filters return classes ordered by start time.
    """
    classes = await db.classes.list()
    if teacher_id is not None:
        classes = classes_for_teacher(classes, teacher_id)
    if day is not None:
        classes = classes_for_weekday(classes, day)
    if on is not None:
        classes = classes_on(classes, on)
    return classes


@router.get("/weekly", response_model=Dict[str, List[ClassResponse]])
async def get_weekly_schedule(
    status_filter: Optional[ClassStatus] = Query(None, alias="status"),
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    Classes grouped by weekday, Monday first.
    """
    return weekly_schedule(await db.classes.list(), status_filter)


@router.get("/{class_id}", response_model=ClassResponse)
async def get_class(class_id: str, db: StudioDatabase = Depends(get_studio_db)):
    return await db.classes.get(class_id)


@router.post("/", response_model=ClassResponse, status_code=status.HTTP_201_CREATED)
async def create_class(
    class_in: ClassCreate,
    db: StudioDatabase = Depends(get_studio_db),
):
    return await db.classes.create(class_in)


@router.patch("/{class_id}", response_model=ClassResponse)
async def update_class(
    class_id: str,
    class_in: ClassUpdate,
    expected_version: Optional[int] = Depends(get_expected_version),
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    Update a class. Writing enrolled_clients recomputes current_enrollment.
    """
    return await db.classes.update(class_id, class_in, expected_version)


@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_class(class_id: str, db: StudioDatabase = Depends(get_studio_db)):
    await db.classes.delete(class_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
