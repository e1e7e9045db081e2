from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.dependencies import get_expected_version, get_studio_db
from services.teachers_service.models.enums import TeacherStatus
from services.teachers_service.repository import search_teachers
from services.teachers_service.schemas import (
    TeacherCreate,
    TeacherPaletteResponse,
    TeacherResponse,
    TeacherUpdate,
)

router = APIRouter(prefix="/teachers", tags=["teachers"])


@router.get("/", response_model=List[TeacherResponse])
async def list_teachers(
    search: Optional[str] = Query(None, description="Match on name, email or specialty"),
    status_filter: Optional[TeacherStatus] = Query(None, alias="status"),
    db: StudioDatabase = Depends(get_studio_db),
):
    teachers = search_teachers(await db.teachers.list(), search)
    if status_filter is not None:
        teachers = [t for t in teachers if t.status == status_filter]
    return teachers


@router.get("/palette", response_model=TeacherPaletteResponse)
async def get_color_palette():
    """
    Colors available for teachers on the schedule.
    """
    return TeacherPaletteResponse()


@router.get("/{teacher_id}", response_model=TeacherResponse)
async def get_teacher(teacher_id: str, db: StudioDatabase = Depends(get_studio_db)):
    return await db.teachers.get(teacher_id)


@router.post("/", response_model=TeacherResponse, status_code=status.HTTP_201_CREATED)
async def create_teacher(
    teacher_in: TeacherCreate,
    db: StudioDatabase = Depends(get_studio_db),
):
    return await db.teachers.create(teacher_in)


@router.patch("/{teacher_id}", response_model=TeacherResponse)
async def update_teacher(
    teacher_id: str,
    teacher_in: TeacherUpdate,
    expected_version: Optional[int] = Depends(get_expected_version),
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    Update a teacher. A new name is copied onto all of their classes.
    """
    return await db.teachers.update(teacher_id, teacher_in, expected_version)


@router.delete("/{teacher_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_teacher(teacher_id: str, db: StudioDatabase = Depends(get_studio_db)):
    """
    Delete a teacher. Fails while any class is still assigned to them.
    """
    await db.teachers.delete(teacher_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
