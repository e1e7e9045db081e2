from typing import Iterable, List, Optional

from libs.auth.permissions import Permission
from libs.common.errors import ValidationFailure
from libs.db.repository import EntityRepository
from services.classes_service.repository import sync_teacher_name
from services.teachers_service.schemas import (
    TeacherCreate,
    TeacherResponse,
    TeacherUpdate,
)


def search_teachers(
    teachers: Iterable[TeacherResponse], term: Optional[str]
) -> List[TeacherResponse]:
    """Case-insensitive substring match on name, email or any specialty."""
    teachers = list(teachers)
    if not term:
        return teachers
    needle = term.lower()
    return [
        t
        for t in teachers
        if needle in t.name.lower()
        or needle in t.email.lower()
        or any(needle in s.lower() for s in t.specialties)
    ]


class TeacherRepository(EntityRepository[TeacherResponse]):
    entity = "teacher"
    store_name = "teachers"
    permission = Permission.TEACHERS
    record_cls = TeacherResponse
    create_schema = TeacherCreate
    update_schema = TeacherUpdate

    async def _after_update(
        self, previous: TeacherResponse, record: TeacherResponse
    ) -> None:
        if previous.name != record.name:
            await sync_teacher_name(self.backend.classes, record.id, record.name)

    async def _before_delete(self, record: TeacherResponse) -> None:
        scheduled = [
            c for c in await self.backend.classes.list() if c.teacher_id == record.id
        ]
        if scheduled:
            raise ValidationFailure(
                "teacher_has_classes",
                f"Teacher {record.id} still teaches {len(scheduled)} class(es)",
                details={"class_ids": [c.id for c in scheduled]},
            )
