from typing import Optional

from libs.auth.permissions import Permission
from libs.common.datetime_utils import studio_today
from libs.common.errors import ValidationFailure
from libs.db.repository import MutableRepository
from services.attendance_service.models.enums import PersonType
from services.attendance_service.schemas import (
    AttendanceCreate,
    AttendanceResponse,
    AttendanceUpdate,
)

# Backend store holding each kind of person.
PERSON_STORES = {
    PersonType.TEACHER: "teachers",
    PersonType.CLIENT: "clients",
    PersonType.EMPLOYEE: "employees",
}


class AttendanceRepository(MutableRepository[AttendanceResponse]):
    """Attendance is corrected in place, never deleted."""

    entity = "attendance record"
    store_name = "attendance"
    permission = Permission.SCHEDULE
    record_cls = AttendanceResponse
    create_schema = AttendanceCreate
    update_schema = AttendanceUpdate

    async def _prepare_create(self, payload: AttendanceCreate) -> dict:
        values = payload.model_dump()
        if values["date"] is None:
            values["date"] = studio_today()

        person_store = getattr(self.backend, PERSON_STORES[payload.person_type])
        person = await person_store.get(payload.person_id)
        if person is None:
            raise ValidationFailure(
                "unknown_person",
                f"No {payload.person_type.value} with id {payload.person_id}",
            )
        values["person_name"] = person.name

        values["class_name"] = None
        if payload.class_id is not None:
            studio_class = await self.backend.classes.get(payload.class_id)
            if studio_class is None:
                raise ValidationFailure(
                    "unknown_class", f"Class {payload.class_id} not found"
                )
            values["class_name"] = studio_class.name

        await self._check_duplicate(values)
        return values

    async def _prepare_update(
        self, current: AttendanceResponse, changes: dict
    ) -> dict:
        if changes.get("date") is not None and changes["date"] != current.date:
            await self._check_duplicate(
                {**current.model_dump(), "date": changes["date"]}, exclude=current.id
            )
        return changes

    async def _check_duplicate(self, values: dict, exclude: Optional[str] = None) -> None:
        key = (
            values["person_id"],
            values["person_type"],
            values["class_id"],
            values["date"],
        )
        for record in await self.store.list():
            if record.id == exclude:
                continue
            if (record.person_id, record.person_type, record.class_id, record.date) == key:
                raise ValidationFailure(
                    "duplicate_attendance",
                    "Attendance already recorded for this person, class and date",
                    details={"existing_id": record.id},
                )
