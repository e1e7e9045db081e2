from libs.auth.permissions import Permission
from libs.common.errors import ValidationFailure
from libs.common.logging import get_logger
from libs.db.repository import EntityRepository
from services.classes_service.schemas import ClassCreate, ClassResponse, ClassUpdate

logger = get_logger(__name__)


async def sync_teacher_name(class_store, teacher_id: str, teacher_name: str) -> int:
    """Rewrite the teacher_name copy on every class the teacher runs."""
    synced = 0
    for studio_class in await class_store.list():
        if studio_class.teacher_id == teacher_id and studio_class.teacher_name != teacher_name:
            await class_store.update(studio_class.id, {"teacher_name": teacher_name})
            synced += 1
    if synced:
        logger.info("Synced teacher name on %d class(es) for %s", synced, teacher_id)
    return synced


async def remove_client_from_classes(class_store, client_id: str) -> int:
    """Drop a client from every roster, keeping current_enrollment in step."""
    removed = 0
    for studio_class in await class_store.list():
        if client_id in studio_class.enrolled_clients:
            remaining = [c for c in studio_class.enrolled_clients if c != client_id]
            await class_store.update(
                studio_class.id,
                {"enrolled_clients": remaining, "current_enrollment": len(remaining)},
            )
            removed += 1
    if removed:
        logger.info("Unenrolled client %s from %d class(es)", client_id, removed)
    return removed


class ClassRepository(EntityRepository[ClassResponse]):
    entity = "class"
    store_name = "classes"
    permission = Permission.SCHEDULE
    record_cls = ClassResponse
    create_schema = ClassCreate
    update_schema = ClassUpdate

    async def _prepare_create(self, payload: ClassCreate) -> dict:
        values = payload.model_dump()
        values["current_enrollment"] = len(values["enrolled_clients"])

        self._check_schedule(values)
        teacher = await self._teacher(values["teacher_id"])
        values["teacher_name"] = teacher.name
        await self._check_clients(values["enrolled_clients"])
        return values

    async def _prepare_update(self, current: ClassResponse, changes: dict) -> dict:
        if changes.get("enrolled_clients") is not None:
            changes["current_enrollment"] = len(changes["enrolled_clients"])

        self._check_schedule({**current.model_dump(), **changes})
        if changes.get("teacher_id") is not None:
            teacher = await self._teacher(changes["teacher_id"])
            changes["teacher_name"] = teacher.name
        if changes.get("enrolled_clients") is not None:
            await self._check_clients(changes["enrolled_clients"])
        return changes

    def _check_schedule(self, values: dict) -> None:
        start, end = values.get("start_time"), values.get("end_time")
        if isinstance(start, str) and isinstance(end, str) and end <= start:
            raise ValidationFailure(
                "invalid_time_range",
                f"Class must end after it starts ({start} - {end})",
            )

        capacity = values.get("max_capacity")
        enrolled = len(values.get("enrolled_clients") or [])
        if isinstance(capacity, int) and enrolled > capacity:
            raise ValidationFailure(
                "capacity_exceeded",
                f"Enrollment {enrolled} exceeds capacity {capacity}",
            )

    async def _teacher(self, teacher_id: str):
        teacher = await self.backend.teachers.get(teacher_id)
        if teacher is None:
            raise ValidationFailure("unknown_teacher", f"Teacher {teacher_id} not found")
        return teacher

    async def _check_clients(self, client_ids) -> None:
        missing = [cid for cid in client_ids if await self.backend.clients.get(cid) is None]
        if missing:
            raise ValidationFailure(
                "unknown_client",
                f"Unknown client(s): {', '.join(missing)}",
                details={"client_ids": missing},
            )
