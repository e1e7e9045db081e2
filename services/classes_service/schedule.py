"""Schedule queries over class records."""

from datetime import date
from typing import Iterable, List, Optional

from libs.common.datetime_utils import weekday_name
from services.classes_service.models.enums import ClassStatus, Weekday
from services.classes_service.schemas import ClassResponse


def by_start_time(classes: Iterable[ClassResponse]) -> List[ClassResponse]:
    return sorted(classes, key=lambda c: c.start_time)


def classes_for_weekday(
    classes: Iterable[ClassResponse], day: Weekday
) -> List[ClassResponse]:
    return by_start_time(c for c in classes if c.day == day)


def classes_on(classes: Iterable[ClassResponse], on: date) -> List[ClassResponse]:
    """Classes that meet on the weekday of ``on``, earliest first."""
    return classes_for_weekday(classes, Weekday(weekday_name(on)))


def classes_for_teacher(
    classes: Iterable[ClassResponse], teacher_id: str
) -> List[ClassResponse]:
    return [c for c in classes if c.teacher_id == teacher_id]


def weekly_schedule(
    classes: Iterable[ClassResponse], status: Optional[ClassStatus] = None
) -> dict:
    """Group classes by weekday, Monday first, each day ordered by start time."""
    classes = [c for c in classes if status is None or c.status == status]
    return {day.value: classes_for_weekday(classes, day) for day in Weekday}
