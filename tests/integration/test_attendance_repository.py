"""Integration tests for the attendance repository."""

from datetime import date

import pytest
from libs.common.errors import PermissionDenied, ValidationFailure
from tests.factories import (
    AttendanceFactory,
    ClassFactory,
    ClientFactory,
    EmployeeFactory,
    TeacherFactory,
)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_names_are_snapshotted_at_creation(db):
    teacher = await db.teachers.create(TeacherFactory.build())
    client = await db.clients.create(ClientFactory.build(name="Emma Wilson"))
    studio_class = await db.classes.create(
        ClassFactory.build(teacher.id, name="Morning Vinyasa")
    )

    record = await db.attendance.create(
        AttendanceFactory.build(client.id, class_id=studio_class.id)
    )
    await db.clients.update(client.id, {"name": "Emma Wilson-Hart"})
    await db.classes.update(studio_class.id, {"name": "Sunrise Vinyasa"})

    stored = await db.attendance.get(record.id)
    assert stored.person_name == "Emma Wilson"
    assert stored.class_name == "Morning Vinyasa"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_person_is_looked_up_by_type(db):
    employee = await db.employees.create(EmployeeFactory.build(name="Jamie Assistant"))

    record = await db.attendance.create(
        AttendanceFactory.build(employee.id, "employee", notes="Full day shift")
    )
    assert record.person_name == "Jamie Assistant"
    assert record.class_id is None
    assert record.class_name is None

    with pytest.raises(ValidationFailure) as exc_info:
        await db.attendance.create(AttendanceFactory.build(employee.id, "client"))
    assert exc_info.value.code == "unknown_person"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_unknown_class_is_rejected(db):
    client = await db.clients.create(ClientFactory.build())

    with pytest.raises(ValidationFailure) as exc_info:
        await db.attendance.create(AttendanceFactory.build(client.id, class_id="nope"))

    assert exc_info.value.code == "unknown_class"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_second_record_for_same_day_and_class_is_duplicate(db):
    client = await db.clients.create(ClientFactory.build())
    await db.attendance.create(AttendanceFactory.build(client.id))

    with pytest.raises(ValidationFailure) as exc_info:
        await db.attendance.create(AttendanceFactory.build(client.id, status="late"))

    assert exc_info.value.code == "duplicate_attendance"
    assert len(await db.attendance.list()) == 1


@pytest.mark.asyncio
@pytest.mark.integration
async def test_moving_onto_an_existing_date_is_duplicate(db):
    client = await db.clients.create(ClientFactory.build())
    await db.attendance.create(AttendanceFactory.build(client.id, date=date(2024, 1, 22)))
    other = await db.attendance.create(
        AttendanceFactory.build(client.id, date=date(2024, 1, 23))
    )

    with pytest.raises(ValidationFailure) as exc_info:
        await db.attendance.update(other.id, {"date": date(2024, 1, 22)})

    assert exc_info.value.code == "duplicate_attendance"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_status_can_be_corrected(db):
    client = await db.clients.create(ClientFactory.build())
    record = await db.attendance.create(AttendanceFactory.build(client.id))

    updated = await db.attendance.update(record.id, {"status": "late", "notes": "5 min"})

    assert updated.status == "late"
    assert updated.notes == "5 min"
    assert updated.person_name == record.person_name


@pytest.mark.asyncio
@pytest.mark.integration
async def test_attendance_has_no_delete(db):
    assert not hasattr(db.attendance, "delete")


@pytest.mark.asyncio
@pytest.mark.integration
async def test_marking_attendance_requires_schedule_permission(db, read_only_db):
    client = await db.clients.create(ClientFactory.build())

    with pytest.raises(PermissionDenied) as exc_info:
        await read_only_db.attendance.create(AttendanceFactory.build(client.id))

    assert exc_info.value.permission == "schedule"
