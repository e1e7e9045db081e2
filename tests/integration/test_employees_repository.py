"""Integration tests for the employees repository."""

import pytest
from libs.auth.models import AuthUser
from libs.auth.permissions import GRANTABLE, MANAGER_DEFAULTS, Permission
from libs.common.datetime_utils import studio_today
from libs.common.errors import NotFoundError, ValidationFailure
from services.employees_service.access import resolve_caller
from tests.factories import EmployeeFactory


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_nonexistent_employee_is_not_found(db):
    with pytest.raises(NotFoundError):
        await db.employees.update("missing", {"name": "Nobody"})


@pytest.mark.asyncio
@pytest.mark.integration
async def test_hire_date_defaults_to_today(db):
    payload = EmployeeFactory.build()
    del payload["hire_date"]

    employee = await db.employees.create(payload)

    assert employee.hire_date == studio_today()


@pytest.mark.asyncio
@pytest.mark.integration
async def test_unknown_permission_token_is_rejected(db):
    with pytest.raises(ValidationFailure):
        await db.employees.create(EmployeeFactory.build(permissions=["billing"]))


@pytest.mark.asyncio
@pytest.mark.integration
async def test_permissions_are_deduplicated(db):
    employee = await db.employees.create(
        EmployeeFactory.build(permissions=["clients", "schedule", "clients"])
    )
    assert employee.permissions == [Permission.CLIENTS, Permission.SCHEDULE]


@pytest.mark.asyncio
@pytest.mark.integration
class TestResolveCaller:
    async def test_owner_role_gets_everything(self, backend):
        caller = await resolve_caller(
            backend.employees, AuthUser(user_id="u1", role="owner")
        )
        assert caller.permissions == GRANTABLE

    async def test_employee_matched_by_email_case_insensitively(self, db, backend):
        await db.employees.create(
            EmployeeFactory.build(email="jamie@zenyoga.com", permissions=["clients"])
        )

        caller = await resolve_caller(
            backend.employees, AuthUser(user_id="u2", email="Jamie@ZenYoga.com")
        )

        assert caller.permissions == {Permission.CLIENTS}

    async def test_manager_defaults(self, db, backend):
        await db.employees.create(
            EmployeeFactory.build(
                email="lead@zenyoga.com", role="manager", permissions=[]
            )
        )
        caller = await resolve_caller(
            backend.employees, AuthUser(user_id="u3", email="lead@zenyoga.com")
        )
        assert caller.permissions == MANAGER_DEFAULTS

    async def test_inactive_employee_gets_nothing(self, db, backend):
        await db.employees.create(
            EmployeeFactory.build(
                email="gone@zenyoga.com", permissions=["all"], status="inactive"
            )
        )
        caller = await resolve_caller(
            backend.employees, AuthUser(user_id="u4", email="gone@zenyoga.com")
        )
        assert caller.permissions == frozenset()

    async def test_unknown_email_gets_nothing(self, backend):
        caller = await resolve_caller(
            backend.employees, AuthUser(user_id="u5", email="stranger@mail.com")
        )
        assert caller.permissions == frozenset()
