from typing import Iterable, List, Optional

from libs.auth.permissions import Permission
from libs.common.datetime_utils import studio_today
from libs.db.repository import EntityRepository
from services.employees_service.schemas import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
)


def search_employees(
    employees: Iterable[EmployeeResponse], term: Optional[str]
) -> List[EmployeeResponse]:
    """Case-insensitive substring match on name or email."""
    employees = list(employees)
    if not term:
        return employees
    needle = term.lower()
    return [
        e for e in employees if needle in e.name.lower() or needle in e.email.lower()
    ]


class EmployeeRepository(EntityRepository[EmployeeResponse]):
    entity = "employee"
    store_name = "employees"
    permission = Permission.EMPLOYEES
    record_cls = EmployeeResponse
    create_schema = EmployeeCreate
    update_schema = EmployeeUpdate

    async def _prepare_create(self, payload: EmployeeCreate) -> dict:
        values = payload.model_dump()
        if values["hire_date"] is None:
            values["hire_date"] = studio_today()
        return values
