from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from services.employees_service.models.enums import EmployeeStatus
from services.employees_service.repository import search_employees
from services.employees_service.schemas import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
)
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.dependencies import get_expected_version, get_studio_db

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("/", response_model=List[EmployeeResponse])
async def list_employees(
    search: Optional[str] = Query(None, description="Match on name or email"),
    status_filter: Optional[EmployeeStatus] = Query(None, alias="status"),
    db: StudioDatabase = Depends(get_studio_db),
):
    employees = search_employees(await db.employees.list(), search)
    if status_filter is not None:
        employees = [e for e in employees if e.status == status_filter]
    return employees


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: str, db: StudioDatabase = Depends(get_studio_db)):
    return await db.employees.get(employee_id)


@router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_in: EmployeeCreate,
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    Add a staff member. Their email is what links a login to these permissions.
    """
    return await db.employees.create(employee_in)


@router.patch("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    employee_in: EmployeeUpdate,
    expected_version: Optional[int] = Depends(get_expected_version),
    db: StudioDatabase = Depends(get_studio_db),
):
    return await db.employees.update(employee_id, employee_in, expected_version)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: str, db: StudioDatabase = Depends(get_studio_db)):
    await db.employees.delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
