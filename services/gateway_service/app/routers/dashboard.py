from typing import List

from fastapi import APIRouter, Depends
from libs.common.datetime_utils import studio_today
from services.clients_service.billing import overdue_clients
from services.clients_service.schemas import ClientResponse
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.dependencies import get_studio_db
from services.payments_service.reporting import dashboard_overview
from services.payments_service.schemas import DashboardOverview

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/overview", response_model=DashboardOverview)
async def get_dashboard_overview(db: StudioDatabase = Depends(get_studio_db)):
    """
    Headline numbers for the studio dashboard.
    """
    return dashboard_overview(
        await db.clients.list(),
        await db.teachers.list(),
        await db.payment_records.list(),
        studio_today(),
    )


@router.get("/overdue-clients", response_model=List[ClientResponse])
async def get_overdue_clients(db: StudioDatabase = Depends(get_studio_db)):
    """
    Clients flagged overdue or past their next payment date.
    """
    return overdue_clients(await db.clients.list(), studio_today())
