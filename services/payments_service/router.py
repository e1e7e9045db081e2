from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from libs.common.datetime_utils import studio_today
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.dependencies import get_studio_db
from services.payments_service.models.enums import PaymentMethod
from services.payments_service.reporting import (
    payment_stats,
    search_payments,
    summarize_payment,
)
from services.payments_service.schemas import (
    PaymentRecordCreate,
    PaymentRecordResponse,
    PaymentStats,
    PaymentSummaryResponse,
)

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("/", response_model=List[PaymentSummaryResponse])
async def list_payments(
    search: Optional[str] = Query(None, description="Match on client name or notes"),
    method: Optional[PaymentMethod] = None,
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    Payments list as shown to staff: one membership line per payment record.
    """
    if search is None and method is None:
        return await db.payments.list()
    records = search_payments(await db.payment_records.list(), search, method)
    return [summarize_payment(r) for r in records]


@router.get("/records", response_model=List[PaymentRecordResponse])
async def list_payment_records(
    search: Optional[str] = Query(None, description="Match on client name or notes"),
    method: Optional[PaymentMethod] = None,
    db: StudioDatabase = Depends(get_studio_db),
):
    return search_payments(await db.payment_records.list(), search, method)


@router.get("/stats", response_model=PaymentStats)
async def get_payment_stats(db: StudioDatabase = Depends(get_studio_db)):
    """
    Total and current-month revenue, payment count and overdue clients.
    """
    return payment_stats(
        await db.payment_records.list(), await db.clients.list(), studio_today()
    )


@router.get("/records/{record_id}", response_model=PaymentRecordResponse)
async def get_payment_record(record_id: str, db: StudioDatabase = Depends(get_studio_db)):
    return await db.payment_records.get(record_id)


@router.post(
    "/", response_model=PaymentRecordResponse, status_code=status.HTTP_201_CREATED
)
async def record_payment(
    payment_in: PaymentRecordCreate,
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    Record a payment. The client's current name is stored with it.
    """
    return await db.payment_records.create(payment_in)
