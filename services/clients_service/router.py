from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from libs.common.datetime_utils import studio_today
from services.clients_service.billing import is_payment_overdue, search_clients
from services.clients_service.models.enums import ClientStatus, PaymentStatus
from services.clients_service.schemas import ClientCreate, ClientResponse, ClientUpdate
from services.gateway_service.app.database import StudioDatabase
from services.gateway_service.app.dependencies import get_expected_version, get_studio_db

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("/", response_model=List[ClientResponse])
async def list_clients(
    search: Optional[str] = Query(None, description="Match on name or email"),
    status_filter: Optional[ClientStatus] = Query(None, alias="status"),
    payment_status: Optional[PaymentStatus] = Query(
        None, description="Stored payment status"
    ),
    overdue: Optional[bool] = Query(
        None, description="Overdue by flag or by due date"
    ),
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    List clients, optionally filtered.
    """
    clients = search_clients(await db.clients.list(), search)
    if status_filter is not None:
        clients = [c for c in clients if c.status == status_filter]
    if payment_status is not None:
        clients = [c for c in clients if c.payment_status == payment_status]
    if overdue is not None:
        today = studio_today()
        clients = [c for c in clients if is_payment_overdue(c, today) == overdue]
    return clients


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(client_id: str, db: StudioDatabase = Depends(get_studio_db)):
    return await db.clients.get(client_id)


@router.post("/", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    client_in: ClientCreate,
    db: StudioDatabase = Depends(get_studio_db),
):
    """
    Create a client. join_date defaults to today and next_payment_date to
    one plan period later.
    """
    return await db.clients.create(client_in)


@router.patch("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    client_in: ClientUpdate,
    expected_version: Optional[int] = Depends(get_expected_version),
    db: StudioDatabase = Depends(get_studio_db),
):
    return await db.clients.update(client_id, client_in, expected_version)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(client_id: str, db: StudioDatabase = Depends(get_studio_db)):
    """
    Delete a client and drop them from every class roster.
    """
    await db.clients.delete(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
