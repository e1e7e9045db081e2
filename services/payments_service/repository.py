from typing import List

from libs.auth.permissions import Permission
from libs.common.datetime_utils import studio_today
from libs.common.errors import ValidationFailure
from libs.db.repository import AppendOnlyRepository
from services.payments_service.reporting import summarize_payment
from services.payments_service.schemas import (
    PaymentRecordCreate,
    PaymentRecordResponse,
    PaymentSummaryResponse,
)


class PaymentRecordRepository(AppendOnlyRepository[PaymentRecordResponse]):
    """Payments are never edited or removed once recorded."""

    entity = "payment record"
    store_name = "payment_records"
    permission = Permission.PAYMENTS
    record_cls = PaymentRecordResponse
    create_schema = PaymentRecordCreate

    async def _prepare_create(self, payload: PaymentRecordCreate) -> dict:
        values = payload.model_dump()
        if values["payment_date"] is None:
            values["payment_date"] = studio_today()

        client = await self.backend.clients.get(payload.client_id)
        if client is None:
            raise ValidationFailure(
                "unknown_client", f"Client {payload.client_id} not found"
            )
        values["client_name"] = client.name
        return values


class PaymentsSummaryView:
    """Read-only payments list, rebuilt from the payment records on each call."""

    def __init__(self, records: PaymentRecordRepository):
        self.records = records

    async def list(self) -> List[PaymentSummaryResponse]:
        return [summarize_payment(r) for r in await self.records.list()]
