from libs.auth.permissions import Permission
from libs.common.datetime_utils import studio_today
from libs.db.repository import EntityRepository
from services.classes_service.repository import remove_client_from_classes
from services.clients_service.billing import next_payment_after
from services.clients_service.schemas import ClientCreate, ClientResponse, ClientUpdate


class ClientRepository(EntityRepository[ClientResponse]):
    entity = "client"
    store_name = "clients"
    permission = Permission.CLIENTS
    record_cls = ClientResponse
    create_schema = ClientCreate
    update_schema = ClientUpdate

    async def _prepare_create(self, payload: ClientCreate) -> dict:
        values = payload.model_dump()
        if values["join_date"] is None:
            values["join_date"] = studio_today()
        if values["next_payment_date"] is None:
            values["next_payment_date"] = next_payment_after(
                values["join_date"], values["payment_plan"]
            )
        return values

    async def _after_delete(self, record: ClientResponse) -> None:
        # Attendance and payment records keep their name snapshot.
        await remove_client_from_classes(self.backend.classes, record.id)
