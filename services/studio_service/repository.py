from libs.auth.permissions import Caller, Permission
from libs.common.errors import NotFoundError, PermissionDenied
from libs.common.logging import get_logger
from libs.db.repository import Payload, parse_input
from services.studio_service.schemas import StudioProfileResponse, StudioProfileUpdate

logger = get_logger(__name__)


class StudioProfileRepository:
    entity = "studio profile"
    permission = Permission.SETTINGS

    def __init__(self, backend, caller: Caller):
        self.backend = backend
        self.caller = caller

    @property
    def store(self):
        return self.backend.studio

    async def get_profile(self) -> StudioProfileResponse:
        profile = await self.store.get()
        if profile is None:
            raise NotFoundError(self.entity, "studio")
        return profile

    async def update_profile(self, profile: Payload) -> StudioProfileResponse:
        """Replace the whole profile."""
        if not self.caller.can(self.permission):
            raise PermissionDenied(self.permission.value, self.caller.user_id)
        payload = parse_input(StudioProfileUpdate, profile)
        record = await self.store.replace(payload.model_dump())
        logger.info("Updated studio profile", extra={"extra_fields": {"caller": self.caller.user_id}})
        return record
