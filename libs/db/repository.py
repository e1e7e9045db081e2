"""Generic entity repositories.

Three levels, matching what each collection allows:

    AppendOnlyRepository   list / get / create
    MutableRepository      + update
    EntityRepository       + delete

Subclasses name the store they own (``store_name`` on the storage backend),
the permission that guards mutations, and the pydantic schemas for input.
Domain rules go in the ``_prepare_*`` / ``_after_*`` hooks.
"""

from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from libs.auth.permissions import Caller, Permission
from libs.common.errors import NotFoundError, PermissionDenied, ValidationFailure
from libs.common.logging import get_logger
from libs.common.validators import error_details

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
SchemaT = TypeVar("SchemaT", bound=BaseModel)

Payload = Union[BaseModel, Mapping[str, Any]]


def parse_input(schema: Type[SchemaT], data: Payload) -> SchemaT:
    """Coerce a schema instance or plain mapping into ``schema``.

    Raises ValidationFailure("invalid_input") when the shape is wrong.
    """
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailure(
            "invalid_input",
            f"Invalid {schema.__name__} payload",
            details=error_details(exc),
        ) from exc


class AppendOnlyRepository(Generic[RecordT]):
    entity: str = "record"
    store_name: str
    permission: Permission
    record_cls: Type[RecordT]
    create_schema: Type[BaseModel]

    def __init__(self, backend, caller: Caller):
        self.backend = backend
        self.caller = caller

    @property
    def store(self):
        return getattr(self.backend, self.store_name)

    def _authorize(self) -> None:
        if not self.caller.can(self.permission):
            logger.warning(
                "Caller %s denied %s on %s",
                self.caller.user_id,
                self.permission.value,
                self.entity,
            )
            raise PermissionDenied(self.permission.value, self.caller.user_id)

    def _log(self, action: str, record_id: str) -> None:
        logger.info(
            "%s %s %s",
            action,
            self.entity,
            record_id,
            extra={
                "extra_fields": {
                    "entity": self.entity,
                    "record_id": record_id,
                    "caller": self.caller.user_id,
                }
            },
        )

    async def list(self) -> List[RecordT]:
        return await self.store.list()

    async def get(self, record_id: str) -> RecordT:
        record = await self.store.get(record_id)
        if record is None:
            raise NotFoundError(self.entity, record_id)
        return record

    async def create(self, data: Payload) -> RecordT:
        self._authorize()
        payload = parse_input(self.create_schema, data)
        values = await self._prepare_create(payload)
        record = await self.store.insert(values)
        self._log("Created", record.id)
        return record

    async def _prepare_create(self, payload: BaseModel) -> dict:
        """Turn validated input into the values to store."""
        return payload.model_dump()


class MutableRepository(AppendOnlyRepository[RecordT]):
    update_schema: Type[BaseModel]

    async def update(
        self,
        record_id: str,
        data: Payload,
        expected_version: Optional[int] = None,
    ) -> RecordT:
        self._authorize()
        changes = parse_input(self.update_schema, data).model_dump(exclude_unset=True)
        current = await self.get(record_id)
        changes = await self._prepare_update(current, changes)

        # The merged record must still be a valid record.
        try:
            self.record_cls.model_validate({**current.model_dump(), **changes})
        except ValidationError as exc:
            raise ValidationFailure(
                "invalid_input",
                f"Invalid {self.entity} update",
                details=error_details(exc),
            ) from exc

        record = await self.store.update(
            record_id, changes, expected_version=expected_version
        )
        self._log("Updated", record_id)
        await self._after_update(current, record)
        return record

    async def _prepare_update(self, current: RecordT, changes: dict) -> dict:
        return changes

    async def _after_update(self, previous: RecordT, record: RecordT) -> None:
        return None


class EntityRepository(MutableRepository[RecordT]):
    async def delete(self, record_id: str) -> bool:
        self._authorize()
        current = await self.get(record_id)
        await self._before_delete(current)
        await self.store.delete(record_id)
        self._log("Deleted", record_id)
        await self._after_delete(current)
        return True

    async def _before_delete(self, record: RecordT) -> None:
        return None

    async def _after_delete(self, record: RecordT) -> None:
        return None
