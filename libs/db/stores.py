"""Record stores: the raw storage seam under every repository.

A store keeps validated pydantic records and knows nothing about permissions
or cross-entity rules. Two implementations exist for each shape:

- ``InMemoryRecordStore`` / ``InMemorySingletonStore``: process memory,
  used for fixtures, demos and tests.
- ``SqlRecordStore`` / ``SqlSingletonStore``: SQLAlchemy async sessions over
  the ORM models in each service's ``models.py``.

Every method is a coroutine so callers never depend on which one they hold.
"""

import uuid
from contextlib import asynccontextmanager
from typing import (
    AsyncIterator,
    Dict,
    Generic,
    List,
    Optional,
    Protocol,
    Sequence,
    Type,
    TypeVar,
)

from pydantic import BaseModel, ValidationError
from sqlalchemy import inspect, select, update
from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
)
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from libs.common.currency import from_cents, to_cents
from libs.common.datetime_utils import utc_now
from libs.common.errors import (
    NotFoundError,
    TransientUnavailable,
    ValidationFailure,
    VersionConflict,
)
from libs.common.logging import get_logger
from libs.common.validators import error_details
from libs.db.base import Base

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

# Fixed primary key of singleton rows.
SINGLETON_KEY = 1


def new_record_id() -> str:
    return str(uuid.uuid4())


def _build(record_cls: Type[RecordT], entity: str, data: dict) -> RecordT:
    try:
        return record_cls.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailure(
            "invalid_input", f"Invalid {entity} data", details=error_details(exc)
        ) from exc


class RecordStore(Protocol[RecordT]):
    entity: str
    record_cls: Type[RecordT]

    async def list(self) -> List[RecordT]: ...

    async def get(self, record_id: str) -> Optional[RecordT]: ...

    async def insert(self, values: dict) -> RecordT: ...

    async def update(
        self, record_id: str, values: dict, *, expected_version: Optional[int] = None
    ) -> RecordT: ...

    async def delete(self, record_id: str) -> None: ...


class SingletonStore(Protocol[RecordT]):
    entity: str
    record_cls: Type[RecordT]

    async def get(self) -> Optional[RecordT]: ...

    async def replace(self, values: dict) -> RecordT: ...


# ---------------------------------------------------------------------------
# In-memory
# ---------------------------------------------------------------------------


class InMemoryRecordStore(Generic[RecordT]):
    """Dict-backed store. Iteration order is insertion order."""

    def __init__(self, entity: str, record_cls: Type[RecordT]):
        self.entity = entity
        self.record_cls = record_cls
        self._records: Dict[str, RecordT] = {}

    async def list(self) -> List[RecordT]:
        return [r.model_copy(deep=True) for r in self._records.values()]

    async def get(self, record_id: str) -> Optional[RecordT]:
        record = self._records.get(record_id)
        return record.model_copy(deep=True) if record else None

    async def insert(self, values: dict) -> RecordT:
        record = _build(
            self.record_cls,
            self.entity,
            {**values, "id": new_record_id(), "version": 1},
        )
        self._records[record.id] = record
        return record.model_copy(deep=True)

    async def update(
        self, record_id: str, values: dict, *, expected_version: Optional[int] = None
    ) -> RecordT:
        current = self._records.get(record_id)
        if current is None:
            raise NotFoundError(self.entity, record_id)
        if expected_version is not None and expected_version != current.version:
            raise VersionConflict(
                self.entity, record_id, expected_version, current.version
            )

        record = _build(
            self.record_cls,
            self.entity,
            {
                **current.model_dump(),
                **values,
                "id": record_id,
                "version": current.version + 1,
            },
        )
        self._records[record_id] = record
        return record.model_copy(deep=True)

    async def delete(self, record_id: str) -> None:
        if self._records.pop(record_id, None) is None:
            raise NotFoundError(self.entity, record_id)


class InMemorySingletonStore(Generic[RecordT]):
    def __init__(self, entity: str, record_cls: Type[RecordT]):
        self.entity = entity
        self.record_cls = record_cls
        self._record: Optional[RecordT] = None

    async def get(self) -> Optional[RecordT]:
        return self._record.model_copy(deep=True) if self._record else None

    async def replace(self, values: dict) -> RecordT:
        self._record = _build(self.record_cls, self.entity, values)
        return self._record.model_copy(deep=True)


# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------


@asynccontextmanager
async def _storage_errors(
    entity: str = "record", conflict_code: str = "conflict"
) -> AsyncIterator[None]:
    """Surface connectivity failures as TransientUnavailable and constraint
    violations (a racing duplicate, a vanished reference) as ValidationFailure.
    """
    try:
        yield
    except IntegrityError as exc:
        logger.warning("Integrity violation on %s: %s", entity, conflict_code)
        raise ValidationFailure(
            conflict_code, f"{entity} conflicts with existing data"
        ) from exc
    except (OperationalError, InterfaceError) as exc:
        logger.error("Storage connectivity failure: %s", exc.__class__.__name__)
        raise TransientUnavailable() from exc
    except DBAPIError as exc:
        if exc.connection_invalidated:
            logger.error("Storage connection invalidated")
            raise TransientUnavailable() from exc
        raise


class _RowMapper:
    """Converts between pydantic record dicts and ORM column values.

    Money fields are stored as integer cents; list fields holding enum
    members are stored as their plain values.
    """

    def __init__(self, model: Type[Base], money_fields: Sequence[str]):
        self.model = model
        self.money_fields = tuple(money_fields)
        self.columns = [attr.key for attr in inspect(model).column_attrs]

    def to_row(self, values: dict) -> dict:
        row = {}
        for key, value in values.items():
            if key not in self.columns:
                continue
            if key in self.money_fields and value is not None:
                value = to_cents(value)
            elif isinstance(value, list):
                value = [getattr(item, "value", item) for item in value]
            row[key] = value
        return row

    def to_data(self, row: Base) -> dict:
        data = {key: getattr(row, key) for key in self.columns}
        for key in self.money_fields:
            data[key] = from_cents(data[key])
        return data


class SqlRecordStore(Generic[RecordT]):
    """Store backed by one ORM table. One session per operation."""

    def __init__(
        self,
        entity: str,
        record_cls: Type[RecordT],
        model: Type[Base],
        session_factory: async_sessionmaker[AsyncSession],
        *,
        money_fields: Sequence[str] = (),
        conflict_code: str = "conflict",
    ):
        self.entity = entity
        self.record_cls = record_cls
        self.model = model
        self.session_factory = session_factory
        # ValidationFailure code raised when a write breaks a table constraint.
        self.conflict_code = conflict_code
        self._mapper = _RowMapper(model, money_fields)

    def _errors(self):
        return _storage_errors(self.entity, self.conflict_code)

    def _record(self, row: Base) -> RecordT:
        return _build(self.record_cls, self.entity, self._mapper.to_data(row))

    async def list(self) -> List[RecordT]:
        async with self._errors():
            async with self.session_factory() as session:
                result = await session.execute(
                    select(self.model).order_by(self.model.created_at, self.model.id)
                )
                return [self._record(row) for row in result.scalars().all()]

    async def get(self, record_id: str) -> Optional[RecordT]:
        async with self._errors():
            async with self.session_factory() as session:
                row = await session.get(self.model, record_id)
                return self._record(row) if row else None

    async def insert(self, values: dict) -> RecordT:
        # Validate before touching the database so bad input never half-writes.
        record = _build(
            self.record_cls,
            self.entity,
            {**values, "id": new_record_id(), "version": 1},
        )
        async with self._errors():
            async with self.session_factory() as session:
                row = self.model(**self._mapper.to_row(record.model_dump()))
                session.add(row)
                await session.commit()
                return self._record(row)

    async def update(
        self, record_id: str, values: dict, *, expected_version: Optional[int] = None
    ) -> RecordT:
        async with self._errors():
            async with self.session_factory() as session:
                stmt = (
                    update(self.model)
                    .where(self.model.id == record_id)
                    .values(
                        **self._mapper.to_row(values),
                        version=self.model.version + 1,
                        updated_at=utc_now(),
                    )
                    .returning(self.model)
                    .execution_options(synchronize_session=False)
                )
                if expected_version is not None:
                    stmt = stmt.where(self.model.version == expected_version)

                row = (await session.execute(stmt)).scalar_one_or_none()
                if row is None:
                    await session.rollback()
                    existing = await session.get(self.model, record_id)
                    if existing is None:
                        raise NotFoundError(self.entity, record_id)
                    raise VersionConflict(
                        self.entity, record_id, expected_version, existing.version
                    )

                record = self._record(row)
                await session.commit()
                return record

    async def delete(self, record_id: str) -> None:
        async with self._errors():
            async with self.session_factory() as session:
                row = await session.get(self.model, record_id)
                if row is None:
                    raise NotFoundError(self.entity, record_id)
                await session.delete(row)
                await session.commit()


class SqlSingletonStore(Generic[RecordT]):
    def __init__(
        self,
        entity: str,
        record_cls: Type[RecordT],
        model: Type[Base],
        session_factory: async_sessionmaker[AsyncSession],
    ):
        self.entity = entity
        self.record_cls = record_cls
        self.model = model
        self.session_factory = session_factory
        self._mapper = _RowMapper(model, ())

    async def get(self) -> Optional[RecordT]:
        async with _storage_errors():
            async with self.session_factory() as session:
                row = await session.get(self.model, SINGLETON_KEY)
                if row is None:
                    return None
                return _build(self.record_cls, self.entity, self._mapper.to_data(row))

    async def replace(self, values: dict) -> RecordT:
        record = _build(self.record_cls, self.entity, values)
        async with _storage_errors():
            async with self.session_factory() as session:
                row = self.model(id=SINGLETON_KEY, **self._mapper.to_row(record.model_dump()))
                await session.merge(row)
                await session.commit()
        return record
