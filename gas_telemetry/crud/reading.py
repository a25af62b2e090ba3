from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from gas_telemetry.errors import StoreConstraintError, StoreError, StoreUnavailableError
from gas_telemetry.models.reading import ReadingModel, SensorType
from gas_telemetry.schema.reading import ReadingCreate, ReadingResponse
from gas_telemetry.logger import CustomLogger
from typing import List, Optional

console = CustomLogger(name="database_logs")

_DRIVER_FIELDS = ("column_name", "constraint_name", "table_name", "detail")


def _driver_errors(error):
    # SQLAlchemy wraps the DBAPI error in .orig, the asyncpg adapter chains the native one.
    orig = getattr(error, "orig", None)
    if orig is None:
        return []
    return [e for e in (orig, orig.__cause__) if e is not None]


def translate_store_error(error: Exception) -> StoreError:
    """Turn a SQLAlchemy/driver failure into the store error taxonomy."""
    drivers = _driver_errors(error)

    code = None
    meta = {}
    for driver in drivers:
        code = code or getattr(driver, "sqlstate", None) or getattr(driver, "pgcode", None)
        for key in _DRIVER_FIELDS:
            value = getattr(driver, key, None)
            if value and key not in meta:
                meta[key] = value
    code = code or getattr(error, "code", None)
    message = str(drivers[0]) if drivers else str(error)

    if isinstance(error, (IntegrityError, DataError)):
        target = meta.get("column_name") or meta.get("constraint_name")
        return StoreConstraintError(message, fields=[target] if target else [], code=code, meta=meta)
    return StoreUnavailableError(message or type(error).__name__, code=code, meta=meta)


class ReadingService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_reading(self, reading_data: ReadingCreate) -> ReadingResponse:
        db_reading = ReadingModel(**reading_data.model_dump())
        try:
            self.db.add(db_reading)
            await self.db.commit()
            await self.db.refresh(db_reading)
        except (SQLAlchemyError, OSError) as e:
            await self._rollback()
            raise translate_store_error(e) from e
        return ReadingResponse.model_validate(db_reading)

    async def get_recent_readings(self, node: Optional[SensorType] = None, limit: int = 10) -> List[ReadingResponse]:
        query = select(ReadingModel)
        if node is not None:
            query = query.where(ReadingModel.node == node)
        query = query.order_by(ReadingModel.created_at.desc(), ReadingModel.id.desc()).limit(limit)

        try:
            result = await self.db.execute(query)
            readings = result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            raise translate_store_error(e) from e
        return [ReadingResponse.model_validate(r) for r in readings]

    async def _rollback(self):
        try:
            await self.db.rollback()
        except (SQLAlchemyError, OSError):
            console.exception("Rollback failed after store error")
