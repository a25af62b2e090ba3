from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from gas_telemetry.database.connection import get_db_async
from gas_telemetry.crud.reading import ReadingService
from gas_telemetry.errors import StoreConstraintError, StoreError, ValidationError
from gas_telemetry.handlers import IngestionHandler, QueryHandler
from gas_telemetry.schema.reading import ErrorResponse, IngestResponse, ReadingListResponse

router = APIRouter(prefix="/api/status", tags=["Status"])

INGEST_SUCCESS = "Status updated successfully"
CONSTRAINT_ERROR = (
    "Database constraint violation. The database schema may not match the reading model. "
    "Please run migrations."
)
MIGRATION_HINT = "Run pending migrations against the Sensor table"


def get_reading_store(db: AsyncSession = Depends(get_db_async)) -> ReadingService:
    return ReadingService(db)


def _error(status_code: int, error: str, **extra) -> JSONResponse:
    body = ErrorResponse(error=error, **extra).model_dump(exclude_unset=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post(
    "",
    response_model=IngestResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_reading(request: Request, store=Depends(get_reading_store)):
    try:
        payload = await request.json()
    except ValueError:
        return _error(400, "Request body must be a JSON object with node, mq135 and mq2")

    handler = IngestionHandler(store)
    try:
        sensor = await handler.submit(payload)
    except ValidationError as e:
        return _error(400, e.message)
    except StoreConstraintError as e:
        return _error(400, CONSTRAINT_ERROR, details=e.fields or "Unknown field", hint=MIGRATION_HINT)
    except StoreError as e:
        return _error(500, "Internal Server Error", details=e.message, code=e.code)

    return IngestResponse(message=INGEST_SUCCESS, sensor=sensor)


@router.get(
    "",
    response_model=ReadingListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def read_status(node: Optional[str] = Query(None), store=Depends(get_reading_store)):
    handler = QueryHandler(store)
    try:
        sensors = await handler.recent(node)
    except StoreError:
        return _error(500, "Internal Server Error")
    return ReadingListResponse(sensors=sensors)
