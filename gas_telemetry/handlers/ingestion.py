from typing import Any
from gas_telemetry.errors import StoreConstraintError, StoreError
from gas_telemetry.logger import CustomLogger
from gas_telemetry.schema.reading import ReadingResponse
from gas_telemetry.utils.validation import normalize_submission

console = CustomLogger(name="ingest_logs")


class IngestionHandler:
    """Validates one node submission and writes it to the reading store.

    Validation failures never reach the store. Store failures are logged with
    their diagnostics and re-raised for the route to translate; nothing is
    retried here, nodes resubmit on their own schedule.
    """

    def __init__(self, store, logger: CustomLogger = console):
        self.store = store
        self.console = logger

    async def submit(self, payload: Any) -> ReadingResponse:
        reading = normalize_submission(payload)
        data = reading.model_dump(mode="json")
        self.console.log("Creating reading", data=data)

        try:
            return await self.store.create_reading(reading)
        except StoreConstraintError as e:
            self.console.error(
                "Reading rejected by store constraint",
                code=e.code,
                fields=e.fields,
                meta=e.meta,
                payload=payload,
            )
            raise
        except StoreError as e:
            self.console.error(
                f"Error creating reading: {e.message}",
                code=e.code,
                meta=e.meta,
                payload=payload,
            )
            raise
