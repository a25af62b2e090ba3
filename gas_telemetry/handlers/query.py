from typing import List, Optional
from gas_telemetry.errors import StoreError
from gas_telemetry.logger import CustomLogger
from gas_telemetry.schema.reading import ReadingResponse
from gas_telemetry.utils.validation import node_from_filter

console = CustomLogger(name="query_logs")

PAGE_SIZE = 10


class QueryHandler:
    def __init__(self, store, logger: CustomLogger = console):
        self.store = store
        self.console = logger

    async def recent(self, node: Optional[str] = None) -> List[ReadingResponse]:
        """Newest readings first, at most PAGE_SIZE.

        An unknown node filter is ignored rather than rejected.
        """
        node_type = node_from_filter(node)
        if node and node_type is None:
            self.console.debug("Ignoring unknown node filter", node=node)

        try:
            return await self.store.get_recent_readings(node=node_type, limit=PAGE_SIZE)
        except StoreError as e:
            self.console.error(f"Error fetching readings: {e.message}", code=e.code, meta=e.meta, node=node)
            raise
