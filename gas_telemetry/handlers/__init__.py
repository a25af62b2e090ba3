from .ingestion import IngestionHandler
from .query import PAGE_SIZE, QueryHandler

__all__ = ["IngestionHandler", "PAGE_SIZE", "QueryHandler"]
