from .status import get_reading_store, router as status_router

__all__ = ["get_reading_store", "status_router"]
