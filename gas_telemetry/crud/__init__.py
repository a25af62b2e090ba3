from .reading import ReadingService, translate_store_error

__all__ = ["ReadingService", "translate_store_error"]
