from .reading import (
    ErrorResponse,
    IngestResponse,
    ReadingCreate,
    ReadingListResponse,
    ReadingResponse,
)

__all__ = [
    "ErrorResponse",
    "IngestResponse",
    "ReadingCreate",
    "ReadingListResponse",
    "ReadingResponse",
]
