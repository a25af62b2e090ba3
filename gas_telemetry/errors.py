from typing import List, Optional


class TelemetryError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TelemetryError):
    """Client input is missing, malformed or outside the known domain."""


class StoreError(TelemetryError):
    """The record store failed to create or find readings."""

    def __init__(self, message: str, code: Optional[str] = None, meta: Optional[dict] = None):
        super().__init__(message)
        self.code = code
        self.meta = meta or {}


class StoreConstraintError(StoreError):
    """The store rejected a write because the table does not match the reading shape."""

    def __init__(self, message: str, fields: Optional[List[str]] = None, code: Optional[str] = None, meta: Optional[dict] = None):
        super().__init__(message, code=code, meta=meta)
        self.fields = fields or []


class StoreUnavailableError(StoreError):
    pass
