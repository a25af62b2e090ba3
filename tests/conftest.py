"""Shared fixtures: an in-memory reading store and an API client wired to it."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from gas_telemetry.main import app
from gas_telemetry.models.reading import ReadingModel, SensorType
from gas_telemetry.routes import get_reading_store
from gas_telemetry.schema.reading import ReadingCreate, ReadingResponse


class InMemoryReadingStore:
    """Stand-in for the Postgres store: assigns ids and strictly increasing timestamps."""

    def __init__(self):
        self.rows: List[ReadingModel] = []
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)
        self.create_calls = 0
        self.find_calls = []

    async def create_reading(self, reading_data: ReadingCreate) -> ReadingResponse:
        self.create_calls += 1
        self._clock += timedelta(seconds=1)
        row = ReadingModel(
            id=uuid4().hex,
            created_at=self._clock,
            updated_at=self._clock,
            **reading_data.model_dump(),
        )
        self.rows.append(row)
        return ReadingResponse.model_validate(row)

    async def get_recent_readings(self, node: Optional[SensorType] = None, limit: int = 10) -> List[ReadingResponse]:
        self.find_calls.append({"node": node, "limit": limit})
        rows = [r for r in self.rows if node is None or r.node == node]
        rows.sort(key=lambda r: r.created_at, reverse=True)
        return [ReadingResponse.model_validate(r) for r in rows[:limit]]


class FailingReadingStore:
    """Every call raises the configured store error."""

    def __init__(self, error: Exception):
        self.error = error
        self.calls = 0

    async def create_reading(self, reading_data):
        self.calls += 1
        raise self.error

    async def get_recent_readings(self, node=None, limit=10):
        self.calls += 1
        raise self.error


@pytest.fixture
def store() -> InMemoryReadingStore:
    return InMemoryReadingStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_reading_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client_for():
    """Build a client around any store object."""
    def build(custom_store):
        app.dependency_overrides[get_reading_store] = lambda: custom_store
        return TestClient(app)

    yield build
    app.dependency_overrides.clear()
