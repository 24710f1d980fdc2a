"""Shared test fixtures."""

import sys
from pathlib import Path

import pytest
import respx

# Add src/ to path so tests can import farmhand
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from farmhand.core.client import RecordClient  # noqa: E402

API_URL = "https://records.test/v1"


class FakeRecordClient:
    """In-memory stand-in for RecordClient.

    Each method returns the next queued response for that method (or the
    default success envelope) and records its arguments in ``calls``.
    Queue an exception instance to have the call raise it.
    """

    def __init__(self):
        self.calls: list[tuple[str, tuple]] = []
        self.responses: dict[str, list] = {}

    def queue(self, method: str, *responses) -> None:
        self.responses.setdefault(method, []).extend(responses)

    async def _respond(self, method: str, *args) -> dict:
        self.calls.append((method, args))
        queued = self.responses.get(method)
        response = queued.pop(0) if queued else {"success": True, "data": [], "results": []}
        if isinstance(response, Exception):
            raise response
        return response

    def calls_to(self, method: str) -> list[tuple]:
        return [args for name, args in self.calls if name == method]

    async def fetch_records(self, table, fields, where=None, order_by=None):
        return await self._respond("fetch_records", table, fields, where, order_by)

    async def get_record_by_id(self, table, record_id, fields):
        return await self._respond("get_record_by_id", table, record_id, fields)

    async def create_record(self, table, records):
        return await self._respond("create_record", table, records)

    async def update_record(self, table, records):
        return await self._respond("update_record", table, records)

    async def delete_record(self, table, record_ids):
        return await self._respond("delete_record", table, record_ids)


@pytest.fixture
def fake_client():
    return FakeRecordClient()


@pytest.fixture
def client_factory(fake_client):
    """Record client factory that always hands out the fake client."""
    return lambda: fake_client


@pytest.fixture
def notifications():
    """Collected user-facing notifications; pass ``notifications.append`` as notifier."""
    return []


@pytest.fixture
def mock_records_api():
    """Mock Apper record API responses."""
    with respx.mock(base_url=API_URL) as mock:
        yield mock


@pytest.fixture
def record_client():
    return RecordClient("test-project", "test-key", base_url=API_URL, timeout=5)


@pytest.fixture
def success_results():
    """Build a mutation envelope with one successful result per record."""

    def build(*records: dict) -> dict:
        return {
            "success": True,
            "results": [{"success": True, "data": record} for record in records],
        }

    return build


@pytest.fixture
def sample_task_record():
    """Sample task_c record as returned by the backend."""
    return {
        "Id": 12,
        "Name": "Irrigate north field",
        "title_c": "Irrigate north field",
        "description_c": "Run drip lines for 2 hours",
        "due_date_c": "2026-05-02",
        "priority_c": "high",
        "completed_c": None,
        "completed_at_c": None,
        "farm_id_c": {"Id": 7, "Name": "Farm A"},
    }


@pytest.fixture
def sample_weather_records():
    """Sample weather_c records, ascending by date."""
    return [
        {
            "Id": 1,
            "Name": "Day 1",
            "condition_c": "cloudy",
            "date_c": "2026-05-01",
            "humidity_c": 64,
            "precipitation_c": 20,
            "temperature_c": '{"high":80,"low":65}',
        },
        {
            "Id": 2,
            "Name": "Day 2",
            "condition_c": None,
            "date_c": "2026-05-02",
            "humidity_c": None,
            "precipitation_c": None,
            "temperature_c": "clear",
        },
    ]
