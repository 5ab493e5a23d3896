"""
Shared fixtures: a fake Sheets service, a controllable clock and a test app.
"""

import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import settings
from dependencies import get_client_factory
from services.cache import TTLCache
from services.sheets_client import Available, SheetsClient, Unavailable


class FakeSheetsService:
    """Stands in for googleapiclient's spreadsheets().values().get().execute() chain."""

    def __init__(self, rows=None, error=None):
        self.rows = rows
        self.error = error
        self.calls = []

    def spreadsheets(self):
        return self

    def values(self):
        return self

    def get(self, **kwargs):
        self.calls.append(kwargs)
        return self

    def execute(self):
        if self.error is not None:
            raise self.error
        if self.rows is None:
            return {"range": "Sheet1!A1:B1000", "majorDimension": "ROWS"}
        return {"values": self.rows}


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sheet_cache(clock):
    return TTLCache(default_ttl_seconds=300, clock=clock)


@pytest.fixture(autouse=True)
def sheet_settings(monkeypatch):
    monkeypatch.setattr(settings, "sheet_id", "sheet-123")
    monkeypatch.setattr(settings, "sheet_range", "Sheet1!A:B")
    monkeypatch.setattr(settings, "google_credentials", None)
    return settings


@pytest.fixture
def service():
    return FakeSheetsService(rows=[["Date", "Price"], ["2024-01-01", "100"]])


@pytest.fixture
def factory_calls():
    return []


@pytest.fixture
def app(sheet_cache, service, factory_calls):
    app = create_app(sheet_cache=sheet_cache)

    def factory():
        factory_calls.append(1)
        return Available(SheetsClient(service))

    app.dependency_overrides[get_client_factory] = lambda: factory
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def unavailable_client(sheet_cache, factory_calls):
    app = create_app(sheet_cache=sheet_cache)

    def factory():
        factory_calls.append(1)
        return Unavailable("GOOGLE_CREDENTIALS is not set")

    app.dependency_overrides[get_client_factory] = lambda: factory
    return TestClient(app)
