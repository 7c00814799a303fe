"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- An in-memory MongoDB collection (mongomock)
- FastAPI test client wired to that collection
- Sample job data
"""

from datetime import datetime, timedelta, timezone

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core.database import get_collection
from main import app


@pytest.fixture
def mongo_client():
    """
    In-memory stand-in for the MongoDB server, fresh for each test.
    """
    client = mongomock.MongoClient(tz_aware=True)
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def collection(mongo_client):
    return mongo_client["jobs"]["jobs"]


@pytest.fixture
def client(collection):
    """
    FastAPI test client with overridden collection dependency.

    Not entered as a context manager, so the lifespan (and the real
    MongoDB connection it opens) never runs.
    """
    app.dependency_overrides[get_collection] = lambda: collection

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Go Developer",
        "company": "Acme",
        "status": "Applied"
    }


class FakeClock:
    """Controllable replacement for utcnow()"""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **delta):
        self.now = self.now + timedelta(**delta)


@pytest.fixture
def clock(monkeypatch):
    """
    Freeze the time used for created_at/updated_at.
    """
    fake = FakeClock(datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc))
    monkeypatch.setattr("app.models.job.utcnow", fake)
    monkeypatch.setattr("app.crud.job.utcnow", fake)
    return fake
