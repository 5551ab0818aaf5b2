# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ramplo.config import AUTH_EMAIL_HEADER
from ramplo.db.mongo import get_database
from ramplo.main import app

from .fakes import FakeDatabase


@pytest.fixture()
def db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture()
def client(db: FakeDatabase):
    """
    TestClient wired to the in-memory database.

    Used without a context manager so startup hooks (Mongo ping, scheduler)
    never run.
    """

    async def override_database():
        return db

    app.dependency_overrides[get_database] = override_database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers() -> dict[str, str]:
    return {AUTH_EMAIL_HEADER: "new.lo@example.com"}


@pytest.fixture()
def onboarded(client: TestClient, auth_headers: dict[str, str]) -> dict[str, str]:
    resp = client.post(
        "/api/onboarding",
        json={"first_name": "Dana", "experience_level": "new"},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    return auth_headers
