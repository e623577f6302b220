"""Contract test fixtures: a fresh app on in-memory SQLite per test."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))


@pytest.fixture
def settings():
    from infrastructure.settings import AppSettings

    return AppSettings(storage_backend="sql", database_url="sqlite://", cache_max_age=120)


@pytest.fixture
def app(settings):
    from presentation.main import create_app

    return create_app(settings)


@pytest.fixture
def client(app):
    from starlette.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def seeded_client(client):
    for i in range(1, 6):
        resp = client.post(
            "/api/app-links/create",
            json={"name": f"Link {i}", "url": f"https://apps.example.com/{i}"},
        )
        assert resp.status_code == 200
    return client
