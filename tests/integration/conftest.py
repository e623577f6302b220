"""Integration test fixtures: a real SQLAlchemy engine on in-memory SQLite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))


@pytest.fixture
def sql_settings():
    from infrastructure.settings import AppSettings

    return AppSettings(storage_backend="sql", database_url="sqlite://")


@pytest.fixture
def sync_engine(sql_settings):
    """Create a synchronous SQLAlchemy engine with the app_links table."""
    from infrastructure.database.engine import build_engine, create_schema

    engine = build_engine(sql_settings)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sync_engine):
    from infrastructure.database.engine import build_session_factory

    return build_session_factory(sync_engine)


@pytest.fixture
def sql_repo(session_factory):
    from infrastructure.database.repository import SqlLinkRepository

    return SqlLinkRepository(session_factory)
