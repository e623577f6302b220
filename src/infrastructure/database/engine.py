"""
SQLAlchemy engine and session-factory setup.

The engine is built from :class:`AppSettings` and owned by the service
container; there is no module-level engine.  In-memory SQLite URLs get a
``StaticPool`` so every session (and every test-client thread) sees the
same database.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from infrastructure.settings import AppSettings


def _is_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def build_engine(settings: AppSettings) -> Engine:
    """Create a synchronous :class:`Engine` for ``settings.database_url``."""
    url = settings.database_url
    kwargs: dict = {"echo": settings.db_echo, "pool_pre_ping": True}

    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(url):
            kwargs["poolclass"] = StaticPool

    return sa_create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory whose objects stay readable after commit."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    """Create the ``app_links`` table if it does not exist yet."""
    Base.metadata.create_all(engine)
