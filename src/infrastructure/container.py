"""Dependency injection container for the App Links directory.

Wires the storage adapter and application services together.  One
container is built per FastAPI app and stored on ``app.state``; there is
no process-wide instance.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from fastapi import Request

from application.services.link_service import LinkRepository, LinkService
from application.services.link_session import (
    LinkSession,
    Notifier,
    admin_session,
    gallery_session,
)
from infrastructure.adapters import InMemoryLinkRepository
from infrastructure.api_client import HttpLinkClient
from infrastructure.database.engine import build_engine, build_session_factory, create_schema
from infrastructure.database.repository import SqlLinkRepository
from infrastructure.settings import AppSettings, get_settings

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Owns the engine, the link repository and the link service."""

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        self.settings = settings or get_settings()
        self.engine: Optional[Engine] = None

        # Infrastructure adapters
        self.link_repo: LinkRepository
        if self.settings.storage_backend == "memory":
            self.link_repo = InMemoryLinkRepository()
        else:
            self.engine = build_engine(self.settings)
            create_schema(self.engine)
            self.link_repo = SqlLinkRepository(build_session_factory(self.engine))

        # Application services
        self.link_service = LinkService(link_repo=self.link_repo)

        logger.info(
            "ServiceContainer initialized (storage=%s)", self.settings.storage_backend
        )

    def api_client(self) -> HttpLinkClient:
        """Client for a remote app-links API, configured from settings."""
        return HttpLinkClient(
            base_url=self.settings.api_base_url,
            timeout=self.settings.api_timeout_seconds,
        )

    def admin_session(self, notify: Notifier) -> LinkSession:
        """Admin table session over the remote API, paged by ``admin_page_size``."""
        return admin_session(self.api_client(), notify, page_size=self.settings.admin_page_size)

    def gallery_session(self, notify: Notifier) -> LinkSession:
        """Public gallery session, paged by ``public_page_size``."""
        return gallery_session(self.api_client(), notify, page_size=self.settings.public_page_size)

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()


# ---------------------------------------------------------------------------
# FastAPI dependency factories
# ---------------------------------------------------------------------------


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_link_service(request: Request) -> LinkService:
    return get_container(request).link_service


def get_app_settings(request: Request) -> AppSettings:
    return get_container(request).settings
