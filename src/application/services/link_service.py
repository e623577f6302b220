"""Application service that orchestrates app-link CRUD operations.

``LinkService`` sits between the presentation layer and the storage
adapters.  It validates input, enforces the all-or-nothing bulk-delete
rule and logs every mutation without leaking storage details upward.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional, Protocol

from domain.exceptions import LinkNotFoundError, LinkValidationError
from domain.models.link import LinkRecord

from application.services.search_filter import NAME_AND_URL_FIELDS, SearchFilter

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Repository port interface (dependency-inversion)
# ---------------------------------------------------------------------------

class LinkRepository(Protocol):
    """Port: persistence operations for :class:`LinkRecord` rows."""

    def list_all(self) -> list[LinkRecord]: ...

    def get_by_id(self, link_id: int) -> Optional[LinkRecord]: ...

    def get_many(self, link_ids: Iterable[int]) -> list[LinkRecord]: ...

    def add(self, name: str, url: str) -> LinkRecord: ...

    def update(self, link: LinkRecord) -> LinkRecord: ...

    def delete_many(self, link_ids: Iterable[int]) -> list[LinkRecord]: ...


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class LinkService:
    """Create, list, update and bulk-delete app links."""

    def __init__(
        self,
        link_repo: LinkRepository,
        search_filter: Optional[SearchFilter] = None,
    ) -> None:
        self._link_repo = link_repo
        self._search = search_filter or SearchFilter(NAME_AND_URL_FIELDS)

    # -- helpers ----------------------------------------------------------

    @staticmethod
    def _require(field: str, value: Optional[str]) -> str:
        cleaned = (value or "").strip()
        if not cleaned:
            raise LinkValidationError(field=field)
        return cleaned

    # -- public API -------------------------------------------------------

    def list_links(self, query: str = "") -> list[LinkRecord]:
        """Return every link in storage order, optionally filtered by *query*."""
        return list(self._search.apply(self._link_repo.list_all(), query))

    def get_link(self, link_id: int) -> LinkRecord:
        link = self._link_repo.get_by_id(link_id)
        if link is None:
            raise LinkNotFoundError(ids=[link_id])
        return link

    def create_link(self, name: str, url: str) -> LinkRecord:
        name = self._require("name", name)
        url = self._require("url", url)
        link = self._link_repo.add(name=name, url=url)
        logger.info("Link %s created (%s)", link.id, link.url)
        return link

    def update_link(self, link_id: int, name: str, url: str) -> LinkRecord:
        name = self._require("name", name)
        url = self._require("url", url)
        link = self.get_link(link_id)
        link.name = name
        link.url = url
        link = self._link_repo.update(link)
        logger.info("Link %s updated", link.id)
        return link

    def delete_links(self, link_ids: Iterable[int]) -> list[LinkRecord]:
        """Delete every id in *link_ids*, or none of them.

        Raises :class:`LinkNotFoundError` listing the absent ids when any
        requested id does not exist; storage is left untouched in that case.
        """
        requested = set(link_ids)
        if not requested:
            raise LinkValidationError(field="ids", reason="must not be empty")

        found = {link.id for link in self._link_repo.get_many(requested)}
        missing = requested - found
        if missing:
            raise LinkNotFoundError(ids=missing)

        deleted = self._link_repo.delete_many(requested)
        logger.info("Deleted %d links: %s", len(deleted), sorted(requested))
        return deleted
