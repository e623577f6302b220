"""Adapter implementations bridging infrastructure to application-layer ports.

Provides an in-memory :class:`LinkRepository` used by unit tests and by
``APP_STORAGE_BACKEND=memory`` deployments.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Optional

from domain.models.link import LinkRecord

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# In-memory repository adapters (swap for the SQL repository in production)
# ---------------------------------------------------------------------------

class InMemoryLinkRepository:
    """Synchronous in-memory link store.

    Ids are assigned from a monotonically increasing counter and never
    reused, mirroring ``AUTOINCREMENT``.  Records handed out are copies.
    """

    def __init__(self) -> None:
        self._store: dict[int, LinkRecord] = {}
        self._next_id = 1

    def list_all(self) -> list[LinkRecord]:
        return [replace(self._store[k]) for k in sorted(self._store)]

    def get_by_id(self, link_id: int) -> Optional[LinkRecord]:
        link = self._store.get(link_id)
        return replace(link) if link else None

    def get_many(self, link_ids: Iterable[int]) -> list[LinkRecord]:
        return [replace(self._store[i]) for i in sorted(set(link_ids)) if i in self._store]

    def add(self, name: str, url: str) -> LinkRecord:
        link = LinkRecord(id=self._next_id, name=name, url=url)
        self._store[link.id] = link
        self._next_id += 1
        return replace(link)

    def update(self, link: LinkRecord) -> LinkRecord:
        self._store[link.id] = replace(link)
        return replace(link)

    def delete_many(self, link_ids: Iterable[int]) -> list[LinkRecord]:
        deleted = []
        for link_id in sorted(set(link_ids)):
            link = self._store.pop(link_id, None)
            if link is not None:
                deleted.append(link)
        return deleted
