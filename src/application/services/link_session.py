"""View session for the admin table and the public gallery.

A ``LinkSession`` owns one ``ListController`` plus the row selection used
for bulk delete.  The API client and the notification callback are both
injected, so a session never reaches for a process-wide connection or
toast channel.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Optional, Protocol

from domain.exceptions import (
    LinkNotFoundError,
    LinkTransportError,
    LinkValidationError,
)
from domain.models.link import LinkRecord

from application.schemas.pagination import (
    ADMIN_PAGE_SIZE,
    GALLERY_PAGE_SIZE,
    PageResult,
    ViewState,
)
from application.services.list_controller import ListController
from application.services.search_filter import (
    NAME_AND_URL_FIELDS,
    NAME_FIELDS,
    SearchFilter,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Ports
# ---------------------------------------------------------------------------

class LinkApiClient(Protocol):
    """Port: the remote app-links API."""

    async def fetch_all_links(self) -> list[LinkRecord]: ...

    async def create_link(self, name: str, url: str) -> LinkRecord: ...

    async def update_link(self, link_id: int, name: str, url: str) -> LinkRecord: ...

    async def delete_links(self, link_ids: Iterable[int]) -> list[LinkRecord]: ...


class NotificationLevel(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    title: str
    message: str


Notifier = Callable[[Notification], None]


class SessionStatus(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

class LinkSession:
    """Per-view state: list, search, page, selection and load status."""

    def __init__(
        self,
        client: LinkApiClient,
        notify: Notifier,
        *,
        page_size: int = ADMIN_PAGE_SIZE,
        search_fields: Sequence[str] = NAME_AND_URL_FIELDS,
    ) -> None:
        self._client = client
        self._notify = notify
        self._controller: ListController[LinkRecord] = ListController(
            [], page_size, SearchFilter(search_fields)
        )
        self._selected: set[int] = set()
        self.status = SessionStatus.IDLE
        self.error: Optional[str] = None

    # -- read side ----------------------------------------------------------

    @property
    def controller(self) -> ListController[LinkRecord]:
        return self._controller

    @property
    def state(self) -> ViewState:
        return self._controller.state

    @property
    def page(self) -> PageResult[LinkRecord]:
        return self._controller.result

    @property
    def selected_ids(self) -> frozenset[int]:
        return frozenset(self._selected)

    # -- loading ------------------------------------------------------------

    async def load(self) -> None:
        """Fetch the full list; a transport failure leaves the view in ERROR."""
        self.status = SessionStatus.LOADING
        try:
            links = await self._client.fetch_all_links()
        except LinkTransportError as exc:
            logger.warning("Failed to fetch links: %s", exc.detail)
            self.status = SessionStatus.ERROR
            self.error = exc.detail
            return
        self._controller.on_external_list_change(links)
        known = {link.id for link in links}
        self._selected &= known
        self.status = SessionStatus.READY
        self.error = None

    async def retry(self) -> None:
        await self.load()

    # -- search & paging ----------------------------------------------------

    def search(self, query: str) -> PageResult[LinkRecord]:
        return self._controller.on_search(query)

    def change_page(self, page: int) -> PageResult[LinkRecord]:
        return self._controller.on_page_change(page)

    def next_page(self) -> PageResult[LinkRecord]:
        return self._controller.next_page()

    def previous_page(self) -> PageResult[LinkRecord]:
        return self._controller.previous_page()

    # -- selection ----------------------------------------------------------

    def toggle_selection(self, link_id: int) -> None:
        if link_id in self._selected:
            self._selected.discard(link_id)
        else:
            self._selected.add(link_id)

    def select_page(self) -> None:
        """Select every row on the current page."""
        self._selected.update(link.id for link in self.page.current_items)

    def deselect_page(self) -> None:
        """Drop every row on the current page from the selection."""
        self._selected.difference_update(link.id for link in self.page.current_items)

    def toggle_page_selection(self) -> None:
        """Header checkbox: deselect the page if all of it is selected, else select it."""
        page_ids = {link.id for link in self.page.current_items}
        if page_ids and page_ids <= self._selected:
            self.deselect_page()
        else:
            self.select_page()

    def clear_selection(self) -> None:
        self._selected.clear()

    # -- mutations ----------------------------------------------------------

    def _fail(self, message: str) -> bool:
        self._notify(Notification(NotificationLevel.ERROR, "Error", message))
        return False

    def _succeed(self, message: str) -> None:
        self._notify(Notification(NotificationLevel.SUCCESS, "Success", message))

    def _transport_failed(self, exc: LinkTransportError) -> bool:
        logger.warning("Link request failed: %s", exc.detail)
        self.status = SessionStatus.ERROR
        self.error = exc.detail
        return False

    async def create_link(self, name: str, url: str) -> bool:
        if not name or not url:
            return self._fail("Name and URL are required")
        try:
            await self._client.create_link(name, url)
        except LinkValidationError as exc:
            return self._fail(exc.detail)
        except LinkTransportError as exc:
            return self._transport_failed(exc)
        self._succeed("Link created successfully")
        await self.load()
        return True

    async def update_link(self, link_id: int, name: str, url: str) -> bool:
        if link_id < 1 or not name or not url:
            return self._fail("ID, Name and URL are required")
        try:
            await self._client.update_link(link_id, name, url)
        except (LinkNotFoundError, LinkValidationError) as exc:
            return self._fail(exc.detail)
        except LinkTransportError as exc:
            return self._transport_failed(exc)
        self._succeed("Link updated successfully")
        await self.load()
        return True

    async def delete_links(self, link_ids: Optional[Iterable[int]] = None) -> bool:
        """Delete *link_ids*, or the current selection when omitted."""
        ids = set(self._selected if link_ids is None else link_ids)
        if not ids:
            return self._fail("No links selected")
        try:
            await self._client.delete_links(ids)
        except (LinkNotFoundError, LinkValidationError) as exc:
            return self._fail(exc.detail)
        except LinkTransportError as exc:
            return self._transport_failed(exc)
        self._selected -= ids
        self._succeed("Links deleted successfully")
        await self.load()
        return True


def admin_session(
    client: LinkApiClient, notify: Notifier, page_size: int = ADMIN_PAGE_SIZE
) -> LinkSession:
    return LinkSession(client, notify, page_size=page_size, search_fields=NAME_AND_URL_FIELDS)


def gallery_session(
    client: LinkApiClient, notify: Notifier, page_size: int = GALLERY_PAGE_SIZE
) -> LinkSession:
    return LinkSession(client, notify, page_size=page_size, search_fields=NAME_FIELDS)
