"""Search-and-paginate state machine shared by the gallery and admin views.

The controller has a single state with two orthogonal fields, the query
and the page.  Every transition runs synchronously and returns the fresh
``PageResult`` so a renderer can redraw immediately.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, Optional, TypeVar

from application.schemas.pagination import (
    ADMIN_PAGE_SIZE,
    GALLERY_PAGE_SIZE,
    PageResult,
    ViewState,
)
from application.services.paged_view import PagedView
from application.services.search_filter import (
    NAME_AND_URL_FIELDS,
    NAME_FIELDS,
    SearchFilter,
)

T = TypeVar("T")


class ListController(Generic[T]):
    """Feeds SearchFilter output into a PagedView."""

    def __init__(
        self,
        items: Sequence[T],
        page_size: int,
        search_filter: Optional[SearchFilter] = None,
        query: str = "",
    ) -> None:
        self._items = items
        self._filter = search_filter or SearchFilter()
        self._query = query
        self._paged = PagedView[T](page_size)
        self._filtered = self._filter.apply(self._items, self._query)

    # -- read side ----------------------------------------------------------

    @property
    def items(self) -> Sequence[T]:
        return self._items

    @property
    def filtered_items(self) -> Sequence[T]:
        return self._filtered

    @property
    def state(self) -> ViewState:
        return ViewState(
            query=self._query,
            current_page=self._paged.current_page,
            page_size=self._paged.page_size,
        )

    @property
    def result(self) -> PageResult[T]:
        return self._paged.compute(self._filtered)

    @property
    def total_pages(self) -> int:
        return self.result.total_pages

    # -- transitions --------------------------------------------------------

    def on_search(self, query: str) -> PageResult[T]:
        """Apply a new query and return to page 1."""
        self._query = query
        self._filtered = self._filter.apply(self._items, query)
        self._paged.set_current_page(1)
        return self.result

    def on_page_change(self, requested_page: int) -> PageResult[T]:
        """Move to *requested_page*, clamped into the current page range."""
        last_page = max(1, self.total_pages)
        self._paged.set_current_page(max(1, min(requested_page, last_page)))
        return self.result

    def next_page(self) -> PageResult[T]:
        return self.on_page_change(self._paged.current_page + 1)

    def previous_page(self) -> PageResult[T]:
        return self.on_page_change(self._paged.current_page - 1)

    def on_external_list_change(self, items: Sequence[T]) -> PageResult[T]:
        """Replace the source list, keeping the query and the page if still valid."""
        self._items = items
        self._filtered = self._filter.apply(items, self._query)
        last_page = max(1, self.total_pages)
        if self._paged.current_page > last_page:
            self._paged.set_current_page(last_page)
        return self.result


def admin_list_controller(
    items: Sequence[T], page_size: int = ADMIN_PAGE_SIZE
) -> ListController[T]:
    """Admin table: 10 rows per page, query matched against name and url."""
    return ListController(items, page_size, SearchFilter(NAME_AND_URL_FIELDS))


def gallery_list_controller(
    items: Sequence[T], page_size: int = GALLERY_PAGE_SIZE
) -> ListController[T]:
    """Public gallery: 20 cards per page, query matched against name only."""
    return ListController(items, page_size, SearchFilter(NAME_FIELDS))
