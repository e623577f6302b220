"""Page-slice derivation for ordered item lists.

``compute`` is the pure form.  ``PagedView`` wraps it with an owned page
number so a view can hold its position between renders.  Neither clamps
the page: callers that accept user input clamp first (see
``ListController.on_page_change``).
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Generic, TypeVar

from application.schemas.pagination import PageResult

T = TypeVar("T")


def total_pages_for(total_items: int, page_size: int) -> int:
    """Number of pages needed for *total_items* (0 for an empty list)."""
    if total_items <= 0:
        return 0
    return math.ceil(total_items / page_size)


def compute(items: Sequence[T], page_size: int, current_page: int) -> PageResult[T]:
    """Slice *items* for *current_page* and derive its display bounds."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")

    total = len(items)
    offset = (current_page - 1) * page_size
    start_index = offset + 1 if total else 0
    end_index = min(current_page * page_size, total)

    return PageResult[T](
        current_items=list(items[offset : offset + page_size]),
        start_index=start_index,
        end_index=end_index,
        total_pages=total_pages_for(total, page_size),
        current_page=current_page,
        page_size=page_size,
        total_items=total,
    )


class PagedView(Generic[T]):
    """Holds the current page number for one list view."""

    def __init__(self, page_size: int, current_page: int = 1) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._page_size = page_size
        self._current_page = current_page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def current_page(self) -> int:
        return self._current_page

    def set_current_page(self, page: int) -> None:
        self._current_page = page

    def compute(self, items: Sequence[T]) -> PageResult[T]:
        return compute(items, self._page_size, self._current_page)
