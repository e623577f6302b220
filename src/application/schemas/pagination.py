"""Pagination value objects shared by the gallery and admin list views.

``ViewState`` is the ephemeral per-session state (query and page) and
``PageResult`` is the read-only derivation a renderer consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")

ADMIN_PAGE_SIZE: int = 10
GALLERY_PAGE_SIZE: int = 20


@dataclass(frozen=True)
class ViewState:
    """Immutable snapshot of a list view's query and page.

    ``current_page`` is 1-based.
    """

    query: str = ""
    current_page: int = 1
    page_size: int = ADMIN_PAGE_SIZE


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of an ordered item list, with its display bounds.

    ``start_index`` and ``end_index`` are 1-based and inclusive, suitable
    for "Showing 11-20 of 25" style captions.  Both are 0 for an empty list.
    """

    current_items: List[T] = field(default_factory=list)
    start_index: int = 0
    end_index: int = 0
    total_pages: int = 0
    current_page: int = 1
    page_size: int = ADMIN_PAGE_SIZE
    total_items: int = 0

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def previous_disabled(self) -> bool:
        return not self.has_previous

    @property
    def next_disabled(self) -> bool:
        # Also disabled on an empty list, where total_pages is 0.
        return not self.has_next
