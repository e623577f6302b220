"""Case-insensitive substring search over link text fields."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")

NAME_FIELDS: tuple[str, ...] = ("name",)
NAME_AND_URL_FIELDS: tuple[str, ...] = ("name", "url")


class SearchFilter:
    """Keeps the items whose fields contain the query, ignoring case.

    Several fields are OR-ed together.  An empty query returns the input
    sequence itself.
    """

    def __init__(self, fields: Sequence[str] = NAME_FIELDS) -> None:
        self._fields = tuple(fields)

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def matches(self, item: Any, query: str) -> bool:
        needle = query.lower()
        for name in self._fields:
            value = getattr(item, name, None) or ""
            if needle in str(value).lower():
                return True
        return False

    def apply(self, items: Sequence[T], query: str) -> Sequence[T]:
        if not query:
            return items
        return [item for item in items if self.matches(item, query)]
