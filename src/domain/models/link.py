from __future__ import annotations

from dataclasses import dataclass

THUMBNAIL_URL_TEMPLATE = "https://picsum.photos/seed/{id}/300/200"


@dataclass
class LinkRecord:
    id: int = 0
    name: str = ""
    url: str = ""

    @property
    def thumbnail(self) -> str:
        """Gallery thumbnail URL, seeded by the record id."""
        return THUMBNAIL_URL_TEMPLATE.format(id=self.id)
