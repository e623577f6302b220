from domain.models.link import THUMBNAIL_URL_TEMPLATE, LinkRecord

__all__ = [
    "THUMBNAIL_URL_TEMPLATE",
    "LinkRecord",
]
