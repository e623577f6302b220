"""
SQLAlchemy 2.0+ ORM models for the App Links directory.

Schema layout
-------------
* ``app_links`` -- one row per link shown in the gallery and admin table
"""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from domain.models.link import LinkRecord


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------

class Base(DeclarativeBase):
    """Shared declarative base for every ORM model."""
    pass


# ---------------------------------------------------------------------------
# AppLinkModel
# ---------------------------------------------------------------------------

class AppLinkModel(Base):
    """A named link to an application.

    ``id`` is assigned by the database and never reused by SQLite's
    ``AUTOINCREMENT``.
    """

    __tablename__ = "app_links"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)

    def to_domain(self) -> LinkRecord:
        return LinkRecord(id=self.id, name=self.name, url=self.url)

    def __repr__(self) -> str:
        return f"<AppLink(id={self.id!r}, name={self.name!r})>"
