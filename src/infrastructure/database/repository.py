"""
SQLAlchemy implementation of the :class:`LinkRepository` port.

Every method runs in its own transaction opened from the injected
session factory.  Driver and constraint failures surface as
:class:`LinkStorageError` so the API answers with a 500 problem document.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable
from typing import Optional, ParamSpec, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from domain.exceptions import LinkStorageError
from domain.models.link import LinkRecord

from .models import AppLinkModel

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def _storage_errors(func: Callable[P, R]) -> Callable[P, R]:
    """Translate ``SQLAlchemyError`` into :class:`LinkStorageError`."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except SQLAlchemyError as exc:
            logger.exception("Storage failure in %s", func.__name__)
            raise LinkStorageError(reason=type(exc).__name__) from exc

    return wrapper


class SqlLinkRepository:
    """CRUD operations for :class:`AppLinkModel` (``app_links``).

    Parameters
    ----------
    session_factory:
        A :class:`sessionmaker` bound to the application engine.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    @_storage_errors
    def list_all(self) -> list[LinkRecord]:
        stmt = select(AppLinkModel).order_by(AppLinkModel.id)
        with self._session_factory() as session:
            return [row.to_domain() for row in session.scalars(stmt)]

    @_storage_errors
    def get_by_id(self, link_id: int) -> Optional[LinkRecord]:
        with self._session_factory() as session:
            row = session.get(AppLinkModel, link_id)
            return row.to_domain() if row is not None else None

    @_storage_errors
    def get_many(self, link_ids: Iterable[int]) -> list[LinkRecord]:
        stmt = (
            select(AppLinkModel)
            .where(AppLinkModel.id.in_(list(link_ids)))
            .order_by(AppLinkModel.id)
        )
        with self._session_factory() as session:
            return [row.to_domain() for row in session.scalars(stmt)]

    @_storage_errors
    def add(self, name: str, url: str) -> LinkRecord:
        with self._session_factory.begin() as session:
            row = AppLinkModel(name=name, url=url)
            session.add(row)
            session.flush()
            return row.to_domain()

    @_storage_errors
    def update(self, link: LinkRecord) -> LinkRecord:
        with self._session_factory.begin() as session:
            row = session.get(AppLinkModel, link.id)
            if row is None:
                raise LinkStorageError(reason=f"row {link.id} vanished during update")
            row.name = link.name
            row.url = link.url
            session.flush()
            return row.to_domain()

    @_storage_errors
    def delete_many(self, link_ids: Iterable[int]) -> list[LinkRecord]:
        ids = list(link_ids)
        with self._session_factory.begin() as session:
            rows = session.scalars(
                select(AppLinkModel)
                .where(AppLinkModel.id.in_(ids))
                .order_by(AppLinkModel.id)
            ).all()
            deleted = [row.to_domain() for row in rows]
            session.execute(delete(AppLinkModel).where(AppLinkModel.id.in_(ids)))
            return deleted
