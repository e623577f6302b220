"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from application.services.link_service import LinkService
from domain.models.link import LinkRecord
from infrastructure.adapters import InMemoryLinkRepository


def _numbered_links(count: int) -> list[LinkRecord]:
    """``Link 1`` .. ``Link {count}`` with matching ids and urls."""
    return [
        LinkRecord(id=i, name=f"Link {i}", url=f"https://apps.example.com/{i}")
        for i in range(1, count + 1)
    ]


@pytest.fixture
def links() -> list[LinkRecord]:
    return _numbered_links(25)


@pytest.fixture
def make_links():
    return _numbered_links


@pytest.fixture
def link_repo() -> InMemoryLinkRepository:
    return InMemoryLinkRepository()


@pytest.fixture
def seeded_repo(link_repo: InMemoryLinkRepository) -> InMemoryLinkRepository:
    for i in range(1, 6):
        link_repo.add(name=f"Link {i}", url=f"https://apps.example.com/{i}")
    return link_repo


@pytest.fixture
def link_service(seeded_repo: InMemoryLinkRepository) -> LinkService:
    return LinkService(link_repo=seeded_repo)
