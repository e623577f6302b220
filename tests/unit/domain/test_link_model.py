"""Tests for src/domain/models/link.py"""

from domain.models import THUMBNAIL_URL_TEMPLATE, LinkRecord


class TestLinkRecord:
    def test_defaults(self):
        link = LinkRecord()
        assert link.id == 0
        assert link.name == ""
        assert link.url == ""

    def test_name_and_url_are_mutable(self):
        link = LinkRecord(id=3, name="Old", url="https://old.example")
        link.name = "New"
        link.url = "https://new.example"
        assert link == LinkRecord(id=3, name="New", url="https://new.example")

    def test_thumbnail_seeded_by_id(self):
        link = LinkRecord(id=7, name="Seven", url="https://seven.example")
        assert link.thumbnail == "https://picsum.photos/seed/7/300/200"
        assert link.thumbnail == THUMBNAIL_URL_TEMPLATE.format(id=7)

    def test_equality_is_by_value(self):
        assert LinkRecord(1, "a", "b") == LinkRecord(1, "a", "b")
        assert LinkRecord(1, "a", "b") != LinkRecord(2, "a", "b")
