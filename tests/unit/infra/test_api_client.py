"""Tests for the async HttpLinkClient against a stubbed transport."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from domain.exceptions import LinkNotFoundError, LinkTransportError, LinkValidationError
from domain.models.link import LinkRecord
from infrastructure.api_client import HttpLinkClient

BASE_URL = "http://links.test"


def _client(handler) -> HttpLinkClient:
    return HttpLinkClient(BASE_URL, timeout=1.0, transport=httpx.MockTransport(handler))


def _problem(status: int, detail: str, **extra) -> httpx.Response:
    body = {"type": "about:blank", "title": "x", "status": status, "detail": detail, **extra}
    return httpx.Response(status, json=body, headers={"content-type": "application/problem+json"})


class TestSuccessfulCalls:

    def test_fetch_all_links(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            return httpx.Response(200, json=[{"id": 1, "name": "A", "url": "https://a"}])

        links = asyncio.run(_client(handler).fetch_all_links())
        assert links == [LinkRecord(1, "A", "https://a")]
        assert seen == {"method": "GET", "path": "/api/app-links"}

    def test_create_posts_name_and_url(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/app-links/create"
            assert json.loads(request.content) == {"name": "Docs", "url": "https://docs"}
            return httpx.Response(200, json={"id": 9, "name": "Docs", "url": "https://docs"})

        link = asyncio.run(_client(handler).create_link("Docs", "https://docs"))
        assert link.id == 9

    def test_update_posts_id(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/app-links/update"
            body = json.loads(request.content)
            return httpx.Response(200, json=body)

        link = asyncio.run(_client(handler).update_link(4, "N", "https://n"))
        assert link == LinkRecord(4, "N", "https://n")

    def test_delete_posts_sorted_ids(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/app-links/delete"
            ids = json.loads(request.content)["ids"]
            assert ids == [2, 5]
            return httpx.Response(200, json=[{"id": i, "name": f"L{i}", "url": "u"} for i in ids])

        deleted = asyncio.run(_client(handler).delete_links({5, 2}))
        assert [link.id for link in deleted] == [2, 5]

    def test_trailing_slash_in_base_url(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/app-links"
            return httpx.Response(200, json=[])

        client = HttpLinkClient(BASE_URL + "/", transport=httpx.MockTransport(handler))
        assert asyncio.run(client.fetch_all_links()) == []


class TestErrorMapping:

    def test_404_uses_missing_ids_from_problem(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return _problem(404, "Link not found: 6", missing_ids=[6])

        with pytest.raises(LinkNotFoundError) as info:
            asyncio.run(_client(handler).delete_links([5, 6]))
        assert info.value.missing_ids == [6]

    def test_404_falls_back_to_requested_id(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="not found")

        with pytest.raises(LinkNotFoundError) as info:
            asyncio.run(_client(handler).update_link(999, "x", "y"))
        assert info.value.missing_ids == [999]

    def test_422_maps_to_validation_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return _problem(422, "name is required")

        with pytest.raises(LinkValidationError) as info:
            asyncio.run(_client(handler).create_link(" ", "https://x"))
        assert "name is required" in info.value.detail

    def test_500_maps_to_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return _problem(500, "Link storage failure: OperationalError")

        with pytest.raises(LinkTransportError) as info:
            asyncio.run(_client(handler).fetch_all_links())
        assert "500" in info.value.detail

    def test_connection_error_maps_to_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(LinkTransportError) as info:
            asyncio.run(_client(handler).fetch_all_links())
        assert "connection refused" in info.value.detail


class TestMalformedResponses:

    def test_non_json_body_maps_to_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>proxy</html>")

        with pytest.raises(LinkTransportError) as info:
            asyncio.run(_client(handler).fetch_all_links())
        assert "not JSON" in info.value.detail

    def test_record_missing_field_maps_to_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"id": 3, "name": "No url"})

        with pytest.raises(LinkTransportError):
            asyncio.run(_client(handler).create_link("No url", "https://x"))

    def test_non_numeric_id_maps_to_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"id": "abc", "name": "A", "url": "u"}])

        with pytest.raises(LinkTransportError):
            asyncio.run(_client(handler).fetch_all_links())

    def test_object_instead_of_list_maps_to_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"items": []})

        with pytest.raises(LinkTransportError) as info:
            asyncio.run(_client(handler).fetch_all_links())
        assert "dict" in info.value.detail
