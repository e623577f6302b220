"""Async HTTP client for the ``/api/app-links`` endpoints.

Implements the :class:`LinkApiClient` port consumed by ``LinkSession``.
Responses are mapped onto the domain exception taxonomy so the session
never has to look at status codes.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

import httpx

from domain.exceptions import LinkNotFoundError, LinkTransportError, LinkValidationError
from domain.models.link import LinkRecord

API_PREFIX = "/api/app-links"


class HttpLinkClient:
    """Thin wrapper around the app-links HTTP API.

    Parameters
    ----------
    base_url:
        Scheme and host of the API server, e.g. ``http://localhost:8000``.
    timeout:
        Per-request timeout in seconds.  No retries are attempted.
    transport:
        Optional httpx transport, used by tests to stub the network.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                resp = await client.request(method, f"{API_PREFIX}{path}", **kwargs)
        except httpx.HTTPError as exc:
            raise LinkTransportError(reason=str(exc) or type(exc).__name__) from exc

        if resp.status_code == 404:
            raise LinkNotFoundError(ids=_missing_ids(resp, kwargs.get("json")))
        if resp.status_code in (400, 422):
            raise LinkValidationError(field=_problem_detail(resp), reason="")
        if resp.is_error:
            raise LinkTransportError(reason=f"HTTP {resp.status_code}: {_problem_detail(resp)}")
        try:
            return resp.json()
        except ValueError as exc:
            raise LinkTransportError(
                reason=f"HTTP {resp.status_code}: response body is not JSON"
            ) from exc

    async def fetch_all_links(self) -> list[LinkRecord]:
        data = await self._request("GET", "")
        return _to_links(data)

    async def create_link(self, name: str, url: str) -> LinkRecord:
        data = await self._request("POST", "/create", json={"name": name, "url": url})
        return _to_link(data)

    async def update_link(self, link_id: int, name: str, url: str) -> LinkRecord:
        data = await self._request(
            "POST", "/update", json={"id": link_id, "name": name, "url": url}
        )
        return _to_link(data)

    async def delete_links(self, link_ids: Iterable[int]) -> list[LinkRecord]:
        data = await self._request("POST", "/delete", json={"ids": sorted(set(link_ids))})
        return _to_links(data)


def _to_link(data: Any) -> LinkRecord:
    try:
        return LinkRecord(id=int(data["id"]), name=data["name"], url=data["url"])
    except (KeyError, TypeError, ValueError) as exc:
        raise LinkTransportError(reason=f"malformed link in response: {data!r}") from exc


def _to_links(data: Any) -> list[LinkRecord]:
    if not isinstance(data, list):
        raise LinkTransportError(reason=f"expected a list of links, got {type(data).__name__}")
    return [_to_link(item) for item in data]


def _missing_ids(resp: httpx.Response, body: Optional[dict[str, Any]]) -> list[int]:
    try:
        problem = resp.json()
    except ValueError:
        problem = None
    if isinstance(problem, dict) and "missing_ids" in problem:
        return list(problem["missing_ids"])
    if not body:
        return []
    if "ids" in body:
        return list(body["ids"])
    if "id" in body:
        return [body["id"]]
    return []


def _problem_detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict):
        return str(body.get("detail") or body.get("title") or body)
    return str(body)
