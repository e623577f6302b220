from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class DomainError(Exception):
    """Base class for all domain-layer exceptions.

    Carries HTTP-mapping metadata so the presentation layer can produce
    RFC 9457 Problem Details without knowing exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Domain Error",
        status_code: int = 400,
        error_type: str = "about:blank",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title
        self.status_code = status_code
        self.error_type = error_type
        self.extensions: dict[str, Any] = {}


class LinkValidationError(DomainError):
    def __init__(self, field: str = "", reason: str = "is required") -> None:
        self.field = field
        self.reason = reason
        super().__init__(
            detail=f"{field} {reason}".strip(),
            title="Invalid Link",
            status_code=422,
            error_type="https://api.app-links.example/problems/invalid-link",
        )


class LinkNotFoundError(DomainError):
    def __init__(self, ids: Iterable[int] = ()) -> None:
        self.missing_ids = sorted(set(ids))
        joined = ", ".join(str(i) for i in self.missing_ids)
        super().__init__(
            detail=f"Link not found: {joined}",
            title="Link Not Found",
            status_code=404,
            error_type="https://api.app-links.example/problems/link-not-found",
        )
        self.extensions = {"missing_ids": self.missing_ids}


class LinkStorageError(DomainError):
    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        super().__init__(
            detail=f"Link storage failure: {reason}",
            title="Storage Failure",
            status_code=500,
            error_type="https://api.app-links.example/problems/storage-failure",
        )


class LinkTransportError(DomainError):
    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        super().__init__(
            detail=f"Link service unreachable: {reason}",
            title="Upstream Unavailable",
            status_code=502,
            error_type="https://api.app-links.example/problems/transport-failure",
        )
