"""
Pydantic v2 request/response schemas for the App Links API.

Error responses follow RFC 9457 Problem Details.  ``title`` is accepted as
an input alias for ``name`` because the admin form posts it under that key.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Base / shared
# ---------------------------------------------------------------------------


class _LinkModel(BaseModel):
    """Base model: snake_case fields, readable from ORM/dataclass attributes."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# RFC 9457 Problem Details error response
# ---------------------------------------------------------------------------


class ErrorResponse(_LinkModel):
    """Error response following RFC 9457 Problem Details for HTTP APIs.

    See https://www.rfc-editor.org/rfc/rfc9457
    """

    type: str = Field(
        default="about:blank",
        description="A URI reference that identifies the problem type.",
        examples=["https://api.app-links.example/problems/link-not-found"],
    )
    title: str = Field(
        ...,
        description="A short, human-readable summary of the problem type.",
        examples=["Link Not Found"],
    )
    status: int = Field(..., description="The HTTP status code.", examples=[404])
    detail: str = Field(
        ...,
        description="A human-readable explanation specific to this occurrence.",
        examples=["Link not found: 6"],
    )
    instance: str | None = Field(
        default=None,
        description="The request path that produced the problem.",
        examples=["/api/app-links/delete"],
    )
    errors: list[dict[str, Any]] | None = Field(
        default=None,
        description="Field-level validation failures, when applicable.",
    )
    missing_ids: list[int] | None = Field(
        default=None,
        description="Requested link ids that do not exist (404 only).",
        examples=[[6]],
    )


# ---------------------------------------------------------------------------
# App links
# ---------------------------------------------------------------------------


class LinkCreate(_LinkModel):
    """Request body for ``POST /api/app-links/create``."""

    name: str = Field(
        ...,
        max_length=255,
        validation_alias=AliasChoices("name", "title"),
        description="Display name shown in the gallery.",
        examples=["Grafana"],
    )
    url: str = Field(
        ...,
        max_length=2048,
        description="Target URL opened from the gallery card.",
        examples=["https://grafana.example.com"],
    )


class LinkUpdate(LinkCreate):
    """Request body for ``POST /api/app-links/update``."""

    id: int = Field(..., ge=1, description="Identifier of the link to update.", examples=[1])


class LinkDelete(_LinkModel):
    """Request body for ``POST /api/app-links/delete``."""

    ids: list[int] = Field(
        ...,
        description="Identifiers to delete; every one must exist.",
        examples=[[5, 6]],
    )


class LinkResponse(_LinkModel):
    """A stored app link."""

    id: int = Field(..., description="Storage-assigned identifier.", examples=[1])
    name: str = Field(..., description="Display name.", examples=["Grafana"])
    url: str = Field(..., description="Target URL.", examples=["https://grafana.example.com"])
