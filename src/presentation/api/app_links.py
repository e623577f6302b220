"""App-link CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from application.services.link_service import LinkService
from infrastructure.container import get_app_settings, get_link_service
from infrastructure.settings import AppSettings

from .schemas import ErrorResponse, LinkCreate, LinkDelete, LinkResponse, LinkUpdate

router = APIRouter(prefix="/app-links", tags=["App Links"])


@router.get(
    "",
    response_model=list[LinkResponse],
    summary="List app links",
    responses={200: {"description": "Every stored link, in id order."}},
)
async def list_links(
    response: Response,
    q: str = Query("", description="Case-insensitive match on name or url."),
    service: LinkService = Depends(get_link_service),
    settings: AppSettings = Depends(get_app_settings),
) -> list[LinkResponse]:
    links = service.list_links(query=q)
    response.headers["Cache-Control"] = f"public, max-age={settings.cache_max_age}"
    return [LinkResponse.model_validate(link) for link in links]


@router.post(
    "/create",
    response_model=LinkResponse,
    summary="Create an app link",
    responses={
        200: {"description": "Link created."},
        422: {"description": "Name or url missing.", "model": ErrorResponse},
        500: {"description": "Storage failure.", "model": ErrorResponse},
    },
)
async def create_link(
    body: LinkCreate,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    link = service.create_link(name=body.name, url=body.url)
    return LinkResponse.model_validate(link)


@router.post(
    "/update",
    response_model=LinkResponse,
    summary="Update an app link",
    responses={
        200: {"description": "Link updated."},
        404: {"description": "No link with this id.", "model": ErrorResponse},
        422: {"description": "Name or url missing.", "model": ErrorResponse},
        500: {"description": "Storage failure.", "model": ErrorResponse},
    },
)
async def update_link(
    body: LinkUpdate,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    link = service.update_link(body.id, name=body.name, url=body.url)
    return LinkResponse.model_validate(link)


@router.post(
    "/delete",
    response_model=list[LinkResponse],
    summary="Delete app links",
    responses={
        200: {"description": "Deleted links, in id order."},
        404: {"description": "At least one id does not exist; nothing deleted.", "model": ErrorResponse},
        422: {"description": "Empty id list.", "model": ErrorResponse},
        500: {"description": "Storage failure.", "model": ErrorResponse},
    },
)
async def delete_links(
    body: LinkDelete,
    service: LinkService = Depends(get_link_service),
) -> list[LinkResponse]:
    deleted = service.delete_links(body.ids)
    return [LinkResponse.model_validate(link) for link in deleted]
