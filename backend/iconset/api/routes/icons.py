"""Icon set endpoints: style catalog, generation and image download proxy."""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse, Response

from iconset.deps import get_icon_service, get_image_proxy
from iconset.schemas.icons import (
    ErrorResponse,
    GenerateIconsRequest,
    GenerateIconsResponse,
    StylePresetOut,
)
from iconset.services.errors import IconRequestError
from iconset.services.icons import IconGenerationService, parse_generation_request
from iconset.services.image_proxy import ImageProxy
from iconset.services.styles import STYLE_PRESETS

logger = logging.getLogger(__name__)

router = APIRouter(tags=["icons"])


def _error(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    content = {"error": error}
    if message is not None:
        content["message"] = message
    return JSONResponse(status_code=status_code, content=content)


@router.get("/styles", response_model=List[StylePresetOut], summary="List style presets")
async def list_styles() -> List[StylePresetOut]:
    return [StylePresetOut.from_preset(preset) for preset in STYLE_PRESETS]


@router.post(
    "/generate",
    response_model=GenerateIconsResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
    summary="Generate a set of four icons",
)
async def generate_icons(
    payload: GenerateIconsRequest | None = Body(default=None),
    service: IconGenerationService = Depends(get_icon_service),
):
    """Return four icon URLs for the given theme, style and optional brand colors."""

    payload = payload or GenerateIconsRequest()
    try:
        request = parse_generation_request(
            prompt=payload.prompt,
            style_id=payload.style_id,
            colors=payload.colors,
        )
    except IconRequestError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    try:
        result = await service.generate(request)
    except Exception as exc:
        logger.exception("Error generating icons", extra={"style_id": request.style.id})
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to generate icons",
            str(exc) or "Unknown error",
        )

    return GenerateIconsResponse(
        images=result.images, prompt=result.prompt, style=result.style
    )


@router.get(
    "/proxy-image",
    response_class=Response,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
    summary="Download a generated image through the API",
)
async def proxy_image(
    url: str | None = Query(default=None, description="Image URL to download"),
    proxy: ImageProxy = Depends(get_image_proxy),
) -> Response:
    if not url or not url.strip():
        return _error(status.HTTP_400_BAD_REQUEST, "URL is required")

    try:
        image = await proxy.fetch(url)
    except Exception:
        logger.exception("Error proxying image")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch image")

    return Response(
        content=image.content,
        media_type=image.content_type,
        headers={"Content-Disposition": "attachment; filename=icon.png"},
    )
