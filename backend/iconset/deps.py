"""FastAPI dependency helpers."""
from __future__ import annotations

from fastapi import Depends

from iconset.core.config import Settings, get_settings
from iconset.services.icons import IconGenerationService
from iconset.services.image_proxy import ImageProxy


def get_icon_service(
    settings: Settings = Depends(get_settings),
) -> IconGenerationService:
    """Provide an icon generation service instance per request."""

    return IconGenerationService(settings)


def get_image_proxy(settings: Settings = Depends(get_settings)) -> ImageProxy:
    """Provide the image download proxy."""

    return ImageProxy(settings)
