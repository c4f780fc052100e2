"""Server-side download of generated images.

Browsers refuse cross-origin downloads of the provider URLs, so the API fetches
the bytes itself and hands them back as an attachment.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from iconset.core.config import Settings
from iconset.services.errors import ImageProxyError

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "image/png"


@dataclass(slots=True)
class ProxiedImage:
    content: bytes
    content_type: str


class ImageProxy:
    def __init__(
        self, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        self._settings = settings
        self._transport = transport

    async def fetch(self, url: str) -> ProxiedImage:
        async with httpx.AsyncClient(
            timeout=self._settings.image_proxy_timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(url)
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise ImageProxyError(f"Failed to fetch image: {exc}") from exc

        if not response.is_success:
            raise ImageProxyError(f"Failed to fetch image: {response.status_code}")

        content_type = response.headers.get("content-type") or DEFAULT_CONTENT_TYPE
        logger.debug(
            "Proxied image",
            extra={"content_type": content_type, "bytes": len(response.content)},
        )
        return ProxiedImage(content=response.content, content_type=content_type)


__all__ = ["DEFAULT_CONTENT_TYPE", "ImageProxy", "ProxiedImage"]
