"""Single-image generation against the Ark images API."""
from __future__ import annotations

import logging
from typing import Any

from iconset.core.config import Settings
from iconset.services.errors import NoImageProducedError
from iconset.services.resilience import with_retry, with_timeout

logger = logging.getLogger(__name__)


class ImageGenerationClient:
    """Turn one prompt into one image URL, with retry and an overall deadline."""

    def __init__(self, ark: Any, settings: Settings) -> None:
        self._ark = ark
        self._settings = settings

    async def generate_one(self, prompt: str, seed: int | None = None) -> str:
        """Return the URL of a single generated image for ``prompt``."""

        return await with_timeout(
            with_retry(
                lambda: self._request_image(prompt, seed),
                attempts=self._settings.ark_retry_attempts,
                base_delay=self._settings.ark_retry_backoff_seconds,
            ),
            self._settings.ark_request_timeout,
        )

    async def _request_image(self, prompt: str, seed: int | None) -> str:
        params: dict[str, Any] = {
            "model": self._settings.ark_image_model,
            "prompt": prompt,
            "size": self._settings.ark_image_size,
            "response_format": "url",
            "watermark": self._settings.ark_image_watermark,
        }
        if seed is not None:
            params["seed"] = seed

        logger.debug(
            "Generating image via Ark",
            extra={"image_model": self._settings.ark_image_model, "seed": seed},
        )
        response = await self._ark.images.generate(**params)

        data = getattr(response, "data", None)
        if not data or not getattr(data[0], "url", None):
            raise NoImageProducedError("No image generated")
        return data[0].url


__all__ = ["ImageGenerationClient"]
