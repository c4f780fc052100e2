"""Business workflow for generating a four-icon set."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, List
from uuid import uuid4

from iconset.core.config import Settings
from iconset.services.ark_client import async_ark_client, ensure_ark_credentials
from iconset.services.errors import IconRequestError
from iconset.services.image_client import ImageGenerationClient
from iconset.services.orchestrator import MultiImageOrchestrator
from iconset.services.prompts import compose_icon_prompts
from iconset.services.styles import StylePreset, get_style_by_id

logger = logging.getLogger(__name__)

MAX_BRAND_COLORS = 4


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """A validated request: trimmed theme, resolved style, filtered colors."""

    theme: str
    style: StylePreset
    colors: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class GenerationResult:
    images: List[str]
    prompt: str
    style: str


def parse_generation_request(
    *, prompt: Any, style_id: Any, colors: Any = None
) -> GenerationRequest:
    """Validate raw request fields, raising :class:`IconRequestError` on the first problem."""

    if not isinstance(prompt, str) or not prompt.strip():
        raise IconRequestError("Prompt is required")

    # bool is an int subclass but never a valid style id
    if isinstance(style_id, bool) or not isinstance(style_id, (int, float)) or not style_id:
        raise IconRequestError("Style ID is required")

    style = get_style_by_id(style_id)
    if style is None:
        raise IconRequestError("Invalid style ID")

    # null, "", false and 0 mean "no colors"; an empty object still counts as given
    if not isinstance(colors, list) and (colors or isinstance(colors, dict)):
        raise IconRequestError("Colors must be an array")

    return GenerationRequest(
        theme=prompt.strip(),
        style=style,
        colors=normalize_colors(colors if isinstance(colors, list) else []),
    )


def normalize_colors(colors: List[Any]) -> tuple[str, ...]:
    """Trim entries, drop blanks and non-strings, keep at most four."""

    cleaned = [
        color.strip() for color in colors if isinstance(color, str) and color.strip()
    ]
    return tuple(cleaned[:MAX_BRAND_COLORS])


class IconGenerationService:
    """Coordinate prompt composition and image generation via Ark runtime."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def generate(
        self, request: GenerationRequest, *, base_seed: int | None = None
    ) -> GenerationResult:
        request_id = uuid4().hex
        ensure_ark_credentials(self._settings)

        prompts = compose_icon_prompts(request.theme, request.style, request.colors)
        logger.info(
            "Starting icon set generation",
            extra={
                "request_id": request_id,
                "style_id": request.style.id,
                "color_count": len(request.colors),
                "prompt_count": len(prompts),
            },
        )
        logger.debug("Composed icon prompts", extra={"request_id": request_id, "prompts": prompts})

        started = time.perf_counter()
        try:
            async with async_ark_client(self._settings) as ark:
                orchestrator = MultiImageOrchestrator(
                    ImageGenerationClient(ark, self._settings)
                )
                images = await orchestrator.generate_all(prompts, base_seed=base_seed)
        except Exception:
            logger.exception(
                "Icon set generation failed",
                extra={"request_id": request_id, "style_id": request.style.id},
            )
            raise

        logger.info(
            "Icon set generation completed",
            extra={
                "request_id": request_id,
                "image_count": len(images),
                "duration_ms": (time.perf_counter() - started) * 1000,
            },
        )
        return GenerationResult(
            images=images, prompt=request.theme, style=request.style.name
        )


__all__ = [
    "GenerationRequest",
    "GenerationResult",
    "IconGenerationService",
    "normalize_colors",
    "parse_generation_request",
]
