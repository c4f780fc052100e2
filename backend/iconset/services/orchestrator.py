"""Concurrent fan-out of prompts to the image generation client."""
from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Protocol, Sequence

logger = logging.getLogger(__name__)

SEED_STRIDE = 1000
MAX_SEED = 2**31 - 1


class SupportsGenerateOne(Protocol):
    async def generate_one(self, prompt: str, seed: int | None = None) -> str: ...


def derive_seeds(count: int, base_seed: int | None = None) -> List[int]:
    """Return ``count`` distinct seeds spaced by :data:`SEED_STRIDE`.

    Without ``base_seed`` the base comes from the current time in
    milliseconds, folded so every derived seed stays within ``MAX_SEED``.
    """

    if base_seed is None:
        span = MAX_SEED - SEED_STRIDE * max(count - 1, 0)
        base_seed = int(time.time() * 1000) % span
    return [base_seed + index * SEED_STRIDE for index in range(count)]


class MultiImageOrchestrator:
    """Generate one image per prompt concurrently, all or nothing."""

    def __init__(self, client: SupportsGenerateOne) -> None:
        self._client = client

    async def generate_all(
        self, prompts: Sequence[str], base_seed: int | None = None
    ) -> List[str]:
        """Return image URLs in prompt order.

        The first failure propagates and no partial list is returned. Sibling
        calls still in flight are cancelled and awaited before the failure is
        raised, so none of them outlives the caller's provider client.
        """

        if not prompts:
            return []

        seeds = derive_seeds(len(prompts), base_seed)
        started = time.perf_counter()
        tasks = [
            asyncio.ensure_future(self._client.generate_one(prompt, seed=seed))
            for prompt, seed in zip(prompts, seeds)
        ]
        try:
            urls = await asyncio.gather(*tasks)
        except BaseException as exc:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            if isinstance(exc, Exception):
                logger.exception(
                    "Multi-image generation failed",
                    extra={"prompt_count": len(prompts), "seeds": seeds},
                )
            raise

        logger.info(
            "Multi-image generation completed",
            extra={
                "prompt_count": len(prompts),
                "duration_ms": (time.perf_counter() - started) * 1000,
            },
        )
        return list(urls)


__all__ = ["MAX_SEED", "MultiImageOrchestrator", "SEED_STRIDE", "derive_seeds"]
