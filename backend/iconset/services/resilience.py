"""Retry and deadline policies for calls to the image provider.

The two policies are independent and are composed by the caller::

    await with_timeout(
        with_retry(lambda: client.images.generate(...), attempts=3, base_delay=1.0),
        seconds=90,
    )
"""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from iconset.services.errors import GenerationTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_sleep = asyncio.sleep

TIMEOUT_MESSAGE = "Image generation timed out. Please try again."

# Failures mentioning these words come from a malformed request and cannot
# succeed on a second attempt.
_NON_RETRYABLE_MARKERS = ("invalid", "required")


def is_retryable(exc: BaseException) -> bool:
    """Return ``False`` for validation-type failures."""

    message = str(exc).lower()
    return not any(marker in message for marker in _NON_RETRYABLE_MARKERS)


async def with_retry(
    task: Callable[[], Awaitable[T]],
    *,
    attempts: int = 3,
    base_delay: float = 1.0,
    operation: str = "image_generation",
) -> T:
    """Run ``task`` up to ``attempts`` times with exponential backoff.

    The delay before attempt ``n + 1`` is ``base_delay * 2 ** n``. The last
    error is re-raised unchanged once the budget is spent.
    """

    attempts = max(1, attempts)
    attempt = 0

    while True:
        try:
            return await task()
        except Exception as exc:
            attempt += 1
            if not is_retryable(exc):
                logger.warning(
                    "%s failed with a non-retryable error",
                    operation,
                    extra={"operation": operation, "attempt": attempt},
                )
                raise
            if attempt >= attempts:
                raise

            wait_seconds = base_delay * (2 ** (attempt - 1))
            logger.warning(
                "%s attempt %s failed, retrying",
                operation,
                attempt,
                extra={
                    "operation": operation,
                    "attempt": attempt,
                    "retry_after_s": wait_seconds,
                },
                exc_info=exc,
            )
            if wait_seconds > 0:
                await _sleep(wait_seconds)


async def with_timeout(
    awaitable: Awaitable[T],
    seconds: float,
    message: str = TIMEOUT_MESSAGE,
) -> T:
    """Await ``awaitable`` and raise :class:`GenerationTimeoutError` past ``seconds``."""

    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError as exc:
        raise GenerationTimeoutError(message) from exc


__all__ = ["TIMEOUT_MESSAGE", "is_retryable", "with_retry", "with_timeout"]
