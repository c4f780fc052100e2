"""Helpers for creating Ark runtime clients."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from volcenginesdkarkruntime import AsyncArk

from iconset.core.config import Settings
from iconset.services.errors import ArkConfigurationError


def ensure_ark_credentials(settings: Settings) -> None:
    """Fail early when neither an API key nor an AK/SK pair is configured."""

    if not (settings.ark_api_key or (settings.ark_ak and settings.ark_sk)):
        raise ArkConfigurationError(
            "Missing Ark credentials. Configure ARK_API_KEY or ARK_AK/ARK_SK."
        )


@asynccontextmanager
async def async_ark_client(settings: Settings) -> AsyncIterator[AsyncArk]:
    """Yield an `AsyncArk` client configured from settings and ensure cleanup."""

    client = AsyncArk(
        api_key=settings.ark_api_key,
        ak=settings.ark_ak,
        sk=settings.ark_sk,
        base_url=settings.ark_base_url,
        timeout=settings.ark_request_timeout,
    )
    try:
        yield client
    finally:
        await client.close()


__all__ = ["async_ark_client", "ensure_ark_credentials"]
