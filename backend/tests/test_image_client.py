"""Tests for the single-image Ark client wrapper."""
from __future__ import annotations

import pytest

pytestmark = pytest.mark.anyio("asyncio")

from iconset.core.config import Settings
from iconset.services.errors import NoImageProducedError
from iconset.services.image_client import ImageGenerationClient


class _StubImageResponse:
    class _Image:
        def __init__(self, url: str | None) -> None:
            self.url = url
            self.b64_json = None
            self.size = "512x512"

    def __init__(self, urls: list[str | None]) -> None:
        self.data = [self._Image(url) for url in urls]


class _StubImages:
    def __init__(self, responses: list[object]) -> None:
        self._responses = list(responses)
        self.calls: list[dict] = []

    async def generate(self, **kwargs: object):  # type: ignore[override]
        self.calls.append(kwargs)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class _StubArk:
    def __init__(self, responses: list[object]) -> None:
        self.images = _StubImages(responses)


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "ark_api_key": "test",
        "ark_image_model": "seedream-test",
        "ark_retry_backoff_seconds": 0,
    }
    values.update(overrides)
    return Settings(**values)


async def test_generate_one_returns_first_url() -> None:
    ark = _StubArk([_StubImageResponse(["https://ark.fake/a.png", "https://ark.fake/b.png"])])
    client = ImageGenerationClient(ark, _settings())

    url = await client.generate_one("a cat icon")

    assert url == "https://ark.fake/a.png"


async def test_generate_one_sends_fixed_parameters() -> None:
    ark = _StubArk([_StubImageResponse(["https://ark.fake/a.png"])])
    client = ImageGenerationClient(ark, _settings())

    await client.generate_one("a cat icon")

    assert ark.images.calls == [
        {
            "model": "seedream-test",
            "prompt": "a cat icon",
            "size": "512x512",
            "response_format": "url",
            "watermark": False,
        }
    ]


async def test_generate_one_passes_seed_verbatim() -> None:
    ark = _StubArk([_StubImageResponse(["https://ark.fake/a.png"])])
    client = ImageGenerationClient(ark, _settings())

    await client.generate_one("a cat icon", seed=4242)

    assert ark.images.calls[0]["seed"] == 4242


async def test_empty_result_is_retried_then_fails() -> None:
    ark = _StubArk([_StubImageResponse([]), _StubImageResponse([]), _StubImageResponse([None])])
    client = ImageGenerationClient(ark, _settings(ark_retry_attempts=3))

    with pytest.raises(NoImageProducedError, match="No image generated"):
        await client.generate_one("a cat icon")
    assert len(ark.images.calls) == 3


async def test_transient_error_then_success() -> None:
    ark = _StubArk(
        [ConnectionError("upstream reset"), _StubImageResponse(["https://ark.fake/ok.png"])]
    )
    client = ImageGenerationClient(ark, _settings())

    assert await client.generate_one("a cat icon") == "https://ark.fake/ok.png"
    assert len(ark.images.calls) == 2


async def test_validation_error_is_not_retried() -> None:
    ark = _StubArk([ValueError("Invalid size parameter")])
    client = ImageGenerationClient(ark, _settings())

    with pytest.raises(ValueError):
        await client.generate_one("a cat icon")
    assert len(ark.images.calls) == 1
