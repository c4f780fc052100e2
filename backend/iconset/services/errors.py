"""Exceptions raised by the icon generation services."""
from __future__ import annotations


class IconRequestError(ValueError):
    """Raised when an inbound generation request has an invalid shape."""


class IconGenerationError(RuntimeError):
    """Base class for failures on the image generation path."""


class ArkConfigurationError(IconGenerationError):
    """Raised when Ark credentials are not configured."""


class NoImageProducedError(IconGenerationError):
    """Raised when Ark answers without any usable image."""


class GenerationTimeoutError(IconGenerationError):
    """Raised when a prompt exceeds its overall generation deadline."""


class ImageProxyError(RuntimeError):
    """Raised when a generated image cannot be fetched for download."""


__all__ = [
    "ArkConfigurationError",
    "GenerationTimeoutError",
    "IconGenerationError",
    "IconRequestError",
    "ImageProxyError",
    "NoImageProducedError",
]
