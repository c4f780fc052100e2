"""Application-wide settings and Ark client configuration helpers."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application configuration."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ark_api_key: Optional[str] = Field(default=None, env="ARK_API_KEY")
    ark_ak: Optional[str] = Field(default=None, env="ARK_AK")
    ark_sk: Optional[str] = Field(default=None, env="ARK_SK")
    ark_base_url: str = Field(
        default="https://ark.cn-beijing.volces.com/api/v3", env="ARK_BASE_URL"
    )
    ark_image_model: str = Field(
        default="ep-20240620000000-image-creation", env="ARK_IMAGE_MODEL"
    )
    # Icons are always square; the composed prompts also mention 512x512.
    ark_image_size: str = Field(default="512x512", env="ARK_IMAGE_SIZE")
    ark_image_watermark: bool = Field(default=False, env="ARK_IMAGE_WATERMARK")
    # Overall deadline for one prompt, retries included.
    ark_request_timeout: float = Field(default=90.0, env="ARK_REQUEST_TIMEOUT")
    ark_retry_attempts: int = Field(default=3, env="ARK_RETRY_ATTEMPTS")
    ark_retry_backoff_seconds: float = Field(
        default=1.0, env="ARK_RETRY_BACKOFF_SECONDS"
    )
    image_proxy_timeout: float = Field(default=30.0, env="IMAGE_PROXY_TIMEOUT")
    cors_allow_origins: tuple[str, ...] = Field(
        default=("*",), env="CORS_ALLOW_ORIGINS"
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
