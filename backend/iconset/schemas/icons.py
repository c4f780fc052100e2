"""Schemas for the icon set endpoints."""
from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field

from iconset.services.styles import StylePreset


class StylePresetOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    description: str
    prompt_modifier: str = Field(..., alias="promptModifier")

    @classmethod
    def from_preset(cls, preset: StylePreset) -> "StylePresetOut":
        return cls(
            id=preset.id,
            name=preset.name,
            description=preset.description,
            prompt_modifier=preset.prompt_modifier,
        )


class GenerateIconsRequest(BaseModel):
    """Raw request body.

    Fields are left untyped so that shape errors are reported with the
    endpoint's own messages instead of a generic 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    prompt: Any = Field(default=None, description="Icon theme, e.g. 'Toys'")
    style_id: Any = Field(default=None, alias="styleId", description="Style preset id (1-5)")
    colors: Any = Field(default=None, description="Optional brand colors as hex strings")


class GenerateIconsResponse(BaseModel):
    success: bool = True
    images: List[str]
    prompt: str
    style: str


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None


__all__ = [
    "ErrorResponse",
    "GenerateIconsRequest",
    "GenerateIconsResponse",
    "StylePresetOut",
]
