"""Fixed catalog of the five icon style presets."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True)
class StylePreset:
    """One selectable visual style and the text it injects into every prompt."""

    id: int
    name: str
    description: str
    prompt_modifier: str


STYLE_PRESETS: tuple[StylePreset, ...] = (
    StylePreset(
        id=1,
        name="Gradient Line Art",
        description="Clean line art with pink-purple-yellow gradient fill",
        prompt_modifier=(
            "clean flat vector icon, soft pastel gradient fill from lavender purple to soft pink "
            "to cream yellow, thin dark gray outline stroke, simple flat 2D illustration, smooth "
            "soft color transitions, solid light gray rounded rectangle background, centered "
            "single object, cute minimal vector illustration style, no shadows, no 3D effects, "
            "muted pastel colors, simple shapes"
        ),
    ),
    StylePreset(
        id=2,
        name="Playful Bubble",
        description="Colorful doodle style with circular bubble background and stars",
        prompt_modifier=(
            "cute colorful doodle icon, soft purple-blue circular bubble background, small yellow "
            "stars and dots decorations around, playful cartoon style, vibrant colors, hand-drawn "
            "feel, whimsical illustration, centered composition, cheerful and fun aesthetic"
        ),
    ),
    StylePreset(
        id=3,
        name="Whimsical Clouds",
        description="Cute illustrated style with clouds and pastel colors",
        prompt_modifier=(
            "cute whimsical icon with small white clouds, soft pastel mint and pink colors, small "
            "stars scattered around, dreamy illustration style, gentle colors, kawaii aesthetic, "
            "light airy feel, adorable cartoon style, white background with decorative elements"
        ),
    ),
    StylePreset(
        id=4,
        name="Glossy 3D",
        description="Shiny blue plastic 3D look with reflections",
        prompt_modifier=(
            "glossy 3D rendered icon, shiny blue plastic material, cyan and blue gradient, strong "
            "specular highlights, reflective surface, modern 3D style, clean white background, "
            "professional app icon look, smooth rounded form, single object"
        ),
    ),
    StylePreset(
        id=5,
        name="Circle Badge",
        description="White silhouette icon inside dark teal circular badge",
        prompt_modifier=(
            "flat minimal icon, white silhouette on dark teal green circular background, badge "
            "style, simple flat design, no gradients on icon, solid circle background, minimal "
            "details, clean vector style, logo icon aesthetic, centered white shape on colored "
            "circle"
        ),
    ),
)

_STYLES_BY_ID: Mapping[int, StylePreset] = MappingProxyType(
    {style.id: style for style in STYLE_PRESETS}
)


def get_style_by_id(style_id: int) -> StylePreset | None:
    """Return the preset with ``style_id`` or ``None`` when there is no such style."""

    return _STYLES_BY_ID.get(style_id)


__all__ = ["STYLE_PRESETS", "StylePreset", "get_style_by_id"]
