"""Prompt composition for a four-icon set.

Each request produces four prompts that share the theme, the style modifier and
the quality directives, and differ only in a "variation" phrase that nudges the
model towards four distinct compositions.

Brand colors are injected by literal phrase substitution: every hard-coded
color phrase known to appear in the preset texts is rewritten to the supplied
colors. A preset containing none of those phrases keeps its modifier as is and
only gains the color instruction prefix/suffix. The substitution is therefore
tied to the exact preset wording in :mod:`iconset.services.styles`.
"""
from __future__ import annotations

from typing import Callable, List, Sequence

from iconset.services.styles import StylePreset

QUALITY_SUFFIX = "single icon, 512x512, high quality, isolated on background"
COLOR_INSTRUCTION = "IMPORTANT: Use only these brand colors: {colors}. "
COLOR_CONSTRAINT = "strictly use colors: {colors}"

_VARIATION_TEMPLATES = (
    "{theme} icon design, first variation, unique representation",
    "{theme} icon design, second variation, different perspective",
    "{theme} icon design, third variation, alternative concept",
    "{theme} icon design, fourth variation, creative interpretation",
)

# (phrase in preset text, builder(color_phrase, first_color) -> replacement), applied in order.
_COLOR_SUBSTITUTIONS: tuple[tuple[str, Callable[[str, str], str]], ...] = (
    ("lavender purple to soft pink to cream yellow", lambda phrase, _: phrase),
    ("pink to purple to yellow", lambda phrase, _: phrase),
    ("purple-blue", lambda _, first: first or "purple-blue"),
    ("pastel mint and pink", lambda phrase, _: phrase),
    (
        "blue plastic material, cyan and blue gradient",
        lambda phrase, _: f"plastic material in {phrase}",
    ),
    ("cyan and blue gradient", lambda phrase, _: phrase),
    ("dark teal green", lambda _, first: first or "dark teal green"),
)


def icon_variations(theme: str) -> List[str]:
    """Return the four variation phrases for ``theme``."""

    return [template.format(theme=theme) for template in _VARIATION_TEMPLATES]


def apply_brand_colors(modifier: str, colors: Sequence[str]) -> str:
    """Rewrite the known color phrases of ``modifier`` to ``colors``."""

    phrase = " and ".join(colors)
    first = colors[0] if colors else ""
    for needle, replacement in _COLOR_SUBSTITUTIONS:
        modifier = modifier.replace(needle, replacement(phrase, first))
    return modifier


def compose_icon_prompts(
    theme: str,
    style: StylePreset,
    colors: Sequence[str] | None = None,
) -> List[str]:
    """Build the four prompts for one icon set.

    ``colors`` must already be trimmed and free of blank entries.
    """

    variations = icon_variations(theme)

    if not colors:
        return [
            f"{variation}, {style.prompt_modifier}, {QUALITY_SUFFIX}"
            for variation in variations
        ]

    phrase = " and ".join(colors)
    modifier = apply_brand_colors(style.prompt_modifier, colors)
    instruction = COLOR_INSTRUCTION.format(colors=phrase)
    constraint = COLOR_CONSTRAINT.format(colors=phrase)
    return [
        f"{instruction}{variation}, {modifier}, {QUALITY_SUFFIX}, {constraint}"
        for variation in variations
    ]


__all__ = [
    "COLOR_INSTRUCTION",
    "QUALITY_SUFFIX",
    "apply_brand_colors",
    "compose_icon_prompts",
    "icon_variations",
]
