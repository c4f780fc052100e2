#!/usr/bin/env python3
"""Generate a four-icon set from the command line.

Usage:
  python backend/bin/generate_icons.py \
    --prompt "Toys" --style-id 1 \
    [--color "#FF2442" --color "#FFD700"] [--seed 42] [--verbose]

Reads Ark credentials from the environment (ARK_API_KEY or ARK_AK/ARK_SK) and
prints the four image URLs.
"""
from __future__ import annotations

import argparse
import asyncio
import logging

from iconset.core.config import Settings
from iconset.services.errors import IconRequestError
from iconset.services.icons import IconGenerationService, parse_generation_request
from iconset.services.styles import STYLE_PRESETS


def main() -> int:
    ap = argparse.ArgumentParser(description="Generate a four-icon set via Ark")
    ap.add_argument("--prompt", required=True, help="Icon theme, e.g. 'Toys'")
    ap.add_argument(
        "--style-id",
        type=int,
        required=True,
        choices=[style.id for style in STYLE_PRESETS],
        help="; ".join(f"{style.id}={style.name}" for style in STYLE_PRESETS),
    )
    ap.add_argument(
        "--color",
        action="append",
        default=None,
        help="Brand color (repeatable, up to 4)",
    )
    ap.add_argument("--seed", type=int, default=None, help="Base seed for the set")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        request = parse_generation_request(
            prompt=args.prompt, style_id=args.style_id, colors=args.color
        )
    except IconRequestError as exc:
        print("ERROR:", exc)
        return 2

    service = IconGenerationService(Settings())
    try:
        result = asyncio.run(service.generate(request, base_seed=args.seed))
    except Exception as exc:  # pragma: no cover - CLI utility
        print("ERROR: Failed to generate icons:", exc)
        return 1

    print(f"{result.style} icons for {result.prompt!r}:")
    for url in result.images:
        print(" -", url)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
