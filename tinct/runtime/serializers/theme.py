# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Theme serializer.

Formats an ExtractionResult for direct use by UI code, either as a block of
CSS custom properties or as the JSON result shape.
"""

from __future__ import annotations

from enum import Enum

from tinct.schema import ExtractionResult


class ThemeFormat(Enum):
    """Theme output formats."""

    CSS = "css"
    JSON = "json"


def to_theme_block(
    result: ExtractionResult,
    *,
    format: ThemeFormat = ThemeFormat.CSS,
    prefix: str = "dominant",
    selector: str = ":root",
) -> str:
    """Serialize an ExtractionResult as a theme block.

    Args:
        result: The extraction result to serialize.
        format: CSS custom properties or JSON.
        prefix: Custom property prefix (CSS only).
        selector: Rule selector wrapping the properties (CSS only).

    Returns:
        Formatted block string.

    Example (CSS)::

        :root {
          --dominant-1: #3c78b4;
          --dominant-1-contrast: #ffffff;
          --dominant-2: #c8b450;
          --dominant-2-contrast: #000000;
        }
    """
    if format == ThemeFormat.JSON:
        return result.to_json(indent=2)
    return _to_css(result, prefix, selector)


def _to_css(result: ExtractionResult, prefix: str, selector: str) -> str:
    """Generate a CSS rule of custom properties, 1-indexed by rank."""
    lines = [f"{selector} {{"]
    for rank, (main, contrast) in enumerate(result.pairs(), start=1):
        lines.append(f"  --{prefix}-{rank}: {main};")
        lines.append(f"  --{prefix}-{rank}-contrast: {contrast};")
    lines.append("}")
    return "\n".join(lines)
