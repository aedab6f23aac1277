# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
ExtractionResult and Bitmap -- the data carried through an extraction call.

Design principles:
- Immutable: All types are frozen dataclasses
- Per-call: Nothing here is cached or shared between calls
- Canonical colors: Every color is a 7-character lowercase "#rrggbb" string

The serialized shape mirrors what UI code consumes::

    {"mainColors": ["#3c78b4", ...], "contrastColors": ["#ffffff", ...]}
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Optional


# =============================================================================
# Color strings
# =============================================================================

_HEX_COLOR_RE = re.compile(r"^#[0-9a-f]{6}$")


def is_hex_color(value: object) -> bool:
    """True if value is a canonical lowercase '#rrggbb' string."""
    return isinstance(value, str) and _HEX_COLOR_RE.match(value) is not None


# =============================================================================
# Bitmap
# =============================================================================


@dataclass(frozen=True)
class Bitmap:
    """
    A loaded image, before any pixel access.

    Attributes:
        width: Width in pixels (0 is representable but rejected by the
            raster processor)
        height: Height in pixels
        source: Decoded image handle a pixel surface can read from. A Pillow
            ``Image`` for raster images, ``None`` for images that were not
            decoded (SVG).
        media_type: MIME type reported by or sniffed from the source, if known
    """
    width: int
    height: int
    source: Any = None
    media_type: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate dimensions are non-negative."""
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Bitmap dimensions must be non-negative, got {self.width}x{self.height}"
            )

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


# =============================================================================
# Result
# =============================================================================


@dataclass(frozen=True)
class ExtractionResult:
    """
    Dominant colors of an image and a readable contrast color for each.

    Attributes:
        main_colors: Dominant colors, most frequent first
        contrast_colors: Contrast color for the main color at the same index
    """
    main_colors: tuple[str, ...]
    contrast_colors: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate index correspondence and color format."""
        if len(self.main_colors) != len(self.contrast_colors):
            raise ValueError(
                f"main_colors and contrast_colors must have equal length, "
                f"got {len(self.main_colors)} and {len(self.contrast_colors)}"
            )
        for color in (*self.main_colors, *self.contrast_colors):
            if not is_hex_color(color):
                raise ValueError(f"Expected '#rrggbb' color, got {color!r}")

    def __len__(self) -> int:
        return len(self.main_colors)

    def pairs(self) -> tuple[tuple[str, str], ...]:
        """(main, contrast) pairs in rank order."""
        return tuple(zip(self.main_colors, self.contrast_colors))

    def to_dict(self) -> dict:
        """Serialize to the external ``mainColors``/``contrastColors`` shape."""
        return {
            "mainColors": list(self.main_colors),
            "contrastColors": list(self.contrast_colors),
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ExtractionResult:
        """Deserialize from dictionary."""
        return cls(
            main_colors=tuple(data["mainColors"]),
            contrast_colors=tuple(data["contrastColors"]),
        )
