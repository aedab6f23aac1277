# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
I/O adapters for Tinct.

1. Image loading -- URL to decoded Bitmap (httpx + Pillow)
2. Pixel surfaces -- Bitmap to raw RGBA bytes
3. Serializers -- ExtractionResult to theme blocks

Adapters never change the colors the measurement core produces.
"""

from tinct.runtime.loader import (
    HttpImageLoader,
    ImageLoader,
    LoaderConfig,
    decode_image,
)
from tinct.runtime.serializers import ThemeFormat, to_theme_block
from tinct.runtime.surface import BufferSurface, PillowSurface, PixelSurface

__all__ = [
    "ImageLoader",
    "HttpImageLoader",
    "LoaderConfig",
    "decode_image",
    "PixelSurface",
    "PillowSurface",
    "BufferSurface",
    "ThemeFormat",
    "to_theme_block",
]
