# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Tinct -- Dominant color extraction for theming UI around images.

Finds the most frequent colors of an image and a readable black or white
contrast color for each.

Quick start::

    import asyncio
    from tinct import extract_dominant_colors

    result = asyncio.run(extract_dominant_colors("https://example.com/a.jpg"))
    result.main_colors       # ('#3c78b4', '#c8b450', '#5a5a5a')
    result.contrast_colors   # ('#ffffff', '#000000', '#ffffff')
    result.to_dict()         # {'mainColors': [...], 'contrastColors': [...]}
"""

from __future__ import annotations

__version__ = "1.0.0"

from tinct.errors import (
    ImageLoadError,
    InvalidDimensionsError,
    SurfaceUnavailableError,
    TinctError,
)
from tinct.measure import (
    DominantColorExtractor,
    ExtractorConfig,
    create_extractor,
    extract_dominant_colors,
)
from tinct.runtime import LoaderConfig, ThemeFormat, to_theme_block
from tinct.schema import Bitmap, ExtractionResult

__all__ = [
    # Core API
    "extract_dominant_colors",
    "create_extractor",
    "DominantColorExtractor",
    "ExtractionResult",
    # Configuration
    "ExtractorConfig",
    "LoaderConfig",
    # Types
    "Bitmap",
    # Errors
    "TinctError",
    "ImageLoadError",
    "InvalidDimensionsError",
    "SurfaceUnavailableError",
    # Serialization
    "ThemeFormat",
    "to_theme_block",
    # Version
    "__version__",
]
