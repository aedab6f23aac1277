# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Measurement core for Tinct.

This module provides deterministic dominant color extraction from images.
All operations are pixel-based; there is no randomness.
"""

from tinct.measure.config import ExtractorConfig
from tinct.measure.contrast import LuminanceContrastCalculator
from tinct.measure.extract import (
    DominantColorExtractor,
    create_extractor,
    extract_dominant_colors,
)
from tinct.measure.raster import RasterProcessor
from tinct.measure.vector import VectorProcessor

__all__ = [
    "extract_dominant_colors",
    "create_extractor",
    "DominantColorExtractor",
    "ExtractorConfig",
    "RasterProcessor",
    "VectorProcessor",
    "LuminanceContrastCalculator",
]
