# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Raster processing: quantize sampled pixels and rank them by frequency.

Pipeline:
1. Read the full RGBA buffer once from the pixel surface
2. Visit every ``sample_size``-th pixel in row-major order
3. Drop pixels below the alpha threshold
4. Quantize channels, pack into '#rrggbb' buckets, count
5. Rank by count (ties: first seen in scan order), skipping
   near-black/near-white buckets unless nothing else is left
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from tinct.errors import InvalidDimensionsError, SurfaceUnavailableError
from tinct.measure.config import DEFAULT_CONFIG, ExtractorConfig
from tinct.measure.quantize import (
    luminance_batch,
    pack_rgb,
    packed_to_hex,
    quantize_channels,
    unpack_rgb,
)
from tinct.runtime.surface import PillowSurface, PixelSurface
from tinct.schema import Bitmap

logger = logging.getLogger(__name__)


class RasterProcessor:
    """Extracts dominant colors from the pixels of a raster bitmap."""

    def __init__(
        self,
        surface: Optional[PixelSurface] = None,
        config: ExtractorConfig = DEFAULT_CONFIG,
    ) -> None:
        self.surface = surface if surface is not None else PillowSurface()
        self.config = config

    async def process(
        self,
        bitmap: Bitmap,
        sample_size: int,
        color_count: int,
    ) -> list[str]:
        """
        Rank the quantized colors of a bitmap.

        Args:
            bitmap: Loaded image; must have non-zero dimensions
            sample_size: Pixel stride (1 = every pixel)
            color_count: Maximum number of colors to return

        Returns:
            Up to color_count '#rrggbb' colors, most frequent first

        Raises:
            InvalidDimensionsError: width or height is 0
            SurfaceUnavailableError: pixel bytes cannot be read
        """
        if bitmap.width == 0 or bitmap.height == 0:
            raise InvalidDimensionsError(bitmap.width, bitmap.height)

        rgba = self._read_pixels(bitmap)
        colors, counts = build_frequency_table(
            rgba,
            sample_size=sample_size,
            alpha_threshold=self.config.alpha_threshold,
            step=self.config.quantize_step,
        )
        ranked = rank_colors(
            colors,
            counts,
            color_count=color_count,
            extreme_low=self.config.extreme_low,
            extreme_high=self.config.extreme_high,
        )

        logger.debug(
            "Ranked %d buckets from %dx%d bitmap (stride %d): %s",
            len(colors), bitmap.width, bitmap.height, sample_size, ranked,
        )
        return ranked

    def _read_pixels(self, bitmap: Bitmap) -> NDArray[np.uint8]:
        """Read the RGBA buffer as an (N, 4) uint8 array."""
        data = self.surface.read_rgba(bitmap)
        if data is None:
            raise SurfaceUnavailableError("Could not obtain a pixel surface for the image")

        expected = bitmap.pixel_count * 4
        if len(data) != expected:
            raise SurfaceUnavailableError(
                f"Pixel surface returned {len(data)} bytes, expected {expected}"
            )
        return np.frombuffer(data, dtype=np.uint8).reshape(-1, 4)


def build_frequency_table(
    rgba: NDArray[np.uint8],
    sample_size: int = 1,
    alpha_threshold: int = 128,
    step: int = 10,
) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """
    Count quantized colors among the sampled opaque pixels.

    Args:
        rgba: Array of shape (N, 4) with uint8 RGBA rows in scan order
        sample_size: Visit every sample_size-th row
        alpha_threshold: Rows with alpha below this are skipped
        step: Quantization step

    Returns:
        (colors, counts) where colors holds packed 24-bit values in order of
        first appearance and counts the matching occurrence counts
    """
    sampled = rgba[::sample_size]
    opaque = sampled[sampled[:, 3] >= alpha_threshold]

    if len(opaque) == 0:
        empty = np.zeros(0, dtype=np.int64)
        return empty, empty

    packed = pack_rgb(quantize_channels(opaque[:, :3], step=step))
    unique, first_index, counts = np.unique(
        packed, return_index=True, return_counts=True
    )

    # np.unique sorts by value; restore scan order
    order = np.argsort(first_index, kind="stable")
    return unique[order], counts[order].astype(np.int64)


def rank_colors(
    colors: NDArray[np.int64],
    counts: NDArray[np.int64],
    color_count: int,
    extreme_low: float = 0.1,
    extreme_high: float = 0.9,
) -> list[str]:
    """
    Pick the most frequent colors, preferring non-extreme ones.

    Colors whose luminance is above extreme_high or below extreme_low are
    dropped. If that leaves nothing, the ranking is taken from all colors.

    Args:
        colors: Packed colors in first-seen order
        counts: Occurrence counts, aligned with colors
        color_count: Maximum number of colors to return

    Returns:
        List of '#rrggbb' strings, most frequent first
    """
    if len(colors) == 0:
        return []

    # Stable sort keeps first-seen order among equal counts
    order = np.argsort(-counts, kind="stable")
    ranked = colors[order]

    lum = luminance_batch(unpack_rgb(ranked))
    extreme = (lum > extreme_high) | (lum < extreme_low)

    selected = ranked[~extreme][:color_count]
    if len(selected) == 0:
        logger.debug("All %d buckets are extreme; ranking unfiltered", len(ranked))
        selected = ranked[:color_count]

    return [packed_to_hex(value) for value in selected]
