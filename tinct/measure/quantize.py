# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Channel quantization, hex packing and luminance.

Quantization rounds each 0-255 channel half up to the nearest multiple of
the step (10 by default), so 255 becomes 260. Packing adds the shifted
channels and keeps the low 24 bits: an overflowing channel carries into
its neighbour instead of being clamped. Red (255, 0, 0) therefore packs
to "#040000" and white to "#050504". Every packed value is a valid color.

Luminance is the Rec. 601 luma weighting scaled to [0, 1].
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# Rec. 601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

_MASK_24 = 0xFFFFFF


# =============================================================================
# Quantization
# =============================================================================


def quantize_channels(
    channels: NDArray[np.uint8],
    step: int = 10,
) -> NDArray[np.int64]:
    """
    Round channel values half up to the nearest multiple of step.

    Args:
        channels: Array of any shape with uint8 channel values [0, 255]

    Returns:
        Array of the same shape with int64 quantized values
        (may exceed 255, e.g. 255 -> 260 for step 10)
    """
    values = np.asarray(channels, dtype=np.int64)
    # (2v + s) // 2s == floor(v / s + 0.5) without float error
    return (2 * values + step) // (2 * step) * step


def pack_rgb(rgb: NDArray[np.int64]) -> NDArray[np.int64]:
    """
    Pack (..., 3) channel values into 24-bit integers.

    Channels are added after shifting, so values above 255 carry into the
    next channel; the result is truncated to 24 bits.
    """
    rgb = np.asarray(rgb, dtype=np.int64)
    packed = (rgb[..., 0] << 16) + (rgb[..., 1] << 8) + rgb[..., 2]
    return packed & _MASK_24


def packed_to_hex(value: int) -> str:
    """Format a 24-bit packed color as '#rrggbb'."""
    return f"#{int(value) & _MASK_24:06x}"


def unpack_rgb(packed: NDArray[np.int64]) -> NDArray[np.int64]:
    """Split 24-bit packed integers into a (..., 3) array of bytes."""
    packed = np.asarray(packed, dtype=np.int64)
    return np.stack(
        [(packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF],
        axis=-1,
    )


# =============================================================================
# Hex parsing
# =============================================================================


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """
    Parse '#rrggbb' into an (r, g, b) tuple.

    Input is not validated.
    """
    return (
        int(hex_color[1:3], 16),
        int(hex_color[3:5], 16),
        int(hex_color[5:7], 16),
    )


# =============================================================================
# Luminance
# =============================================================================


def luminance(r: float, g: float, b: float) -> float:
    """Relative luminance of one color in [0, 1]."""
    wr, wg, wb = LUMA_WEIGHTS
    return (wr * r + wg * g + wb * b) / 255


def luminance_batch(rgb: NDArray[np.int64]) -> NDArray[np.float64]:
    """
    Vectorized luminance for a (..., 3) array of byte channels.

    Returns:
        Array of shape (...,) with values in [0, 1]
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return rgb @ np.array(LUMA_WEIGHTS, dtype=np.float64) / 255
