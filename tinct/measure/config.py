# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Configuration for the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractorConfig:
    """Configuration for dominant color extraction."""

    # Defaults used when the caller does not pass sample_size / color_count
    sample_size: int = 10  # Visit every Nth pixel
    color_count: int = 3

    # Pixels with alpha below this are treated as transparent and never counted
    alpha_threshold: int = 128

    # Channels are rounded (half up) to the nearest multiple of this step
    quantize_step: int = 10

    # Luminance bounds (0-1) outside which a color counts as near-black/near-white
    extreme_low: float = 0.1
    extreme_high: float = 0.9

    # Colors darker than this get a white contrast color, others black
    contrast_threshold: float = 0.5

    # Returned for vector images instead of measuring pixels
    vector_palette: tuple[str, ...] = ("#000000", "#333333", "#666666")

    def __post_init__(self) -> None:
        if self.quantize_step < 1:
            raise ValueError(f"quantize_step must be >= 1, got {self.quantize_step}")
        if not 0 <= self.alpha_threshold <= 256:
            raise ValueError(f"alpha_threshold must be 0-256, got {self.alpha_threshold}")
        if not 0.0 <= self.extreme_low <= self.extreme_high <= 1.0:
            raise ValueError(
                f"Expected 0 <= extreme_low <= extreme_high <= 1, "
                f"got {self.extreme_low}, {self.extreme_high}"
            )


DEFAULT_CONFIG = ExtractorConfig()
