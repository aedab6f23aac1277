# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Vector processing.

Vector images are not rasterized, so no pixels are measured. A fixed
grayscale palette is returned instead. Callers that need real colors for
an SVG should rasterize it themselves and pass the raster image.
"""

from __future__ import annotations

from tinct.measure.config import DEFAULT_CONFIG, ExtractorConfig
from tinct.schema import Bitmap


class VectorProcessor:
    """Returns the configured fixed palette, ignoring pixel content."""

    def __init__(self, config: ExtractorConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    async def process(
        self,
        bitmap: Bitmap,
        sample_size: int,
        color_count: int,
    ) -> list[str]:
        return list(self.config.vector_palette[:color_count])
