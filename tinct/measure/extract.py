# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Main extraction API.

This is the primary entry point for Tinct's measurement core: it loads an
image, picks the raster or vector processor from the URL, ranks colors and
pairs each with a contrast color.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Protocol

from tinct.measure.config import DEFAULT_CONFIG, ExtractorConfig
from tinct.measure.contrast import ContrastCalculator, LuminanceContrastCalculator
from tinct.measure.raster import RasterProcessor
from tinct.measure.vector import VectorProcessor
from tinct.runtime.loader import HttpImageLoader, ImageLoader
from tinct.schema import Bitmap, ExtractionResult

logger = logging.getLogger(__name__)


class ImageProcessor(Protocol):
    async def process(
        self, bitmap: Bitmap, sample_size: int, color_count: int
    ) -> list[str]: ...


class DominantColorExtractor:
    """
    Coordinates loading, processor selection and contrast calculation.

    Holds only its collaborators; every call builds and discards its own
    state, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        image_loader: ImageLoader,
        contrast_calculator: ContrastCalculator,
        raster_processor: ImageProcessor,
        vector_processor: ImageProcessor,
        config: ExtractorConfig = DEFAULT_CONFIG,
    ) -> None:
        self.image_loader = image_loader
        self.contrast_calculator = contrast_calculator
        self.raster_processor = raster_processor
        self.vector_processor = vector_processor
        self.config = config

    async def extract(
        self,
        image_url: str,
        sample_size: Optional[int] = None,
        color_count: Optional[int] = None,
    ) -> ExtractionResult:
        """
        Extract dominant colors and contrast colors from an image URL.

        Args:
            image_url: http(s), file or data URL, or a filesystem path
            sample_size: Pixel stride, clamped to >= 1 (default: config, 10)
            color_count: Maximum colors to return, clamped to >= 1
                (default: config, 3)

        Returns:
            ExtractionResult with up to color_count colors

        Raises:
            ImageLoadError: the image could not be loaded
            InvalidDimensionsError: the raster image has a zero dimension
            SurfaceUnavailableError: raster pixels could not be read

        Example:
            >>> extractor = create_extractor()
            >>> result = await extractor.extract("https://example.com/a.jpg")
            >>> result.main_colors
            ('#3c78b4', '#c8b450', '#5a5a5a')
        """
        sample_size = clamp_count(
            self.config.sample_size if sample_size is None else sample_size
        )
        color_count = clamp_count(
            self.config.color_count if color_count is None else color_count
        )

        bitmap = await self.image_loader.load(image_url)

        vector = is_vector_url(image_url)
        processor = self.vector_processor if vector else self.raster_processor
        logger.debug(
            "Extracting %s with %s processor (stride %d, count %d)",
            image_url, "vector" if vector else "raster", sample_size, color_count,
        )

        main_colors = await processor.process(bitmap, sample_size, color_count)
        contrast_colors = [self.contrast_calculator.calculate(c) for c in main_colors]

        return ExtractionResult(
            main_colors=tuple(main_colors),
            contrast_colors=tuple(contrast_colors),
        )


def is_vector_url(url: str) -> bool:
    """
    True if the URL should be treated as a vector image.

    Purely syntactic: any URL containing "svg" in any case matches, so
    ".../my-svg-icon.png" is treated as vector too.
    """
    lowered = url.lower()
    return lowered.endswith(".svg") or "svg" in lowered


def clamp_count(value: object) -> int:
    """
    Coerce a caller-supplied stride or count to an int >= 1.

    Fractions are truncated; anything non-numeric or non-finite becomes 1.
    """
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    if not math.isfinite(number):
        return 1
    return max(1, int(number))


def create_extractor(
    *,
    image_loader: Optional[ImageLoader] = None,
    contrast_calculator: Optional[ContrastCalculator] = None,
    raster_processor: Optional[ImageProcessor] = None,
    vector_processor: Optional[ImageProcessor] = None,
    config: Optional[ExtractorConfig] = None,
) -> DominantColorExtractor:
    """
    Build an extractor, filling any collaborator not given with the default.

    Args:
        image_loader: Loads a URL into a Bitmap (default: HttpImageLoader)
        contrast_calculator: Maps a color to its contrast color
            (default: LuminanceContrastCalculator)
        raster_processor: Ranks colors of raster images (default: RasterProcessor)
        vector_processor: Colors for vector images (default: VectorProcessor)
        config: Thresholds and defaults shared by the default collaborators
    """
    config = config if config is not None else DEFAULT_CONFIG
    return DominantColorExtractor(
        image_loader=image_loader if image_loader is not None else HttpImageLoader(),
        contrast_calculator=(
            contrast_calculator
            if contrast_calculator is not None
            else LuminanceContrastCalculator(threshold=config.contrast_threshold)
        ),
        raster_processor=(
            raster_processor if raster_processor is not None else RasterProcessor(config=config)
        ),
        vector_processor=(
            vector_processor if vector_processor is not None else VectorProcessor(config=config)
        ),
        config=config,
    )


async def extract_dominant_colors(
    image_url: str,
    sample_size: int = 10,
    color_count: int = 3,
) -> ExtractionResult:
    """
    Extract dominant colors with the default collaborators.

    Example:
        >>> from tinct import extract_dominant_colors
        >>> result = await extract_dominant_colors("https://example.com/a.jpg")
        >>> result.to_dict()
        {'mainColors': [...], 'contrastColors': [...]}
    """
    return await create_extractor().extract(image_url, sample_size, color_count)
