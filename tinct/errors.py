# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Error types raised by Tinct.

Every error raised by an extraction call reaches the caller unmodified.
The only fallback in the pipeline is the all-extreme ranking fallback
in the raster processor; load and dimension failures never produce a
default result.
"""

from __future__ import annotations


class TinctError(Exception):
    """Base class for all Tinct errors."""


class ImageLoadError(TinctError):
    """Raised when an image cannot be fetched, read, or decoded.

    The message is stable so callers can match on it.
    """

    DEFAULT_MESSAGE = "Error loading the image"

    def __init__(self, message: str = DEFAULT_MESSAGE, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class InvalidDimensionsError(TinctError, ValueError):
    """Raised when a loaded bitmap has zero width or height."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Image with invalid dimensions ({width}x{height})")


class SurfaceUnavailableError(TinctError, RuntimeError):
    """Raised when raw RGBA pixel data cannot be obtained from a bitmap."""
