# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Pixel surfaces: turn a loaded Bitmap into raw RGBA bytes.

The raster processor reads pixels only through this interface, so tests
and other environments can supply their own byte source.
"""

from __future__ import annotations

import logging
from typing import Protocol

from tinct.errors import SurfaceUnavailableError
from tinct.schema import Bitmap

logger = logging.getLogger(__name__)


class PixelSurface(Protocol):
    """Produces width * height * 4 bytes of row-major RGBA for a bitmap."""

    def read_rgba(self, bitmap: Bitmap) -> bytes: ...


class PillowSurface:
    """Reads RGBA bytes from a Pillow image held in ``Bitmap.source``."""

    def read_rgba(self, bitmap: Bitmap) -> bytes:
        image = bitmap.source
        if image is None or not hasattr(image, "convert"):
            raise SurfaceUnavailableError("Could not obtain a pixel surface for the image")

        try:
            if image.mode != "RGBA":
                image = image.convert("RGBA")
            return image.tobytes()
        except (OSError, ValueError) as e:
            logger.warning("Pixel surface unavailable: %s", e)
            raise SurfaceUnavailableError(
                "Could not obtain a pixel surface for the image"
            ) from e


class BufferSurface:
    """Serves a fixed RGBA byte buffer, ignoring the bitmap's source."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)

    def read_rgba(self, bitmap: Bitmap) -> bytes:
        return self._data
