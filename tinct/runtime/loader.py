# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Image acquisition: fetch a URL and decode it into a Bitmap.

Supported sources:
- http:// and https:// (httpx.AsyncClient)
- file:// URLs and plain filesystem paths
- data: URLs (base64 or percent-encoded)

Raster payloads are decoded with Pillow. SVG payloads are not rasterized;
they yield a Bitmap with no pixel source and the dimensions declared on
the root element.

Every failure surfaces as ImageLoadError("Error loading the image") with
the underlying exception chained. There is no retry.
"""

from __future__ import annotations

import asyncio
import base64
import io
import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol
from urllib.parse import unquote_to_bytes, urlsplit
from urllib.request import url2pathname

import httpx
from PIL import Image

from tinct.errors import ImageLoadError
from tinct.schema import Bitmap

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"

_LENGTH_RE = re.compile(r"\s*([0-9]*\.?[0-9]+)")


class ImageLoader(Protocol):
    async def load(self, url: str) -> Bitmap: ...


@dataclass(frozen=True)
class LoaderConfig:
    """Configuration for HttpImageLoader."""

    # Seconds before an HTTP request is abandoned
    timeout: float = 10.0
    follow_redirects: bool = True
    headers: dict[str, str] = field(
        default_factory=lambda: {"Accept": "image/*", "User-Agent": "tinct"}
    )

    # Payloads larger than this are rejected (0 = no limit)
    max_bytes: int = 50 * 1024 * 1024


class HttpImageLoader:
    """
    Loads images from HTTP(S), file and data URLs.

    Args:
        config: Loader settings (timeouts, headers, size limit)
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests
    """

    def __init__(
        self,
        config: Optional[LoaderConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config if config is not None else LoaderConfig()
        self._transport = transport

    async def load(self, url: str) -> Bitmap:
        """
        Fetch and decode the image at url.

        Raises:
            ImageLoadError: the image could not be fetched, read or decoded
        """
        try:
            payload, media_type = await self._fetch(url)
            if self.config.max_bytes and len(payload) > self.config.max_bytes:
                raise ValueError(
                    f"Image payload is {len(payload)} bytes, "
                    f"limit is {self.config.max_bytes}"
                )
            bitmap = decode_image(payload, media_type)
        except (
            httpx.HTTPError,
            httpx.InvalidURL,
            OSError,
            ValueError,
            ET.ParseError,
            Image.DecompressionBombError,
        ) as e:
            logger.warning("Failed to load image %s: %s", url, e)
            raise ImageLoadError(url=url) from e

        logger.debug(
            "Loaded %s: %dx%d (%s)",
            url, bitmap.width, bitmap.height, bitmap.media_type,
        )
        return bitmap

    async def _fetch(self, url: str) -> tuple[bytes, Optional[str]]:
        """Return (payload, media_type) for any supported URL form."""
        scheme = urlsplit(url).scheme.lower()

        if scheme in ("http", "https"):
            return await self._fetch_http(url)
        if scheme == "data":
            return _parse_data_url(url)
        if scheme == "file":
            path = Path(url2pathname(urlsplit(url).path))
            return await asyncio.to_thread(path.read_bytes), None
        # No scheme, or a Windows drive letter
        if scheme == "" or len(scheme) == 1:
            return await asyncio.to_thread(Path(url).read_bytes), None

        raise ValueError(f"Unsupported URL scheme: {scheme!r}")

    async def _fetch_http(self, url: str) -> tuple[bytes, Optional[str]]:
        async with httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=self.config.follow_redirects,
            headers=self.config.headers,
            transport=self._transport,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            media_type = response.headers.get("content-type", "").split(";")[0].strip()
            return response.content, media_type.lower() or None


# =============================================================================
# Decoding
# =============================================================================


def decode_image(payload: bytes, media_type: Optional[str] = None) -> Bitmap:
    """
    Decode raw image bytes into a Bitmap.

    Raises:
        OSError: Pillow cannot identify or read the payload
        ET.ParseError: an SVG payload is not well-formed XML
    """
    if is_svg(payload, media_type):
        return _decode_svg(payload)

    image = Image.open(io.BytesIO(payload))
    image.load()
    return Bitmap(
        width=image.width,
        height=image.height,
        source=image,
        media_type=Image.MIME.get(image.format or "", media_type),
    )


def is_svg(payload: bytes, media_type: Optional[str] = None) -> bool:
    """True if the payload is declared or looks like an SVG document."""
    if media_type == SVG_MEDIA_TYPE:
        return True
    head = payload[:4096].lstrip().lower()
    return head.startswith(b"<svg") or (
        head.startswith(b"<?xml") and b"<svg" in head
    )


def _decode_svg(payload: bytes) -> Bitmap:
    """Read declared dimensions from an SVG root; no rasterization."""
    root = ET.fromstring(payload)

    width = _parse_length(root.get("width"))
    height = _parse_length(root.get("height"))

    if not (width and height):
        view_box = (root.get("viewBox") or "").replace(",", " ").split()
        if len(view_box) == 4:
            width = width or _parse_length(view_box[2])
            height = height or _parse_length(view_box[3])

    return Bitmap(width=width, height=height, source=None, media_type=SVG_MEDIA_TYPE)


def _parse_length(value: Optional[str]) -> int:
    """Leading number of an SVG length ("120", "64px", "12.5") as int, else 0."""
    if not value:
        return 0
    m = _LENGTH_RE.match(value)
    return int(float(m.group(1))) if m else 0


def _parse_data_url(url: str) -> tuple[bytes, Optional[str]]:
    """Split a data: URL into (payload, media_type)."""
    header, sep, data = url[len("data:"):].partition(",")
    if not sep:
        raise ValueError("Malformed data URL: missing ','")

    params = header.split(";")
    media_type = params[0].strip().lower() or None
    if "base64" in (p.strip().lower() for p in params[1:]):
        return base64.b64decode(data, validate=True), media_type
    return unquote_to_bytes(data), media_type
