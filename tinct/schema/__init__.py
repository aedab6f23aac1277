# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Schema definitions for extraction input and output.

All types in this module are immutable (frozen dataclasses).
"""

from tinct.schema.extraction_result import (
    Bitmap,
    ExtractionResult,
    is_hex_color,
)

__all__ = [
    "Bitmap",
    "ExtractionResult",
    "is_hex_color",
]
