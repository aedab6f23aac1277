# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Serializers for ExtractionResult delivery to UI code.

Serializers format colors exactly as extracted -- no modification.
"""

from tinct.runtime.serializers.theme import ThemeFormat, to_theme_block

__all__ = [
    "ThemeFormat",
    "to_theme_block",
]
