# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Contrast color selection: black or white text for a given background."""

from __future__ import annotations

from typing import Protocol

from tinct.measure.quantize import hex_to_rgb, luminance

WHITE = "#ffffff"
BLACK = "#000000"


class ContrastCalculator(Protocol):
    def calculate(self, color: str) -> str: ...


class LuminanceContrastCalculator:
    """
    Picks white for dark colors and black for light ones.

    Luminance is computed from the color's own channels. Input must be a
    well-formed '#rrggbb' string; anything else is not guarded.
    """

    def __init__(self, threshold: float = 0.5) -> None:
        self.threshold = threshold

    def calculate(self, color: str) -> str:
        return WHITE if luminance(*hex_to_rgb(color)) < self.threshold else BLACK
