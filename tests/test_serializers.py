# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for the theme serializer."""

import json

import pytest

from tinct import ThemeFormat, to_theme_block
from tinct.schema import ExtractionResult


@pytest.fixture
def two_color_result():
    return ExtractionResult(
        main_colors=("#3c78b4", "#c8b450"),
        contrast_colors=("#ffffff", "#000000"),
    )


class TestCSSBlock:

    def test_default_block(self, two_color_result):
        assert to_theme_block(two_color_result) == (
            ":root {\n"
            "  --dominant-1: #3c78b4;\n"
            "  --dominant-1-contrast: #ffffff;\n"
            "  --dominant-2: #c8b450;\n"
            "  --dominant-2-contrast: #000000;\n"
            "}"
        )

    def test_prefix_and_selector(self, two_color_result):
        block = to_theme_block(two_color_result, prefix="hero", selector=".card")
        assert block.startswith(".card {")
        assert "  --hero-2-contrast: #000000;" in block

    def test_empty_result(self):
        empty = ExtractionResult(main_colors=(), contrast_colors=())
        assert to_theme_block(empty) == ":root {\n}"


class TestJSONBlock:

    def test_matches_result_dict(self, two_color_result):
        block = to_theme_block(two_color_result, format=ThemeFormat.JSON)
        assert json.loads(block) == two_color_result.to_dict()

    def test_colors_unchanged(self, two_color_result):
        data = json.loads(to_theme_block(two_color_result, format=ThemeFormat.JSON))
        assert data["mainColors"] == list(two_color_result.main_colors)
