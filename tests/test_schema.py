# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for schema types, configuration and errors."""

import dataclasses
import json

import pytest

from tinct.errors import (
    ImageLoadError,
    InvalidDimensionsError,
    SurfaceUnavailableError,
    TinctError,
)
from tinct.measure.config import ExtractorConfig
from tinct.schema import Bitmap, ExtractionResult, is_hex_color


class TestExtractionResult:

    def test_valid_result(self):
        r = ExtractionResult(main_colors=("#3c78b4",), contrast_colors=("#ffffff",))
        assert len(r) == 1
        assert r.pairs() == (("#3c78b4", "#ffffff"),)

    def test_empty_result_allowed(self):
        r = ExtractionResult(main_colors=(), contrast_colors=())
        assert r.to_dict() == {"mainColors": [], "contrastColors": []}

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="equal length"):
            ExtractionResult(main_colors=("#3c78b4", "#c8b450"), contrast_colors=("#ffffff",))

    @pytest.mark.parametrize("bad", ["#FFFFFF", "ffffff", "#fff", "#gggggg", 0xFFFFFF])
    def test_rejects_non_canonical_colors(self, bad):
        with pytest.raises(ValueError, match="rrggbb"):
            ExtractionResult(main_colors=(bad,), contrast_colors=("#000000",))

    def test_immutable(self):
        r = ExtractionResult(main_colors=(), contrast_colors=())
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.main_colors = ("#000000",)

    def test_json_shape(self):
        r = ExtractionResult(
            main_colors=("#3c78b4", "#c8b450"),
            contrast_colors=("#ffffff", "#000000"),
        )
        assert json.loads(r.to_json()) == {
            "mainColors": ["#3c78b4", "#c8b450"],
            "contrastColors": ["#ffffff", "#000000"],
        }

    def test_from_dict(self):
        r = ExtractionResult.from_dict(
            {"mainColors": ["#3c78b4"], "contrastColors": ["#ffffff"]}
        )
        assert r.main_colors == ("#3c78b4",)
        assert r.contrast_colors == ("#ffffff",)


class TestBitmap:

    def test_zero_dimensions_representable(self):
        b = Bitmap(width=0, height=0)
        assert b.pixel_count == 0
        assert b.source is None

    def test_negative_dimension(self):
        with pytest.raises(ValueError, match="non-negative"):
            Bitmap(width=-1, height=4)

    def test_pixel_count(self):
        assert Bitmap(width=3, height=4).pixel_count == 12


class TestIsHexColor:

    def test_canonical(self):
        assert is_hex_color("#0a1b2c")

    def test_non_string(self):
        assert not is_hex_color(None)

    def test_uppercase_rejected(self):
        assert not is_hex_color("#0A1B2C")

    def test_pattern_not_exported(self):
        import tinct.schema

        assert "HEX_COLOR_RE" not in tinct.schema.__all__
        assert not hasattr(tinct.schema, "HEX_COLOR_RE")


class TestExtractorConfig:

    def test_defaults(self):
        config = ExtractorConfig()
        assert config.sample_size == 10
        assert config.color_count == 3
        assert config.alpha_threshold == 128
        assert config.vector_palette == ("#000000", "#333333", "#666666")

    def test_invalid_step(self):
        with pytest.raises(ValueError, match="quantize_step"):
            ExtractorConfig(quantize_step=0)

    def test_invalid_extreme_bounds(self):
        with pytest.raises(ValueError, match="extreme_low"):
            ExtractorConfig(extreme_low=0.8, extreme_high=0.2)


class TestErrors:

    def test_image_load_error_message_is_stable(self):
        assert str(ImageLoadError()) == "Error loading the image"

    def test_hierarchy(self):
        assert issubclass(ImageLoadError, TinctError)
        assert issubclass(InvalidDimensionsError, ValueError)
        assert issubclass(SurfaceUnavailableError, RuntimeError)

    def test_invalid_dimensions_carries_size(self):
        e = InvalidDimensionsError(0, 7)
        assert (e.width, e.height) == (0, 7)
        assert "0x7" in str(e)
