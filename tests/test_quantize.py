# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for channel quantization, hex packing and luminance."""

import numpy as np
import pytest

from tinct.measure.quantize import (
    hex_to_rgb,
    luminance,
    luminance_batch,
    pack_rgb,
    packed_to_hex,
    quantize_channels,
    unpack_rgb,
)


class TestQuantizeChannels:

    def test_rounds_half_up_to_step(self):
        channels = np.array([0, 4, 5, 14, 15, 25, 250, 254, 255], dtype=np.uint8)
        result = quantize_channels(channels)
        np.testing.assert_array_equal(
            result, [0, 0, 10, 10, 20, 30, 250, 250, 260]
        )

    def test_near_identical_colors_share_bucket(self):
        a = quantize_channels(np.array([61, 119, 184], dtype=np.uint8))
        b = quantize_channels(np.array([64, 124, 176], dtype=np.uint8))
        np.testing.assert_array_equal(a, b)
        np.testing.assert_array_equal(a, [60, 120, 180])

    def test_custom_step(self):
        channels = np.array([0, 7, 8, 24, 255], dtype=np.uint8)
        np.testing.assert_array_equal(
            quantize_channels(channels, step=16), [0, 0, 16, 32, 256]
        )

    def test_preserves_shape(self):
        channels = np.zeros((4, 3), dtype=np.uint8)
        assert quantize_channels(channels).shape == (4, 3)


class TestPackRGB:

    def test_in_range_channels(self):
        assert packed_to_hex(pack_rgb(np.array([60, 120, 180]))) == "#3c78b4"

    @pytest.mark.parametrize(
        "rgb, expected",
        [
            ([260, 0, 0], "#040000"),
            ([0, 260, 0], "#010400"),
            ([0, 0, 260], "#000104"),
            ([260, 260, 260], "#050504"),
        ],
    )
    def test_overflowing_channel_carries(self, rgb, expected):
        assert packed_to_hex(pack_rgb(np.array(rgb))) == expected

    def test_batch(self):
        packed = pack_rgb(np.array([[0, 0, 0], [250, 250, 250]]))
        assert [packed_to_hex(p) for p in packed] == ["#000000", "#fafafa"]

    def test_unpack_inverts_pack_for_bytes(self):
        rgb = np.array([[12, 200, 7], [255, 0, 128]])
        np.testing.assert_array_equal(unpack_rgb(pack_rgb(rgb)), rgb)


class TestHexToRGB:

    def test_parses_lowercase(self):
        assert hex_to_rgb("#3c78b4") == (60, 120, 180)

    def test_parses_uppercase(self):
        assert hex_to_rgb("#FFFFFF") == (255, 255, 255)


class TestLuminance:

    def test_white(self):
        assert luminance(255, 255, 255) == pytest.approx(1.0)

    def test_black(self):
        assert luminance(0, 0, 0) == 0.0

    def test_green_weighs_most(self):
        assert luminance(0, 255, 0) > luminance(255, 0, 0) > luminance(0, 0, 255)

    def test_batch_matches_scalar(self):
        rgb = np.array([[60, 120, 180], [200, 180, 80], [4, 0, 0]])
        expected = [luminance(*row) for row in rgb.tolist()]
        np.testing.assert_allclose(luminance_batch(rgb), expected, atol=1e-12)
