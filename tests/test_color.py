"""
Tests for color.py
"""

import plotly.colors as pc
import pytest

from tempmatrix.core.color import DEFAULT_PALETTE, SequentialColorScale
from tempmatrix.models.temperature import EMPTY_RANGE, ValueRange


class TestSequentialColorScale:
    """Test SequentialColorScale."""

    def test_two_colour_interpolation(self):
        scale = SequentialColorScale(ValueRange(0.0, 10.0), ["#000000", "#ffffff"])

        assert scale(0.0) == "rgb(0, 0, 0)"
        assert scale(10.0) == "rgb(255, 255, 255)"
        assert scale(5.0) == "rgb(128, 128, 128)"

    def test_rgb_palette(self):
        scale = SequentialColorScale(
            ValueRange(0.0, 2.0), ["rgb(0, 0, 255)", "rgb(0, 255, 0)", "rgb(255, 0, 0)"]
        )
        assert scale(1.0) == "rgb(0, 255, 0)"
        assert scale(2.0) == "rgb(255, 0, 0)"

    def test_clamps_out_of_domain(self):
        scale = SequentialColorScale(ValueRange(0.0, 10.0))
        assert scale(-40.0) == scale(0.0)
        assert scale(99.0) == scale(10.0)

    def test_default_palette_is_turbo(self):
        scale = SequentialColorScale(ValueRange(0.0, 1.0))

        assert scale.palette == list(pc.sequential.Turbo)
        assert scale.palette == list(DEFAULT_PALETTE)
        assert scale(0.0) == scale.interpolate(0.0)
        assert scale(0.0).startswith("rgb(")

    def test_low_and_high_differ(self):
        scale = SequentialColorScale(ValueRange(5.0, 35.0))
        assert scale(5.0) != scale(35.0)

    def test_none_and_empty_domain(self):
        """Test absent values and empty domains produce no colour."""
        assert SequentialColorScale(ValueRange(0.0, 1.0))(None) is None
        assert SequentialColorScale(EMPTY_RANGE)(12.0) is None

    def test_single_value_domain(self):
        scale = SequentialColorScale(ValueRange(7.0, 7.0), ["#000000", "#ffffff"])
        assert scale(7.0) == "rgb(128, 128, 128)"

    def test_palette_too_short(self):
        with pytest.raises(ValueError):
            SequentialColorScale(ValueRange(0.0, 1.0), ["#000000"])
