"""
Unit tests for chart configuration helpers.

Tests all helper functions in tempmatrix.core.chart_config to ensure
they return valid Plotly configuration objects.
"""

import plotly.graph_objects as go

from tempmatrix.core.chart_config import (
    apply_pixel_canvas_layout,
    create_axis_label,
    get_colorbar_config,
    get_standard_colors,
    rounded_rect_path,
    stops_to_colorscale,
)
from tempmatrix.core.encoding import LegendDescriptor
from tempmatrix.models.temperature import ValueRange


class TestStandardColors:
    """Test get_standard_colors helper function."""

    def test_color_values(self):
        """Test that color values are valid color codes."""
        colors = get_standard_colors()

        assert "series_max" in colors
        assert "no_data" in colors
        for color_value in colors.values():
            assert isinstance(color_value, str)
            assert color_value.startswith("#") or color_value.startswith("rgba")


class TestPixelCanvasLayout:
    """Test apply_pixel_canvas_layout helper function."""

    def test_axes_match_pixels(self):
        fig = apply_pixel_canvas_layout(go.Figure(), width=334, height=847)

        assert fig.layout.width == 334
        assert fig.layout.height == 847
        assert tuple(fig.layout.xaxis.range) == (0, 334)
        assert tuple(fig.layout.yaxis.range) == (847, 0)
        assert fig.layout.showlegend is False
        assert fig.layout.margin.l == 0

    def test_title(self):
        fig = apply_pixel_canvas_layout(go.Figure(), 100, 100, title="Matrix")
        assert fig.layout.title.text == "Matrix"


class TestAxisLabel:
    """Test create_axis_label helper function."""

    def test_top_label(self):
        label = create_axis_label("2023", 120.0, 33.0)

        assert label["text"] == "2023"
        assert label["xref"] == "x"
        assert label["xanchor"] == "center"
        assert label["yanchor"] == "bottom"
        assert label["showarrow"] is False

    def test_left_label(self):
        label = create_axis_label("March", 78.0, 200.0, position="left")
        assert label["xanchor"] == "right"
        assert label["yanchor"] == "middle"

    def test_kwargs_override(self):
        label = create_axis_label("x", 0, 0, font=dict(size=20))
        assert label["font"] == dict(size=20)


class TestRoundedRectPath:
    """Test rounded_rect_path helper function."""

    def test_path_shape(self):
        path = rounded_rect_path(10, 20, 50, 30, 8)
        assert path.startswith("M 18,20")
        assert path.endswith("Z")

    def test_radius_clamped(self):
        path = rounded_rect_path(0, 0, 10, 4, 8)
        assert path.startswith("M 2.0,0")


class TestColorbar:
    """Test legend to colour bar conversion."""

    def test_stops_to_colorscale(self):
        stops = [(0.0, "high"), (0.5, "mid"), (1.0, "low")]
        assert stops_to_colorscale(stops) == [[0.0, "low"], [0.5, "mid"], [1.0, "high"]]

    def test_colorbar_position(self):
        legend = LegendDescriptor(
            title="MAX (°C)",
            domain=ValueRange(0.0, 30.0),
            x=250.0,
            y=45.0,
            width=16,
            height=240,
            tick_values=(0.0, 10.0, 20.0, 30.0),
            tick_labels=("0", "10", "20", "30"),
        )

        colorbar = get_colorbar_config(legend, figure_width=500, figure_height=900)

        assert colorbar["x"] == 0.5
        assert colorbar["y"] == 1.0 - 45.0 / 900
        assert colorbar["len"] == 240
        assert colorbar["lenmode"] == "pixels"
        assert colorbar["thickness"] == 16
        assert colorbar["ticktext"] == ["0", "10", "20", "30"]
