"""
chart_config.py

Reusable Plotly configuration helpers for the temperature matrix figure.

Provides the pixel-space canvas layout, colour constants, axis label
annotations and the colour bar built from a legend descriptor.
"""

from typing import Any, Dict, List, Sequence, Tuple

import plotly.graph_objects as go

from tempmatrix import config as cfg


def get_standard_colors() -> Dict[str, str]:
    """
    Get the colour palette used by the matrix figure.

    :return: Dictionary with color definitions
    """
    return {
        "background": "#14161c",
        "text": "#e6e6e6",
        "muted_text": "rgba(230,230,230,0.75)",
        "cell_stroke": cfg.CELL_STROKE,
        "legend_stroke": cfg.LEGEND_STROKE,
        "no_data": cfg.NO_DATA_FILL,
        "series_max": cfg.SERIES_COLORS["max"],
        "series_min": cfg.SERIES_COLORS["min"],
    }


def apply_pixel_canvas_layout(
    fig: go.Figure,
    width: int,
    height: int,
    title: str = None,
) -> go.Figure:
    """
    Map both axes one-to-one onto chart pixels, origin at the top left.

    Shapes and traces can then be placed with the same coordinates the encoding
    engine produces.

    :param fig: Plotly figure to configure
    :param width: Figure width in pixels
    :param height: Figure height in pixels
    :param title: Optional title
    :return: Configured figure
    """
    colors = get_standard_colors()
    layout_config = {
        "width": width,
        "height": height,
        "margin": dict(l=0, r=0, t=0, b=0),
        "showlegend": False,
        "hovermode": "closest",
        "clickmode": "event",
        "plot_bgcolor": colors["background"],
        "paper_bgcolor": colors["background"],
        "font": dict(color=colors["text"]),
        "hoverlabel": dict(bgcolor="rgba(20,22,28,0.92)", font=dict(color=colors["text"])),
    }
    if title:
        layout_config["title"] = dict(text=title, x=0.01, y=0.995, yanchor="top")

    fig.update_layout(**layout_config)
    fig.update_xaxes(range=[0, width], visible=False, fixedrange=True)
    fig.update_yaxes(range=[height, 0], visible=False, fixedrange=True)
    return fig


def create_axis_label(
    text: str, x: float, y: float, position: str = "top", **kwargs
) -> Dict[str, Any]:
    """
    Create a data-space text annotation for a band axis.

    :param text: Label text
    :param x: Pixel x
    :param y: Pixel y
    :param position: "top" (year labels above the grid) or "left" (month labels)
    :param kwargs: Additional annotation parameters
    :return: Annotation configuration dictionary
    """
    anchors = {
        "top": dict(xanchor="center", yanchor="bottom"),
        "left": dict(xanchor="right", yanchor="middle"),
        "below": dict(xanchor="left", yanchor="top"),
    }

    return {
        "text": text,
        "x": x,
        "y": y,
        "xref": "x",
        "yref": "y",
        "showarrow": False,
        "font": dict(size=11, color=get_standard_colors()["text"]),
        **anchors.get(position, anchors["top"]),
        **kwargs,
    }


def rounded_rect_path(x: float, y: float, width: float, height: float, radius: float) -> str:
    """
    SVG path for a rectangle with rounded corners.

    :return: Path string usable as a plotly ``path`` shape
    """
    r = max(0.0, min(radius, width / 2, height / 2))
    x1 = x + width
    y1 = y + height
    return (
        f"M {x + r},{y} L {x1 - r},{y} Q {x1},{y} {x1},{y + r} "
        f"L {x1},{y1 - r} Q {x1},{y1} {x1 - r},{y1} "
        f"L {x + r},{y1} Q {x},{y1} {x},{y1 - r} "
        f"L {x},{y + r} Q {x},{y} {x + r},{y} Z"
    )


def stops_to_colorscale(stops: Sequence[Tuple[float, str]]) -> List[List]:
    """
    Convert top-to-bottom legend stops (offset 0 = highest value) into a plotly
    colorscale ordered low to high.
    """
    return [[round(1.0 - offset, 10), color] for offset, color in reversed(stops)]


def get_colorbar_config(
    legend, figure_width: int, figure_height: int
) -> Dict[str, Any]:
    """
    Colour bar placed at the legend descriptor's pixel position.

    :param legend: LegendDescriptor from the encoding engine
    :param figure_width: Figure width in pixels
    :param figure_height: Figure height in pixels
    :return: plotly colorbar dict
    """
    return dict(
        title=dict(text=legend.title, side="top"),
        x=legend.x / figure_width,
        xanchor="left",
        y=1.0 - legend.y / figure_height,
        yanchor="top",
        len=legend.height,
        lenmode="pixels",
        thickness=legend.width,
        outlinecolor=get_standard_colors()["legend_stroke"],
        outlinewidth=1,
        tickmode="array",
        tickvals=list(legend.tick_values),
        ticktext=list(legend.tick_labels),
    )
