"""
Temperature Matrix Visualization
Plotly figure for the year x month grid built from an encoding RenderPlan.
"""

from typing import List, Optional

import plotly.graph_objects as go

from tempmatrix import config as cfg
from tempmatrix.core.chart_config import (
    apply_pixel_canvas_layout,
    create_axis_label,
    get_colorbar_config,
    get_standard_colors,
    rounded_rect_path,
    stops_to_colorscale,
)
from tempmatrix.core.encoding import RenderPlan
from tempmatrix.models.temperature import format_temperature
from tempmatrix.utils.log_util import app_logger

logger = app_logger(__name__)

SERIES_NAMES = {"max": "Daily max", "min": "Daily min"}


def _series_trace(plan: RenderPlan, kind: str) -> go.Scatter:
    """One line trace for every cell's series of the given kind, None separated."""
    xs: List[Optional[float]] = []
    ys: List[Optional[float]] = []
    for glyph in plan.cells:
        points = glyph.max_points if kind == "max" else glyph.min_points
        if not points:
            continue
        for _, px, py in points:
            xs.append(glyph.x + px)
            ys.append(glyph.y + py)
        xs.append(None)
        ys.append(None)

    return go.Scatter(
        x=xs,
        y=ys,
        mode="lines",
        name=SERIES_NAMES[kind],
        line=dict(
            color=cfg.SERIES_COLORS[kind],
            width=plan.layout.sparkline_width,
            shape="spline",
        ),
        connectgaps=False,
        hoverinfo="skip",
    )


def _hover_trace(plan: RenderPlan) -> go.Scatter:
    """Transparent square markers over each cell carrying the tooltip text."""
    size = min(plan.cells[0].width, plan.cells[0].height)
    return go.Scatter(
        x=[glyph.x + glyph.width / 2 for glyph in plan.cells],
        y=[glyph.y + glyph.height / 2 for glyph in plan.cells],
        mode="markers",
        name="cells",
        marker=dict(symbol="square", size=size, color="rgba(0,0,0,0)"),
        customdata=[[glyph.year, glyph.month] for glyph in plan.cells],
        hovertext=[glyph.tooltip.text(cfg.TEMPERATURE_UNIT) for glyph in plan.cells],
        hoverinfo="text",
    )


def _legend_trace(plan: RenderPlan) -> go.Scatter:
    """Invisible trace whose marker colour bar draws the legend."""
    legend = plan.legend
    return go.Scatter(
        x=[legend.x, legend.x],
        y=[legend.y, legend.y],
        mode="markers",
        name="legend",
        marker=dict(
            size=0,
            color=[legend.domain.low, legend.domain.high],
            cmin=legend.domain.low,
            cmax=legend.domain.high,
            colorscale=stops_to_colorscale(legend.stops),
            showscale=True,
            colorbar=get_colorbar_config(legend, plan.width, plan.height),
        ),
        hoverinfo="skip",
    )


def create_temperature_matrix_figure(plan: RenderPlan) -> go.Figure:
    """
    Create the year x month temperature matrix.

    Design:
    - X-axis: the selected years (band per year, labels on top)
    - Y-axis: January..December (band per month, labels on the left)
    - Cell fill: monthly extreme of the active mode on the Turbo scale; months
      without data use the translucent no-data fill and a dotted outline
    - Two sparklines per cell: green daily max, cyan daily min, sharing one
      vertical scale across the whole grid (nice bounds noted in the footer)
    - Hover: Date YYYY-MM with both monthly extremes
    - Colour bar: fixed union domain, integer tick labels
    """
    if plan.is_empty:
        logger.info("No temperature data available for matrix")
        fig = go.Figure()
        fig.update_layout(title="No Temperature Data Available", height=plan.height)
        return fig

    colors = get_standard_colors()
    radius = plan.layout.cell_radius

    shapes = [
        dict(
            type="path",
            path=rounded_rect_path(glyph.x, glyph.y, glyph.width, glyph.height, radius),
            fillcolor=glyph.fill,
            line=dict(
                color=colors["cell_stroke"],
                width=1,
                dash="solid" if glyph.has_data else "dot",
            ),
            layer="below",
        )
        for glyph in plan.cells
    ]

    annotations = [
        create_axis_label(label, x, plan.layout.margin_top - 12, position="top")
        for label, x in plan.year_ticks
    ]
    annotations += [
        create_axis_label(label, plan.layout.margin_left - 12, y, position="left")
        for label, y in plan.month_ticks
    ]
    annotations.append(
        create_axis_label(
            f"Background encodes: {plan.mode_label} (click the chart to toggle)",
            plan.layout.margin_left,
            plan.height - plan.layout.footer_height,
            position="below",
            font=dict(size=12, color=colors["muted_text"]),
        )
    )
    if plan.sparkline_bounds is not None:
        low, high = (format_temperature(v) for v in plan.sparkline_bounds)
        annotations.append(
            create_axis_label(
                f"Sparkline scale: {low} to {high} {cfg.TEMPERATURE_UNIT}",
                plan.layout.margin_left,
                plan.height - plan.layout.footer_height + 20,
                position="below",
                font=dict(size=11, color=colors["muted_text"]),
            )
        )

    fig = go.Figure(data=[_series_trace(plan, "max"), _series_trace(plan, "min"), _hover_trace(plan)])

    if not plan.legend.is_empty:
        fig.add_trace(_legend_trace(plan))

    apply_pixel_canvas_layout(fig, plan.width, plan.height)
    fig.update_layout(shapes=shapes, annotations=annotations)

    logger.info(
        f"Created temperature matrix with {len(plan.year_ticks)} years x "
        f"{len(plan.month_ticks)} months ({plan.mode_label})"
    )
    return fig
