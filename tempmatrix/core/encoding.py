"""
encoding.py

Visual encoding of the temperature matrix.

Turns a ViewState into everything the render surface needs: cell rectangles
from two band scales, background colours from a fixed union-domain colour
scale, sparkline points on a grid-wide value scale, axis labels and the legend.
The engine only reads the matrix; the active mode is read from the shared
ViewState on every colour lookup.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from tempmatrix import config as cfg
from tempmatrix.core.color import SequentialColorScale
from tempmatrix.core.interaction import tooltip_for
from tempmatrix.core.matrix_builder import MONTH_COUNT
from tempmatrix.core.scales import BandScale, LinearScale
from tempmatrix.models.temperature import (
    DailyPoint,
    MatrixCell,
    Mode,
    TooltipPayload,
    ValueRange,
    ViewState,
    format_temperature,
)
from tempmatrix.utils.log_util import app_logger

logger = app_logger(__name__)

DAY_DOMAIN = (1, 31)

PixelPoint = Tuple[int, float, float]


@dataclass(frozen=True)
class CellGlyph:
    """Everything needed to draw and bind one cell."""

    key: str
    year: int
    month: int
    x: float
    y: float
    width: float
    height: float
    fill: str
    has_data: bool
    max_points: Tuple[PixelPoint, ...]
    min_points: Tuple[PixelPoint, ...]
    tooltip: TooltipPayload


@dataclass(frozen=True)
class LegendDescriptor:
    """
    Vertical colour legend.

    ``stops`` run top to bottom as (offset, colour) with the highest value at
    offset 0.
    """

    title: str
    domain: ValueRange
    x: float
    y: float
    width: float
    height: float
    stops: Tuple[Tuple[float, str], ...] = ()
    tick_values: Tuple[float, ...] = ()
    tick_labels: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.domain.is_empty


@dataclass(frozen=True)
class RenderPlan:
    """Render surface contract for one frame."""

    width: int
    height: int
    mode: Mode
    mode_label: str
    cells: Tuple[CellGlyph, ...]
    legend: LegendDescriptor
    year_ticks: Tuple[Tuple[str, float], ...]
    month_ticks: Tuple[Tuple[str, float], ...]
    sparkline_bounds: Optional[Tuple[float, float]] = None
    layout: cfg.LayoutConfig = cfg.DEFAULT_LAYOUT

    @property
    def is_empty(self) -> bool:
        return not self.cells


def legend_offsets(step: float) -> List[float]:
    """Gradient offsets 0, step, ..., 1."""
    count = int(round(1.0 / step))
    return [round(i * step, 10) for i in range(count + 1)]


class EncodingEngine:
    """
    Derive scales from a ViewState and expose pure mapping functions.

    :param view_state: Shared view state; only its mode is read after construction
    :param layout: Pixel layout configuration
    """

    def __init__(self, view_state: ViewState, layout: cfg.LayoutConfig = cfg.DEFAULT_LAYOUT):
        self.view_state = view_state
        self.layout = layout

        years = list(view_state.years)
        ranges = view_state.domain_ranges

        grid_left = layout.margin_left
        grid_top = layout.margin_top
        self.x = BandScale(
            years,
            (grid_left, grid_left + len(years) * layout.cell_width),
            padding_inner=layout.padding_inner,
            padding_outer=layout.padding_outer,
        )
        self.y = BandScale(
            list(range(MONTH_COUNT)),
            (grid_top, grid_top + MONTH_COUNT * layout.cell_height),
            padding_inner=layout.padding_inner,
            padding_outer=layout.padding_outer,
        )

        pad = layout.mini_pad
        self.mini_width = max(0.0, self.x.bandwidth - pad * 2)
        self.mini_height = max(0.0, self.y.bandwidth - pad * 2)

        self.spark_x = LinearScale(DAY_DOMAIN, (pad, pad + self.mini_width))
        self.spark_y = LinearScale(ranges.daily_all.as_tuple(), (self.mini_height, 0))

        self.color = SequentialColorScale(ranges.monthly_union)

    @property
    def mode(self) -> Mode:
        return self.view_state.mode

    def cell_rect(self, cell: MatrixCell) -> Tuple[float, float, float, float]:
        """(x, y, width, height) of a cell in chart pixels."""
        return self.x(cell.year), self.y(cell.month), self.x.bandwidth, self.y.bandwidth

    def background_value(self, cell: MatrixCell, mode: Optional[Mode] = None) -> Optional[float]:
        mode = mode or self.mode
        if mode is Mode.EXTREME_MAX:
            return cell.monthly_max_extreme
        return cell.monthly_min_extreme

    def background_color(self, cell: MatrixCell, mode: Optional[Mode] = None) -> str:
        """
        Fill for a cell under the given (or current) mode.

        Absent extremes, and an empty colour domain, return the no-data fill
        rather than a palette colour.
        """
        color = self.color(self.background_value(cell, mode))
        return cfg.NO_DATA_FILL if color is None else color

    def point_to_pixel(self, point: DailyPoint) -> Optional[Tuple[float, float]]:
        """Local (x, y) of a daily point inside its cell."""
        py = self.spark_y(point.value)
        if py is None:
            return None
        return self.spark_x(point.day), self.layout.mini_pad + py

    def sparkline(self, series: Sequence[DailyPoint]) -> Tuple[PixelPoint, ...]:
        points = []
        for point in series:
            pixel = self.point_to_pixel(point)
            if pixel is not None:
                points.append((point.day, pixel[0], pixel[1]))
        return tuple(points)

    def sparkline_bounds(self) -> Optional[Tuple[float, float]]:
        """Display bounds of the shared sparkline axis, rounded to nice ticks."""
        if self.spark_y.is_empty:
            return None
        return self.spark_y.nice(self.layout.sparkline_ticks).domain

    def recolor(self, mode: Optional[Mode] = None) -> Dict[str, str]:
        """Background fill for every cell, keyed by ``YYYY-MM``."""
        return {
            cell.key: self.background_color(cell, mode)
            for cell in self.view_state.matrix
        }

    def legend(self, mode: Optional[Mode] = None) -> LegendDescriptor:
        """Legend over the fixed union domain; only the title depends on mode."""
        mode = mode or self.mode
        layout = self.layout
        domain = self.color.domain
        x = layout.margin_left + len(self.x.domain) * layout.cell_width + layout.legend_gap
        top = layout.margin_top
        title = f"{mode.label} ({cfg.TEMPERATURE_UNIT})"

        if domain.is_empty:
            return LegendDescriptor(
                title=title,
                domain=domain,
                x=x,
                y=top,
                width=layout.legend_width,
                height=layout.legend_height,
            )

        stops = tuple(
            (offset, self.color(domain.high - offset * domain.span))
            for offset in legend_offsets(layout.legend_step)
        )

        axis = LinearScale(domain.as_tuple(), (top + layout.legend_height, top))
        ticks = tuple(axis.ticks(layout.legend_ticks))

        return LegendDescriptor(
            title=title,
            domain=domain,
            x=x,
            y=top,
            width=layout.legend_width,
            height=layout.legend_height,
            stops=stops,
            tick_values=ticks,
            tick_labels=tuple(format_temperature(t) for t in ticks),
        )

    def glyph(self, cell: MatrixCell, mode: Optional[Mode] = None) -> CellGlyph:
        mode = mode or self.mode
        x, y, width, height = self.cell_rect(cell)
        return CellGlyph(
            key=cell.key,
            year=cell.year,
            month=cell.month,
            x=x,
            y=y,
            width=width,
            height=height,
            fill=self.background_color(cell, mode),
            has_data=self.background_value(cell, mode) is not None,
            max_points=self.sparkline(cell.daily_max),
            min_points=self.sparkline(cell.daily_min),
            tooltip=tooltip_for(cell, mode),
        )

    def plan(self) -> RenderPlan:
        """Assemble the full render plan for the current mode."""
        mode = self.mode
        layout = self.layout
        years = self.view_state.years

        cells = tuple(self.glyph(cell, mode) for cell in self.view_state.matrix)
        logger.debug(f"Encoded {len(cells)} cells in {mode.label} mode")

        return RenderPlan(
            width=layout.chart_width(len(years)),
            height=layout.chart_height(),
            mode=mode,
            mode_label=mode.label,
            cells=cells,
            legend=self.legend(mode),
            year_ticks=tuple((str(year), self.x.center(year)) for year in years),
            month_ticks=tuple(
                (name, self.y.center(month)) for month, name in enumerate(cfg.MONTHS)
            ),
            sparkline_bounds=self.sparkline_bounds(),
            layout=layout,
        )
