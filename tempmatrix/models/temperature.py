"""
Temperature data models and type definitions.

This module provides the data structures that flow through the matrix pipeline:
normalized daily records, per-cell daily series, value ranges and the single
view state owned by the interaction controller.
"""

import datetime
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from tempmatrix.core.matrix_builder import TemperatureMatrix


@dataclass(frozen=True)
class DailyRecord:
    """One validated daily observation. ``month`` is zero based (0 = January)."""

    date: datetime.date
    year: int
    month: int
    day: int
    tmax: float
    tmin: float


@dataclass(frozen=True)
class DailyPoint:
    """A single sparkline sample."""

    day: int
    value: float


@dataclass(frozen=True)
class MatrixCell:
    """
    One year-month cell of the grid.

    Extremes are ``None`` when the month has no observations, which keeps an
    empty month distinguishable from a genuine 0 °C reading.
    """

    year: int
    month: int
    monthly_max_extreme: Optional[float]
    monthly_min_extreme: Optional[float]
    daily_max: Tuple[DailyPoint, ...] = ()
    daily_min: Tuple[DailyPoint, ...] = ()

    @property
    def key(self) -> str:
        return format_year_month(self.year, self.month)

    @property
    def is_empty(self) -> bool:
        return not self.daily_max and not self.daily_min


@dataclass(frozen=True)
class ValueRange:
    """Closed numeric interval, or the empty range when no values were seen."""

    low: Optional[float] = None
    high: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self.low is None or self.high is None

    @property
    def span(self) -> float:
        return 0.0 if self.is_empty else self.high - self.low

    def as_tuple(self) -> Optional[Tuple[float, float]]:
        return None if self.is_empty else (self.low, self.high)

    def union(self, other: "ValueRange") -> "ValueRange":
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        return ValueRange(min(self.low, other.low), max(self.high, other.high))

    @classmethod
    def from_values(cls, values) -> "ValueRange":
        values = list(values)
        if not values:
            return EMPTY_RANGE
        return cls(min(values), max(values))


EMPTY_RANGE = ValueRange()


@dataclass(frozen=True)
class DomainRanges:
    """Global ranges used to calibrate the colour and sparkline scales."""

    monthly_max: ValueRange = EMPTY_RANGE
    monthly_min: ValueRange = EMPTY_RANGE
    monthly_union: ValueRange = EMPTY_RANGE
    daily_all: ValueRange = EMPTY_RANGE


class Mode(Enum):
    """Which monthly extreme drives the cell background."""

    EXTREME_MAX = "max"
    EXTREME_MIN = "min"

    @property
    def label(self) -> str:
        return "MAX" if self is Mode.EXTREME_MAX else "MIN"

    def toggled(self) -> "Mode":
        return Mode.EXTREME_MIN if self is Mode.EXTREME_MAX else Mode.EXTREME_MAX


@dataclass
class ViewState:
    """
    Session state for one rendered matrix.

    ``matrix``, ``years`` and ``domain_ranges`` are fixed at construction; only
    ``mode`` changes afterwards, and only through the interaction controller.
    """

    matrix: "TemperatureMatrix"
    domain_ranges: DomainRanges
    mode: Mode = Mode.EXTREME_MAX

    @property
    def years(self) -> Tuple[int, ...]:
        return self.matrix.years


@dataclass(frozen=True)
class TooltipPayload:
    """Hover content for one cell. Extremes are display strings."""

    label: str
    max_extreme: str
    min_extreme: str
    mode_label: str

    def text(self, unit: str = "°C") -> str:
        return "<br>".join(
            [
                f"<b>Date: {self.label}</b>",
                f"max: <b>{self.max_extreme}</b> {unit}",
                f"min: <b>{self.min_extreme}</b> {unit}",
                f"Background encodes: {self.mode_label}",
            ]
        )


def format_year_month(year: int, month: int) -> str:
    """Format a zero-based month as ``YYYY-MM``."""
    return f"{year}-{month + 1:02d}"


def format_temperature(value: Optional[float], missing: str = "N/A") -> str:
    """
    Integer-rounded display string, half away from zero; ``missing`` for None.
    """
    if value is None:
        return missing
    rounded = math.floor(abs(value) + 0.5)
    if rounded == 0:
        return "0"
    return f"-{rounded}" if value < 0 else str(rounded)
