# config.py
"""
Configurations for the temperature matrix application.

This module holds the data location, the number of years shown, display labels,
colours, and the pixel layout shared by the encoding engine, the plotly render
surface and the streamlit page.
"""

import os
from dataclasses import dataclass

DATA_PATH = os.environ.get("TEMPMATRIX_DATA_PATH", "data/temperature_daily.csv")

YEAR_COUNT = 10

REQUIRED_COLUMNS = ("date", "max_temperature", "min_temperature")

MONTHS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

TEMPERATURE_UNIT = "°C"
MISSING_LABEL = "N/A"

# Cell fill when the active extreme is absent
NO_DATA_FILL = "rgba(255,255,255,0.10)"

SERIES_COLORS = {
    "max": "rgba(0, 230, 120, 0.95)",  # green: daily max
    "min": "rgba(120, 220, 255, 0.95)",  # cyan: daily min
}

CELL_STROKE = "rgba(0,0,0,0.18)"
LEGEND_STROKE = "rgba(255,255,255,0.25)"


@dataclass(frozen=True)
class LayoutConfig:
    """Pixel layout of the year x month grid."""

    margin_top: int = 45
    margin_right: int = 60
    margin_bottom: int = 50
    margin_left: int = 90

    cell_width: int = 92
    cell_height: int = 56
    cell_radius: int = 8
    mini_pad: int = 6

    padding_inner: float = 0.22
    padding_outer: float = 0.05

    legend_width: int = 16
    legend_height: int = 240
    legend_gap: int = 10
    legend_step: float = 0.05
    legend_ticks: int = 6

    sparkline_ticks: int = 10
    sparkline_width: float = 1.4

    # room below the grid for the mode caption
    footer_height: int = 80

    def chart_width(self, year_count: int) -> int:
        return self.margin_left + self.margin_right + year_count * self.cell_width

    def chart_height(self) -> int:
        return (
            self.margin_top
            + self.margin_bottom
            + len(MONTHS) * self.cell_height
            + self.footer_height
        )


DEFAULT_LAYOUT = LayoutConfig()
