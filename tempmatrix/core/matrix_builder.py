"""
matrix_builder.py

Pure data processing for the year x month temperature matrix.

Selects the most recent calendar years, groups daily records by (year, month),
and produces one MatrixCell per pair with the monthly extremes and day-sorted
daily series. Nothing here depends on plotly or streamlit.
"""

from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

import pandas as pd

from tempmatrix.models.temperature import DailyPoint, DailyRecord, MatrixCell
from tempmatrix.utils.log_util import app_logger

logger = app_logger(__name__)

MONTH_COUNT = 12

_RECORD_COLUMNS = ["year", "month", "day", "tmax", "tmin"]


class TemperatureMatrix:
    """
    Flat arena of cells indexed by (year index, month).

    Years are unique and ascending. Every year holds exactly twelve cells, so
    cell (year, month) lives at ``year_index * 12 + month``.
    """

    def __init__(self, years: Sequence[int], cells: Sequence[MatrixCell]):
        self._years = tuple(years)
        self._cells = tuple(cells)
        self._index = {year: i for i, year in enumerate(self._years)}

        if len(self._index) != len(self._years):
            raise ValueError("Matrix years must be unique")
        if len(self._cells) != len(self._years) * MONTH_COUNT:
            raise ValueError(
                f"Expected {len(self._years) * MONTH_COUNT} cells, got {len(self._cells)}"
            )

    @property
    def years(self) -> Tuple[int, ...]:
        return self._years

    @property
    def empty(self) -> bool:
        return not self._years

    def cell(self, year: int, month: int) -> MatrixCell:
        """
        Look up one cell.

        :raises KeyError: If the year is not part of the matrix
        :raises ValueError: If month is outside 0..11
        """
        if not 0 <= month < MONTH_COUNT:
            raise ValueError(f"Month must be in 0..11, got {month}")
        return self._cells[self._index[year] * MONTH_COUNT + month]

    def row(self, year: int) -> Tuple[MatrixCell, ...]:
        start = self._index[year] * MONTH_COUNT
        return self._cells[start : start + MONTH_COUNT]

    def as_nested(self) -> Dict[int, Dict[int, MatrixCell]]:
        """Return the year -> month -> cell mapping view."""
        return {
            year: {cell.month: cell for cell in self.row(year)} for year in self._years
        }

    def __iter__(self) -> Iterator[MatrixCell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TemperatureMatrix):
            return NotImplemented
        return self._years == other._years and self._cells == other._cells

    def __repr__(self) -> str:
        return f"TemperatureMatrix(years={list(self._years)}, cells={len(self._cells)})"


def select_years(records: Iterable[DailyRecord], count: int) -> List[int]:
    """
    Pick the ``count`` most recent distinct calendar years, ascending.

    :param records: Normalized daily records
    :param count: Number of years to keep
    :return: Sorted list of at most ``count`` years
    """
    if count < 0:
        raise ValueError(f"Year count must not be negative, got {count}")

    years = sorted({record.year for record in records})
    selected = years[max(0, len(years) - count) :] if count else []

    logger.debug(f"Selected {len(selected)} of {len(years)} years: {selected}")
    return selected


def records_to_frame(records: Iterable[DailyRecord]) -> pd.DataFrame:
    """
    Tabulate records into year, month, day, tmax, tmin columns.

    :param records: Normalized daily records
    :return: DataFrame with one row per record
    """
    records = list(records)
    return pd.DataFrame(
        {
            "year": [r.year for r in records],
            "month": [r.month for r in records],
            "day": [r.day for r in records],
            "tmax": [r.tmax for r in records],
            "tmin": [r.tmin for r in records],
        },
        columns=_RECORD_COLUMNS,
    )


def _empty_cell(year: int, month: int) -> MatrixCell:
    return MatrixCell(
        year=year,
        month=month,
        monthly_max_extreme=None,
        monthly_min_extreme=None,
        daily_max=(),
        daily_min=(),
    )


def _cell_from_group(year: int, month: int, group: pd.DataFrame) -> MatrixCell:
    days = [int(d) for d in group["day"]]
    tmax = [float(v) for v in group["tmax"]]
    tmin = [float(v) for v in group["tmin"]]

    return MatrixCell(
        year=year,
        month=month,
        monthly_max_extreme=max(tmax),
        monthly_min_extreme=min(tmin),
        daily_max=tuple(DailyPoint(d, v) for d, v in zip(days, tmax)),
        daily_min=tuple(DailyPoint(d, v) for d, v in zip(days, tmin)),
    )


def build_matrix(
    records: Iterable[DailyRecord], years: Sequence[int]
) -> TemperatureMatrix:
    """
    Group records into one cell per (year, month) for the selected years.

    The max extreme comes from the tmax field and the min extreme from the tmin
    field. Daily series are sorted by day; duplicate days are all kept, ordered
    by value so the result does not depend on input row order.

    :param records: Normalized daily records
    :param years: Ascending selected years (from select_years)
    :return: TemperatureMatrix with len(years) * 12 cells
    """
    years = list(years)
    df = records_to_frame(records)
    df = df[df["year"].isin(years)]

    groups = {}
    if not df.empty:
        df = df.sort_values(["year", "month", "day", "tmax", "tmin"], kind="mergesort")
        groups = {
            (int(year), int(month)): group
            for (year, month), group in df.groupby(["year", "month"], sort=False)
        }

    cells = []
    for year in years:
        for month in range(MONTH_COUNT):
            group = groups.get((year, month))
            if group is None:
                cells.append(_empty_cell(year, month))
            else:
                cells.append(_cell_from_group(year, month, group))

    matrix = TemperatureMatrix(years, cells)
    filled = sum(1 for cell in matrix if not cell.is_empty)
    logger.info(
        f"Built temperature matrix: {len(years)} years x {MONTH_COUNT} months, "
        f"{filled} cells with data"
    )
    if not years:
        logger.warning("No years selected; matrix is empty")
    return matrix
