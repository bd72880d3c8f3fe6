"""
pipeline.py

Runs raw rows through normalization, year selection, matrix building and
domain calculation to produce the session ViewState.
"""

from typing import Iterable, Mapping

from tempmatrix import config as cfg
from tempmatrix.core.domains import compute_domain_ranges
from tempmatrix.core.matrix_builder import build_matrix, select_years
from tempmatrix.core.normalize import normalize_rows
from tempmatrix.models.temperature import Mode, ViewState
from tempmatrix.utils.log_util import app_logger

logger = app_logger(__name__)


def build_view_state(
    rows: Iterable[Mapping],
    year_count: int = cfg.YEAR_COUNT,
    mode: Mode = Mode.EXTREME_MAX,
) -> ViewState:
    """
    Build the immutable matrix and ranges for a session.

    :param rows: Raw rows with date, max_temperature, min_temperature
    :param year_count: Number of most recent years to show
    :param mode: Initial background mode
    :return: ViewState
    """
    records = normalize_rows(rows)
    years = select_years(records, year_count)
    matrix = build_matrix(records, years)
    ranges = compute_domain_ranges(matrix)

    logger.info(
        f"View state ready: {len(records)} records, years {years[:1]}..{years[-1:]}"
    )
    return ViewState(matrix=matrix, domain_ranges=ranges, mode=mode)
