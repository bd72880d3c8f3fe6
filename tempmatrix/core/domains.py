"""
domains.py

Global value ranges for calibrating the matrix scales.

Computed once per matrix build. The union of the two monthly-extreme ranges is
the colour domain for both modes, so toggling never rescales the legend.
"""

from tempmatrix.core.matrix_builder import TemperatureMatrix
from tempmatrix.models.temperature import DomainRanges, ValueRange
from tempmatrix.utils.log_util import app_logger

logger = app_logger(__name__)


def compute_domain_ranges(matrix: TemperatureMatrix) -> DomainRanges:
    """
    Collect monthly extremes and every daily value in a single pass.

    :param matrix: Built TemperatureMatrix
    :return: DomainRanges; lists with no values produce the empty range
    """
    max_extremes = []
    min_extremes = []
    daily_values = []

    for cell in matrix:
        if cell.monthly_max_extreme is not None:
            max_extremes.append(cell.monthly_max_extreme)
        if cell.monthly_min_extreme is not None:
            min_extremes.append(cell.monthly_min_extreme)
        daily_values.extend(point.value for point in cell.daily_max)
        daily_values.extend(point.value for point in cell.daily_min)

    monthly_max = ValueRange.from_values(max_extremes)
    monthly_min = ValueRange.from_values(min_extremes)

    ranges = DomainRanges(
        monthly_max=monthly_max,
        monthly_min=monthly_min,
        monthly_union=monthly_max.union(monthly_min),
        daily_all=ValueRange.from_values(daily_values),
    )

    if ranges.monthly_union.is_empty:
        logger.warning("No monthly extremes found; colour domain is empty")
    else:
        logger.debug(
            f"Domain ranges: union={ranges.monthly_union.as_tuple()}, "
            f"daily={ranges.daily_all.as_tuple()}"
        )
    return ranges
