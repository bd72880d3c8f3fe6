#!/usr/bin/env python3
"""
render_matrix.py: Render the temperature matrix from a daily CSV to a standalone HTML file.

Useful for sharing the chart without running the streamlit app.

Usage:
    python -m tempmatrix.cli.render_matrix [--data data/temperature_daily.csv] [--years 10] [--mode max] [--output matrix.html]
"""

import argparse
import sys

from tempmatrix import config as cfg
from tempmatrix.core.encoding import EncodingEngine
from tempmatrix.core.loader import DataLoadError, load_daily_rows
from tempmatrix.core.matrix_viz import create_temperature_matrix_figure
from tempmatrix.core.pipeline import build_view_state
from tempmatrix.models.temperature import Mode
from tempmatrix.utils.log_util import app_logger

logger = app_logger(__name__)


def render_to_html(data_path: str, output_path: str, years: int, mode: Mode) -> int:
    """
    Build the matrix for ``data_path`` and write it as HTML.

    Returns the number of years rendered.
    """
    rows = load_daily_rows(data_path)
    view_state = build_view_state(rows, years, mode=mode)

    plan = EncodingEngine(view_state).plan()
    fig = create_temperature_matrix_figure(plan)
    fig.write_html(output_path, include_plotlyjs="cdn")

    logger.info(f"Matrix written to: {output_path}")
    return len(view_state.years)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Render the monthly temperature matrix to HTML")
    parser.add_argument("--data", type=str, default=cfg.DATA_PATH, help="Daily temperature CSV")
    parser.add_argument("--years", type=int, default=cfg.YEAR_COUNT, help="Number of recent years")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.EXTREME_MAX.value,
        help="Monthly extreme used for the cell background",
    )
    parser.add_argument("--output", type=str, default="temperature_matrix.html", help="HTML output path")
    args = parser.parse_args(argv)

    if args.years < 0:
        parser.error("--years must not be negative")

    try:
        count = render_to_html(args.data, args.output, args.years, Mode(args.mode))
    except DataLoadError as e:
        logger.exception(f"Failed to load temperature data: {e}")
        print(f"❌ Error: {e}")
        return 1
    except OSError as e:
        logger.exception(f"Failed to write {args.output}: {e}")
        print(f"❌ Error: {e}")
        return 1

    print(f"✅ Rendered {count} years to: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
