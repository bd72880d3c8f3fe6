"""
loader.py

Thin CSV loading for daily temperature files.

The loader only reads raw rows; validation belongs to core.normalize. Anything
that prevents delivering a row sequence is reported as DataLoadError.
"""

from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from tempmatrix import config as cfg
from tempmatrix.core.normalize import normalize_rows
from tempmatrix.models.temperature import DailyRecord
from tempmatrix.utils.log_util import app_logger

logger = app_logger(__name__)


class DataLoadError(RuntimeError):
    """The dataset could not be supplied at all."""


def load_daily_rows(path: Union[str, Path]) -> List[Dict[str, str]]:
    """
    Read a daily temperature CSV into raw row dicts.

    Values are kept as strings so the normalizer sees exactly what the file holds.

    :param path: CSV path with date, max_temperature, min_temperature columns
    :return: List of row dicts
    :raises DataLoadError: If the file is missing, unreadable or lacks columns
    """
    path = Path(path)
    if not path.exists():
        raise DataLoadError(f"Data file not found: {path}")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (OSError, ValueError, pd.errors.ParserError) as e:
        raise DataLoadError(f"Could not read {path}: {e}") from e

    missing = [col for col in cfg.REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise DataLoadError(f"{path} is missing columns: {', '.join(missing)}")

    logger.info(f"Loaded {len(df)} rows from {path}")
    return df[list(cfg.REQUIRED_COLUMNS)].to_dict("records")


def load_daily_records(path: Union[str, Path]) -> List[DailyRecord]:
    """Load a CSV and return its valid daily records."""
    return normalize_rows(load_daily_rows(path))
