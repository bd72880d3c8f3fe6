"""
normalize.py

Row validation for daily temperature observations.

Raw rows carry a ``YYYY-MM-DD`` date string and numeric (or numeric string)
max/min temperatures. Rows that fail validation are dropped here; everything
downstream assumes well-formed DailyRecord objects.
"""

import datetime
import math
import numbers
import re
from typing import Iterable, List, Mapping, Optional

from tempmatrix.models.temperature import DailyRecord
from tempmatrix.utils.log_util import app_logger

logger = app_logger(__name__)

_DATE_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


def parse_date(value) -> datetime.date:
    """
    Parse a strict ``YYYY-MM-DD`` date string.

    :param value: Date string
    :return: datetime.date
    :raises ValueError: If the string is not zero-padded YYYY-MM-DD or names a
        day that does not exist (e.g. 2023-02-30)
    """
    if not isinstance(value, str):
        raise ValueError(f"Date must be a string, got {type(value).__name__}")

    match = _DATE_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"Date '{value}' is not in YYYY-MM-DD format")

    year, month, day = (int(part) for part in match.groups())
    return datetime.date(year, month, day)


def parse_number(value) -> float:
    """
    Coerce a number or numeric string to a finite float.

    :param value: int, float or numeric string (surrounding whitespace allowed)
    :return: float
    :raises ValueError: For blank strings, non-numeric text, booleans, NaN or infinity
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a temperature value: {value!r}")

    if isinstance(value, numbers.Real):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Blank temperature value")
        # float() also takes digit separators and non-ASCII digits
        if not text.isascii() or "_" in text:
            raise ValueError(f"Not a plain decimal number: {value!r}")
        number = float(text)
    else:
        raise ValueError(f"Unsupported temperature type: {type(value).__name__}")

    if not math.isfinite(number):
        raise ValueError(f"Temperature is not finite: {value!r}")
    return number


def normalize_row(row: Mapping) -> Optional[DailyRecord]:
    """
    Convert one raw row into a DailyRecord.

    :param row: Mapping with date, max_temperature, min_temperature keys
    :return: DailyRecord, or None when any field is invalid
    """
    try:
        date = parse_date(row.get("date"))
        tmax = parse_number(row.get("max_temperature"))
        tmin = parse_number(row.get("min_temperature"))
    except (ValueError, TypeError):
        return None

    return DailyRecord(
        date=date,
        year=date.year,
        month=date.month - 1,
        day=date.day,
        tmax=tmax,
        tmin=tmin,
    )


def normalize_rows(rows: Iterable[Mapping]) -> List[DailyRecord]:
    """
    Normalize a sequence of raw rows, silently dropping invalid ones.

    :param rows: Iterable of raw row mappings
    :return: List of valid DailyRecord objects in input order
    """
    records = []
    dropped = 0
    for row in rows:
        record = normalize_row(row)
        if record is None:
            dropped += 1
            continue
        records.append(record)

    if dropped:
        logger.info(f"Dropped {dropped} malformed rows, kept {len(records)}")
    else:
        logger.debug(f"Normalized {len(records)} rows")
    return records
