"""
Utility functions for FinPlanLab.

Every quantity of time inside the engine is an *epoch day*: the integer number of
days since 1970-01-01 (UTC). These helpers convert between epoch days, calendar
dates and ISO strings using numpy's ``datetime64`` arithmetic.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone

import numpy as np
import pandas as pd

DEFAULT_BIRTH_YEAR = 1990
DEFAULT_BIRTH_MONTH = 1
DEFAULT_BIRTH_DAY = 1


def date_to_epoch_day(value: date) -> int:
    """
    Convert a calendar date to an epoch day.

    **Args:**
        value: A ``datetime.date`` (a ``datetime`` is truncated to its date)

    **Returns:**
        Integer days since 1970-01-01

    **Example:**
        ```python
        from datetime import date
        from finplanlab.core.utils import date_to_epoch_day

        date_to_epoch_day(date(1970, 1, 2))  # 1
        date_to_epoch_day(date(2024, 1, 1))  # 19723
        ```
    """
    if isinstance(value, datetime):
        value = value.date()
    return int(np.datetime64(value, "D").astype("int64"))


def epoch_day_to_date(day: int) -> date:
    """Convert an epoch day back to a calendar date."""
    return np.datetime64(int(day), "D").item()


def create_epoch_day(year: int, month: int, day: int) -> int:
    """Epoch day for a (year, month, day) triple."""
    return date_to_epoch_day(date(year, month, day))


def epoch_day_to_date_string(day: int) -> str:
    """Format an epoch day as ``YYYY-MM-DD``."""
    return epoch_day_to_date(day).isoformat()


def parse_date_string(value: str | date) -> date:
    """
    Parse an ISO date or timestamp string into a calendar date.

    Accepts plain dates (``2024-01-01``) as well as full timestamps
    (``2024-01-01T00:00:00.000Z``); the time component is discarded.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return pd.Timestamp(value).date()


def date_string_to_epoch_day(value: str) -> int:
    """Epoch day for an ISO date or timestamp string."""
    return date_to_epoch_day(parse_date_string(value))


def today_epoch_day() -> int:
    """Epoch day for the current UTC date."""
    return date_to_epoch_day(datetime.now(timezone.utc).date())


def is_last_day_of_month(day: int) -> bool:
    """True when the epoch day is the final calendar day of its month."""
    d = np.datetime64(int(day), "D")
    return bool((d + 1).astype("datetime64[M]") != d.astype("datetime64[M]"))


def last_days_of_months_in_range(start_day: int, end_day: int) -> list[int]:
    """
    List the month-end epoch days inside an inclusive window.

    **Use Cases:**
    - Growth and interest accrual days for balances and debts

    **Args:**
        start_day: First epoch day of the window (inclusive)
        end_day: Last epoch day of the window (inclusive)

    **Returns:**
        Ascending list of epoch days that fall on the last day of a month

    **Example:**
        ```python
        from finplanlab.core.utils import create_epoch_day, last_days_of_months_in_range

        start = create_epoch_day(2024, 1, 15)
        end = create_epoch_day(2024, 3, 30)
        last_days_of_months_in_range(start, end)
        # [Jan 31, Feb 29] as epoch days; Mar 31 is outside the window
        ```
    """
    if start_day > end_day:
        return []

    first_month = np.datetime64(int(start_day), "D").astype("datetime64[M]")
    last_month = np.datetime64(int(end_day), "D").astype("datetime64[M]")
    months = np.arange(first_month, last_month + 1)

    # Day 0 of the next month is the last day of this one
    month_ends = ((months + 1).astype("datetime64[D]") - 1).astype("int64")
    return [int(d) for d in month_ends if start_day <= d <= end_day]


def calculate_age(birth_date: str | None, today_day: int | None = None) -> int:
    """
    Age in whole years on ``today_day`` for a ``YYYY-MM-DD`` birth date.

    A missing birth date falls back to January 1st of the default birth year.
    """
    today = epoch_day_to_date(today_day if today_day is not None else today_epoch_day())

    if not birth_date:
        return today.year - DEFAULT_BIRTH_YEAR

    born = parse_date_string(birth_date)
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def slugify_name(name: str) -> str:
    """
    Derive an id from a display name.

    "Main Checking" -> "main_checking"
    """
    return re.sub(r"[^a-z0-9]+", "_", name.strip().lower()).strip("_")
