"""Calendar-day queries: weekday names, recurring-day search, week numbers."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

import numpy as np

from calkit.calendar import (
    InvalidArgumentError,
    add_days,
    day_of_week,
    days_in_month,
    is_leap_year,
    quarter_of,
)
from calkit.config import CalkitConfig
from calkit.queries._coerce import DateLike, to_local_date

logger = logging.getLogger(__name__)

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
FRIDAY = 5

# Mon..Sun; only Saturday and Sunday count.
_WEEKEND_MASK = "0000011"


def day_name(value: DateLike, *, config: Optional[CalkitConfig] = None) -> str:
    return DAY_NAMES[day_of_week(to_local_date(value, config))]


def _scan_after(start: date, predicate: Callable[[date], bool]) -> date:
    # Day-by-day from the day after ``start``; add_days raises past year 9999.
    cursor = add_days(start, 1)
    steps = 1
    while not predicate(cursor):
        cursor = add_days(cursor, 1)
        steps += 1
    logger.debug("Scan from %s matched %s after %d days", start, cursor, steps)
    return cursor


def next_friday(value: DateLike, *, config: Optional[CalkitConfig] = None) -> date:
    """First Friday strictly after the given day."""
    return _scan_after(
        to_local_date(value, config),
        lambda d: day_of_week(d) == FRIDAY,
    )


def next_friday_the_13th(
    value: DateLike, *, config: Optional[CalkitConfig] = None
) -> date:
    """First Friday falling on the 13th strictly after the given day."""
    return _scan_after(
        to_local_date(value, config),
        lambda d: d.day == 13 and day_of_week(d) == FRIDAY,
    )


def weekends_in_month(month: int, year: int) -> int:
    """Number of Saturdays and Sundays in the month."""
    n_days = days_in_month(month, year)
    if year > 9999:
        raise InvalidArgumentError(f"Year must be <= 9999; got {year}.")
    first = np.datetime64(date(year, month, 1), "D")
    return int(np.busday_count(first, first + n_days, weekmask=_WEEKEND_MASK))


def week_number(value: DateLike, *, config: Optional[CalkitConfig] = None) -> int:
    """
    Week of the year: week 1 contains January 1 and weeks start on Monday.

    Date(2024, 0, 31) → 5, Date(2024, 1, 23) → 8
    """
    d = to_local_date(value, config)
    jan1 = date(d.year, 1, 1)
    return ((d - jan1).days + jan1.weekday()) // 7 + 1


def quarter(value: DateLike, *, config: Optional[CalkitConfig] = None) -> int:
    return quarter_of(to_local_date(value, config).month)


def is_leap_year_of(value: DateLike, *, config: Optional[CalkitConfig] = None) -> bool:
    return is_leap_year(to_local_date(value, config).year)
