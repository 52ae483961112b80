"""
calkit.queries
~~~~~~~~~~~~~~

One-shot calendar queries built on calkit.calendar.  Arguments named
``value`` accept a ``date``, a ``datetime``, a ``numpy.datetime64`` or a date
string (ISO 8601, RFC 2822 and similar, parsed with ``dateutil``).  Naive
values are read as wall-clock times in the configured timezone (UTC unless
``CALKIT_NAIVE_TZ`` says otherwise).

Basic usage::

    from calkit.queries import date_to_timestamp, day_name, week_number

    date_to_timestamp("04 Dec 1995 00:12:00 UTC")   # → 818035920000
    day_name("1970-01-01T00:00:00Z")                # → 'Thursday'
    week_number("2024-02-23")                       # → 8
"""

from __future__ import annotations

from calkit.calendar import days_in_month
from calkit.queries.lookups import (
    DAY_NAMES,
    day_name,
    is_leap_year_of,
    next_friday,
    next_friday_the_13th,
    quarter,
    week_number,
    weekends_in_month,
)
from calkit.queries.timestamps import (
    date_to_timestamp,
    days_in_period,
    format_us_datetime,
    is_date_in_period,
    time_of_day,
)

__all__ = [
    "DAY_NAMES",
    "date_to_timestamp",
    "day_name",
    "days_in_month",
    "days_in_period",
    "format_us_datetime",
    "is_date_in_period",
    "is_leap_year_of",
    "next_friday",
    "next_friday_the_13th",
    "quarter",
    "time_of_day",
    "week_number",
    "weekends_in_month",
]
