"""
calkit.calendar
~~~~~~~~~~~~~~~

Boundary-safe calendar primitives on ``datetime.date`` values.  Every
operation returns a new, normalized date; nothing mutates its arguments.

Basic usage::

    from calkit.calendar import add_days, format_ddmmyyyy, parse_date

    d = parse_date("28-02-2024")
    format_ddmmyyyy(add_days(d, 1))               # → '29-02-2024'

Public API
----------
parse_date, format_ddmmyyyy     DD-MM-YYYY conversion.
add_days, compare, day_of_week  Date arithmetic (Sunday = 0).
days_in_month, is_leap_year     Gregorian month lengths.
quarter_of                      Calendar quarter of a month.
CalendarError                   Base exception for all calendar-related errors.
"""

from __future__ import annotations

from calkit.calendar._exceptions import (
    CalendarError,
    CapabilityNotImplementedError,
    InvalidArgumentError,
    InvalidFormatError,
)
from calkit.calendar.primitives import (
    DDMMYYYY,
    add_days,
    compare,
    day_of_week,
    days_in_month,
    format_ddmmyyyy,
    is_leap_year,
    parse_date,
    quarter_of,
)

__all__ = [
    "DDMMYYYY",
    "CalendarError",
    "CapabilityNotImplementedError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "add_days",
    "compare",
    "day_of_week",
    "days_in_month",
    "format_ddmmyyyy",
    "is_leap_year",
    "parse_date",
    "quarter_of",
]
