import logging
from datetime import date, timedelta

from ._exceptions import (
    CapabilityNotImplementedError,
    InvalidArgumentError,
    InvalidFormatError,
)

logger = logging.getLogger(__name__)

DDMMYYYY = "DD-MM-YYYY"

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"Month must be in 1..12; got {month}.")


def _check_year(year: int) -> None:
    if year < 1:
        raise InvalidArgumentError(f"Year must be >= 1; got {year}.")


# ── leap years and month lengths ─────────────────────────────────────────

def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4 and (not by 100, or by 400)."""
    _check_year(year)
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    _check_month(month)
    _check_year(year)
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def quarter_of(month: int) -> int:
    """1–3 → 1, 4–6 → 2, 7–9 → 3, 10–12 → 4."""
    _check_month(month)
    return (month - 1) // 3 + 1


# ── parsing / formatting ─────────────────────────────────────────────────

def parse_date(text: str, fmt: str = DDMMYYYY) -> date:
    """
    Parse ``text`` into a normalized date.

    Only the ``DD-MM-YYYY`` layout is provided; any other ``fmt`` raises
    CapabilityNotImplementedError.  The text must split on ``-`` into
    exactly three all-digit components, and the day is validated against
    the length of its month.
    """
    if fmt != DDMMYYYY:
        raise CapabilityNotImplementedError(
            f"Date format {fmt!r} is not supported; only {DDMMYYYY!r} is."
        )
    if not isinstance(text, str):
        raise InvalidFormatError(f"Expected a date string; got {type(text).__name__}.")

    parts = text.strip().split("-")
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        logger.debug("Rejected date text %r: not three numeric components", text)
        raise InvalidFormatError(f"Expected {DDMMYYYY}; got {text!r}.")

    day, month, year = (int(p) for p in parts)
    if not 1 <= month <= 12:
        raise InvalidFormatError(f"Month out of range in {text!r}.")
    if not 1 <= year <= 9999:
        raise InvalidFormatError(f"Year out of range in {text!r}.")
    if not 1 <= day <= days_in_month(month, year):
        raise InvalidFormatError(f"Day out of range in {text!r}.")
    return date(year, month, day)


def format_ddmmyyyy(d: date) -> str:
    return f"{d.day:02d}-{d.month:02d}-{d.year}"


# ── arithmetic ───────────────────────────────────────────────────────────

def add_days(d: date, n: int) -> date:
    """Return a new date ``n`` days after ``d`` (``n`` may be negative)."""
    try:
        return d + timedelta(days=int(n))
    except OverflowError as exc:
        raise InvalidArgumentError(
            f"Adding {n} days to {d.isoformat()} leaves the supported date range."
        ) from exc


def compare(a: date, b: date) -> int:
    """Total order by (year, month, day): -1, 0 or 1."""
    return (a > b) - (a < b)


def day_of_week(d: date) -> int:
    """Day-of-week index with Sunday = 0 … Saturday = 6."""
    return d.isoweekday() % 7
