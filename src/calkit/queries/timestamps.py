"""Instant-based queries: epoch timestamps, day spans and clock formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Mapping, Optional, Union

from calkit.calendar import InvalidArgumentError
from calkit.config import CalkitConfig, load_config
from calkit.queries._coerce import DateLike, to_datetime, to_local, to_local_date
from calkit.schedule import DatePeriod

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MS_PER_DAY = 86_400_000

_ONE_MS = timedelta(milliseconds=1)


def date_to_timestamp(value: DateLike, *, config: Optional[CalkitConfig] = None) -> int:
    """
    Milliseconds since 1970-01-01T00:00:00Z.

    '01 Jan 1970 00:00:00 UTC' → 0
    '04 Dec 1995 00:12:00 UTC' → 818035920000
    """
    return (to_datetime(value, config) - EPOCH) // _ONE_MS


def time_of_day(value: DateLike, *, config: Optional[CalkitConfig] = None) -> str:
    """24-hour ``HH:MM:SS``."""
    return to_local(value, config).strftime("%H:%M:%S")


def days_in_period(
    start: DateLike, end: DateLike, *, config: Optional[CalkitConfig] = None
) -> int:
    """Days between two instants, counting both ends: floor(Δms / 1 day) + 1."""
    cfg = config if config is not None else load_config()
    delta = date_to_timestamp(end, config=cfg) - date_to_timestamp(start, config=cfg)
    return delta // MS_PER_DAY + 1


def is_date_in_period(
    value: DateLike,
    period: Union[DatePeriod, Mapping[str, DateLike]],
    *,
    config: Optional[CalkitConfig] = None,
) -> bool:
    """
    True if ``start <= value <= end``.

    A DatePeriod is compared by calendar day, so any time on its end date
    is inside.  A ``{"start": ..., "end": ...}`` mapping is compared as
    instants.
    """
    cfg = config if config is not None else load_config()
    if isinstance(period, DatePeriod):
        return to_local_date(value, cfg) in period
    try:
        start, end = period["start"], period["end"]
    except KeyError as exc:
        raise InvalidArgumentError(
            "Period mapping needs 'start' and 'end' keys."
        ) from exc

    ts = date_to_timestamp(value, config=cfg)
    return (
        date_to_timestamp(start, config=cfg)
        <= ts
        <= date_to_timestamp(end, config=cfg)
    )


def format_us_datetime(value: DateLike, *, config: Optional[CalkitConfig] = None) -> str:
    """
    ``M/D/YYYY, h:mm:ss AM/PM`` with no padding on month, day or hour.

    '2024-02-01T15:00:00.000Z' → '2/1/2024, 3:00:00 PM'
    """
    dt = to_local(value, config)
    hour = dt.hour % 12 or 12
    meridiem = "PM" if dt.hour >= 12 else "AM"
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    )
