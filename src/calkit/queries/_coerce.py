from __future__ import annotations

import logging
import warnings
from datetime import date, datetime, time
from typing import Optional, Union

import numpy as np
from dateutil import parser as _dateparser
from dateutil.parser import UnknownTimezoneWarning

from calkit.calendar import InvalidFormatError
from calkit.config import CalkitConfig, load_config

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, np.datetime64]


# RFC 2822 zone names dateutil recognises but cannot resolve on its own.
RFC2822_ZONES = {
    "UT": 0,
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
}

# Two unrelated fallbacks: text that leans on either one lacks a full date.
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _parse_with(text: str, default: datetime) -> datetime:
    with warnings.catch_warnings():
        warnings.simplefilter("error", UnknownTimezoneWarning)
        return _dateparser.parse(text, default=default, tzinfos=RFC2822_ZONES)


def _parse_text(text: str) -> datetime:
    try:
        first, second = (_parse_with(text, d) for d in _DEFAULTS)
    except (ValueError, OverflowError, UnknownTimezoneWarning) as exc:
        logger.debug("Could not parse date text %r: %s", text, exc)
        raise InvalidFormatError(f"Unrecognised date string: {text!r}") from exc
    if first != second:
        logger.debug("Date text %r has no complete year, month and day", text)
        raise InvalidFormatError(f"Incomplete date string: {text!r}")
    return first


def to_datetime(value: DateLike, config: Optional[CalkitConfig] = None) -> datetime:
    """
    Convert a date-like into an aware datetime.

    Naive values (including ``date`` and ``numpy.datetime64``) are taken as
    wall-clock times in the configured timezone.
    """
    cfg = config if config is not None else load_config()
    if isinstance(value, str):
        dt = _parse_text(value)
    elif isinstance(value, np.datetime64):
        if np.isnat(value):
            raise InvalidFormatError("NaT is not a date.")
        dt = value.astype("datetime64[us]").item()
    elif isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time())
    else:
        raise TypeError(f"Unsupported type for date: {type(value)}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=cfg.tzinfo)
    return dt


def to_local(value: DateLike, config: Optional[CalkitConfig] = None) -> datetime:
    """Naive wall-clock datetime in the configured timezone."""
    cfg = config if config is not None else load_config()
    return to_datetime(value, cfg).astimezone(cfg.tzinfo).replace(tzinfo=None)


def to_local_date(value: DateLike, config: Optional[CalkitConfig] = None) -> date:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return to_local(value, config).date()
