import logging
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional, Union

import numpy as np

from calkit.calendar import (
    InvalidArgumentError,
    add_days,
    compare,
    format_ddmmyyyy,
    parse_date,
)
from calkit.config import CalkitConfig, load_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatePeriod:
    """Inclusive ``[start, end]`` range of calendar dates."""

    start: date
    end: date

    @classmethod
    def parse(cls, start: str, end: str) -> "DatePeriod":
        return cls(parse_date(start), parse_date(end))

    @property
    def is_inverted(self) -> bool:
        return compare(self.start, self.end) > 0

    @property
    def span_days(self) -> int:
        """Number of days in the period, both bounds included; 0 when inverted."""
        if self.is_inverted:
            return 0
        return (self.end - self.start).days + 1

    def __contains__(self, d: date) -> bool:
        return self.start <= d <= self.end


PeriodLike = Union[DatePeriod, Mapping[str, str]]


def _check_count(name: str, value: int, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(f"{name} must be an integer; got {value!r}.")
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be >= {minimum}; got {value}.")
    return int(value)


class WorkCycle:
    """
    Repeating pattern of ``work_days`` working days followed by ``off_days``
    days off, anchored at offset 0.

    The cycle is held as a dense weight pattern (1.0 = working, 0.0 = off);
    a span of days is classified by indexing the pattern with
    ``arange(n) % length``.
    """

    def __init__(self, work_days: int, off_days: int = 0) -> None:
        self._work_days: int = _check_count("work_days", work_days, 1)
        self._off_days: int = _check_count("off_days", off_days, 0)
        self._n: int = self._work_days + self._off_days

        pattern = np.zeros(self._n, dtype=float)
        pattern[: self._work_days] = 1.0
        pattern.flags.writeable = False
        self._np_pattern: np.ndarray = pattern

    # ── classification ───────────────────────────────────────────────────

    def is_working(self, offset: int) -> bool:
        """True if the day ``offset`` days after the anchor is a working day."""
        offset = _check_count("offset", offset, 0)
        return bool(self._np_pattern[offset % self._n] > 0.0)

    def mask(self, n_days: int) -> np.ndarray:
        """Boolean array marking the working offsets in ``[0, n_days)``."""
        n_days = _check_count("n_days", n_days, 0)
        return self._np_pattern[np.arange(n_days, dtype=np.int64) % self._n] > 0.0

    def working_dates(self, period: "DatePeriod") -> list[date]:
        """Working dates inside ``period``, with the cycle anchored at its start."""
        if period.is_inverted:
            return []
        offsets = np.flatnonzero(self.mask(period.span_days))
        return [add_days(period.start, int(k)) for k in offsets]

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def work_days(self) -> int:
        return self._work_days

    @property
    def off_days(self) -> int:
        return self._off_days

    @property
    def length(self) -> int:
        return self._n

    @property
    def pattern(self) -> np.ndarray:
        return self._np_pattern

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorkCycle):
            return NotImplemented
        return (self._work_days, self._off_days) == (other._work_days, other._off_days)

    def __hash__(self) -> int:
        return hash((self._work_days, self._off_days))

    def __repr__(self) -> str:
        return (
            f"WorkCycle(work_days={self._work_days}, "
            f"off_days={self._off_days}, "
            f"length={self._n})"
        )


def _to_period(period: PeriodLike) -> DatePeriod:
    if isinstance(period, DatePeriod):
        return period
    if isinstance(period, Mapping):
        try:
            start, end = period["start"], period["end"]
        except KeyError as exc:
            raise InvalidArgumentError(
                f"Period mapping needs 'start' and 'end' keys; got {sorted(period)}."
            ) from exc
        return DatePeriod.parse(start, end)
    raise TypeError(f"Unsupported type for period: {type(period)}")


def work_schedule(
    period: PeriodLike,
    work_days: int,
    off_days: int,
    *,
    config: Optional[CalkitConfig] = None,
) -> list[str]:
    """
    Working-day dates of a repeating work/off cycle within an inclusive period.

    The cycle starts on ``period.start`` with a run of ``work_days`` working
    days, then ``off_days`` days off, repeating until ``period.end``.  Dates
    are returned chronologically as ``DD-MM-YYYY`` strings; an inverted
    period yields ``[]``.

    Example::

        >>> work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 1, 1)
        ['01-01-2024', '03-01-2024', '05-01-2024', '07-01-2024', '09-01-2024']
    """
    p = _to_period(period)
    cycle = WorkCycle(work_days, off_days)
    cfg = config if config is not None else load_config()

    if p.span_days > cfg.max_span_days:
        raise InvalidArgumentError(
            f"Period spans {p.span_days} days; the limit is {cfg.max_span_days}."
        )

    schedule = [format_ddmmyyyy(d) for d in cycle.working_dates(p)]
    logger.debug(
        "Generated %d working days for %r over %s..%s",
        len(schedule), cycle, p.start.isoformat(), p.end.isoformat(),
    )
    return schedule
