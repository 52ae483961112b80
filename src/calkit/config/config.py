"""Runtime configuration loaded from environment variables."""
from __future__ import annotations

from dataclasses import dataclass
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from calkit.calendar._exceptions import InvalidArgumentError

DEFAULT_NAIVE_TZ = "UTC"
# Roughly the whole representable date range (years 1..9999).
DEFAULT_MAX_SPAN_DAYS = 3_660_000


@dataclass(frozen=True)
class CalkitConfig:
    naive_tz: str = DEFAULT_NAIVE_TZ
    max_span_days: int = DEFAULT_MAX_SPAN_DAYS

    def __post_init__(self) -> None:
        if self.max_span_days < 1:
            raise InvalidArgumentError(
                f"max_span_days must be >= 1; got {self.max_span_days}."
            )
        try:
            ZoneInfo(self.naive_tz)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidArgumentError(f"Unknown timezone {self.naive_tz!r}.") from exc

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.naive_tz)


def load_config() -> CalkitConfig:
    """Load config from environment with defaults suitable for UTC inputs."""
    raw_span = os.getenv("CALKIT_MAX_SPAN_DAYS", str(DEFAULT_MAX_SPAN_DAYS))
    try:
        max_span_days = int(raw_span)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"CALKIT_MAX_SPAN_DAYS must be an integer; got {raw_span!r}."
        ) from exc
    return CalkitConfig(
        naive_tz=os.getenv("CALKIT_NAIVE_TZ") or DEFAULT_NAIVE_TZ,
        max_span_days=max_span_days,
    )
