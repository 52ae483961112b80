"""
tests/queries/test_timestamps.py

Covers:
  - Epoch milliseconds from RFC 2822, ISO 8601, date, datetime and datetime64
  - Naive inputs under a non-UTC configured timezone
  - HH:MM:SS formatting
  - Inclusive day counts between instants
  - Inclusive period containment
  - US-locale M/D/YYYY, h:mm:ss AM/PM formatting
  - North American RFC 2822 zone names, unknown zones, incomplete dates
  - Invalid input handling
"""

from datetime import date, datetime, timedelta, timezone

import numpy as np
import pytest

from calkit.calendar import InvalidArgumentError, InvalidFormatError
from calkit.config import CalkitConfig
from calkit.queries import (
    date_to_timestamp,
    days_in_period,
    format_us_datetime,
    is_date_in_period,
    time_of_day,
)
from calkit.schedule import DatePeriod


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def utc():
    return CalkitConfig()


@pytest.fixture
def berlin():
    return CalkitConfig(naive_tz="Europe/Berlin")


@pytest.fixture
def february():
    return {"start": "2024-02-02", "end": "2024-03-02"}


# ── Timestamps ────────────────────────────────────────────────────────────────

class TestDateToTimestamp:

    def test_epoch(self, utc):
        assert date_to_timestamp("01 Jan 1970 00:00:00 UTC", config=utc) == 0

    def test_rfc_style(self, utc):
        assert date_to_timestamp("04 Dec 1995 00:12:00 UTC", config=utc) == 818035920000

    def test_rfc_2822_with_weekday(self, utc):
        assert date_to_timestamp("Mon, 04 Dec 1995 00:12:00 GMT", config=utc) == 818035920000

    def test_iso_with_zulu(self, utc):
        assert date_to_timestamp("2024-02-01T15:00:00.000Z", config=utc) == 1706799600000

    def test_iso_date_only_is_utc_midnight(self, utc):
        assert date_to_timestamp("2024-02-01", config=utc) == 1706745600000

    def test_iso_with_offset(self, utc):
        assert date_to_timestamp("1970-01-01T02:00:00+02:00", config=utc) == 0

    def test_milliseconds_kept(self, utc):
        assert date_to_timestamp("1970-01-01T00:00:00.250Z", config=utc) == 250

    def test_before_epoch_is_negative(self, utc):
        assert date_to_timestamp("1969-12-31T00:00:00Z", config=utc) == -86400000

    def test_date_object(self, utc):
        assert date_to_timestamp(date(1970, 1, 2), config=utc) == 86400000

    def test_aware_datetime(self, utc):
        dt = datetime(1970, 1, 1, 2, tzinfo=timezone(timedelta(hours=2)))
        assert date_to_timestamp(dt, config=utc) == 0

    def test_naive_datetime(self, utc):
        assert date_to_timestamp(datetime(1970, 1, 1, 0, 0, 1), config=utc) == 1000

    def test_datetime64(self, utc):
        assert date_to_timestamp(np.datetime64("1970-01-01T00:00:01"), config=utc) == 1000

    def test_naive_text_in_configured_zone(self, berlin):
        assert date_to_timestamp("2024-02-01T00:00:00", config=berlin) == 1706742000000

    def test_aware_text_ignores_configured_zone(self, berlin):
        assert date_to_timestamp("2024-02-01T00:00:00Z", config=berlin) == 1706745600000

    def test_environment_zone(self, monkeypatch):
        monkeypatch.setenv("CALKIT_NAIVE_TZ", "Europe/Berlin")
        assert date_to_timestamp("2024-02-01T00:00:00") == 1706742000000

    @pytest.mark.parametrize("zone,hours", [
        ("EST", 5), ("EDT", 4), ("CST", 6), ("CDT", 5),
        ("MST", 7), ("MDT", 6), ("PST", 8), ("PDT", 7),
    ])
    def test_rfc_2822_north_american_zones(self, utc, zone, hours):
        text = f"04 Dec 1995 00:12:00 {zone}"
        assert date_to_timestamp(text, config=utc) == 818035920000 + hours * 3_600_000

    def test_eastern_zone_example(self, utc):
        assert date_to_timestamp("04 Dec 1995 00:12:00 EST", config=utc) == 818053920000

    def test_unknown_zone_name_raises(self, utc):
        with pytest.raises(InvalidFormatError):
            date_to_timestamp("04 Dec 1995 00:12:00 XYZT", config=utc)

    @pytest.mark.parametrize("text", ["10:00", "Dec 1995", "04 Dec", "Monday"])
    def test_incomplete_date_raises(self, utc, text):
        with pytest.raises(InvalidFormatError):
            date_to_timestamp(text, config=utc)

    def test_unparseable_raises(self, utc):
        with pytest.raises(InvalidFormatError):
            date_to_timestamp("bogus", config=utc)

    def test_nat_raises(self, utc):
        with pytest.raises(InvalidFormatError):
            date_to_timestamp(np.datetime64("NaT"), config=utc)

    def test_unsupported_type_raises(self, utc):
        with pytest.raises(TypeError):
            date_to_timestamp(0, config=utc)


# ── Time of day ───────────────────────────────────────────────────────────────

class TestTimeOfDay:

    def test_morning(self, utc):
        assert time_of_day(datetime(2023, 6, 1, 8, 20, 55), config=utc) == "08:20:55"

    def test_evening(self, utc):
        assert time_of_day(datetime(2015, 11, 20, 23, 15, 1), config=utc) == "23:15:01"

    def test_midnight(self, utc):
        assert time_of_day(date(2024, 1, 1), config=utc) == "00:00:00"

    def test_aware_text_in_configured_zone(self, berlin):
        assert time_of_day("2024-02-01T15:00:00Z", config=berlin) == "16:00:00"


# ── Day counts ────────────────────────────────────────────────────────────────

class TestDaysInPeriod:

    def test_adjacent_days(self, utc):
        assert days_in_period(
            "2024-02-01T00:00:00.000Z", "2024-02-02T00:00:00.000Z", config=utc
        ) == 2

    def test_twelve_days(self, utc):
        assert days_in_period(
            "2024-02-01T00:00:00.000Z", "2024-02-12T00:00:00.000Z", config=utc
        ) == 12

    def test_same_instant(self, utc):
        assert days_in_period("2024-02-01", "2024-02-01", config=utc) == 1

    def test_partial_day_is_floored(self, utc):
        assert days_in_period(
            "2024-02-01T00:00:00Z", "2024-02-02T23:59:59Z", config=utc
        ) == 2

    def test_end_before_start(self, utc):
        assert days_in_period(
            "2024-02-02T00:00:00Z", "2024-02-01T12:00:00Z", config=utc
        ) == 0

    def test_across_leap_february(self, utc):
        assert days_in_period(date(2024, 2, 1), date(2024, 3, 1), config=utc) == 30


# ── Containment ───────────────────────────────────────────────────────────────

class TestIsDateInPeriod:

    def test_before_start(self, utc, february):
        assert not is_date_in_period("2024-02-01", february, config=utc)

    def test_on_start(self, utc, february):
        assert is_date_in_period("2024-02-02", february, config=utc)

    def test_inside(self, utc, february):
        assert is_date_in_period("2024-02-10", february, config=utc)

    def test_on_end(self, utc, february):
        assert is_date_in_period("2024-03-02", february, config=utc)

    def test_after_end(self, utc, february):
        assert not is_date_in_period("2024-03-03", february, config=utc)

    def test_after_end_by_a_minute(self, utc, february):
        assert not is_date_in_period("2024-03-02T00:01:00Z", february, config=utc)

    def test_date_period(self, utc):
        p = DatePeriod(date(2024, 2, 2), date(2024, 3, 2))
        assert is_date_in_period(date(2024, 3, 2), p, config=utc)
        assert not is_date_in_period(date(2024, 3, 3), p, config=utc)

    def test_date_period_includes_whole_end_day(self, utc):
        p = DatePeriod(date(2024, 2, 2), date(2024, 3, 2))
        assert is_date_in_period("2024-03-02T10:00:00Z", p, config=utc)
        assert is_date_in_period(datetime(2024, 3, 2, 23, 59, 59), p, config=utc)
        assert not is_date_in_period("2024-03-03T00:00:00Z", p, config=utc)

    def test_date_period_uses_configured_zone(self, berlin):
        # 23:30 UTC on 1 March is already 2 March in Berlin
        p = DatePeriod(date(2024, 3, 2), date(2024, 3, 5))
        assert is_date_in_period("2024-03-01T23:30:00Z", p, config=berlin)

    def test_missing_key_raises(self, utc):
        with pytest.raises(InvalidArgumentError):
            is_date_in_period("2024-02-10", {"start": "2024-02-02"}, config=utc)


# ── US-locale formatting ──────────────────────────────────────────────────────

class TestFormatUsDatetime:

    @pytest.mark.parametrize("text,expected", [
        ("2024-02-01T15:00:00.000Z", "2/1/2024, 3:00:00 PM"),
        ("1999-01-05T02:20:00.000Z", "1/5/1999, 2:20:00 AM"),
        ("2010-12-15T22:59:00.000Z", "12/15/2010, 10:59:00 PM"),
    ])
    def test_examples(self, utc, text, expected):
        assert format_us_datetime(text, config=utc) == expected

    def test_midnight_is_twelve_am(self, utc):
        assert format_us_datetime("2024-01-01T00:05:09Z", config=utc) == "1/1/2024, 12:05:09 AM"

    def test_noon_is_twelve_pm(self, utc):
        assert format_us_datetime("2024-01-01T12:00:00Z", config=utc) == "1/1/2024, 12:00:00 PM"

    def test_configured_zone(self, berlin):
        assert format_us_datetime("2024-12-31T23:30:00Z", config=berlin) == "1/1/2025, 12:30:00 AM"
