from __future__ import annotations

import random
from datetime import datetime, timezone

import pytest

from toolbox.src.conversions.datetime_engine import (
    SUPPORTED_TIMEZONES,
    InvalidInstantError,
    InvalidTimestampError,
    InvalidTimezoneError,
    format_datetime,
    from_unix_time,
    is_valid_timezone,
    local_calendar_fields,
    parse_datetime,
    to_unix_time,
    validate_datetime,
)
from toolbox.src.conversions.models import (
    MAX_EPOCH_MS,
    MIN_EPOCH_MS,
    CalendarFields,
    Instant,
)

NEW_YEAR_2024 = 1704067200

_rng = random.Random(1704067200)
INSTANT_SWEEP = sorted(
    {MIN_EPOCH_MS, MAX_EPOCH_MS, 0, -1, 999, 1000, -1001, 1704067200123}
    | {_rng.randint(MIN_EPOCH_MS, MAX_EPOCH_MS) for _ in range(300)}
    | {_rng.randint(-(10**12), 10**13) for _ in range(100)}
)


def test_standard_format_rejects_impossible_dates():
    assert parse_datetime("2024/02/30 12:00:00", "standard") is None
    assert parse_datetime("2023/02/29 12:00:00", "standard") is None
    assert parse_datetime("2024/13/01 00:00:00", "standard") is None
    assert parse_datetime("2024/01/01 24:00:00", "standard") is None


def test_standard_format_accepts_leap_day():
    instant = parse_datetime("2024/02/29 12:00:00", "standard")

    assert instant is not None
    assert to_unix_time(instant, "seconds") == 1709208000


@pytest.mark.parametrize(
    "text",
    ["", "2024-01-01 00:00:00", "2024/1/1 00:00:00", "2024/01/01  00:00:00", None],
)
def test_standard_format_requires_exact_shape(text):
    assert parse_datetime(text, "standard") is None


def test_unknown_format_is_rejected():
    assert parse_datetime("2024/01/01 00:00:00", "rfc") is None


def test_standard_format_is_read_in_given_timezone():
    tokyo = parse_datetime("2024/01/01 09:00:00", "standard", timezone="Asia/Tokyo")
    utc = parse_datetime("2024/01/01 00:00:00", "standard")

    assert tokyo == utc
    assert to_unix_time(tokyo, "seconds") == NEW_YEAR_2024


def test_wall_clock_time_in_dst_gap_is_rejected():
    assert parse_datetime("2024/03/10 02:30:00", "standard", timezone="America/New_York") is None
    assert parse_datetime("2024/03/10 03:30:00", "standard", timezone="America/New_York") is not None


def test_invalid_timezone_makes_parse_fail():
    assert parse_datetime("2024/01/01 00:00:00", "standard", timezone="Mars/Base") is None


def test_iso_parsing_with_and_without_offset():
    assert to_unix_time(parse_datetime("2024-01-01T00:00:00Z", "iso"), "seconds") == NEW_YEAR_2024
    assert (
        to_unix_time(parse_datetime("2024-01-01T09:00:00+09:00", "iso"), "seconds")
        == NEW_YEAR_2024
    )
    naive = parse_datetime("2024-01-01T09:00:00", "iso", timezone="Asia/Tokyo")
    assert to_unix_time(naive, "seconds") == NEW_YEAR_2024
    assert parse_datetime("yesterday", "iso") is None


def test_to_unix_time_from_aware_datetime():
    instant = Instant.from_datetime(datetime(2024, 1, 1, tzinfo=timezone.utc))

    assert to_unix_time(instant, "seconds") == NEW_YEAR_2024
    assert to_unix_time(instant, "milliseconds") == NEW_YEAR_2024 * 1000


def test_seconds_are_floored_for_pre_epoch_instants():
    instant = Instant(-1500)

    assert to_unix_time(instant, "seconds") == -2
    assert to_unix_time(instant, "milliseconds") == -1500


@pytest.mark.parametrize("millis", INSTANT_SWEEP)
def test_unit_consistency(millis):
    instant = Instant(millis)

    assert to_unix_time(instant, "seconds") == to_unix_time(instant, "milliseconds") // 1000


@pytest.mark.parametrize("millis", INSTANT_SWEEP)
def test_millisecond_round_trip_is_exact(millis):
    instant = Instant(millis)

    restored = from_unix_time(to_unix_time(instant, "milliseconds"), "milliseconds")

    assert restored.time == instant.time


@pytest.mark.parametrize("millis", INSTANT_SWEEP)
def test_second_round_trip_keeps_the_second(millis):
    instant = Instant(millis)

    restored = from_unix_time(to_unix_time(instant, "seconds"), "seconds")

    assert restored.time // 1000 == instant.time // 1000
    assert restored.time % 1000 == 0


def test_second_round_trip_drops_milliseconds():
    restored = from_unix_time(to_unix_time(Instant(1704067200999), "seconds"), "seconds")

    assert restored.time == 1704067200000


def test_to_unix_time_rejects_invalid_instant():
    with pytest.raises(InvalidInstantError, match="Invalid date object"):
        to_unix_time(Instant.invalid(), "seconds")
    with pytest.raises(InvalidInstantError):
        to_unix_time("2024-01-01", "seconds")


@pytest.mark.parametrize("value", ["1704067200", None, True, float("nan")])
def test_from_unix_time_rejects_non_numbers(value):
    with pytest.raises(InvalidTimestampError, match="^Invalid timestamp$"):
        from_unix_time(value, "seconds")


@pytest.mark.parametrize(
    ("value", "unit"),
    [
        (float("inf"), "seconds"),
        (1e20, "milliseconds"),
        (1e300, "seconds"),
        (10**400, "seconds"),
        (-(10**400), "milliseconds"),
    ],
)
def test_from_unix_time_rejects_unrepresentable_values(value, unit):
    with pytest.raises(InvalidTimestampError, match="Invalid timestamp value"):
        from_unix_time(value, unit)


def test_from_unix_time_truncates_fractional_milliseconds():
    assert from_unix_time(1.0009, "milliseconds").time == 1
    assert from_unix_time(1.5, "seconds").time == 1500


def test_format_in_tokyo():
    instant = from_unix_time(NEW_YEAR_2024, "seconds")

    assert format_datetime(instant, "standard", "Asia/Tokyo") == "2024/01/01 09:00:00"
    assert format_datetime(instant, "standard", "UTC") == "2024/01/01 00:00:00"


def test_iso_output_has_no_offset_suffix():
    instant = from_unix_time(NEW_YEAR_2024, "seconds")

    # local wall-clock fields only; the zone is not recoverable from the text
    assert format_datetime(instant, "iso", "Asia/Tokyo") == "2024-01-01T09:00:00"
    assert format_datetime(instant, "iso", "America/New_York") == "2023-12-31T19:00:00"


def test_format_datetime_rejects_bad_input():
    with pytest.raises(InvalidTimezoneError, match="Invalid timezone: Mars/Base"):
        format_datetime(Instant(0), "standard", "Mars/Base")
    with pytest.raises(InvalidInstantError):
        format_datetime(Instant.invalid(), "standard", "UTC")


def test_local_calendar_fields():
    assert local_calendar_fields(Instant(0), "UTC") == CalendarFields(1970, 1, 1, 0, 0, 0)
    assert local_calendar_fields(Instant(0), "Asia/Tokyo") == CalendarFields(1970, 1, 1, 9, 0, 0)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2024/01/01 00:00:00", True),
        ("2024/02/30 00:00:00", False),
        ("2024-01-01T00:00:00Z", True),
        ("Mon, 01 Jan 2024 00:00:00 +0000", True),
        ("not a date", False),
        ("", False),
        (None, False),
    ],
)
def test_validate_datetime(text, expected):
    assert validate_datetime(text) is expected


def test_supported_timezones_are_valid():
    for name in SUPPORTED_TIMEZONES:
        assert is_valid_timezone(name)
    assert not is_valid_timezone("Mars/Base")
    assert not is_valid_timezone("")
    assert not is_valid_timezone(None)
