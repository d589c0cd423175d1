from __future__ import annotations

import math
import re
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .models import CalendarFields, Instant

DateTimeFormat = Literal["standard", "iso"]
TimeUnit = Literal["seconds", "milliseconds"]

SUPPORTED_TIMEZONES: tuple[str, ...] = (
    "UTC",
    "Asia/Tokyo",
    "America/New_York",
    "Europe/London",
    "America/Los_Angeles",
)

_STANDARD_PATTERN = re.compile(
    r"^([0-9]{4})/([0-9]{2})/([0-9]{2}) ([0-9]{2}):([0-9]{2}):([0-9]{2})$"
)


class InvalidInstantError(ValueError):
    pass


class InvalidTimestampError(ValueError):
    pass


class InvalidTimezoneError(ValueError):
    pass


def parse_datetime(
    input: object, format: str, timezone: str = "UTC"
) -> Optional[Instant]:
    """Parse user-typed text into an :class:`Instant`.

    ``standard`` expects ``YYYY/MM/DD HH:MM:SS`` read as wall-clock time in
    ``timezone``. ``iso`` accepts ISO-8601; values without an offset are read
    in ``timezone`` as well. Anything unparseable (including calendar-invalid
    dates such as ``2024/02/30`` and times skipped by a DST change) yields
    ``None``.
    """
    if not input or not isinstance(input, str):
        return None

    try:
        zone = _zone(timezone)
    except InvalidTimezoneError:
        return None

    if format == "iso":
        return _parse_iso(input, zone)
    if format != "standard":
        return None

    match = _STANDARD_PATTERN.match(input)
    if not match:
        return None

    expected = CalendarFields(*(int(part) for part in match.groups()))
    try:
        local = datetime(
            expected.year,
            expected.month,
            expected.day,
            expected.hour,
            expected.minute,
            expected.second,
            tzinfo=zone,
        )
    except ValueError:
        return None

    instant = Instant.from_datetime(local)
    if not instant.is_valid:
        return None

    # a wall-clock time inside a DST gap maps to a different local time
    try:
        observed = local_calendar_fields(instant, timezone)
    except InvalidInstantError:
        return None
    return instant if observed == expected else None


def to_unix_time(instant: Instant, unit: str) -> int:
    if not isinstance(instant, Instant) or not instant.is_valid:
        raise InvalidInstantError("Invalid date object")

    millis = int(instant.epoch_ms)
    return millis // 1000 if unit == "seconds" else millis


def from_unix_time(value: object, unit: str) -> Instant:
    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or (isinstance(value, float) and math.isnan(value))
    ):
        raise InvalidTimestampError("Invalid timestamp")

    millis = value * 1000 if unit == "seconds" else value
    if isinstance(millis, float) and math.isinf(millis):
        raise InvalidTimestampError("Invalid timestamp value")

    # sub-millisecond fractions are dropped toward zero
    instant = Instant(int(millis))
    if not instant.is_valid:
        raise InvalidTimestampError("Invalid timestamp value")
    return instant


def local_calendar_fields(instant: Instant, timezone: str) -> CalendarFields:
    """Calendar fields of ``instant`` as observed on a wall clock in ``timezone``."""
    if not isinstance(instant, Instant) or not instant.is_valid:
        raise InvalidInstantError("Invalid date object")

    zone = _zone(timezone)
    try:
        local = instant.to_datetime().astimezone(zone)
    except OverflowError as exc:
        # the offset pushes the wall clock past year 1 or 9999
        raise InvalidInstantError("Invalid date object") from exc

    return CalendarFields(
        year=local.year,
        month=local.month,
        day=local.day,
        hour=local.hour,
        minute=local.minute,
        second=local.second,
    )


def format_datetime(instant: Instant, format: str, timezone: str) -> str:
    """Render ``instant`` in ``timezone``.

    The ``iso`` form reuses the local wall-clock fields and carries no offset
    suffix, so outside UTC it does not identify the instant on its own.
    """
    fields = local_calendar_fields(instant, timezone)

    date_part = f"{fields.year:04d}-{fields.month:02d}-{fields.day:02d}"
    time_part = f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
    if format == "iso":
        return f"{date_part}T{time_part}"
    return f"{date_part.replace('-', '/')} {time_part}"


def validate_datetime(input: object) -> bool:
    if not input or not isinstance(input, str):
        return False

    if _STANDARD_PATTERN.match(input):
        return parse_datetime(input, "standard") is not None

    return _parse_iso(input, ZoneInfo("UTC")) is not None or _parse_rfc2822(input) is not None


def is_valid_timezone(timezone: object) -> bool:
    if not isinstance(timezone, str):
        return False
    try:
        _zone(timezone)
    except InvalidTimezoneError:
        return False
    return True


def _zone(timezone: str) -> ZoneInfo:
    if not timezone or not isinstance(timezone, str):
        raise InvalidTimezoneError(f"Invalid timezone: {timezone}")
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidTimezoneError(f"Invalid timezone: {timezone}") from exc


def _parse_iso(text: str, zone: ZoneInfo) -> Optional[Instant]:
    try:
        parsed = datetime.fromisoformat(text.strip())
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone)
    try:
        instant = Instant.from_datetime(parsed)
    except OverflowError:
        return None
    return instant if instant.is_valid else None


def _parse_rfc2822(text: str) -> Optional[Instant]:
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    instant = Instant.from_datetime(parsed)
    return instant if instant.is_valid else None
