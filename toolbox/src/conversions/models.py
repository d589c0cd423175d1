from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _delta_ms(delta: timedelta) -> int:
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


MIN_EPOCH_MS = _delta_ms(datetime(1, 1, 1, tzinfo=timezone.utc) - EPOCH)
MAX_EPOCH_MS = _delta_ms(
    datetime(9999, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc) - EPOCH
)


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int

    def to_dict(self) -> dict[str, Any]:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True)
class ARGB:
    a: int
    r: int
    g: int
    b: int

    @property
    def rgb(self) -> RGB:
        return RGB(self.r, self.g, self.b)

    def to_dict(self) -> dict[str, Any]:
        return {"a": self.a, "r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True)
class CMYK:
    c: float
    m: float
    y: float
    k: float

    def to_dict(self) -> dict[str, Any]:
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}


@dataclass(frozen=True)
class HSL:
    h: float
    s: float
    l: float

    def to_dict(self) -> dict[str, Any]:
        return {"h": self.h, "s": self.s, "l": self.l}


@dataclass(frozen=True)
class ColorBag:
    """Whatever representations of one color are at hand for CSS output."""

    rgb: Optional[RGB] = None
    argb: Optional[ARGB] = None
    hex: Optional[str] = None
    hsl: Optional[HSL] = None


@dataclass(frozen=True)
class Instant:
    """An absolute point in time as milliseconds since the Unix epoch.

    ``epoch_ms`` may be NaN or out of range; such an instant is kept around
    as a value but rejected by every operation that needs a real time.
    """

    epoch_ms: float

    @classmethod
    def invalid(cls) -> "Instant":
        return cls(float("nan"))

    @classmethod
    def from_datetime(cls, value: datetime) -> "Instant":
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return cls(_delta_ms(value - EPOCH))

    @property
    def time(self) -> float:
        return self.epoch_ms

    @property
    def is_valid(self) -> bool:
        if isinstance(self.epoch_ms, bool) or not isinstance(self.epoch_ms, (int, float)):
            return False
        if isinstance(self.epoch_ms, float) and not math.isfinite(self.epoch_ms):
            return False
        return MIN_EPOCH_MS <= self.epoch_ms <= MAX_EPOCH_MS

    def to_datetime(self) -> datetime:
        """Return the instant as an aware UTC datetime. Requires a valid instant."""
        return EPOCH + timedelta(milliseconds=int(self.epoch_ms))


@dataclass(frozen=True)
class CalendarFields:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error_message: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True, error_message=None)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, error_message=message)

    def to_dict(self) -> dict[str, Any]:
        return {"is_valid": self.is_valid, "error_message": self.error_message}


@dataclass(frozen=True)
class ColorConversionResult:
    source_format: str
    rgb: RGB
    argb: ARGB
    hex: str
    hex8: str
    cmyk: CMYK
    hsl: HSL
    css: dict[str, str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_format": self.source_format,
            "rgb": self.rgb.to_dict(),
            "argb": self.argb.to_dict(),
            "hex": self.hex,
            "hex8": self.hex8,
            "cmyk": self.cmyk.to_dict(),
            "hsl": self.hsl.to_dict(),
            "css": dict(self.css),
        }


@dataclass(frozen=True)
class DateTimeConversionResult:
    datetime: str
    unix_time: int
    unit: str
    format: str
    timezone: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "datetime": self.datetime,
            "unix_time": int(self.unix_time),
            "unit": self.unit,
            "format": self.format,
            "timezone": self.timezone,
        }
