from __future__ import annotations

from dataclasses import dataclass

from .datetime_engine import SUPPORTED_TIMEZONES
from .messages import DEFAULT_LOCALE, SUPPORTED_LOCALES

# 2101-01-01T00:00:00Z, the end of the supported timeline
UNIX_TIME_MAX_SECONDS = 4_133_894_400
UNIX_TIME_MIN_SECONDS = 0


@dataclass(frozen=True)
class ConverterSettings:
    default_locale: str = DEFAULT_LOCALE
    supported_locales: tuple[str, ...] = SUPPORTED_LOCALES
    default_timezone: str = "UTC"
    supported_timezones: tuple[str, ...] = SUPPORTED_TIMEZONES
    default_unit: str = "seconds"
    default_datetime_format: str = "standard"
    default_alpha: int = 255
    unix_time_min_seconds: int = UNIX_TIME_MIN_SECONDS
    unix_time_max_seconds: int = UNIX_TIME_MAX_SECONDS

    def __post_init__(self) -> None:
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"default_locale '{self.default_locale}' is not in supported_locales"
            )
        if self.default_timezone not in self.supported_timezones:
            raise ValueError(
                f"default_timezone '{self.default_timezone}' is not in supported_timezones"
            )
        if self.unix_time_min_seconds > self.unix_time_max_seconds:
            raise ValueError("unix_time_min_seconds must not exceed unix_time_max_seconds")

    def unix_time_bounds(self, unit: str) -> tuple[int, int]:
        scale = 1 if unit == "seconds" else 1000
        return self.unix_time_min_seconds * scale, self.unix_time_max_seconds * scale


DEFAULT_SETTINGS = ConverterSettings()
