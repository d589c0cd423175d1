from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

from .color import (
    argb_to_hex,
    cmyk_to_rgb,
    format_css,
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
)
from .config import DEFAULT_SETTINGS, ConverterSettings
from .datetime_engine import (
    InvalidTimezoneError,
    format_datetime,
    from_unix_time,
    is_valid_timezone,
    parse_datetime,
    to_unix_time,
)
from .messages import MessageCatalog, get_catalog
from .models import (
    ARGB,
    RGB,
    ColorBag,
    ColorConversionResult,
    DateTimeConversionResult,
    ValidationResult,
)
from .validation import (
    InputValidationError,
    parse_number,
    validate_argb_input,
    validate_cmyk_input,
    validate_datetime_input,
    validate_hex_input,
    validate_hsl_input,
    validate_rgb_input,
    validate_unix_time_input,
)

logger = logging.getLogger(__name__)

COLOR_SOURCE_FORMATS: tuple[str, ...] = ("rgb", "argb", "hex", "cmyk", "hsl")
CSS_FORMATS: tuple[str, ...] = ("rgb", "rgba", "hex", "hsl")


class ColorConversionPipeline:
    """Validate raw form fields for one color format, then derive every other format."""

    def __init__(
        self,
        settings: ConverterSettings | None = None,
        messages: MessageCatalog | None = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.messages = messages or get_catalog(self.settings.default_locale)

    def run(
        self, source_format: str, values: Mapping[str, object]
    ) -> ColorConversionResult:
        if source_format not in COLOR_SOURCE_FORMATS:
            raise ValueError(
                f"unsupported color format '{source_format}'. "
                f"Use one of: {', '.join(COLOR_SOURCE_FORMATS)}"
            )

        alpha = self.settings.default_alpha
        if source_format == "rgb":
            r, g, b = _fields(values, "rgb")
            _check(validate_rgb_input(r, g, b, messages=self.messages))
            rgb = RGB(int(r), int(g), int(b))
        elif source_format == "argb":
            a, r, g, b = _fields(values, "argb")
            _check(validate_argb_input(a, r, g, b, messages=self.messages))
            alpha = int(a)
            rgb = RGB(int(r), int(g), int(b))
        elif source_format == "hex":
            text = values.get("hex", "")
            _check(validate_hex_input(text, messages=self.messages))
            rgb = hex_to_rgb(str(text).strip())
            if rgb is None:
                raise InputValidationError(
                    ValidationResult.fail(self.messages.translate("validation.hex.invalid"))
                )
        elif source_format == "cmyk":
            c, m, y, k = _fields(values, "cmyk")
            _check(validate_cmyk_input(c, m, y, k, messages=self.messages))
            rgb = cmyk_to_rgb(c, m, y, k)
        else:
            h, s, l = _fields(values, "hsl")
            _check(validate_hsl_input(h, s, l, messages=self.messages))
            rgb = hsl_to_rgb(h, s, l)

        hex_value = rgb_to_hex(rgb.r, rgb.g, rgb.b)
        argb = ARGB(a=alpha, r=rgb.r, g=rgb.g, b=rgb.b)
        hsl = rgb_to_hsl(rgb.r, rgb.g, rgb.b)
        bag = ColorBag(rgb=rgb, argb=argb, hex=hex_value, hsl=hsl)

        logger.debug("converted %s input to %s", source_format, hex_value)
        return ColorConversionResult(
            source_format=source_format,
            rgb=rgb,
            argb=argb,
            hex=hex_value,
            hex8=argb_to_hex(argb.a, argb.r, argb.g, argb.b),
            cmyk=rgb_to_cmyk(rgb.r, rgb.g, rgb.b),
            hsl=hsl,
            css={css_format: format_css(bag, css_format) for css_format in CSS_FORMATS},
        )


class DateTimeConversionPipeline:
    def __init__(
        self,
        settings: ConverterSettings | None = None,
        messages: MessageCatalog | None = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.messages = messages or get_catalog(self.settings.default_locale)

    def to_unix(
        self,
        text: str,
        format: Optional[str] = None,
        unit: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> DateTimeConversionResult:
        format = format or self.settings.default_datetime_format
        unit = unit or self.settings.default_unit
        timezone = timezone or self.settings.default_timezone

        _check(validate_datetime_input(text, format, messages=self.messages))
        if not is_valid_timezone(timezone):
            raise InvalidTimezoneError(f"Invalid timezone: {timezone}")

        text = text.strip()
        instant = parse_datetime(text, format, timezone=timezone)
        if instant is None:
            key = "invalid_standard" if format == "standard" else "invalid_iso"
            raise InputValidationError(
                ValidationResult.fail(self.messages.translate(f"validation.datetime.{key}"))
            )

        unix_time = to_unix_time(instant, unit)
        logger.debug("parsed %r (%s, %s) as %s %s", text, format, timezone, unix_time, unit)
        return DateTimeConversionResult(
            datetime=text,
            unix_time=unix_time,
            unit=unit,
            format=format,
            timezone=timezone,
        )

    def from_unix(
        self,
        text: str,
        unit: Optional[str] = None,
        format: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> DateTimeConversionResult:
        unit = unit or self.settings.default_unit
        format = format or self.settings.default_datetime_format
        timezone = timezone or self.settings.default_timezone

        _check(
            validate_unix_time_input(
                text, unit, messages=self.messages, settings=self.settings
            )
        )

        instant = from_unix_time(parse_number(text), unit)
        formatted = format_datetime(instant, format, timezone)
        logger.debug("formatted %s %s in %s as %r", text, unit, timezone, formatted)
        return DateTimeConversionResult(
            datetime=formatted,
            unix_time=to_unix_time(instant, unit),
            unit=unit,
            format=format,
            timezone=timezone,
        )


def _fields(values: Mapping[str, object], letters: str) -> list[float]:
    return [parse_number(values.get(letter, "")) for letter in letters]


def _check(result: ValidationResult) -> None:
    if not result.is_valid:
        raise InputValidationError(result)
