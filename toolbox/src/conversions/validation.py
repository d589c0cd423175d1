from __future__ import annotations

import math
import re
from typing import Optional

from .color import hex_to_rgb, validate_color_value
from .config import DEFAULT_SETTINGS, ConverterSettings
from .datetime_engine import validate_datetime
from .messages import MessageCatalog, get_catalog
from .models import ValidationResult

_HEX_DIGITS = re.compile(r"^(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")
_SPECIAL_FLOATS = ("inf", "infinity", "nan")


class InputValidationError(ValueError):
    """Raised by callers that turn a failed :class:`ValidationResult` into an error."""

    def __init__(self, result: ValidationResult) -> None:
        super().__init__(result.error_message)
        self.result = result


def validate_datetime_input(
    input: object,
    format: str,
    messages: Optional[MessageCatalog] = None,
) -> ValidationResult:
    messages = messages or get_catalog()
    if _is_blank(input):
        return ValidationResult.fail(messages.translate("validation.datetime.required"))

    if not validate_datetime(input):
        key = "invalid_standard" if format == "standard" else "invalid_iso"
        return ValidationResult.fail(messages.translate(f"validation.datetime.{key}"))

    return ValidationResult.ok()


def validate_unix_time_input(
    input: object,
    unit: str,
    messages: Optional[MessageCatalog] = None,
    settings: ConverterSettings = DEFAULT_SETTINGS,
) -> ValidationResult:
    """Check that ``input`` is a number inside the supported timeline.

    Being parseable is not enough: values before the epoch or after the
    configured upper bound (2100, scaled to ``unit``) are rejected too.
    """
    messages = messages or get_catalog()
    if _is_blank(input):
        return ValidationResult.fail(messages.translate("validation.unix.required"))

    value = parse_number(input)
    if isinstance(value, float) and math.isnan(value):
        return ValidationResult.fail(messages.translate("validation.unix.not_a_number"))

    lower, upper = settings.unix_time_bounds(unit)
    if value < lower or value > upper:
        return ValidationResult.fail(messages.translate("validation.unix.out_of_range"))

    return ValidationResult.ok()


def validate_rgb_input(
    r: object,
    g: object,
    b: object,
    messages: Optional[MessageCatalog] = None,
) -> ValidationResult:
    messages = messages or get_catalog()
    for value, name in ((r, "red"), (g, "green"), (b, "blue")):
        if not validate_color_value(value, "rgb"):
            return ValidationResult.fail(messages.translate(f"validation.rgb.{name}"))
    return ValidationResult.ok()


def validate_argb_input(
    a: object,
    r: object,
    g: object,
    b: object,
    messages: Optional[MessageCatalog] = None,
) -> ValidationResult:
    messages = messages or get_catalog()
    if not validate_color_value(a, "rgb"):
        return ValidationResult.fail(messages.translate("validation.argb.alpha"))
    return validate_rgb_input(r, g, b, messages=messages)


def validate_hex_input(
    hex: object,
    messages: Optional[MessageCatalog] = None,
) -> ValidationResult:
    messages = messages or get_catalog()
    if _is_blank(hex):
        return ValidationResult.fail(messages.translate("validation.hex.required"))

    digits = hex.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if not _HEX_DIGITS.match(digits):
        return ValidationResult.fail(messages.translate("validation.hex.malformed"))

    if hex_to_rgb(hex.strip()) is None:
        return ValidationResult.fail(messages.translate("validation.hex.invalid"))

    return ValidationResult.ok()


def validate_cmyk_input(
    c: object,
    m: object,
    y: object,
    k: object,
    messages: Optional[MessageCatalog] = None,
) -> ValidationResult:
    messages = messages or get_catalog()
    for value, name in ((c, "cyan"), (m, "magenta"), (y, "yellow"), (k, "key")):
        if not validate_color_value(value, "cmyk"):
            return ValidationResult.fail(messages.translate(f"validation.cmyk.{name}"))
    return ValidationResult.ok()


def validate_hsl_input(
    h: object,
    s: object,
    l: object,
    messages: Optional[MessageCatalog] = None,
) -> ValidationResult:
    messages = messages or get_catalog()
    checks = ((h, "hsl-h", "hue"), (s, "hsl-sl", "saturation"), (l, "hsl-sl", "lightness"))
    for value, value_format, name in checks:
        if not validate_color_value(value, value_format):
            return ValidationResult.fail(messages.translate(f"validation.hsl.{name}"))
    return ValidationResult.ok()


def generate_error_message(
    kind: str,
    context: Optional[str] = None,
    messages: Optional[MessageCatalog] = None,
) -> str:
    messages = messages or get_catalog()
    if kind in ("validation", "conversion"):
        if context:
            return messages.translate(f"errors.{kind}_with_context", context=context)
        return messages.translate(f"errors.{kind}")
    if kind == "system":
        return messages.translate("errors.system")
    return messages.translate("errors.generic")


def parse_number(value: object) -> float:
    """Read a form field as a number; anything unreadable becomes NaN."""
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if not text:
        return math.nan
    # plain ASCII notation only; "Infinity" is the one spelled-out number
    if "_" in text or not text.isascii():
        return math.nan
    body = text.lstrip("+-")
    if body.lower() in _SPECIAL_FLOATS and body != "Infinity":
        return math.nan
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def _is_blank(value: object) -> bool:
    return not value or not isinstance(value, str) or value.strip() == ""
