from __future__ import annotations

import math
import re
from typing import Literal, Optional

from .models import ARGB, CMYK, HSL, RGB, ColorBag

ColorValueFormat = Literal["rgb", "cmyk", "hsl-h", "hsl-sl"]
CssFormat = Literal["rgb", "rgba", "hex", "hsl"]

_HEX_PATTERN = re.compile(r"^(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")
_HEX8_PATTERN = re.compile(r"^[0-9A-Fa-f]{8}$")

_RGB_RANGE_MESSAGE = "RGB values must be integers between 0 and 255"
_CMYK_RANGE_MESSAGE = "CMYK values must be numbers between 0 and 100"
_HSL_RANGE_MESSAGE = "HSL values must be valid (h: 0-360, s: 0-100, l: 0-100)"


class ColorRangeError(ValueError):
    pass


class CssFormatError(ValueError):
    pass


def validate_color_value(value: object, format: str) -> bool:
    if not _is_number(value) or _is_nan(value):
        return False

    if format == "rgb":
        return _is_integral(value) and 0 <= value <= 255
    if format in ("cmyk", "hsl-sl"):
        return 0 <= value <= 100
    if format == "hsl-h":
        return 0 <= value <= 360
    return False


def rgb_to_hex(r: float, g: float, b: float) -> str:
    _require_rgb(r, g, b)
    return "#" + "".join(f"{round_half_up(v):02X}" for v in (r, g, b))


def hex_to_rgb(hex: object) -> Optional[RGB]:
    if not hex or not isinstance(hex, str):
        return None

    digits = hex[1:] if hex.startswith("#") else hex
    if not _HEX_PATTERN.match(digits):
        return None

    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    return RGB(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def argb_to_hex(a: float, r: float, g: float, b: float) -> str:
    if not validate_color_value(a, "rgb"):
        raise ColorRangeError("ARGB values must be integers between 0 and 255")
    _require_rgb(r, g, b)
    return "#" + "".join(f"{round_half_up(v):02X}" for v in (a, r, g, b))


def hex_to_argb(hex: object) -> Optional[ARGB]:
    """Parse ``#AARRGGBB``; shorter forms are read as opaque colors."""
    if not hex or not isinstance(hex, str):
        return None

    digits = hex[1:] if hex.startswith("#") else hex
    if _HEX8_PATTERN.match(digits):
        return ARGB(
            a=int(digits[0:2], 16),
            r=int(digits[2:4], 16),
            g=int(digits[4:6], 16),
            b=int(digits[6:8], 16),
        )

    rgb = hex_to_rgb(hex)
    if rgb is None:
        return None
    return ARGB(a=255, r=rgb.r, g=rgb.g, b=rgb.b)


def rgb_to_cmyk(r: float, g: float, b: float) -> CMYK:
    _require_rgb(r, g, b)

    r_norm, g_norm, b_norm = r / 255, g / 255, b / 255
    k = 1 - max(r_norm, g_norm, b_norm)

    # pure black: cmy would divide by zero
    if k == 1:
        return CMYK(c=0.0, m=0.0, y=0.0, k=100.0)

    c = (1 - r_norm - k) / (1 - k)
    m = (1 - g_norm - k) / (1 - k)
    y = (1 - b_norm - k) / (1 - k)

    return CMYK(
        c=_percent_one_decimal(c),
        m=_percent_one_decimal(m),
        y=_percent_one_decimal(y),
        k=_percent_one_decimal(k),
    )


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> RGB:
    """Convert ink percentages to RGB.

    Not an exact inverse of :func:`rgb_to_cmyk`: the one-decimal rounding on
    the way in leaves up to 2 units of error per channel on a round trip.
    """
    if not all(validate_color_value(v, "cmyk") for v in (c, m, y, k)):
        raise ColorRangeError(_CMYK_RANGE_MESSAGE)

    k_norm = k / 100
    return RGB(
        r=round_half_up(255 * (1 - c / 100) * (1 - k_norm)),
        g=round_half_up(255 * (1 - m / 100) * (1 - k_norm)),
        b=round_half_up(255 * (1 - y / 100) * (1 - k_norm)),
    )


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    _require_rgb(r, g, b)

    r_norm, g_norm, b_norm = r / 255, g / 255, b / 255
    high = max(r_norm, g_norm, b_norm)
    low = min(r_norm, g_norm, b_norm)
    delta = high - low

    lightness = (high + low) / 2

    saturation = 0.0
    hue = 0.0
    if delta != 0:
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)

        if high == r_norm:
            hue = ((g_norm - b_norm) / delta + (6 if g_norm < b_norm else 0)) / 6
        elif high == g_norm:
            hue = ((b_norm - r_norm) / delta + 2) / 6
        else:
            hue = ((r_norm - g_norm) / delta + 4) / 6

    return HSL(
        h=round_half_up(hue * 360),
        s=_percent_one_decimal(saturation),
        l=_percent_one_decimal(lightness),
    )


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    if not (
        validate_color_value(h, "hsl-h")
        and validate_color_value(s, "hsl-sl")
        and validate_color_value(l, "hsl-sl")
    ):
        raise ColorRangeError(_HSL_RANGE_MESSAGE)

    hue = h % 360
    s_norm = s / 100
    l_norm = l / 100

    chroma = (1 - abs(2 * l_norm - 1)) * s_norm
    x = chroma * (1 - abs((hue / 60) % 2 - 1))
    match = l_norm - chroma / 2

    if hue < 60:
        r1, g1, b1 = chroma, x, 0.0
    elif hue < 120:
        r1, g1, b1 = x, chroma, 0.0
    elif hue < 180:
        r1, g1, b1 = 0.0, chroma, x
    elif hue < 240:
        r1, g1, b1 = 0.0, x, chroma
    elif hue < 300:
        r1, g1, b1 = x, 0.0, chroma
    else:
        r1, g1, b1 = chroma, 0.0, x

    return RGB(
        r=round_half_up((r1 + match) * 255),
        g=round_half_up((g1 + match) * 255),
        b=round_half_up((b1 + match) * 255),
    )


def format_css(color: ColorBag, format: str) -> str:
    if format == "rgb":
        if color.rgb is None:
            raise CssFormatError("RGB values are required for rgb format")
        rgb = color.rgb
        if _any_nan(rgb.r, rgb.g, rgb.b):
            raise CssFormatError("Invalid RGB values: NaN detected")
        return f"rgb({format_number(rgb.r)}, {format_number(rgb.g)}, {format_number(rgb.b)})"

    if format == "rgba":
        if color.argb is None:
            raise CssFormatError("ARGB values are required for rgba format")
        argb = color.argb
        if _any_nan(argb.a, argb.r, argb.g, argb.b):
            raise CssFormatError("Invalid ARGB values: NaN detected")
        try:
            alpha = round_half_up((argb.a / 255) * 100) / 100
        except OverflowError as exc:
            raise CssFormatError("Invalid ARGB values: alpha is out of range") from exc
        return (
            f"rgba({format_number(argb.r)}, {format_number(argb.g)}, "
            f"{format_number(argb.b)}, {format_number(alpha)})"
        )

    if format == "hex":
        if not color.hex:
            raise CssFormatError("HEX value is required for hex format")
        return color.hex

    if format == "hsl":
        if color.hsl is None:
            raise CssFormatError("HSL values are required for hsl format")
        hsl = color.hsl
        if _any_nan(hsl.h, hsl.s, hsl.l):
            raise CssFormatError("Invalid HSL values: NaN detected")
        return f"hsl({format_number(hsl.h)}, {format_number(hsl.s)}%, {format_number(hsl.l)}%)"

    raise CssFormatError(f"Unsupported CSS format: {format}")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Render a number the way a browser would: ``1`` not ``1.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _percent_one_decimal(ratio: float) -> float:
    return round_half_up(ratio * 1000) / 10


def _require_rgb(r: float, g: float, b: float) -> None:
    if not all(validate_color_value(v, "rgb") for v in (r, g, b)):
        raise ColorRangeError(_RGB_RANGE_MESSAGE)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integral(value: float) -> bool:
    return isinstance(value, int) or float(value).is_integer()


def _any_nan(*values: float) -> bool:
    return any(_is_nan(v) for v in values)


def _is_nan(value: object) -> bool:
    # ints never are, and may be too large to convert to float
    return isinstance(value, float) and math.isnan(value)
