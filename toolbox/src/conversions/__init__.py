from .color import (
    ColorRangeError,
    CssFormatError,
    argb_to_hex,
    cmyk_to_rgb,
    format_css,
    hex_to_argb,
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    validate_color_value,
)
from .config import ConverterSettings
from .datetime_engine import (
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
from .messages import MessageCatalog, get_catalog, negotiate_locale
from .models import (
    ARGB,
    CMYK,
    HSL,
    RGB,
    CalendarFields,
    ColorBag,
    ColorConversionResult,
    DateTimeConversionResult,
    Instant,
    ValidationResult,
)
from .pipeline import ColorConversionPipeline, DateTimeConversionPipeline
from .validation import (
    InputValidationError,
    generate_error_message,
    validate_argb_input,
    validate_cmyk_input,
    validate_datetime_input,
    validate_hex_input,
    validate_hsl_input,
    validate_rgb_input,
    validate_unix_time_input,
)

__all__ = [
    "ARGB",
    "CMYK",
    "HSL",
    "RGB",
    "SUPPORTED_TIMEZONES",
    "CalendarFields",
    "ColorBag",
    "ColorConversionPipeline",
    "ColorConversionResult",
    "ColorRangeError",
    "ConverterSettings",
    "CssFormatError",
    "DateTimeConversionPipeline",
    "DateTimeConversionResult",
    "InputValidationError",
    "Instant",
    "InvalidInstantError",
    "InvalidTimestampError",
    "InvalidTimezoneError",
    "MessageCatalog",
    "ValidationResult",
    "argb_to_hex",
    "cmyk_to_rgb",
    "format_css",
    "format_datetime",
    "from_unix_time",
    "generate_error_message",
    "get_catalog",
    "hex_to_argb",
    "hex_to_rgb",
    "hsl_to_rgb",
    "is_valid_timezone",
    "local_calendar_fields",
    "negotiate_locale",
    "parse_datetime",
    "rgb_to_cmyk",
    "rgb_to_hex",
    "rgb_to_hsl",
    "to_unix_time",
    "validate_argb_input",
    "validate_cmyk_input",
    "validate_color_value",
    "validate_datetime",
    "validate_datetime_input",
    "validate_hex_input",
    "validate_hsl_input",
    "validate_rgb_input",
    "validate_unix_time_input",
]
