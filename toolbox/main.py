from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from toolbox.src.conversions.config import DEFAULT_SETTINGS
from toolbox.src.conversions.io import save_color_swatch, write_result_json
from toolbox.src.conversions.messages import SUPPORTED_LOCALES, get_catalog
from toolbox.src.conversions.pipeline import (
    COLOR_SOURCE_FORMATS,
    ColorConversionPipeline,
    DateTimeConversionPipeline,
)
from toolbox.src.conversions.validation import InputValidationError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conversion-toolbox",
        description="Convert color codes and Unix timestamps.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    parser.add_argument(
        "--locale",
        default=DEFAULT_SETTINGS.default_locale,
        choices=list(SUPPORTED_LOCALES),
        help="Language of validation messages.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    color = subparsers.add_parser(
        "color",
        help="Convert one color into RGB, ARGB, HEX, CMYK, HSL and CSS strings.",
    )
    color.add_argument(
        "--from",
        dest="source_format",
        required=True,
        choices=list(COLOR_SOURCE_FORMATS),
        help="Format of the given values.",
    )
    color.add_argument(
        "values",
        nargs="+",
        help="Channel values in format order (e.g. 255 0 0 for rgb), or one HEX string.",
    )
    color.add_argument(
        "--swatch-out",
        default=None,
        help="Optional path to save a PNG swatch of the converted color.",
    )
    _add_out_argument(color)

    to_unix = subparsers.add_parser(
        "to-unix", help="Convert a datetime string to Unix time."
    )
    to_unix.add_argument("datetime", help="Datetime text, e.g. '2024/01/01 00:00:00'.")
    _add_datetime_options(to_unix)
    _add_out_argument(to_unix)

    from_unix = subparsers.add_parser(
        "from-unix", help="Convert Unix time to a datetime string."
    )
    from_unix.add_argument("value", help="Unix time value.")
    _add_datetime_options(from_unix)
    _add_out_argument(from_unix)

    return parser


def _add_datetime_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        default=DEFAULT_SETTINGS.default_datetime_format,
        choices=["standard", "iso"],
        help="Datetime text format.",
    )
    parser.add_argument(
        "--unit",
        default=DEFAULT_SETTINGS.default_unit,
        choices=["seconds", "milliseconds"],
        help="Unix time unit.",
    )
    parser.add_argument(
        "--timezone",
        default=DEFAULT_SETTINGS.default_timezone,
        help="IANA timezone for reading or rendering wall-clock time.",
    )


def _add_out_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--out",
        default=None,
        help="Optional JSON output path. If omitted, prints JSON to stdout.",
    )


def _color_values(source_format: str, raw_values: list[str]) -> dict[str, str]:
    if source_format == "hex":
        return {"hex": raw_values[0]}
    letters = source_format
    if len(raw_values) != len(letters):
        raise ValueError(
            f"{source_format} expects {len(letters)} values ({', '.join(letters)}), "
            f"got {len(raw_values)}"
        )
    return dict(zip(letters, raw_values))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    messages = get_catalog(args.locale)

    try:
        if args.command == "color":
            values = _color_values(args.source_format, args.values)
            result = ColorConversionPipeline(messages=messages).run(
                args.source_format, values
            )
            if args.swatch_out:
                save_color_swatch(result.rgb, args.swatch_out)
                logger.info("saved swatch to %s", args.swatch_out)
        elif args.command == "to-unix":
            result = DateTimeConversionPipeline(messages=messages).to_unix(
                args.datetime, format=args.format, unit=args.unit, timezone=args.timezone
            )
        elif args.command == "from-unix":
            result = DateTimeConversionPipeline(messages=messages).from_unix(
                args.value, unit=args.unit, format=args.format, timezone=args.timezone
            )
        else:
            parser.error("unknown command")
            return
    except InputValidationError as exc:
        parser.exit(2, f"{exc}\n")
    except ValueError as exc:
        logger.debug("conversion failed", exc_info=True)
        parser.exit(2, f"conversion_failed: {exc}\n")

    if args.out:
        write_result_json(result, Path(args.out))
    else:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    sys.exit(main())
