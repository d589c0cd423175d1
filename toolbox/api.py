from __future__ import annotations

import logging
from typing import Literal, Optional, Union

from fastapi import FastAPI, Header, HTTPException
from pydantic import BaseModel, Field

from toolbox.src.conversions.color import format_css
from toolbox.src.conversions.config import DEFAULT_SETTINGS
from toolbox.src.conversions.messages import get_catalog, negotiate_locale
from toolbox.src.conversions.models import ARGB, HSL, RGB, ColorBag
from toolbox.src.conversions.pipeline import (
    ColorConversionPipeline,
    DateTimeConversionPipeline,
)
from toolbox.src.conversions.validation import InputValidationError

logger = logging.getLogger(__name__)

Locale = Literal["en", "ja"]
Number = Union[int, float]
FieldValue = Union[str, int, float]


class RgbModel(BaseModel):
    r: Number
    g: Number
    b: Number


class ArgbModel(BaseModel):
    a: Number
    r: Number
    g: Number
    b: Number


class CmykModel(BaseModel):
    c: Number
    m: Number
    y: Number
    k: Number


class HslModel(BaseModel):
    h: Number
    s: Number
    l: Number


class ColorConvertRequest(BaseModel):
    format: Literal["rgb", "argb", "hex", "cmyk", "hsl"] = Field(
        ..., description="Format the values are given in"
    )
    values: dict[str, FieldValue] = Field(
        ...,
        description="Raw field values keyed by channel letter, or {'hex': '#RRGGBB'}",
    )
    locale: Optional[Locale] = Field(
        default=None, description="Locale for error messages; overrides Accept-Language"
    )


class ColorConvertResponse(BaseModel):
    rgb: RgbModel
    argb: ArgbModel
    hex: str
    hex8: str
    cmyk: CmykModel
    hsl: HslModel
    css: dict[str, str]


class CssRequest(BaseModel):
    format: str = Field(..., description="One of rgb, rgba, hex, hsl")
    rgb: Optional[RgbModel] = None
    argb: Optional[ArgbModel] = None
    hex: Optional[str] = None
    hsl: Optional[HslModel] = None


class CssResponse(BaseModel):
    css: str


class ToUnixRequest(BaseModel):
    datetime: str = Field(..., description="Datetime text in the chosen format")
    format: Literal["standard", "iso"] = DEFAULT_SETTINGS.default_datetime_format
    unit: Literal["seconds", "milliseconds"] = DEFAULT_SETTINGS.default_unit
    timezone: str = Field(
        default=DEFAULT_SETTINGS.default_timezone,
        description="IANA zone the wall-clock text is read in",
    )
    locale: Optional[Locale] = None


class FromUnixRequest(BaseModel):
    value: str = Field(..., description="Unix time as typed by the user")
    unit: Literal["seconds", "milliseconds"] = DEFAULT_SETTINGS.default_unit
    format: Literal["standard", "iso"] = DEFAULT_SETTINGS.default_datetime_format
    timezone: str = DEFAULT_SETTINGS.default_timezone
    locale: Optional[Locale] = None


class DateTimeResponse(BaseModel):
    datetime: str
    unix_time: int
    unit: str
    format: str
    timezone: str


class TimezonesResponse(BaseModel):
    timezones: list[str]
    default: str


app = FastAPI(
    title="Conversion Toolbox API",
    version="1.0.0",
    description="Color code and Unix time conversions with localized validation messages.",
)


def _resolve_locale(locale: Optional[str], accept_language: Optional[str]) -> str:
    if locale:
        return locale
    return negotiate_locale(accept_language, default=DEFAULT_SETTINGS.default_locale)


def _build_color_pipeline(locale: str) -> ColorConversionPipeline:
    return ColorConversionPipeline(
        settings=DEFAULT_SETTINGS, messages=get_catalog(locale)
    )


def _build_datetime_pipeline(locale: str) -> DateTimeConversionPipeline:
    return DateTimeConversionPipeline(
        settings=DEFAULT_SETTINGS, messages=get_catalog(locale)
    )


@app.post("/color/convert", response_model=ColorConvertResponse)
def convert_color(
    payload: ColorConvertRequest,
    accept_language: Optional[str] = Header(default=None),
) -> ColorConvertResponse:
    pipeline = _build_color_pipeline(_resolve_locale(payload.locale, accept_language))
    try:
        result = pipeline.run(payload.format, payload.values)
    except InputValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValueError as exc:
        logger.warning("color conversion failed for %s input: %s", payload.format, exc)
        raise HTTPException(
            status_code=400, detail=f"conversion_failed: {exc}"
        ) from exc

    return ColorConvertResponse(**result.to_dict())


@app.post("/color/css", response_model=CssResponse)
def color_css(payload: CssRequest) -> CssResponse:
    bag = ColorBag(
        rgb=None if payload.rgb is None else RGB(**_whole(payload.rgb.model_dump())),
        argb=None if payload.argb is None else ARGB(**_whole(payload.argb.model_dump())),
        hex=payload.hex,
        hsl=None if payload.hsl is None else HSL(**_whole(payload.hsl.model_dump())),
    )
    try:
        css = format_css(bag, payload.format)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"conversion_failed: {exc}") from exc
    return CssResponse(css=css)


@app.post("/datetime/to-unix", response_model=DateTimeResponse)
def datetime_to_unix(
    payload: ToUnixRequest,
    accept_language: Optional[str] = Header(default=None),
) -> DateTimeResponse:
    pipeline = _build_datetime_pipeline(_resolve_locale(payload.locale, accept_language))
    try:
        result = pipeline.to_unix(
            payload.datetime,
            format=payload.format,
            unit=payload.unit,
            timezone=payload.timezone,
        )
    except InputValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValueError as exc:
        logger.warning("datetime conversion failed for %r: %s", payload.datetime, exc)
        raise HTTPException(status_code=400, detail=f"conversion_failed: {exc}") from exc

    return DateTimeResponse(**result.to_dict())


@app.post("/datetime/from-unix", response_model=DateTimeResponse)
def datetime_from_unix(
    payload: FromUnixRequest,
    accept_language: Optional[str] = Header(default=None),
) -> DateTimeResponse:
    pipeline = _build_datetime_pipeline(_resolve_locale(payload.locale, accept_language))
    try:
        result = pipeline.from_unix(
            payload.value,
            unit=payload.unit,
            format=payload.format,
            timezone=payload.timezone,
        )
    except InputValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValueError as exc:
        logger.warning("unix time conversion failed for %r: %s", payload.value, exc)
        raise HTTPException(status_code=400, detail=f"conversion_failed: {exc}") from exc

    return DateTimeResponse(**result.to_dict())


@app.get("/datetime/timezones", response_model=TimezonesResponse)
def list_timezones() -> TimezonesResponse:
    return TimezonesResponse(
        timezones=list(DEFAULT_SETTINGS.supported_timezones),
        default=DEFAULT_SETTINGS.default_timezone,
    )


def _whole(fields: dict[str, float]) -> dict[str, float]:
    # 255.0 must print as 255 in css output
    return {
        name: int(value) if isinstance(value, float) and value.is_integer() else value
        for name, value in fields.items()
    }
