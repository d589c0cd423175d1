from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

SUPPORTED_LOCALES: tuple[str, ...] = ("en", "ja")
DEFAULT_LOCALE = "en"

_MESSAGES: dict[str, dict[str, Any]] = {
    "en": {
        "validation": {
            "datetime": {
                "required": "Please enter a date and time.",
                "invalid_standard": (
                    "Invalid datetime format. Please use YYYY/mm/DD HH:MM:SS."
                ),
                "invalid_iso": "Invalid datetime format. Please use ISO 8601.",
            },
            "unix": {
                "required": "Please enter a Unix time value.",
                "not_a_number": "Invalid Unix time value. Please enter a number.",
                "out_of_range": "Unix time value is outside the valid range.",
            },
            "rgb": {
                "red": "Red value must be an integer between 0 and 255.",
                "green": "Green value must be an integer between 0 and 255.",
                "blue": "Blue value must be an integer between 0 and 255.",
            },
            "argb": {
                "alpha": "Alpha value must be an integer between 0 and 255.",
            },
            "hex": {
                "required": "Please enter a HEX value.",
                "malformed": "Invalid HEX format. Please use #RRGGBB or #RGB.",
                "invalid": "Invalid HEX value.",
            },
            "cmyk": {
                "cyan": "Cyan value must be between 0 and 100.",
                "magenta": "Magenta value must be between 0 and 100.",
                "yellow": "Yellow value must be between 0 and 100.",
                "key": "Key value must be between 0 and 100.",
            },
            "hsl": {
                "hue": "Hue value must be between 0 and 360.",
                "saturation": "Saturation value must be between 0 and 100.",
                "lightness": "Lightness value must be between 0 and 100.",
            },
        },
        "errors": {
            "validation": "Invalid input.",
            "validation_with_context": "Invalid input: {context}",
            "conversion": (
                "An error occurred during conversion. Please check your input."
            ),
            "conversion_with_context": "An error occurred during conversion: {context}",
            "system": "An unexpected error occurred. Please reload the page.",
            "generic": "An error occurred.",
        },
    },
    "ja": {
        "validation": {
            "datetime": {
                "required": "日時を入力してください。",
                "invalid_standard": (
                    "無効な日時形式です。YYYY/mm/DD HH:MM:SS形式で入力してください。"
                ),
                "invalid_iso": "無効な日時形式です。ISO 8601形式で入力してください。",
            },
            "unix": {
                "required": "Unix Time値を入力してください。",
                "not_a_number": "無効なUnix Time値です。数値を入力してください。",
                "out_of_range": "Unix Time値が有効な範囲外です。",
            },
            "rgb": {
                "red": "Red値は0-255の整数で入力してください。",
                "green": "Green値は0-255の整数で入力してください。",
                "blue": "Blue値は0-255の整数で入力してください。",
            },
            "argb": {
                "alpha": "Alpha値は0-255の整数で入力してください。",
            },
            "hex": {
                "required": "HEX値を入力してください。",
                "malformed": (
                    "無効なHEX形式です。#RRGGBB または #RGB形式で入力してください。"
                ),
                "invalid": "無効なHEX値です。",
            },
            "cmyk": {
                "cyan": "Cyan値は0-100の範囲で入力してください。",
                "magenta": "Magenta値は0-100の範囲で入力してください。",
                "yellow": "Yellow値は0-100の範囲で入力してください。",
                "key": "Key値は0-100の範囲で入力してください。",
            },
            "hsl": {
                "hue": "Hue値は0-360の範囲で入力してください。",
                "saturation": "Saturation値は0-100の範囲で入力してください。",
                "lightness": "Lightness値は0-100の範囲で入力してください。",
            },
        },
        "errors": {
            "validation": "入力値が無効です。",
            "validation_with_context": "入力値が無効です: {context}",
            "conversion": "変換中にエラーが発生しました。入力値を確認してください。",
            "conversion_with_context": "変換中にエラーが発生しました: {context}",
            "system": "予期しないエラーが発生しました。ページを再読み込みしてください。",
            "generic": "エラーが発生しました。",
        },
    },
}


class MessageCatalog:
    """User-facing messages for one locale, looked up by dotted key path."""

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        if locale not in _MESSAGES:
            raise ValueError(
                f"unsupported locale '{locale}'. Use one of: {', '.join(SUPPORTED_LOCALES)}"
            )
        self.locale = locale
        self._messages = _MESSAGES[locale]

    def translate(self, key: str, **params: Any) -> str:
        node: Any = self._messages
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                raise KeyError(f"missing message '{key}' for locale '{self.locale}'")
            node = node[part]
        if not isinstance(node, str):
            raise KeyError(f"'{key}' is a message group, not a message")
        return node.format(**params) if params else node

    def keys(self) -> list[str]:
        return sorted(_flatten_keys(self._messages))


@lru_cache(maxsize=None)
def get_catalog(locale: str = DEFAULT_LOCALE) -> MessageCatalog:
    return MessageCatalog(locale)


def negotiate_locale(
    accept_language: Optional[str], default: str = DEFAULT_LOCALE
) -> str:
    """Pick the best supported locale from an ``Accept-Language`` header."""
    if not accept_language:
        return default

    ranked: list[tuple[float, int, str]] = []
    for position, item in enumerate(accept_language.split(",")):
        tag, _, params = item.strip().partition(";")
        primary = tag.strip().lower().split("-")[0]
        if not primary:
            continue

        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        if quality <= 0:
            continue
        ranked.append((-quality, position, primary))

    for _, _, primary in sorted(ranked):
        if primary in SUPPORTED_LOCALES:
            return primary
        if primary == "*":
            return default
    return default


def _flatten_keys(node: dict[str, Any], prefix: str = "") -> list[str]:
    keys: list[str] = []
    for name, value in node.items():
        path = f"{prefix}{name}"
        if isinstance(value, dict):
            keys.extend(_flatten_keys(value, prefix=f"{path}."))
        else:
            keys.append(path)
    return keys
