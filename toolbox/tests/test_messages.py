from __future__ import annotations

import pytest

from toolbox.src.conversions.messages import (
    SUPPORTED_LOCALES,
    MessageCatalog,
    get_catalog,
    negotiate_locale,
)


def test_every_locale_defines_the_same_keys():
    english = get_catalog("en").keys()

    assert "validation.rgb.red" in english
    for locale in SUPPORTED_LOCALES:
        assert get_catalog(locale).keys() == english


def test_translate_with_params():
    catalog = MessageCatalog("en")

    assert catalog.translate("errors.validation_with_context", context="Hue") == "Invalid input: Hue"
    assert catalog.translate("validation.hex.invalid") == "Invalid HEX value."


def test_translate_unknown_key_and_group():
    catalog = get_catalog("en")

    with pytest.raises(KeyError):
        catalog.translate("validation.rgb.purple")
    with pytest.raises(KeyError):
        catalog.translate("validation.rgb")


def test_unsupported_locale():
    with pytest.raises(ValueError, match="unsupported locale 'fr'"):
        MessageCatalog("fr")


def test_catalogs_are_cached():
    assert get_catalog("ja") is get_catalog("ja")


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (None, "en"),
        ("", "en"),
        ("ja", "ja"),
        ("ja-JP,en;q=0.8", "ja"),
        ("fr-FR,en;q=0.5,ja;q=0.4", "en"),
        ("en;q=0.2, ja;q=0.9", "ja"),
        ("en;q=0, ja;q=0.1", "ja"),
        ("fr, de", "en"),
        ("EN-us", "en"),
    ],
)
def test_negotiate_locale(header, expected):
    assert negotiate_locale(header) == expected


def test_negotiate_locale_wildcard_uses_default():
    assert negotiate_locale("fr, *;q=0.5", default="ja") == "ja"
