from __future__ import annotations

import json

import pytest
from PIL import Image

from toolbox.src.conversions.io import save_color_swatch, write_result_json
from toolbox.src.conversions.models import RGB, ValidationResult
from toolbox.src.conversions.pipeline import ColorConversionPipeline


def test_save_color_swatch_writes_solid_png(tmp_path):
    out_path = tmp_path / "nested" / "swatch.png"

    save_color_swatch(RGB(30, 120, 210), out_path, size=(32, 16))

    with Image.open(out_path) as image:
        assert image.size == (32, 16)
        assert image.mode == "RGB"
        assert image.getpixel((0, 0)) == (30, 120, 210)
        assert image.getpixel((31, 15)) == (30, 120, 210)


def test_save_color_swatch_rejects_empty_size(tmp_path):
    with pytest.raises(ValueError, match="swatch size"):
        save_color_swatch(RGB(0, 0, 0), tmp_path / "empty.png", size=(0, 10))


def test_write_result_json(tmp_path):
    result = ColorConversionPipeline().run("hex", {"hex": "#1E78D2"})
    out_path = tmp_path / "out" / "result.json"

    write_result_json(result, out_path)

    text = out_path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    payload = json.loads(text)
    assert payload == result.to_dict()
    assert payload["rgb"] == {"r": 30, "g": 120, "b": 210}


def test_write_result_json_keeps_non_ascii(tmp_path):
    out_path = tmp_path / "validation.json"

    write_result_json(ValidationResult.fail("日時を入力してください。"), out_path)

    assert "日時を入力してください。" in out_path.read_text(encoding="utf-8")
