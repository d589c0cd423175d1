from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

from PIL import Image

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str) -> subprocess.CompletedProcess:
    cmd = [sys.executable, "-m", "toolbox.main", *args]
    env = {**os.environ, "PYTHONIOENCODING": "utf-8"}
    return subprocess.run(
        cmd, cwd=REPO_ROOT, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def test_cli_color_smoke(tmp_path):
    out_path = tmp_path / "result.json"
    swatch_path = tmp_path / "swatch.png"

    completed = _run(
        "color",
        "--from",
        "hsl",
        "210",
        "75",
        "47.1",
        "--out",
        str(out_path),
        "--swatch-out",
        str(swatch_path),
    )

    assert completed.returncode == 0, completed.stderr
    assert out_path.exists()
    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["source_format"] == "hsl"
    assert payload["hex"] == "#1E78D2"
    assert payload["css"]["rgb"] == "rgb(30, 120, 210)"
    with Image.open(swatch_path) as image:
        assert image.getpixel((0, 0)) == (30, 120, 210)


def test_cli_to_unix_prints_json():
    completed = _run("to-unix", "2024/01/01 09:00:00", "--timezone", "Asia/Tokyo")

    assert completed.returncode == 0, completed.stderr
    payload = json.loads(completed.stdout)
    assert payload["unix_time"] == 1704067200


def test_cli_from_unix_prints_json():
    completed = _run("from-unix", "1704067200000", "--unit", "milliseconds", "--format", "iso")

    assert completed.returncode == 0, completed.stderr
    assert json.loads(completed.stdout)["datetime"] == "2024-01-01T00:00:00"


def test_cli_validation_error_exits_with_message():
    completed = _run("--locale", "ja", "color", "--from", "rgb", "0", "300", "0")

    assert completed.returncode == 2
    assert "Green値は0-255の整数で入力してください。" in completed.stderr
    assert completed.stdout == ""


def test_cli_wrong_value_count():
    completed = _run("color", "--from", "cmyk", "0", "0", "0")

    assert completed.returncode == 2
    assert "cmyk expects 4 values" in completed.stderr
