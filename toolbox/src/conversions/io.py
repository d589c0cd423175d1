from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Protocol

import numpy as np
from PIL import Image

from .models import RGB


class SupportsToDict(Protocol):
    def to_dict(self) -> dict[str, Any]:
        ...


def save_color_swatch(
    rgb: RGB, output_path: str | Path, size: tuple[int, int] = (64, 64)
) -> None:
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError("swatch size must be positive")

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    swatch = np.zeros((height, width, 3), dtype=np.uint8)
    swatch[:, :] = [rgb.r, rgb.g, rgb.b]
    Image.fromarray(swatch).save(path)


def write_result_json(result: SupportsToDict, output_path: str | Path) -> None:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    path.write_text(payload + "\n", encoding="utf-8")
