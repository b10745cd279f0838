"""Truecolor half-block rendering.

Each character cell shows two stacked pixels: the top one as the foreground
colour of a lower half block, the bottom one as the cell background.
"""

import math
from pathlib import Path

import numpy as np
from PIL import Image

from termimg.image import load_image
from termimg.terminal import default_columns

HALF_BLOCK = "▄"
RESET = "\033[0m"


def cell_rows(columns: int, aspect: float) -> int:
    """Number of text lines for an image of the given width/height ratio."""
    return max(1, math.floor(columns / aspect / 2 + 0.5))


def _format_cells(pixels: np.ndarray, rows: int, columns: int) -> str:
    lines = []
    for y in range(rows):
        parts = []
        for x in range(columns):
            tr, tg, tb = (int(v) for v in pixels[2 * y, x])
            br, bg, bb = (int(v) for v in pixels[2 * y + 1, x])
            parts.append(f"\033[38;2;{tr};{tg};{tb}m\033[48;2;{br};{bg};{bb}m{HALF_BLOCK}")
        parts.append(RESET)
        lines.append("".join(parts))
    return "\n".join(lines)


def encode(path: str | Path, columns: int | None = None) -> str:
    if columns is None:
        columns = default_columns()
    if columns < 1:
        raise ValueError(f"columns must be at least 1, got {columns}")
    image = load_image(path)
    rows = cell_rows(columns, image.width / image.height)
    image = image.resize((columns, rows * 2), Image.BILINEAR)
    # (height, width, 3)
    pixels = np.asarray(image)
    return _format_cells(pixels, rows, columns)
