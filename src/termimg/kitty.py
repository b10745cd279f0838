"""Kitty graphics protocol encoder.

Images are re-encoded as PNG (f=100) and transmitted with a=T, split into
base64 chunks of at most 4096 bytes. Every chunk but the last carries m=1.
See https://sw.kovidgoyal.net/kitty/graphics-protocol/
"""

import base64
import io
import logging
from pathlib import Path

from PIL import Image

from termimg.image import load_image
from termimg.options import RenderOptions
from termimg.passthrough import ESC, wrap

logger = logging.getLogger(__name__)

APC = ESC + "_G"
ST = ESC + "\\"
CHUNK_SIZE = 4096


def serialize(params: dict[str, str | int], chunk: str) -> str:
    """Build one APC unit: ESC _G key=value,... ; payload ESC \\"""
    keys = ",".join(f"{k}={v}" for k, v in params.items())
    return f"{APC}{keys};{chunk}{ST}"


def chunk_payload(payload: str, size: int = CHUNK_SIZE) -> list[str]:
    """Split a base64 payload into ordered chunks; always at least one."""
    if not payload:
        return [""]
    return [payload[i : i + size] for i in range(0, len(payload), size)]


def _pixels(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"kitty {name} must be a positive pixel count, got {value!r}")
    return value


def _resize(image: Image.Image, width: int, height: int | None) -> Image.Image:
    if height is None:
        height = max(1, round(image.height * width / image.width))
    return image.resize((width, height), Image.BILINEAR)


def to_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def encode(path: str | Path, options: RenderOptions, multiplexer: bool = False) -> str:
    width = _pixels("width", options.width)
    height = None if options.height is None else _pixels("height", options.height)
    image = _resize(load_image(path), width, height)
    payload = base64.standard_b64encode(to_png(image)).decode("ascii")

    chunks = chunk_payload(payload)
    units = []
    for i, chunk in enumerate(chunks):
        more = 0 if i == len(chunks) - 1 else 1
        params: dict[str, str | int] = {"f": 100, "a": "T", "m": more} if i == 0 else {"m": more}
        units.append(serialize(params, chunk))

    logger.debug("kitty image %s: %dx%d, %d chunks", path, image.width, image.height, len(chunks))
    return wrap("".join(units), multiplexer)
