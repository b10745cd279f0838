import io
from pathlib import Path

from PIL import Image, UnidentifiedImageError
from PIL.Image import DecompressionBombError

from termimg.errors import FileReadError, ImageDecodeError


def read_bytes(path: str | Path) -> bytes:
    """Read a source file, raising FileReadError if it is missing or unreadable."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise FileReadError(path, f"Cannot read file ({exc.strerror or exc})") from exc


def load_image(path: str | Path) -> Image.Image:
    """Decode an image file into an RGB bitmap.

    The source is fully loaded and detached from the file, so the returned
    image owns its pixel buffer.
    """
    data = read_bytes(path)
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            return image.convert("RGB")
    except (UnidentifiedImageError, DecompressionBombError, OSError, EOFError, SyntaxError, ValueError) as exc:
        raise ImageDecodeError(path, f"Cannot decode image ({exc})") from exc
