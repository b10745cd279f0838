import base64
import logging
from pathlib import Path

from termimg.image import read_bytes
from termimg.options import RenderOptions
from termimg.passthrough import ESC, wrap

logger = logging.getLogger(__name__)

OSC = ESC + "]"
BEL = "\x07"


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def encode(path: str | Path, options: RenderOptions, multiplexer: bool = False) -> str:
    """Build an iTerm2 inline image sequence (OSC 1337) from a file.

    The file is sent byte-for-byte; iTerm2 decodes it itself.
    See https://iterm2.com/documentation-images.html
    """
    path = Path(path)
    data = read_bytes(path)
    height = "auto" if options.height is None else options.height
    params = ";".join(
        [
            f"name={_b64(path.name.encode('utf-8'))}",
            "inline=1",
            f"width={options.width}",
            f"height={height}",
            f"preserveAspectRatio={1 if options.preserve_aspect_ratio else 0}",
        ]
    )
    logger.debug("iTerm2 image %s: %d bytes", path, len(data))
    return wrap(f"{OSC}1337;File={params}:{_b64(data)}{BEL}", multiplexer)
