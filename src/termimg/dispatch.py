import logging
from pathlib import Path

from termimg import ansi, iterm2, kitty, sixel
from termimg.capabilities import CapabilitySignal
from termimg.detect import ANSI, ITERM2, KITTY, SIXEL, detect
from termimg.options import RenderOptions
from termimg.sixel import CommandRunner

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Image rendering not supported for this terminal: "
ANSI_COLUMNS = 40


def render(
    path: str | Path,
    size: int = 100,
    *,
    signal: CapabilitySignal | None = None,
    runner: CommandRunner | None = None,
    ansi_columns: int = ANSI_COLUMNS,
) -> str:
    """Encode an image for the current terminal.

    Returns the escape sequence to print, or a fallback message naming the
    file when the terminal has no supported protocol. Sixel output needs a
    command runner; without one sixel terminals get the fallback message.
    Read and decode errors from the encoders propagate.
    """
    if signal is None:
        signal = CapabilitySignal.from_environ()
    protocol = detect(signal)
    logger.debug("Rendering %s with protocol %s", path, protocol)

    if protocol == KITTY:
        return kitty.encode(path, RenderOptions(width=size), signal.multiplexer)
    if protocol == ITERM2:
        return iterm2.encode(path, RenderOptions(width=size), signal.multiplexer)
    if protocol == ANSI:
        return ansi.encode(path, ansi_columns)
    if protocol == SIXEL and runner is not None:
        return sixel.encode(path, runner, signal.multiplexer)

    return FALLBACK_MESSAGE + str(path)
