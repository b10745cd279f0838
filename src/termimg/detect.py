import logging
import re
from typing import Literal

from termimg.capabilities import CapabilitySignal

logger = logging.getLogger(__name__)

KITTY = "kitty"
ITERM2 = "iterm2"
SIXEL = "sixel"
ANSI = "ansi"
NONE = "none"

ProtocolName = Literal["kitty", "iterm2", "sixel", "ansi", "none"]

_SIXEL_TERM = re.compile(r"\bsixel\b", re.IGNORECASE)


def _is_truecolor(colorterm: str) -> bool:
    return "truecolor" in colorterm or colorterm == "24bit"


def detect(signal: CapabilitySignal) -> str:
    """Pick the graphics protocol for a terminal.

    Checks run in priority order and the first match wins, since one terminal
    can satisfy several heuristics at once. An explicit override is returned
    as-is, even when it names no known protocol.
    """
    if signal.override:
        logger.debug("Protocol override: %s", signal.override)
        return signal.override

    if signal.kitty_window_id or "xterm-kitty" in signal.term or signal.wezterm_executable:
        return KITTY

    # Ghostty speaks the kitty protocol more reliably than its own
    if signal.term_program == "ghostty" and "ghostty" in signal.term:
        return KITTY

    if signal.term_program in ("iTerm.app", "WezTerm"):
        return ITERM2

    if _SIXEL_TERM.search(signal.term) or signal.sixel_enabled:
        return SIXEL

    if signal.is_tty and _is_truecolor(signal.colorterm):
        return ANSI

    return NONE
