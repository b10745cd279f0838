import os
import sys
from dataclasses import dataclass
from typing import Mapping, TextIO

OVERRIDE_VAR = "TERMIMG_PROTOCOL"


@dataclass(frozen=True)
class CapabilitySignal:
    """Snapshot of the environment values used to pick a graphics protocol."""

    override: str | None = None
    multiplexer: bool = False
    kitty_window_id: str | None = None
    wezterm_executable: str | None = None
    term_program: str = ""
    term: str = ""
    colorterm: str = ""
    sixel_enabled: bool = False
    is_tty: bool = False

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str] | None = None, stream: TextIO | None = None
    ) -> "CapabilitySignal":
        """Read the signal from the process environment and stdout."""
        if environ is None:
            environ = os.environ
        if stream is None:
            stream = sys.stdout
        return cls(
            override=environ.get(OVERRIDE_VAR) or None,
            multiplexer=bool(environ.get("TMUX")),
            kitty_window_id=environ.get("KITTY_WINDOW_ID") or None,
            wezterm_executable=environ.get("WEZTERM_EXECUTABLE") or None,
            term_program=environ.get("TERM_PROGRAM", ""),
            term=environ.get("TERM", ""),
            colorterm=environ.get("COLORTERM", ""),
            sixel_enabled=environ.get("SIXEL") == "1",
            is_tty=stream is not None and stream.isatty(),
        )
