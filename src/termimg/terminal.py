import os
import sys

MAX_ANSI_COLUMNS = 120


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def default_columns() -> int:
    """Width used by the half-block renderer when the caller gives none."""
    return min(get_terminal_size()[0], MAX_ANSI_COLUMNS)
