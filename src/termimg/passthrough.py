ESC = "\x1b"

# tmux DCS passthrough: ESC P tmux; <payload with ESC doubled> ST
TMUX_START = ESC + "Ptmux;"
TMUX_END = ESC + "\\"


def wrap(sequence: str, multiplexer: bool) -> str:
    """Wrap a raw escape sequence so tmux forwards it to the outer terminal."""
    if not multiplexer:
        return sequence
    doubled = sequence.replace(ESC, ESC + ESC)
    return f"{TMUX_START}{doubled}{TMUX_END}"
