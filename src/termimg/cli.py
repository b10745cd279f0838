import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from termimg.capabilities import OVERRIDE_VAR, CapabilitySignal
from termimg.dispatch import render
from termimg.errors import TermImageError
from termimg.sixel import SubprocessRunner


def _positive_int(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if size < 1:
        raise argparse.ArgumentTypeError(f"size must be at least 1, got {size}")
    return size


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Display an image inline in the terminal")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-s", "--size", type=_positive_int, default=100, help="Target width passed to the image protocol (default: 100)"
    )
    parser.add_argument(
        "-p",
        "--protocol",
        default=None,
        choices=["kitty", "iterm2", "sixel", "ansi", "none"],
        help=f"Force a protocol instead of detecting one (same as ${OVERRIDE_VAR})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    signal = CapabilitySignal.from_environ()
    if args.protocol is not None:
        signal = replace(signal, override=args.protocol)
    runner = SubprocessRunner() if SubprocessRunner.available() else None

    try:
        output = render(image_path, args.size, signal=signal, runner=runner)
    except TermImageError as exc:
        print(exc, file=sys.stderr)
        return 1

    sys.stdout.write(output + "\n")
    sys.stdout.flush()
    return 0
