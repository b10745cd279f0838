import logging
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from termimg.errors import FileReadError, ImageDecodeError
from termimg.passthrough import wrap

logger = logging.getLogger(__name__)

ENCODER = "img2sixel"


class CommandRunner(Protocol):
    def run(self, command: str) -> str:
        """Execute a shell command and return its stdout.

        Raises subprocess.CalledProcessError when the command exits non-zero.
        """
        ...


class SubprocessRunner:
    """Runs commands through the shell and captures stdout."""

    def run(self, command: str) -> str:
        result = subprocess.run(command, shell=True, capture_output=True, text=True)
        if result.returncode != 0:
            raise subprocess.CalledProcessError(result.returncode, command, result.stdout, result.stderr)
        return result.stdout

    @staticmethod
    def available() -> bool:
        return shutil.which(ENCODER) is not None


def command_for(path: str | Path) -> str:
    """Shell command whose stdout is the SIXEL stream for an image."""
    return f"{ENCODER} {shlex.quote(str(path))}"


def encode(path: str | Path, runner: CommandRunner, multiplexer: bool = False) -> str:
    if not Path(path).is_file():
        raise FileReadError(path)
    command = command_for(path)
    logger.debug("Running %s", command)
    try:
        output = runner.run(command)
    except subprocess.CalledProcessError as exc:
        raise ImageDecodeError(path, f"{ENCODER} failed ({(exc.stderr or '').strip() or exc.returncode})") from exc
    return wrap(output, multiplexer)
