import pytest

from termimg.capabilities import CapabilitySignal
from termimg.dispatch import FALLBACK_MESSAGE, render
from termimg.errors import FileReadError, ImageDecodeError

KITTY = CapabilitySignal(kitty_window_id="1")
ITERM2 = CapabilitySignal(term_program="iTerm.app")
SIXEL = CapabilitySignal(sixel_enabled=True)
ANSI = CapabilitySignal(is_tty=True, colorterm="truecolor")
NONE = CapabilitySignal()


class FakeRunner:
    def run(self, command):
        return "\x1bPq~\x1b\\"


def test_none_returns_fallback(png_file):
    path = png_file()
    result = render(path, 100, signal=NONE)
    assert result == FALLBACK_MESSAGE + str(path)
    assert "\x1b" not in result


def test_unknown_override_returns_fallback(png_file):
    path = png_file()
    assert render(path, signal=CapabilitySignal(override="braille")) == FALLBACK_MESSAGE + str(path)


def test_kitty(png_file):
    result = render(png_file(size=(20, 10)), 10, signal=KITTY)
    assert result.startswith("\x1b_Gf=100,a=T,m=0;")


def test_iterm2_uses_size_as_width(png_file):
    result = render(png_file(), 500, signal=ITERM2)
    assert result.startswith("\x1b]1337;File=")
    assert ";width=500;" in result


def test_ansi_uses_fixed_columns(png_file):
    result = render(png_file(size=(40, 40)), 500, signal=ANSI)
    lines = result.split("\n")
    assert lines[0].count("▄") == 40
    assert len(lines) == 20


def test_ansi_columns_argument(png_file):
    result = render(png_file(size=(40, 40)), signal=ANSI, ansi_columns=8)
    assert result.split("\n")[0].count("▄") == 8


def test_sixel_without_runner_falls_back(png_file):
    path = png_file()
    assert render(path, signal=SIXEL) == FALLBACK_MESSAGE + str(path)


def test_sixel_with_runner(png_file):
    assert render(png_file(), signal=SIXEL, runner=FakeRunner()) == "\x1bPq~\x1b\\"


def test_multiplexer_flag_reaches_encoder(png_file):
    signal = CapabilitySignal(term_program="iTerm.app", multiplexer=True)
    assert render(png_file(), signal=signal).startswith("\x1bPtmux;")


def test_signal_read_from_environment(png_file, monkeypatch):
    monkeypatch.setenv("TERMIMG_PROTOCOL", "iterm2")
    monkeypatch.delenv("TMUX", raising=False)
    assert render(png_file()).startswith("\x1b]1337;File=")


def test_read_errors_propagate(tmp_path):
    with pytest.raises(FileReadError):
        render(tmp_path / "missing.png", signal=ITERM2)


def test_decode_errors_propagate(corrupt_file):
    with pytest.raises(ImageDecodeError):
        render(corrupt_file, signal=KITTY)
