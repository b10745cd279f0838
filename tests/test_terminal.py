import io

from termimg import terminal


def test_not_a_tty(monkeypatch):
    monkeypatch.setattr(terminal.sys, "stdout", io.StringIO())
    assert terminal.get_terminal_size() == (80, 24)


def test_default_columns_capped(monkeypatch):
    monkeypatch.setattr(terminal, "get_terminal_size", lambda: (200, 60))
    assert terminal.default_columns() == terminal.MAX_ANSI_COLUMNS


def test_default_columns_narrow(monkeypatch):
    monkeypatch.setattr(terminal, "get_terminal_size", lambda: (72, 20))
    assert terminal.default_columns() == 72
