from unittest import mock

import pytest

from viuer.utils import DEFAULT_TERM_SIZE, terminal_size, truecolor_available


def test_truecolor(monkeypatch):
    monkeypatch.setenv("COLORTERM", "truecolor")
    assert truecolor_available() is True
    monkeypatch.setenv("COLORTERM", "")
    assert truecolor_available() is False


@pytest.mark.parametrize(
    ("value", "expected"),
    [("24bit", True), ("truecolor", True), ("256color", False), ("", False)],
)
def test_truecolor_values(monkeypatch, value, expected):
    monkeypatch.setenv("COLORTERM", value)
    assert truecolor_available() is expected


def test_truecolor_unset(monkeypatch):
    monkeypatch.delenv("COLORTERM", raising=False)
    assert truecolor_available() is False


def test_terminal_size_from_environment(monkeypatch):
    monkeypatch.setenv("COLUMNS", "100")
    monkeypatch.setenv("LINES", "40")
    assert terminal_size() == (100, 40)


def test_terminal_size_fallback(monkeypatch):
    monkeypatch.delenv("COLUMNS", raising=False)
    monkeypatch.delenv("LINES", raising=False)
    with mock.patch("os.get_terminal_size", side_effect=OSError):
        assert terminal_size() == DEFAULT_TERM_SIZE
    assert DEFAULT_TERM_SIZE == (80, 24)