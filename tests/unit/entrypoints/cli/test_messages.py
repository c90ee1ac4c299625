"""Unit tests for the stderr status lines (`warn`, `success`, `error`)."""

import io
import sys

import click
import pytest

from casework.entrypoints.cli.helpers.messages import (
    caution_glyph,
    error,
    error_glyph,
    success,
    success_glyph,
    warn,
)

# pylint: disable=magic-value-comparison


class Terminal(io.StringIO):
    """A tty-like stream with a chosen encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def isatty(self) -> bool:
        return True


@pytest.fixture
def stderr_as(monkeypatch):
    """Make both click's stream lookup and sys.stderr a `Terminal`."""

    def _install(encoding: str) -> Terminal:
        terminal = Terminal(encoding)
        monkeypatch.setattr(click, "get_text_stream", lambda name: terminal)
        monkeypatch.setattr(sys, "stderr", terminal)
        monkeypatch.delenv("NO_COLOR", raising=False)
        return terminal

    return _install


STATUS_LINES = [
    (warn, caution_glyph, "⚠️", "[!]", "\x1b[33m"),
    (success, success_glyph, "✅", "[OK]", "\x1b[32m"),
    (error, error_glyph, "❌", "[X]", "\x1b[31m"),
]


@pytest.mark.parametrize(("emit", "glyph", "emoji", "ascii_", "colour"), STATUS_LINES)
class TestStatusLines:
    """Each helper picks a glyph for the terminal and colours the line."""

    def test_emoji_on_utf8(self, stderr_as, emit, glyph, emoji, ascii_, colour):
        terminal = stderr_as("utf-8")
        assert glyph() == emoji
        emit("Loaded 5 case(s) and 7 task(s).")
        line = terminal.getvalue()
        assert line.startswith(f"{colour}\x1b[1m{emoji}  Loaded 5 case(s)")
        assert line.endswith("\x1b[0m\n")

    def test_ascii_fallback(self, stderr_as, emit, glyph, emoji, ascii_, colour):
        terminal = stderr_as("ascii")
        assert glyph() == ascii_
        emit("Deleted 2 example case(s).")
        assert f"{ascii_}  Deleted 2 example case(s)." in terminal.getvalue()
        assert emoji not in terminal.getvalue()

    def test_encoding_checked_on_every_call(
        self, stderr_as, emit, glyph, emoji, ascii_, colour
    ):
        stderr_as("ascii")
        assert glyph() == ascii_
        stderr_as("utf-8")
        assert glyph() == emoji


@pytest.mark.parametrize("emit", [warn, success, error])
def test_stdout_left_to_json(emit, capsys):
    """Status lines never reach stdout, which carries command results."""
    emit("Example data was already loaded; nothing added.")
    captured = capsys.readouterr()
    assert "Example data was already loaded" in captured.err
    assert captured.out == ""
