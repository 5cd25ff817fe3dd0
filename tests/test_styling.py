"""Tests for styling sinks and the display helpers."""

from lrc_colorizer.colors import RGB
from lrc_colorizer import display
from lrc_colorizer.display import center_line, display_frame, get_terminal_size
from lrc_colorizer.styling import ansi_fg, plain, strip_ansi, visible_width


class TestSinks:
    """Tests for the styling sinks."""

    def test_ansi_fg(self):
        assert ansi_fg("hi", RGB(1, 22, 255)) == "\x1b[38;2;1;22;255mhi\x1b[0m"

    def test_ansi_fg_empty_text(self):
        assert ansi_fg("", RGB(1, 2, 3)) == ""

    def test_plain(self):
        assert plain("hi", RGB(1, 2, 3)) == "hi"


class TestWidth:
    """Tests for strip_ansi and visible_width."""

    def test_strip(self):
        styled = ansi_fg("Take ", RGB(9, 9, 9)) + ansi_fg("on me", RGB(1, 1, 1))
        assert strip_ansi(styled) == "Take on me"

    def test_visible_width_ignores_escapes(self):
        assert visible_width(ansi_fg("abc", RGB(0, 0, 0))) == 3

    def test_visible_width_wide_characters(self):
        assert visible_width(ansi_fg("晴天", RGB(0, 0, 0))) == 4


class TestCenterLine:
    """Tests for center_line."""

    def test_centered_by_visible_width(self):
        styled = ansi_fg("abcd", RGB(0, 0, 0))
        line = center_line(styled, 10)
        assert strip_ansi(line) == "   abcd   "

    def test_too_wide(self):
        assert center_line("abcdef", 4) == "abcdef"


class TestTerminalOutput:
    """Tests for the terminal painting helpers."""

    def test_size_without_terminal(self, capsys):
        """Captured stdout has no terminal, so the fallback size is used."""
        assert get_terminal_size() == display.FALLBACK_SIZE

    def test_cursor_and_clear(self, capsys):
        display.hide_cursor()
        display.clear_screen()
        display.show_cursor()
        assert capsys.readouterr().out == "\x1b[?25l\x1b[2J\x1b[H\x1b[?25h"

    def test_display_frame_middle_row(self, capsys, monkeypatch):
        monkeypatch.setattr(display, "get_terminal_size", lambda: (10, 6))
        display_frame(ansi_fg("ab", RGB(1, 2, 3)))
        out = capsys.readouterr().out
        assert out.startswith("\x1b[4;1H")
        assert strip_ansi(out) == "    ab    "
