"""Tests for RichConsoleSurface."""

import io

import pytest
from rich.console import Console

from console_progress.progress import ProgressRenderer
from console_progress.styles import Color
from console_progress.surface import RichConsoleSurface


@pytest.fixture(autouse=True)
def plain_environment(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.delenv("NO_COLOR", raising=False)


def make_console(terminal: bool) -> Console:
    return Console(
        file=io.StringIO(),
        force_terminal=terminal,
        color_system="standard" if terminal else None,
        width=120,
    )


class TestRichConsoleSurface:
    """Test RichConsoleSurface."""

    def test_cursor_tracking(self):
        """Cursor visibility is tracked and written as control codes."""
        console = make_console(terminal=True)
        surface = RichConsoleSurface(console=console)
        assert surface.get_cursor_visible() is True
        surface.set_cursor_visible(False)
        assert surface.get_cursor_visible() is False
        surface.set_cursor_visible(True)
        output = console.file.getvalue()
        assert "\x1b[?25l" in output
        assert "\x1b[?25h" in output

    def test_move_to_column(self):
        """Columns are zero based."""
        console = make_console(terminal=True)
        surface = RichConsoleSurface(console=console)
        surface.set_cursor_column(3)
        assert console.file.getvalue() == "\x1b[4G"

    def test_background(self):
        """Text is written with the current background."""
        console = make_console(terminal=True)
        surface = RichConsoleSurface(console=console)
        assert surface.get_background_style() == Color.DEFAULT
        surface.set_background_style(Color.DARK_BLUE)
        assert surface.get_background_style() == Color.DARK_BLUE
        surface.write_text("  ")
        assert "\x1b[44m  " in console.file.getvalue()

    def test_plain_output(self):
        """Non-terminal consoles get plain text."""
        console = make_console(terminal=False)
        surface = RichConsoleSurface(console=console)
        with ProgressRenderer(total_units=4, width=8, surface=surface) as bar:
            bar.draw(2)
            bar.draw(4)
        assert console.file.getvalue() == (
            "\r" + " " * 8 + " 50.00% (2 of 4)"
            "\r" + " " * 8 + " 100.00% (4 of 4)\n"
        )

    def test_plain_output_start_column(self):
        """Off-terminal the start column is padded with spaces."""
        console = make_console(terminal=False)
        surface = RichConsoleSurface(console=console)
        with ProgressRenderer(total_units=4, width=4, start_column=3, surface=surface) as bar:
            bar.draw(2)
        assert console.file.getvalue() == "\r" + " " * 3 + " " * 4 + " 50.00% (2 of 4)"

    def test_capture_includes_line_start(self):
        """Column moves go through the console buffer and are captured."""
        console = make_console(terminal=False)
        surface = RichConsoleSurface(console=console)
        bar = ProgressRenderer(total_units=4, width=4, start_column=2, surface=surface)
        with console.capture() as capture:
            bar.draw(2)
        assert capture.get() == "\r  " + " " * 4 + " 50.00% (2 of 4)"
        assert console.file.getvalue() == ""

    def test_write_char(self):
        """Single characters use the current background."""
        console = make_console(terminal=True)
        surface = RichConsoleSurface(console=console)
        surface.set_background_style(Color.DARK_RED)
        surface.write_char("x")
        assert "\x1b[41mx" in console.file.getvalue()
