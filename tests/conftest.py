"""Shared fixtures."""

import pytest

from console_progress.styles import Color
from console_progress.surface import OutputSurface


class RecordingSurface(OutputSurface):
    """Surface that records every call and the cells written.

    cells holds every character with its background; text holds only what was
    written on the starting background, i.e. labels and ETA.
    """

    def __init__(self, cursor_visible: bool = True, background: Color = Color.DEFAULT):
        self.cursor_visible = cursor_visible
        self.background = background
        self.initial_background = background
        self.events = []
        self.cells = []  # (char, background) pairs
        self.text = ""
        self.fail_on_write = None

    def set_cursor_visible(self, visible: bool) -> None:
        self.events.append(("cursor_visible", visible))
        self.cursor_visible = visible

    def get_cursor_visible(self) -> bool:
        return self.cursor_visible

    def set_cursor_column(self, column: int) -> None:
        self.events.append(("column", column))

    def set_background_style(self, style: Color) -> None:
        self.events.append(("background", style))
        self.background = style

    def get_background_style(self) -> Color:
        return self.background

    def write_text(self, text: str) -> None:
        if self.fail_on_write and self.fail_on_write in text:
            raise IOError("surface write failed")
        self.events.append(("text", text))
        self.cells.extend((char, self.background) for char in text)
        if self.background == self.initial_background:
            self.text += text

    def write_char(self, char: str) -> None:
        self.events.append(("char", char))
        self.cells.append((char, self.background))

    def write_line(self) -> None:
        self.events.append(("line",))
        self.text += "\n"

    def blocks(self, style: Color) -> int:
        return sum(1 for _, background in self.cells if background == style)


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def clock():
    return FakeClock()
