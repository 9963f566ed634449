"""Output surfaces the progress bar draws on."""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console, ConsoleOptions, RenderResult
from rich.control import Control
from rich.segment import Segment
from rich.style import Style

from console_progress.styles import Color


class LineStart:
    """Carriage return padded out to a column.

    Off-terminal rich drops control codes, so this is yielded as a plain
    segment. It still goes through the console buffer and shows up in
    capture() and recorded output.
    """

    def __init__(self, column: int):
        self.column = column

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield Segment("\r" + " " * self.column)


class OutputSurface(ABC):
    """Minimal terminal-like surface: cursor, background color and text."""

    @abstractmethod
    def set_cursor_visible(self, visible: bool) -> None:
        """Show or hide the cursor."""

    @abstractmethod
    def get_cursor_visible(self) -> bool:
        """Return whether the cursor is visible."""

    @abstractmethod
    def set_cursor_column(self, column: int) -> None:
        """Move the write cursor to a column on the current line."""

    @abstractmethod
    def set_background_style(self, style: Color) -> None:
        """Set the background used by subsequent writes."""

    @abstractmethod
    def get_background_style(self) -> Color:
        """Return the current background."""

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Write text with the current background."""

    def write_char(self, char: str) -> None:
        """Write a single character with the current background."""
        self.write_text(char)

    @abstractmethod
    def write_line(self) -> None:
        """Terminate the current line."""


class RichConsoleSurface(OutputSurface):
    """Surface backed by a rich Console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        background: Color = Color.DEFAULT,
    ):
        """
        Initialize surface.

        Args:
            console: Console to write to (a default Console when omitted)
            background: Background the terminal starts with
        """
        self.console = console or Console()
        self._background = background
        # Terminals cannot be asked, so we track what we last set.
        self._cursor_visible = True

    def set_cursor_visible(self, visible: bool) -> None:
        self.console.show_cursor(visible)
        self._cursor_visible = visible

    def get_cursor_visible(self) -> bool:
        return self._cursor_visible

    def set_cursor_column(self, column: int) -> None:
        if self.console.is_terminal:
            self.console.control(Control.move_to_column(column))
        else:
            self.console.print(LineStart(column), end="", crop=False)

    def set_background_style(self, style: Color) -> None:
        self._background = style

    def get_background_style(self) -> Color:
        return self._background

    def write_text(self, text: str) -> None:
        self.console.out(
            text,
            style=Style(bgcolor=self._background.value),
            end="",
            highlight=False,
        )

    def write_line(self) -> None:
        self.console.line()
