"""Single-line console progress bar with optional ETA."""

import logging
import time
from typing import Callable, Optional

from console_progress.config import ProgressBarConfig
from console_progress.eta import EtaEstimator, format_remaining
from console_progress.exceptions import OutOfRange, PreconditionViolation
from console_progress.styles import Color
from console_progress.surface import OutputSurface, RichConsoleSurface

logger = logging.getLogger(__name__)

PROGRESS_BLOCK_CHARACTER = " "


class ProgressRenderer:
    """Draws a colored bar, a percentage label and optionally an ETA.

    Use as a context manager so the cursor visibility is restored however
    the block exits::

        with ProgressRenderer(total_units=len(items)) as bar:
            bar.begin()
            for i, item in enumerate(items):
                process(item)
                bar.draw(i + 1)
    """

    def __init__(
        self,
        total_units: int,
        start_column: int = 0,
        width: int = 40,
        completed_style: Color = Color.CYAN,
        remaining_style: Color = Color.BLACK,
        show_eta: bool = False,
        surface: Optional[OutputSurface] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize progress bar.

        Args:
            total_units: Total amount of work, used for the percentage
            start_column: Column the bar starts at
            width: Size of the bar in characters
            completed_style: Color of the completed part of the bar
            remaining_style: Color of the remaining part of the bar
            show_eta: Show the ETA (requires begin() before drawing)
            surface: Surface to draw on (rich console by default)
            clock: Time source for the ETA, in seconds
        """
        self.config = ProgressBarConfig(
            total_units=total_units,
            start_column=start_column,
            width=width,
            completed_style=completed_style,
            remaining_style=remaining_style,
            show_eta=show_eta,
        )
        self.surface = surface or RichConsoleSurface()
        self.eta_enabled = show_eta
        self._eta = EtaEstimator(clock=clock)
        self._units_per_block = self.config.units_per_block
        self._original_cursor_visible = self.surface.get_cursor_visible()
        self._released = False

        logger.debug(
            "Progress bar created: total=%d width=%d start_column=%d",
            self.total_units,
            self.width,
            self.start_column,
        )

    @classmethod
    def from_config(
        cls,
        config: ProgressBarConfig,
        surface: Optional[OutputSurface] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "ProgressRenderer":
        """Create a progress bar from a ProgressBarConfig."""
        return cls(
            total_units=config.total_units,
            start_column=config.start_column,
            width=config.width,
            completed_style=config.completed_style,
            remaining_style=config.remaining_style,
            show_eta=config.show_eta,
            surface=surface,
            clock=clock,
        )

    @property
    def total_units(self) -> int:
        return self.config.total_units

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def start_column(self) -> int:
        return self.config.start_column

    @property
    def completed_style(self) -> Color:
        return self.config.completed_style

    @property
    def remaining_style(self) -> Color:
        return self.config.remaining_style

    @property
    def start_time(self) -> Optional[float]:
        """Time begin() was last called, or None."""
        return self._eta.start_time

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager."""
        self.release()

    def begin(self) -> None:
        """Mark the start of work and enable the ETA."""
        self._eta.start()
        self.eta_enabled = True
        logger.debug("ETA tracking started")

    def completed_blocks(self, current: int) -> int:
        """Number of filled cells for the given unit of work.

        Rounded rather than truncated, so the last unit fills the whole bar.
        """
        self._check_range(current)
        blocks = round(current / self._units_per_block)
        return max(0, min(self.width, blocks))

    def format_label(self, current: int) -> str:
        """Percentage and count text shown after the bar."""
        self._check_range(current)
        percent = current / self.total_units * 100
        return f" {percent:>5.2f}% ({current} of {self.total_units})"

    def draw(self, current: int) -> None:
        """
        Draw the progress bar.

        Args:
            current: Current unit of work in relation to total_units
        """
        self._check_range(current)
        if self.eta_enabled and not self._eta.started:
            raise PreconditionViolation("Call begin() before drawing with ETA enabled")

        original_background = self.surface.get_background_style()
        self.surface.set_cursor_visible(False)
        self.surface.set_cursor_column(self.start_column)

        try:
            blocks = self.completed_blocks(current)
            self._write_blocks(self.completed_style, blocks)
            self._write_blocks(self.remaining_style, self.width - blocks)

            self.surface.set_background_style(original_background)
            self.surface.write_text(self.format_label(current))

            if self.eta_enabled and current > 0:
                remaining = self._eta.remaining(current, self.total_units)
                self.surface.write_text(f" {format_remaining(remaining)}")

            if current == self.total_units:
                self.surface.write_line()
                logger.debug("Progress bar completed")
        finally:
            self.surface.set_background_style(original_background)

    def release(self) -> None:
        """Restore the cursor visibility captured at construction."""
        if self._released:
            return
        self._released = True
        self.surface.set_cursor_visible(self._original_cursor_visible)
        logger.debug("Cursor visibility restored")

    def _write_blocks(self, style: Color, count: int) -> None:
        self.surface.set_background_style(style)
        if count:
            self.surface.write_text(PROGRESS_BLOCK_CHARACTER * count)

    def _check_range(self, current: int) -> None:
        if current < 0 or current > self.total_units:
            raise OutOfRange(current, self.total_units)
