"""Progress bar configuration."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from console_progress.exceptions import InvalidConfiguration
from console_progress.styles import Color

ENV_PREFIX = "CONSOLE_PROGRESS_"
TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ProgressBarConfig:
    """Fixed configuration of a single progress bar."""

    total_units: int
    start_column: int = 0
    width: int = 40
    completed_style: Union[Color, str] = Color.CYAN
    remaining_style: Union[Color, str] = Color.BLACK
    show_eta: bool = False

    def __post_init__(self):
        """Validate values and normalize color names."""
        if self.total_units <= 0:
            raise InvalidConfiguration(
                f"total_units must be greater than 0, got {self.total_units}"
            )
        if self.width <= 0:
            raise InvalidConfiguration(f"width must be greater than 0, got {self.width}")
        if self.start_column < 0:
            raise InvalidConfiguration(
                f"start_column must not be negative, got {self.start_column}"
            )

        if isinstance(self.completed_style, str):
            self.completed_style = Color.parse(self.completed_style)
        if isinstance(self.remaining_style, str):
            self.remaining_style = Color.parse(self.remaining_style)

    @property
    def units_per_block(self) -> float:
        """Units of work represented by one bar cell."""
        return self.total_units / self.width

    @classmethod
    def from_env(
        cls,
        total_units: int,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ProgressBarConfig":
        """
        Build a configuration, taking overrides from the environment.

        Recognized variables: CONSOLE_PROGRESS_WIDTH, CONSOLE_PROGRESS_START_COLUMN,
        CONSOLE_PROGRESS_COMPLETED_COLOR, CONSOLE_PROGRESS_REMAINING_COLOR and
        CONSOLE_PROGRESS_SHOW_ETA.

        Args:
            total_units: Total amount of work
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ProgressBarConfig instance
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        width = env.get(f"{ENV_PREFIX}WIDTH")
        if width:
            kwargs["width"] = _parse_int("WIDTH", width)

        start_column = env.get(f"{ENV_PREFIX}START_COLUMN")
        if start_column:
            kwargs["start_column"] = _parse_int("START_COLUMN", start_column)

        completed = env.get(f"{ENV_PREFIX}COMPLETED_COLOR")
        if completed:
            kwargs["completed_style"] = Color.parse(completed)

        remaining = env.get(f"{ENV_PREFIX}REMAINING_COLOR")
        if remaining:
            kwargs["remaining_style"] = Color.parse(remaining)

        show_eta = env.get(f"{ENV_PREFIX}SHOW_ETA")
        if show_eta:
            kwargs["show_eta"] = show_eta.strip().lower() in TRUE_VALUES

        return cls(total_units=total_units, **kwargs)


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise InvalidConfiguration(
            f"{ENV_PREFIX}{name} must be an integer, got {value!r}"
        ) from None
