"""Single-line console progress bar with optional ETA."""

from console_progress.config import ProgressBarConfig
from console_progress.eta import EtaEstimator, format_remaining
from console_progress.exceptions import (
    InvalidConfiguration,
    OutOfRange,
    PreconditionViolation,
    ProgressBarError,
)
from console_progress.progress import ProgressRenderer
from console_progress.styles import Color
from console_progress.surface import OutputSurface, RichConsoleSurface

__all__ = [
    "Color",
    "EtaEstimator",
    "InvalidConfiguration",
    "OutOfRange",
    "OutputSurface",
    "PreconditionViolation",
    "ProgressBarConfig",
    "ProgressBarError",
    "ProgressRenderer",
    "RichConsoleSurface",
    "format_remaining",
]
