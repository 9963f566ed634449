"""Errors raised by the progress bar."""


class ProgressBarError(Exception):
    """Base class for progress bar errors."""


class InvalidConfiguration(ProgressBarError, ValueError):
    """Raised when a bar is configured with a zero total, zero width or bad values."""


class OutOfRange(ProgressBarError, ValueError):
    """Raised when the current unit of work falls outside [0, total]."""

    def __init__(self, current: int, total: int):
        self.current = current
        self.total = total
        super().__init__(
            f"current unit of work {current} must be between 0 and {total}"
        )


class PreconditionViolation(ProgressBarError, RuntimeError):
    """Raised when ETA is requested before begin() was called."""
