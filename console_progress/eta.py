"""ETA estimation by linear extrapolation of elapsed time."""

import math
import time
from datetime import timedelta
from typing import Callable, Optional

from console_progress.exceptions import OutOfRange, PreconditionViolation

LESS_THAN_A_MINUTE = "Less than a minute"


class EtaEstimator:
    """Estimates remaining time from the average time per unit so far."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Initialize estimator.

        Args:
            clock: Returns the current time in seconds
        """
        self.clock = clock
        self.start_time: Optional[float] = None

    @property
    def started(self) -> bool:
        """Whether start() has been called."""
        return self.start_time is not None

    def start(self) -> None:
        """Stamp the start of work. Calling again re-stamps."""
        self.start_time = self.clock()

    def remaining(self, current: int, total: int) -> timedelta:
        """
        Estimate the time left until all units are done.

        Args:
            current: Units completed so far (must be > 0)
            total: Total units of work

        Returns:
            Estimated remaining time
        """
        if self.start_time is None:
            raise PreconditionViolation("Call begin() before estimating the ETA")
        if current <= 0 or current > total:
            raise OutOfRange(current, total)

        elapsed = self.clock() - self.start_time
        per_unit = elapsed / current
        estimated_total = per_unit * total
        return timedelta(seconds=estimated_total - elapsed)


def format_remaining(remaining: timedelta) -> str:
    """Format remaining time as whole hours and minutes."""
    if remaining < timedelta(minutes=1):
        return LESS_THAN_A_MINUTE

    seconds = remaining.total_seconds()
    hours = math.floor(seconds / 3600)
    minutes = math.floor(seconds / 60) % 60
    return f"{hours} hour(s) {minutes} minute(s)"
