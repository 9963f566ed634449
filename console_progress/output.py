"""Output filtering and logging utilities."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Global console instances; both follow sys.stdout / sys.stderr as they change
console = Console()
error_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """
    Route package logging through rich.

    Args:
        verbose: Log DEBUG messages instead of WARNING and above
    """
    handler = RichHandler(console=error_console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    package_logger = logging.getLogger("console_progress")
    for existing in list(package_logger.handlers):
        if isinstance(existing, RichHandler):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


class OutputFilter:
    """Filtered output manager."""

    def __init__(self, verbose: bool = False):
        """
        Initialize output filter.

        Args:
            verbose: Enable verbose output
        """
        self.verbose = verbose
        self.console = console
        self.error_console = error_console

    def info(self, message: str, verbose_only: bool = False):
        """Print info message."""
        if verbose_only and not self.verbose:
            return
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def success(self, message: str):
        """Print success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def warning(self, message: str):
        """Print warning message."""
        self.error_console.print(f"[yellow]⚠[/yellow] {message}")

    def error(self, message: str):
        """Print error message."""
        self.error_console.print(f"[red]✗[/red] {message}")
