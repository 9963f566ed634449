"""CLI entrypoint for console-progress."""

import sys
import time
from dataclasses import replace
from typing import Optional

import typer

from console_progress.config import ProgressBarConfig
from console_progress.exceptions import ProgressBarError
from console_progress.output import OutputFilter, configure_logging
from console_progress.progress import ProgressRenderer
from console_progress.styles import Color
from console_progress.surface import RichConsoleSurface

app = typer.Typer(
    name="console-progress",
    help="Single-line console progress bar with optional ETA",
    add_completion=False,
)


@app.command()
def main(
    total: int = typer.Option(
        3500,
        "--total",
        help="Total units of work to simulate",
    ),
    width: Optional[int] = typer.Option(
        None,
        "--width",
        help="Bar width in characters (default 40)",
    ),
    start_column: Optional[int] = typer.Option(
        None,
        "--start-column",
        help="Column the bar starts at (default 0)",
    ),
    completed_color: Optional[str] = typer.Option(
        None,
        "--completed-color",
        help="Color of the completed part (e.g. cyan, dark_blue)",
    ),
    remaining_color: Optional[str] = typer.Option(
        None,
        "--remaining-color",
        help="Color of the remaining part (e.g. black, dark_gray)",
    ),
    eta: bool = typer.Option(
        False,
        "--eta",
        help="Show estimated time to completion",
    ),
    delay: float = typer.Option(
        0.001,
        "--delay",
        help="Seconds to sleep per unit of work",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Verbose output",
    ),
):
    """
    Draw a progress bar over a simulated workload.

    Defaults can be overridden with CONSOLE_PROGRESS_* environment variables.
    """
    output = OutputFilter(verbose=verbose)
    configure_logging(verbose)

    try:
        config = ProgressBarConfig.from_env(total_units=total)
        overrides = {}
        if width is not None:
            overrides["width"] = width
        if start_column is not None:
            overrides["start_column"] = start_column
        if completed_color:
            overrides["completed_style"] = Color.parse(completed_color)
        if remaining_color:
            overrides["remaining_style"] = Color.parse(remaining_color)
        if eta:
            overrides["show_eta"] = True
        if overrides:
            config = replace(config, **overrides)
    except ProgressBarError as e:
        output.error(f"Invalid configuration: {e}")
        sys.exit(1)

    surface = RichConsoleSurface(console=output.console)
    if surface.console.is_terminal and config.start_column + config.width > surface.console.width:
        output.warning("Progress bar is wider than the terminal and will wrap")

    output.info(f"Simulating {config.total_units} units of work", verbose_only=True)

    with ProgressRenderer.from_config(config, surface=surface) as progress_bar:
        if config.show_eta:
            progress_bar.begin()
        for i in range(config.total_units):
            if delay > 0:
                time.sleep(delay)
            progress_bar.draw(i + 1)

    output.success("Done")


def cli_entrypoint():
    """CLI entrypoint for console script."""
    app()


# Make app callable for direct execution
if __name__ == "__main__":
    cli_entrypoint()
