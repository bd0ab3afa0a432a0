"""Options and helpers shared by the AutoEyes commands."""

import click
from rich.console import Console
from rich.table import Table

from autoeyes.core.pattern import DEFAULT_THRESHOLD, Match
from autoeyes.core.region import Region
from autoeyes.services.screenshot_service import ScreenshotService

EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def search_options(func):
    """Add the --region/--window/--threshold options to a command."""
    func = click.option(
        "--threshold",
        "-t",
        type=click.FloatRange(0.0, 1.0),
        default=DEFAULT_THRESHOLD,
        show_default=True,
        help="Minimum similarity score accepted as a match.",
    )(func)
    func = click.option(
        "--window",
        "-w",
        type=str,
        default=None,
        help="Search inside the window with this title instead of a region.",
    )(func)
    func = click.option(
        "--region",
        "-r",
        type=int,
        nargs=4,
        default=None,
        metavar="X Y W H",
        help="Screen region to search (default: whole screen).",
    )(func)
    return func


def timeout_option(func):
    return click.option(
        "--timeout",
        type=click.FloatRange(min=0.0),
        default=None,
        help="Seconds to wait before giving up (default: configured wait time).",
    )(func)


def resolve_region(
    screenshot_service: ScreenshotService,
    region: tuple[int, int, int, int] | None,
    window: str | None,
) -> Region:
    """Turn the --region/--window options into a Region."""
    if region and window:
        raise click.UsageError("Use either --region or --window, not both.")
    if region:
        return Region.from_tuple(region)
    if window:
        return screenshot_service.window_region(window)
    return screenshot_service.virtual_screen()


def display_matches(console: Console, matches: list[Match], title: str) -> None:
    """Display matches in a formatted table."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")
    table.add_column("Width", justify="right")
    table.add_column("Height", justify="right")
    table.add_column("Center", style="magenta")
    table.add_column("Score", justify="right", style="green")

    for index, match in enumerate(matches, start=1):
        region = match.region
        table.add_row(
            str(index),
            str(region.x),
            str(region.y),
            str(region.width),
            str(region.height),
            f"({region.center.x}, {region.center.y})",
            f"{match.score:.4f}",
        )

    console.print(table)
