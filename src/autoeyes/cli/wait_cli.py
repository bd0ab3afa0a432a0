"""Wait commands for AutoEyes.

Each command polls the screen until its condition holds or the timeout
elapses. Exit status is 0 on success, 1 on timeout and 2 on errors.
"""

import sys
from pathlib import Path

import click
from dependency_injector.wiring import Provide, inject
from loguru import logger
from rich.console import Console

from autoeyes.cli.options import (
    EXIT_ERROR,
    EXIT_NOT_FOUND,
    display_matches,
    resolve_region,
    search_options,
    timeout_option,
)
from autoeyes.container import Container
from autoeyes.core.pattern import Pattern
from autoeyes.exceptions import AutoEyesError
from autoeyes.orchestration.pattern_waiter import PatternWaiter
from autoeyes.services.screenshot_service import ScreenshotService

IMAGE_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.command()
@click.argument("image", type=IMAGE_PATH)
@search_options
@timeout_option
@inject
def wait(
    image: Path,
    region: tuple[int, int, int, int] | None,
    window: str | None,
    threshold: float,
    timeout: float | None,
    screenshot_service: ScreenshotService = Provide[Container.screenshot_service],
    pattern_waiter: PatternWaiter = Provide[Container.pattern_waiter],
):
    """Wait until IMAGE appears on screen."""
    try:
        pattern = Pattern.from_file(image, threshold=threshold)
        search_region = resolve_region(screenshot_service, region, window)
        match = pattern_waiter.wait_for(search_region, pattern, timeout=timeout)
    except AutoEyesError as e:
        logger.error(str(e))
        sys.exit(EXIT_ERROR)

    if match is None:
        sys.exit(EXIT_NOT_FOUND)

    display_matches(Console(), [match], title=f"{pattern.name} appeared")


@click.command(name="wait-count")
@click.argument("image", type=IMAGE_PATH)
@click.option(
    "--count",
    "-c",
    type=click.IntRange(min=1),
    required=True,
    help="Number of occurrences to wait for.",
)
@search_options
@timeout_option
@inject
def wait_count(
    image: Path,
    count: int,
    region: tuple[int, int, int, int] | None,
    window: str | None,
    threshold: float,
    timeout: float | None,
    screenshot_service: ScreenshotService = Provide[Container.screenshot_service],
    pattern_waiter: PatternWaiter = Provide[Container.pattern_waiter],
):
    """Wait until COUNT occurrences of IMAGE are on screen."""
    try:
        pattern = Pattern.from_file(image, threshold=threshold)
        search_region = resolve_region(screenshot_service, region, window)
        matches = pattern_waiter.wait_for_count(
            search_region, pattern, count, timeout=timeout
        )
    except AutoEyesError as e:
        logger.error(str(e))
        sys.exit(EXIT_ERROR)

    if matches:
        display_matches(
            Console(), matches, title=f"{len(matches)}/{count} of {pattern.name}"
        )

    if len(matches) < count:
        logger.info(f"Only {len(matches)} of {count} occurrence(s) found")
        sys.exit(EXIT_NOT_FOUND)


@click.command(name="wait-any")
@click.argument("images", type=IMAGE_PATH, nargs=-1, required=True)
@search_options
@timeout_option
@inject
def wait_any(
    images: tuple[Path, ...],
    region: tuple[int, int, int, int] | None,
    window: str | None,
    threshold: float,
    timeout: float | None,
    screenshot_service: ScreenshotService = Provide[Container.screenshot_service],
    pattern_waiter: PatternWaiter = Provide[Container.pattern_waiter],
):
    """Wait until any of IMAGES appears on screen.

    Images are checked in the order given; the first one found wins.
    """
    try:
        patterns = [Pattern.from_file(path, threshold=threshold) for path in images]
        search_region = resolve_region(screenshot_service, region, window)
        match = pattern_waiter.wait_any(search_region, patterns, timeout=timeout)
    except AutoEyesError as e:
        logger.error(str(e))
        sys.exit(EXIT_ERROR)

    if match is None:
        sys.exit(EXIT_NOT_FOUND)

    display_matches(Console(), [match], title="First pattern found")


@click.command(name="wait-vanish")
@click.argument("image", type=IMAGE_PATH)
@search_options
@timeout_option
@inject
def wait_vanish(
    image: Path,
    region: tuple[int, int, int, int] | None,
    window: str | None,
    threshold: float,
    timeout: float | None,
    screenshot_service: ScreenshotService = Provide[Container.screenshot_service],
    pattern_waiter: PatternWaiter = Provide[Container.pattern_waiter],
):
    """Wait until IMAGE is no longer on screen."""
    try:
        pattern = Pattern.from_file(image, threshold=threshold)
        search_region = resolve_region(screenshot_service, region, window)
        vanished = pattern_waiter.wait_vanish(search_region, pattern, timeout=timeout)
    except AutoEyesError as e:
        logger.error(str(e))
        sys.exit(EXIT_ERROR)

    if not vanished:
        logger.info(f"{pattern.name} is still visible")
        sys.exit(EXIT_NOT_FOUND)

    logger.info(f"{pattern.name} vanished")
