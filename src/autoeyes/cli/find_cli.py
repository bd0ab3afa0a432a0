"""Single-shot search commands for AutoEyes."""

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
)
from autoeyes.container import Container
from autoeyes.core.pattern import Pattern
from autoeyes.detection.pattern_locator import PatternLocator
from autoeyes.exceptions import AutoEyesError
from autoeyes.services.screenshot_service import ScreenshotService


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@search_options
@inject
def find(
    image: Path,
    region: tuple[int, int, int, int] | None,
    window: str | None,
    threshold: float,
    screenshot_service: ScreenshotService = Provide[Container.screenshot_service],
    pattern_locator: PatternLocator = Provide[Container.pattern_locator],
):
    """Find the best match of IMAGE on screen.

    Exits with status 1 when no area scores at least the threshold.
    """
    try:
        pattern = Pattern.from_file(image, threshold=threshold)
        search_region = resolve_region(screenshot_service, region, window)
        snapshot = screenshot_service.snapshot(search_region)
        match = pattern_locator.find_best(snapshot, pattern, search_region.top_left)
    except AutoEyesError as e:
        logger.error(str(e))
        sys.exit(EXIT_ERROR)

    if match is None:
        logger.info(f"{pattern.name} not found")
        sys.exit(EXIT_NOT_FOUND)

    display_matches(Console(), [match], title=f"Best match of {pattern.name}")


@click.command(name="find-all")
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@search_options
@inject
def find_all(
    image: Path,
    region: tuple[int, int, int, int] | None,
    window: str | None,
    threshold: float,
    screenshot_service: ScreenshotService = Provide[Container.screenshot_service],
    pattern_locator: PatternLocator = Provide[Container.pattern_locator],
):
    """Find every occurrence of IMAGE on screen.

    Matches are listed in discovery order, best score first. Exits with
    status 1 when there are none.
    """
    try:
        pattern = Pattern.from_file(image, threshold=threshold)
        search_region = resolve_region(screenshot_service, region, window)
        snapshot = screenshot_service.snapshot(search_region)
        matches = pattern_locator.find_all(snapshot, pattern, search_region.top_left)
    except AutoEyesError as e:
        logger.error(str(e))
        sys.exit(EXIT_ERROR)

    if not matches:
        logger.info(f"{pattern.name} not found")
        sys.exit(EXIT_NOT_FOUND)

    logger.info(f"Found {len(matches)} occurrence(s) of {pattern.name}")
    display_matches(Console(), matches, title=f"Matches of {pattern.name}")
