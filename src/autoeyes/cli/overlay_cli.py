"""Overlay commands for AutoEyes."""

import sys
from pathlib import Path

import click
from dependency_injector.wiring import Provide, inject
from loguru import logger

from autoeyes.cli.options import (
    EXIT_ERROR,
    EXIT_NOT_FOUND,
    resolve_region,
    search_options,
)
from autoeyes.container import Container
from autoeyes.core.pattern import Pattern
from autoeyes.detection.pattern_locator import PatternLocator
from autoeyes.exceptions import AutoEyesError
from autoeyes.services.overlay_service import OverlayService
from autoeyes.services.screenshot_service import ScreenshotService


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@search_options
@click.option(
    "--hold-ms",
    type=click.IntRange(min=0),
    default=0,
    help="How long to show the overlay in milliseconds (default: until a key is pressed).",
)
@inject
def highlight(
    image: Path,
    region: tuple[int, int, int, int] | None,
    window: str | None,
    threshold: float,
    hold_ms: int,
    screenshot_service: ScreenshotService = Provide[Container.screenshot_service],
    pattern_locator: PatternLocator = Provide[Container.pattern_locator],
    overlay_service: OverlayService = Provide[Container.overlay_service],
):
    """Highlight every occurrence of IMAGE on screen.

    Each match gets a border, a fill whose opacity follows its score, and its
    score as caption.
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

    logger.info(f"Highlighting {len(matches)} occurrence(s) of {pattern.name}")
    with overlay_service as overlay:
        overlay.draw_border(search_region, color=(255, 255, 255), thickness=1)
        for match in matches:
            overlay.highlight_match(match)
            overlay.draw_border(match.region)
            overlay.draw_caption(match.region, f"{match.score:.3f}")
        overlay.wait_key(hold_ms)
