"""Utility functions for AutoEyes."""

from autoeyes.utils.common import get_timestamp
from autoeyes.utils.visualization import (
    add_caption_to_image,
    add_fill_to_image,
    add_region_to_image,
    draw_matches,
    get_roi_from_screenshot,
)

__all__ = [
    "get_timestamp",
    "add_caption_to_image",
    "add_fill_to_image",
    "add_region_to_image",
    "draw_matches",
    "get_roi_from_screenshot",
]
