"""Screenshot service for capturing screen regions.

This service captures a screen region as a BGR image and resolves the full
screen and window rectangles into regions.

pyautogui and pygetwindow are imported on first use: both need a desktop
session, and pygetwindow refuses to import on unsupported platforms.
"""

import cv2
import numpy as np
from loguru import logger

from autoeyes.core.region import Region
from autoeyes.exceptions import CaptureError


class ScreenshotService:
    """Service for screen capture operations.

    Responsibilities:
    - Capture screen regions
    - Resolve screen and window geometry
    """

    def __init__(self) -> None:
        logger.debug("Initializing")

    def snapshot(self, region: Region) -> np.ndarray:
        """Capture the live display inside a region.

        Args:
            region: Screen region to capture

        Returns:
            BGR image of the region as numpy array
        """
        import pyautogui

        try:
            screenshot = pyautogui.screenshot(region=region.to_tuple())
        except Exception as e:
            logger.error(f"Failed to capture region {region.to_tuple()}: {e}")
            raise

        screenshot = np.array(screenshot)
        screenshot = cv2.cvtColor(screenshot, cv2.COLOR_RGB2BGR)

        logger.debug(
            f"snapshot returned image of size {screenshot.shape[1]}x{screenshot.shape[0]}"
        )
        return screenshot

    def virtual_screen(self) -> Region:
        """Region covering the whole primary screen."""
        import pyautogui

        width, height = pyautogui.size()
        return Region(0, 0, int(width), int(height))

    def window_region(self, window_title: str) -> Region:
        """Region covering the window with the given title.

        Raises:
            CaptureError: If no window with that title exists
            ValueError: If window_title is empty
        """
        logger.debug(f'window_region called with window_title="{window_title}"')

        if not window_title:
            raise ValueError("window_title cannot be empty")

        import pygetwindow

        windows = pygetwindow.getWindowsWithTitle(window_title)
        if not windows:
            logger.error(f'Window "{window_title}" not found')
            raise CaptureError(
                f'Window "{window_title}" not found. Ensure the application is running.'
            )

        window = windows[0]
        return Region(window.left, window.top, window.width, window.height)
