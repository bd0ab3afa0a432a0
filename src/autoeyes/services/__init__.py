"""Service layer for AutoEyes.

This module contains service classes that wrap the desktop-facing
collaborators: screen capture, overlay drawing and application directories.
"""

from autoeyes.services.app_data import AppData
from autoeyes.services.overlay_service import OverlayService
from autoeyes.services.screenshot_service import ScreenshotService

__all__ = [
    "AppData",
    "OverlayService",
    "ScreenshotService",
]
