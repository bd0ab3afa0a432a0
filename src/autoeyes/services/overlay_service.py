"""Overlay service for highlighting regions over a live screen image.

The overlay keeps a canvas holding a capture of the screen and shows it in an
OpenCV window. The canvas is captured on open() and recaptured by
clear_all(); draw calls accumulate on top of it. The screen itself is never
modified.
"""

import cv2
import numpy as np
from loguru import logger

from autoeyes.core.pattern import Match
from autoeyes.core.region import Region
from autoeyes.exceptions import OverlayError
from autoeyes.services.screenshot_service import ScreenshotService
from autoeyes.utils.visualization import (
    add_caption_to_image,
    add_fill_to_image,
    add_region_to_image,
)


class OverlayService:
    """Service for drawing highlights and captions over the screen.

    Lifecycle: open() -> draw_* / clear_all() -> close(). Also usable as a
    context manager. OpenCV windows belong to the thread that created them,
    so all calls must come from the thread that called open().
    """

    DEFAULT_COLOR = (0, 0, 139)  # Dark red (BGR)
    DEFAULT_FONT_SCALE = 0.6
    WINDOW_NAME = "AutoEyes"

    def __init__(
        self,
        screenshot_service: ScreenshotService,
        screen: Region | None = None,
        window_name: str = WINDOW_NAME,
        display: bool = True,
    ) -> None:
        """Initialize OverlayService.

        Args:
            screenshot_service: Service capturing the screen under the overlay
            screen: Screen area covered by the overlay (default: whole screen)
            window_name: Title of the OpenCV window
            display: If False, draw on the canvas only and never open a window
        """
        self._screenshot_service = screenshot_service
        self._screen = screen
        self._window_name = window_name
        self._display = display
        self._canvas: np.ndarray | None = None

    def __enter__(self) -> "OverlayService":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
        return False

    @property
    def is_open(self) -> bool:
        return self._canvas is not None

    @property
    def canvas(self) -> np.ndarray:
        """Copy of the current overlay image."""
        return self._require_canvas().copy()

    def open(self) -> None:
        if self.is_open:
            return

        if self._screen is None:
            self._screen = self._screenshot_service.virtual_screen()

        logger.debug(f"Opening overlay over {self._screen.to_tuple()}")
        self._canvas = self._screenshot_service.snapshot(self._screen)
        if self._display:
            cv2.namedWindow(self._window_name, cv2.WINDOW_NORMAL)
        self._show()

    def close(self) -> None:
        if not self.is_open:
            return

        logger.debug("Closing overlay")
        self._canvas = None
        if self._display:
            cv2.destroyWindow(self._window_name)

    def draw_border(
        self,
        region: Region,
        color: tuple[int, int, int] | None = None,
        thickness: int = 2,
    ) -> None:
        local = self._to_local(region)
        if local is None:
            return
        self._canvas = add_region_to_image(
            self._canvas, local, color=color or self.DEFAULT_COLOR, thickness=thickness
        )
        self._show()

    def draw_fill(
        self,
        region: Region,
        color: tuple[int, int, int] | None = None,
        alpha: float = 0.5,
    ) -> None:
        local = self._to_local(region)
        if local is None:
            return
        add_fill_to_image(self._canvas, local, color or self.DEFAULT_COLOR, alpha)
        self._show()

    def draw_caption(
        self,
        region: Region,
        text: str,
        font_scale: float | None = None,
        color: tuple[int, int, int] | None = None,
    ) -> None:
        local = self._to_local(region)
        if local is None:
            return
        add_caption_to_image(
            self._canvas,
            local[:2],
            text,
            color or self.DEFAULT_COLOR,
            font_scale or self.DEFAULT_FONT_SCALE,
        )
        self._show()

    def highlight_match(
        self, match: Match, color: tuple[int, int, int] | None = None
    ) -> None:
        """Fill a match region, more opaque for higher scores (at most 50%)."""
        self.draw_fill(match.region, color, alpha=match.score * 0.5)

    def clear_all(self) -> None:
        self._require_canvas()
        logger.debug("Clearing overlay")
        self._canvas = self._screenshot_service.snapshot(self._screen)
        self._show()

    def wait_key(self, delay_ms: int = 0) -> int:
        """Pump the overlay window until a key is pressed or the delay passes."""
        self._require_canvas()
        if not self._display:
            return -1
        return cv2.waitKey(delay_ms)

    def _require_canvas(self) -> np.ndarray:
        if self._canvas is None:
            raise OverlayError("Overlay is not open. Call open() first.")
        return self._canvas

    def _to_local(self, region: Region) -> tuple[int, int, int, int] | None:
        """Clip a screen region to the overlay and return it in canvas coordinates.

        None means no part of the region is visible on the overlay.
        """
        self._require_canvas()
        left = max(region.x, self._screen.x)
        top = max(region.y, self._screen.y)
        right = min(region.bottom_right.x, self._screen.bottom_right.x)
        bottom = min(region.bottom_right.y, self._screen.bottom_right.y)
        if right <= left or bottom <= top:
            logger.warning(f"Region {region.to_tuple()} is outside the overlay")
            return None

        return (
            left - self._screen.x,
            top - self._screen.y,
            right - left,
            bottom - top,
        )

    def _show(self) -> None:
        if self._display:
            cv2.imshow(self._window_name, self._canvas)
            cv2.waitKey(1)
