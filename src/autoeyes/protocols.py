"""Protocol definitions for dependency injection.

This module defines protocol interfaces for the collaborators the pattern
locator and the wait orchestration depend on: screen capture, correlation
matching and overlay rendering. Protocols enable type-safe dependency injection
while decoupling the search logic from concrete backends.

All protocols are marked @runtime_checkable to support isinstance() validation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from autoeyes.core.pattern import Match, ScoreExtremes
    from autoeyes.core.region import Region


@runtime_checkable
class MatcherProtocol(Protocol):
    """Protocol for the correlation pass over an image/template pair."""

    def correlate(self, image: np.ndarray, template: np.ndarray) -> ScoreExtremes:
        """Correlate a template against every position of an image.

        Scores must be comparable across calls and higher must always mean
        more similar. Identical inputs must give identical results.

        Args:
            image: BGR image to search in
            template: BGR template, no larger than the image

        Returns:
            ScoreExtremes with best and worst scores and their top-left locations
        """
        ...


@runtime_checkable
class CaptureProtocol(Protocol):
    """Protocol for capturing screen regions."""

    def snapshot(self, region: Region) -> np.ndarray:
        """Capture the live display inside a region.

        Args:
            region: Screen region to capture

        Returns:
            BGR image of shape (region.height, region.width, 3)
        """
        ...


@runtime_checkable
class OverlayProtocol(Protocol):
    """Protocol for drawing highlights over the screen.

    Drawing never influences matching decisions.
    """

    def open(self) -> None:
        """Create the drawing surface."""
        ...

    def close(self) -> None:
        """Release the drawing surface."""
        ...

    def draw_border(
        self,
        region: Region,
        color: tuple[int, int, int] | None = None,
        thickness: int = 2,
    ) -> None:
        """Draw a rectangle border around a region."""
        ...

    def draw_fill(
        self,
        region: Region,
        color: tuple[int, int, int] | None = None,
        alpha: float = 0.5,
    ) -> None:
        """Fill a region with a translucent color."""
        ...

    def draw_caption(
        self,
        region: Region,
        text: str,
        font_scale: float | None = None,
        color: tuple[int, int, int] | None = None,
    ) -> None:
        """Draw a caption at a region's top-left corner."""
        ...

    def highlight_match(
        self, match: Match, color: tuple[int, int, int] | None = None
    ) -> None:
        """Fill a match region with opacity proportional to its score."""
        ...

    def clear_all(self) -> None:
        """Remove every highlight and caption."""
        ...
