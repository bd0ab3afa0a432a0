"""Search targets and search results.

A Pattern couples a reference image with the acceptance threshold used for
every correlation pass against it. ScoreExtremes is the raw output of one pass,
and Match is a located occurrence in screen coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import cv2
import numpy as np
from loguru import logger

from autoeyes.core.region import Point, Region
from autoeyes.exceptions import PatternLoadError

if TYPE_CHECKING:
    from autoeyes.protocols import MatcherProtocol

DEFAULT_THRESHOLD = 0.9


@dataclass(frozen=True)
class ScoreExtremes:
    """Best and worst scores of one correlation pass, with their locations.

    Locations are top-left offsets of the pattern inside the searched image.
    """

    best_score: float
    best_location: Point
    worst_score: float
    worst_location: Point


@dataclass(frozen=True, eq=False)
class Pattern:
    """Reference image plus acceptance threshold.

    The image is copied on construction, so later changes to the caller's
    array do not leak into searches. A score is accepted when
    ``score >= threshold``. When ``matcher`` is None the locator's own matcher
    is used.
    """

    image: np.ndarray
    threshold: float = DEFAULT_THRESHOLD
    matcher: MatcherProtocol | None = None
    name: str = "pattern"

    def __post_init__(self):
        if self.image is None or self.image.size == 0:
            raise ValueError("pattern image cannot be empty")

        object.__setattr__(self, "image", np.array(self.image, copy=True))

    @classmethod
    def from_file(
        cls,
        path: Path | str,
        threshold: float = DEFAULT_THRESHOLD,
        matcher: MatcherProtocol | None = None,
    ) -> Pattern:
        """Load a pattern image (BGR) from disk.

        Raises:
            PatternLoadError: If the file is missing or not a readable image
        """
        path = Path(path)
        image = cv2.imread(str(path), cv2.IMREAD_COLOR)
        if image is None:
            raise PatternLoadError(f'Could not read pattern image "{path}"')

        logger.debug(
            f"Loaded pattern {path.name} ({image.shape[1]}x{image.shape[0]}), threshold={threshold}"
        )
        return cls(image=image, threshold=threshold, matcher=matcher, name=path.stem)

    @property
    def width(self) -> int:
        return self.image.shape[1]

    @property
    def height(self) -> int:
        return self.image.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        """Pattern size as (width, height)."""
        return (self.width, self.height)

    def accepts(self, score: float) -> bool:
        return score >= self.threshold


@dataclass(frozen=True)
class Match:
    """A located occurrence of a pattern.

    The region is sized to the pattern and positioned in screen coordinates.
    """

    region: Region
    score: float

    @classmethod
    def at(cls, origin: Point, location: Point, pattern: Pattern, score: float) -> Match:
        """Build a match at ``origin + location``, sized to the pattern."""
        return cls(
            region=Region(
                origin.x + int(location.x),
                origin.y + int(location.y),
                pattern.width,
                pattern.height,
            ),
            score=float(score),
        )

    @property
    def center(self) -> Point:
        return self.region.center
