"""Single and multi-occurrence pattern search on captured snapshots."""

import cv2
import numpy as np
from loguru import logger

from autoeyes.core.pattern import Match, Pattern, ScoreExtremes
from autoeyes.core.region import Point
from autoeyes.detection.template_matcher import TemplateMatcher
from autoeyes.exceptions import InvalidPatternError
from autoeyes.protocols import MatcherProtocol
from autoeyes.utils.visualization import get_roi_from_screenshot

ORIGIN = Point(0, 0)


class PatternLocator:
    """Locates patterns inside snapshot images.

    Responsibilities:
    - Best single match (one correlation pass)
    - Every non-overlapping match via detect-and-erase suppression
    - Choosing an erasure fill that the matcher rejects for the pattern

    Snapshots are never modified; multi-match search works on a private copy.
    ``origin`` is the screen position of the snapshot's top-left pixel and is
    added to every reported match.
    """

    def __init__(self, matcher: MatcherProtocol | None = None) -> None:
        """Initialize PatternLocator.

        Args:
            matcher: Matcher used for patterns that do not carry their own
        """
        logger.debug("Initializing")
        self._matcher = matcher if matcher is not None else TemplateMatcher()

    def matcher_for(self, pattern: Pattern) -> MatcherProtocol:
        return pattern.matcher if pattern.matcher is not None else self._matcher

    def find_best(
        self, snapshot: np.ndarray, pattern: Pattern, origin: Point = ORIGIN
    ) -> Match | None:
        """Find the best match of a pattern in one correlation pass.

        Args:
            snapshot: BGR image of the searched region
            pattern: Pattern to look for
            origin: Screen position of the snapshot's top-left pixel

        Returns:
            Match if the best score reaches the pattern threshold, None otherwise
        """
        extremes = self.matcher_for(pattern).correlate(snapshot, pattern.image)
        if not pattern.accepts(extremes.best_score):
            logger.debug(
                f"find_best: {pattern.name} not found "
                f"(best={extremes.best_score:.4f} < {pattern.threshold})"
            )
            return None

        match = Match.at(origin, extremes.best_location, pattern, extremes.best_score)
        logger.debug(f"find_best: {pattern.name} found at {match.region.to_tuple()}")
        return match

    def find_all(
        self, snapshot: np.ndarray, pattern: Pattern, origin: Point = ORIGIN
    ) -> list[Match]:
        """Find every occurrence of a pattern by repeated search and erasure.

        Each round reports the current best location, overwrites it with a fill
        that cannot pass the threshold and searches again, until the best score
        drops below the threshold.

        Args:
            snapshot: BGR image of the searched region
            pattern: Pattern to look for
            origin: Screen position of the snapshot's top-left pixel

        Returns:
            Matches in discovery order (highest score of each round first)

        Raises:
            InvalidPatternError: If no erasure fill is rejected by the matcher
        """
        matcher = self.matcher_for(pattern)
        working = snapshot.copy()

        extremes = matcher.correlate(working, pattern.image)
        if not pattern.accepts(extremes.best_score):
            logger.debug(f"find_all: {pattern.name} not found")
            return []

        fill = self._select_fill(working, extremes, pattern, matcher)

        matches: list[Match] = []
        while pattern.accepts(extremes.best_score):
            matches.append(
                Match.at(origin, extremes.best_location, pattern, extremes.best_score)
            )

            x, y = extremes.best_location
            working[y : y + pattern.height, x : x + pattern.width] = fill

            extremes = matcher.correlate(working, pattern.image)

        logger.debug(f"find_all: {len(matches)} occurrence(s) of {pattern.name}")
        return matches

    def _select_fill(
        self,
        working: np.ndarray,
        extremes: ScoreExtremes,
        pattern: Pattern,
        matcher: MatcherProtocol,
    ) -> np.ndarray:
        """Pick erasure content that scores below the threshold.

        The worst-matching area of the snapshot itself is used when it is
        rejected. Otherwise synthetic white and white/black buffers are probed.

        Raises:
            InvalidPatternError: If even the synthetic buffers are accepted
        """
        if not pattern.accepts(extremes.worst_score):
            logger.debug(
                f"Using worst-matching area at {tuple(extremes.worst_location)} as fill "
                f"(score={extremes.worst_score:.4f})"
            )
            return get_roi_from_screenshot(
                working,
                (*extremes.worst_location, pattern.width, pattern.height),
            ).copy()

        fill = self._white_fill(pattern)
        probe = matcher.correlate(fill, pattern.image)
        if not pattern.accepts(probe.best_score):
            logger.debug(f"Using white fill (score={probe.best_score:.4f})")
            return fill

        # Upper-left triangle stays white, lower-right triangle becomes black
        corners = np.array(
            [
                [pattern.width - 1, 0],
                [pattern.width - 1, pattern.height - 1],
                [0, pattern.height - 1],
            ],
            dtype=np.int32,
        )
        cv2.fillConvexPoly(fill, corners, (0, 0, 0, 0))
        probe = matcher.correlate(fill, pattern.image)
        if not pattern.accepts(probe.best_score):
            logger.debug(f"Using diagonal white/black fill (score={probe.best_score:.4f})")
            return fill

        logger.error(
            f"Pattern {pattern.name} matches every fill at threshold {pattern.threshold}"
        )
        raise InvalidPatternError(
            f"Invalid pattern image {pattern.name!r}: it cannot be told apart from "
            f"erased areas at threshold {pattern.threshold}. Raise the threshold or "
            f"use a more distinctive image."
        )

    @staticmethod
    def _white_fill(pattern: Pattern) -> np.ndarray:
        dtype = pattern.image.dtype
        white = np.iinfo(dtype).max if np.issubdtype(dtype, np.integer) else 1.0
        return np.full(pattern.image.shape, white, dtype=dtype)
