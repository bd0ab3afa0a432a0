"""Correlation pass backed by OpenCV template matching."""

import cv2
import numpy as np
from loguru import logger

from autoeyes.core.pattern import ScoreExtremes
from autoeyes.core.region import Point

# Methods where a lower raw value means a better match
_SQUARED_DIFFERENCE_METHODS = (cv2.TM_SQDIFF, cv2.TM_SQDIFF_NORMED)

METHODS = {
    "ccorr_normed": cv2.TM_CCORR_NORMED,
    "ccoeff_normed": cv2.TM_CCOEFF_NORMED,
    "sqdiff_normed": cv2.TM_SQDIFF_NORMED,
}


class TemplateMatcher:
    """Runs cv2.matchTemplate and reports the score extremes.

    Scores are oriented so that higher always means more similar. For
    TM_SQDIFF_NORMED the score is ``1 - difference``, so a perfect match scores
    1.0. The default TM_CCORR_NORMED stays in [0, 1] for 8-bit images and,
    unlike TM_CCOEFF_NORMED, is defined for uniform templates.
    """

    def __init__(self, method: int = cv2.TM_CCORR_NORMED) -> None:
        if method == cv2.TM_SQDIFF:
            raise ValueError("TM_SQDIFF has no fixed score range, use TM_SQDIFF_NORMED")
        self._method = method

    @classmethod
    def from_name(cls, name: str) -> "TemplateMatcher":
        """Create a matcher from a method name such as ``"ccorr_normed"``."""
        try:
            return cls(METHODS[name.lower()])
        except KeyError:
            raise ValueError(
                f"Unknown match method {name!r}, expected one of {sorted(METHODS)}"
            )

    @property
    def method(self) -> int:
        return self._method

    def correlate(self, image: np.ndarray, template: np.ndarray) -> ScoreExtremes:
        self._validate_input(image, template)

        result = cv2.matchTemplate(image, template, self._method)
        min_val, max_val, min_loc, max_loc = cv2.minMaxLoc(result)

        if self._method in _SQUARED_DIFFERENCE_METHODS:
            extremes = ScoreExtremes(
                best_score=1.0 - min_val,
                best_location=Point(*min_loc),
                worst_score=1.0 - max_val,
                worst_location=Point(*max_loc),
            )
        else:
            extremes = ScoreExtremes(
                best_score=max_val,
                best_location=Point(*max_loc),
                worst_score=min_val,
                worst_location=Point(*min_loc),
            )

        logger.debug(
            f"correlate: best={extremes.best_score:.4f}@{tuple(extremes.best_location)} "
            f"worst={extremes.worst_score:.4f}@{tuple(extremes.worst_location)}"
        )
        return extremes

    @staticmethod
    def _validate_input(image: np.ndarray, template: np.ndarray) -> None:
        if image is None or image.size == 0:
            raise ValueError("image cannot be empty")

        if template is None or template.size == 0:
            raise ValueError("template cannot be empty")

        if (
            image.ndim != template.ndim
            or image.shape[2:] != template.shape[2:]
            or image.dtype != template.dtype
        ):
            raise ValueError(
                f"image and template must have the same layout, got "
                f"{image.shape}/{image.dtype} and {template.shape}/{template.dtype}"
            )

        if template.shape[0] > image.shape[0] or template.shape[1] > image.shape[1]:
            raise ValueError(
                f"Template ({template.shape[1]}x{template.shape[0]}) is larger than "
                f"image ({image.shape[1]}x{image.shape[0]})"
            )
