"""AutoEyes: locate reference images on screen and wait for them."""

from autoeyes.core import Match, Pattern, Point, Region, ScoreExtremes
from autoeyes.detection import PatternLocator, TemplateMatcher
from autoeyes.exceptions import AutoEyesError, InvalidPatternError
from autoeyes.orchestration import CancellationToken, PatternWaiter, StopReason

__all__ = [
    "Match",
    "Pattern",
    "Point",
    "Region",
    "ScoreExtremes",
    "PatternLocator",
    "TemplateMatcher",
    "AutoEyesError",
    "InvalidPatternError",
    "CancellationToken",
    "PatternWaiter",
    "StopReason",
]
