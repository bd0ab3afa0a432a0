"""Core data model for AutoEyes: regions, patterns and matches."""

from autoeyes.core.region import Point, Region
from autoeyes.core.pattern import DEFAULT_THRESHOLD, Match, Pattern, ScoreExtremes

__all__ = [
    "Point",
    "Region",
    "DEFAULT_THRESHOLD",
    "Match",
    "Pattern",
    "ScoreExtremes",
]
