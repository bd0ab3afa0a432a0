"""Computer vision detection algorithms."""

from autoeyes.detection.template_matcher import TemplateMatcher
from autoeyes.detection.pattern_locator import PatternLocator

__all__ = [
    "TemplateMatcher",
    "PatternLocator",
]
