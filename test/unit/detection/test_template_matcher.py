"""Unit tests for TemplateMatcher."""

import cv2
import numpy as np
import pytest

from autoeyes.core.region import Point
from autoeyes.detection.template_matcher import TemplateMatcher


@pytest.fixture
def scene():
    """Dark 60x40 image with a distinctive 8x8 checker patch at (30, 12)."""
    image = np.full((40, 60, 3), 20, dtype=np.uint8)
    patch = np.zeros((8, 8, 3), dtype=np.uint8)
    patch[::2, ::2] = (255, 255, 255)
    patch[1::2, 1::2] = (0, 0, 255)
    image[12:20, 30:38] = patch
    return image, patch


@pytest.mark.parametrize("name", ["ccorr_normed", "ccoeff_normed", "sqdiff_normed"])
def test_best_location_and_score_orientation(scene, name):
    """Verify every method reports the exact patch as best, with higher = better."""
    image, patch = scene
    matcher = TemplateMatcher.from_name(name)

    extremes = matcher.correlate(image, patch)

    assert extremes.best_location == Point(30, 12)
    assert extremes.best_score == pytest.approx(1.0, abs=1e-3)
    assert extremes.worst_score < extremes.best_score


def test_uniform_template_against_black_scores_zero():
    """Verify TM_CCORR_NORMED gives 0 for all-black windows instead of failing."""
    image = np.zeros((20, 20, 3), dtype=np.uint8)
    template = np.full((5, 5, 3), (0, 0, 255), dtype=np.uint8)

    extremes = TemplateMatcher().correlate(image, template)

    assert extremes.best_score == pytest.approx(0.0, abs=1e-6)


def test_correlate_is_deterministic(scene):
    """Verify identical inputs give identical results."""
    image, patch = scene
    matcher = TemplateMatcher()

    assert matcher.correlate(image, patch) == matcher.correlate(image, patch)


def test_template_larger_than_image_raises():
    """Verify an oversized template is rejected."""
    matcher = TemplateMatcher()
    image = np.zeros((10, 10, 3), dtype=np.uint8)
    template = np.zeros((11, 5, 3), dtype=np.uint8)

    with pytest.raises(ValueError, match="is larger than"):
        matcher.correlate(image, template)


def test_channel_mismatch_raises():
    """Verify BGR and BGRA buffers cannot be mixed."""
    matcher = TemplateMatcher()
    image = np.zeros((10, 10, 4), dtype=np.uint8)
    template = np.zeros((5, 5, 3), dtype=np.uint8)

    with pytest.raises(ValueError, match="same layout"):
        matcher.correlate(image, template)


def test_empty_input_raises():
    matcher = TemplateMatcher()

    with pytest.raises(ValueError, match="image cannot be empty"):
        matcher.correlate(np.zeros((0, 0, 3), dtype=np.uint8), np.zeros((1, 1, 3), dtype=np.uint8))


def test_unknown_method_name_raises():
    with pytest.raises(ValueError, match="Unknown match method"):
        TemplateMatcher.from_name("fuzzy")


def test_unnormalized_sqdiff_rejected():
    with pytest.raises(ValueError, match="TM_SQDIFF_NORMED"):
        TemplateMatcher(cv2.TM_SQDIFF)
