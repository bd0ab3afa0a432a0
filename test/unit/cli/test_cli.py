"""Tests for the autoeyes command line.

Screen access is replaced by a synthetic 100x100 scene with red squares at
(5, 5) and (50, 50).
"""

from unittest.mock import patch

import cv2
import numpy as np
import pytest
from click.testing import CliRunner
from loguru import logger

from autoeyes.cli.cli import autoeyes
from autoeyes.core.region import Region
from autoeyes.exceptions import CaptureError
from autoeyes.services.screenshot_service import ScreenshotService

RED = (0, 0, 255)
GREEN = (0, 255, 0)


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


@pytest.fixture
def scene():
    image = np.zeros((100, 100, 3), dtype=np.uint8)
    image[5:15, 5:15] = RED
    image[50:60, 50:60] = RED
    return image


@pytest.fixture
def screen(scene):
    with patch.object(
        ScreenshotService, "snapshot", return_value=scene
    ) as mock_snapshot, patch.object(
        ScreenshotService, "virtual_screen", return_value=Region(0, 0, 100, 100)
    ):
        yield mock_snapshot


@pytest.fixture
def red_png(tmp_path):
    path = tmp_path / "red.png"
    cv2.imwrite(str(path), np.full((10, 10, 3), RED, dtype=np.uint8))
    return path


@pytest.fixture
def green_png(tmp_path):
    path = tmp_path / "green.png"
    cv2.imwrite(str(path), np.full((10, 10, 3), GREEN, dtype=np.uint8))
    return path


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(
            autoeyes,
            ["--data-dir", str(tmp_path / "data"), "--poll-interval", "0", *args],
        )

    return invoke


def test_help_lists_commands():
    result = CliRunner().invoke(autoeyes, ["--help"])

    assert result.exit_code == 0
    for command in ("find", "find-all", "wait", "wait-count", "wait-any", "wait-vanish"):
        assert command in result.output


class TestFind:
    """Tests for find and find-all."""

    def test_find_prints_best_match(self, run, screen, red_png):
        result = run("find", str(red_png), "-t", "0.95")

        assert result.exit_code == 0, result.output
        assert "(10, 10)" in result.output or "(55, 55)" in result.output

    def test_find_not_found_exits_1(self, run, screen, green_png):
        result = run("find", str(green_png))

        assert result.exit_code == 1

    def test_find_in_region_reports_screen_coordinates(self, run, screen, red_png):
        result = run("find", str(red_png), "-r", "200", "300", "100", "100")

        assert result.exit_code == 0, result.output
        assert screen.call_args.args == (Region(200, 300, 100, 100),)
        assert "(210, 310)" in result.output or "(255, 355)" in result.output

    def test_find_all_lists_every_match(self, run, screen, red_png):
        result = run("find-all", str(red_png), "--threshold", "0.95")

        assert result.exit_code == 0, result.output
        assert "(10, 10)" in result.output
        assert "(55, 55)" in result.output

    def test_find_all_invalid_pattern_exits_2(self, run, screen, red_png):
        result = run("find-all", str(red_png), "--threshold", "0")

        assert result.exit_code == 2

    def test_unreadable_image_exits_2(self, run, screen, tmp_path):
        bad = tmp_path / "bad.png"
        bad.write_text("not an image")

        result = run("find", str(bad))

        assert result.exit_code == 2

    def test_region_and_window_are_exclusive(self, run, screen, red_png):
        result = run("find", str(red_png), "-r", "0", "0", "10", "10", "-w", "App")

        assert result.exit_code == 2
        assert "either --region or --window" in result.output

    def test_missing_window_exits_2(self, run, screen, red_png):
        with patch.object(
            ScreenshotService,
            "window_region",
            side_effect=CaptureError('Window "App" not found'),
        ):
            result = run("find", str(red_png), "-w", "App")

        assert result.exit_code == 2


class TestWait:
    """Tests for the wait commands."""

    def test_wait_found(self, run, screen, red_png):
        result = run("wait", str(red_png), "--timeout", "0")

        assert result.exit_code == 0, result.output

    def test_wait_timeout_exits_1(self, run, screen, green_png):
        result = run("wait", str(green_png), "--timeout", "0")

        assert result.exit_code == 1

    def test_wait_count_reached(self, run, screen, red_png):
        result = run("wait-count", str(red_png), "--count", "2", "--timeout", "0")

        assert result.exit_code == 0, result.output
        assert "2/2" in result.output

    def test_wait_count_not_reached_exits_1(self, run, screen, red_png):
        result = run("wait-count", str(red_png), "-c", "3", "--timeout", "0")

        assert result.exit_code == 1

    def test_wait_any_first_visible_pattern(self, run, screen, green_png, red_png):
        result = run("wait-any", str(green_png), str(red_png), "--timeout", "0")

        assert result.exit_code == 0, result.output

    def test_wait_vanish_absent_pattern(self, run, screen, green_png):
        result = run("wait-vanish", str(green_png), "--timeout", "0")

        assert result.exit_code == 0

    def test_wait_vanish_still_visible_exits_1(self, run, screen, red_png):
        result = run("wait-vanish", str(red_png), "--timeout", "0")

        assert result.exit_code == 1

    def test_debug_writes_poll_snapshots(self, run, screen, red_png, tmp_path):
        result = run("--debug", "wait", str(red_png), "--timeout", "0")

        assert result.exit_code == 0, result.output
        debug_dir = tmp_path / "data" / "debug"
        assert (debug_dir / "autoeyes.log").exists()
        assert len(list(debug_dir.glob("*/debug_summary.json"))) == 1


def test_highlight_draws_matches(run, screen, red_png):
    with patch("autoeyes.services.overlay_service.cv2") as mock_cv2:
        result = run("highlight", str(red_png), "--hold-ms", "1")

    assert result.exit_code == 0, result.output
    mock_cv2.namedWindow.assert_called_once()
    mock_cv2.waitKey.assert_called_with(1)
    mock_cv2.destroyWindow.assert_called_once()
