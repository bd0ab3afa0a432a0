"""Unit tests for DebugFrameLogger."""

import json
import tempfile
from pathlib import Path

import cv2
import numpy as np

from autoeyes.core.pattern import Match
from autoeyes.core.region import Point, Region
from autoeyes.orchestration.debug_frame_logger import DebugFrameLogger

ORIGIN = Point(100, 200)


def make_match(x, y, score=0.97):
    return Match(region=Region(x, y, 10, 10), score=score)


class TestDebugFrameLogger:
    """Tests for DebugFrameLogger class."""

    def test_session_directory_creation(self):
        """Verify session directory is created on initialization."""
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = DebugFrameLogger(output_dir=Path(tmpdir), session_name="session")

            assert logger.session_dir.is_dir()
            assert logger.session_dir == Path(tmpdir) / "session"

    def test_auto_generated_session_name(self, tmp_path):
        logger = DebugFrameLogger(output_dir=tmp_path)

        assert logger.session_dir.parent == tmp_path
        assert len(logger.session_dir.name) > 0

    def test_log_frame_saves_annotated_snapshot(self, tmp_path):
        """Verify the saved image has the match outlined in snapshot coordinates."""
        logger = DebugFrameLogger(output_dir=tmp_path, session_name="session")
        snapshot = np.zeros((50, 80, 3), dtype=np.uint8)

        logger.log_frame(
            poll_number=0,
            snapshot=snapshot,
            origin=ORIGIN,
            pattern_names=["button"],
            matches=[make_match(120, 220)],
        )

        files = list(logger.session_dir.glob("*.png"))
        assert len(files) == 1
        assert files[0].name.endswith("_poll0000_1matches.png")
        saved = cv2.imread(str(files[0]))
        assert saved.shape == snapshot.shape
        # Border drawn at the match's top-left corner in local coordinates
        assert saved[20, 20].any()
        # Caller's snapshot untouched
        assert not snapshot.any()

    def test_frame_metadata(self, tmp_path):
        logger = DebugFrameLogger(output_dir=tmp_path, session_name="session")
        snapshot = np.zeros((50, 80, 3), dtype=np.uint8)

        logger.log_frame(
            poll_number=3,
            snapshot=snapshot,
            origin=ORIGIN,
            pattern_names=["ok", "cancel"],
            matches=[make_match(100, 200, 0.91), make_match(130, 210, 0.96)],
        )
        logger.log_frame(
            poll_number=4,
            snapshot=snapshot,
            origin=ORIGIN,
            pattern_names=["ok", "cancel"],
            matches=[],
        )

        assert logger.frame_count == 2
        first, second = logger._frames
        assert first.poll_number == 3
        assert first.pattern_names == ["ok", "cancel"]
        assert first.match_count == 2
        assert first.best_score == 0.96
        assert second.match_count == 0
        assert second.best_score is None

    def test_save_summary_creates_json_file(self, tmp_path):
        """Verify save_summary creates JSON file with correct structure."""
        logger = DebugFrameLogger(output_dir=tmp_path, session_name="session")
        snapshot = np.zeros((50, 80, 3), dtype=np.uint8)
        for i in range(3):
            logger.log_frame(i, snapshot, ORIGIN, ["button"], [])

        summary_path = logger.save_summary(metadata={"stop_reason": "timed_out"})

        assert summary_path.name == "debug_summary.json"
        with open(summary_path) as f:
            summary = json.load(f)

        assert summary["session_name"] == "session"
        assert summary["total_frames"] == 3
        assert summary["stop_reason"] == "timed_out"
        frame = summary["frames"][0]
        assert set(frame) == {
            "timestamp",
            "poll_number",
            "pattern_names",
            "match_count",
            "best_score",
            "image_file",
        }
