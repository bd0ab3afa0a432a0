"""Debug frame logging for wait operations.

This module provides optional debug data capture during polling without
polluting the wait logic.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
import json
import cv2
import numpy as np
from loguru import logger

from autoeyes.core.pattern import Match
from autoeyes.core.region import Point
from autoeyes.utils.common import get_timestamp
from autoeyes.utils.visualization import draw_matches


@dataclass
class DebugFrame:
    """Single poll of debug data captured during a wait."""

    timestamp: str
    poll_number: int
    pattern_names: list[str]
    match_count: int
    best_score: float | None
    image_file: str


class DebugFrameLogger:
    """Captures and saves annotated snapshots during a wait"""

    def __init__(self, output_dir: Path, session_name: str | None = None):
        """Initialize logger with output directory.

        Args:
            output_dir: Base directory for debug output
            session_name: Optional session name (default: timestamp)
        """
        self._session_name = session_name or get_timestamp()
        self._session_dir = output_dir / self._session_name
        self._session_dir.mkdir(parents=True, exist_ok=True)

        self._frames: list[DebugFrame] = []

        logger.info(f"DebugFrameLogger initialized: {self._session_dir}")

    def log_frame(
        self,
        poll_number: int,
        snapshot: np.ndarray,
        origin: Point,
        pattern_names: list[str],
        matches: list[Match],
    ) -> None:
        """Log a single poll with the found matches drawn on the snapshot.

        Args:
            poll_number: Sequential poll number (0-indexed)
            snapshot: Captured region (BGR)
            origin: Screen position of the snapshot's top-left pixel
            pattern_names: Names of the patterns searched in this poll
            matches: Matches found in this poll, in screen coordinates
        """
        timestamp = get_timestamp()

        local_regions = [
            (m.region.x - origin.x, m.region.y - origin.y, m.region.width, m.region.height)
            for m in matches
        ]
        labels = [f"{m.score:.3f}" for m in matches]
        annotated = draw_matches(snapshot, local_regions, labels)

        image_filename = f"{timestamp}_poll{poll_number:04d}_{len(matches)}matches.png"
        cv2.imwrite(str(self._session_dir / image_filename), annotated)

        frame = DebugFrame(
            timestamp=timestamp,
            poll_number=poll_number,
            pattern_names=list(pattern_names),
            match_count=len(matches),
            best_score=max((m.score for m in matches), default=None),
            image_file=image_filename,
        )
        self._frames.append(frame)

        if (poll_number + 1) % 10 == 0:
            logger.debug(f"DebugFrameLogger: {poll_number + 1} polls captured")

    def save_summary(self, metadata: dict | None = None) -> Path:
        summary = {
            "session_name": self._session_name,
            "total_frames": len(self._frames),
            "frames": [asdict(frame) for frame in self._frames],
        }

        if metadata:
            summary.update(metadata)

        summary_path = self._session_dir / "debug_summary.json"
        with open(summary_path, "w") as f:
            json.dump(summary, f, indent=2)

        logger.info(f"DebugFrameLogger: Saved summary to {summary_path}")
        return summary_path

    @property
    def session_dir(self) -> Path:
        return self._session_dir

    @property
    def frame_count(self) -> int:
        return len(self._frames)
