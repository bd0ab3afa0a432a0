"""Time-bounded waits built on repeated capture and pattern search.

Every wait captures a fresh snapshot of the region on each poll, searches it,
and then evaluates its stop conditions: goal reached, cancelled, timed out.
The first poll always runs, so a zero timeout performs exactly one search.
"""

from dataclasses import dataclass
import time
from pathlib import Path
from typing import Any, Callable, Sequence

import numpy as np
from loguru import logger

from autoeyes.core.pattern import Match, Pattern
from autoeyes.core.region import Region
from autoeyes.detection.pattern_locator import PatternLocator
from autoeyes.orchestration.debug_frame_logger import DebugFrameLogger
from autoeyes.orchestration.stop_conditions import (
    CancellationToken,
    CancelledCondition,
    SatisfiedCondition,
    StopConditionChain,
    StopReason,
    Stopwatch,
    TimeoutCondition,
    WaitState,
)
from autoeyes.protocols import CaptureProtocol


@dataclass(frozen=True)
class WaitResult:
    """Outcome of one polling loop."""

    value: Any  # Last value produced by the probe
    stop_reason: StopReason
    polls: int
    elapsed: float

    @property
    def timed_out(self) -> bool:
        return self.stop_reason == StopReason.TIMED_OUT


def _as_matches(value: Any) -> list[Match]:
    if value is None:
        return []
    if isinstance(value, Match):
        return [value]
    return list(value)


class PatternWaiter:
    """
    Waits for patterns to appear, accumulate or vanish within a screen region.
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        capture: CaptureProtocol,
        locator: PatternLocator,
        default_timeout: float = DEFAULT_TIMEOUT,
        poll_interval: float = 0.0,
        debug_dir: Path | None = None,
    ):
        """
        Initialize waiter with injected services.

        Args:
            capture: Service for capturing screen regions
            locator: Locator running the searches
            default_timeout: Timeout in seconds used when a wait passes None
            poll_interval: Pause in seconds between polls (0 polls continuously)
            debug_dir: Optional directory for per-poll debug snapshots
        """
        if default_timeout < 0:
            raise ValueError(f"default_timeout must not be negative, got {default_timeout}")
        if poll_interval < 0:
            raise ValueError(f"poll_interval must not be negative, got {poll_interval}")

        self._capture = capture
        self._locator = locator
        self._default_timeout = default_timeout
        self._poll_interval = poll_interval
        self._debug_dir = debug_dir

    @property
    def default_timeout(self) -> float:
        return self._default_timeout

    def wait_for(
        self,
        region: Region,
        pattern: Pattern,
        timeout: float | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> Match | None:
        """Wait for an occurrence of a pattern.

        Returns:
            The first match found, or None if none appeared before the timeout
        """
        result = self.poll(
            region,
            probe=lambda snapshot: self._locator.find_best(
                snapshot, pattern, region.top_left
            ),
            is_satisfied=lambda match: match is not None,
            satisfied_reason=StopReason.FOUND,
            timeout=timeout,
            cancel_token=cancel_token,
            pattern_names=[pattern.name],
        )
        return result.value

    def wait_for_count(
        self,
        region: Region,
        pattern: Pattern,
        count: int,
        timeout: float | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> list[Match]:
        """Wait until at least ``count`` occurrences of a pattern are visible.

        Returns:
            Matches of the last poll; fewer than ``count`` if the wait timed out

        Raises:
            InvalidPatternError: If the pattern is too generic for multi-match search
        """
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")

        result = self.poll(
            region,
            probe=lambda snapshot: self._locator.find_all(
                snapshot, pattern, region.top_left
            ),
            is_satisfied=lambda matches: len(matches) >= count,
            satisfied_reason=StopReason.COUNT_REACHED,
            timeout=timeout,
            cancel_token=cancel_token,
            pattern_names=[pattern.name],
        )
        return result.value

    def wait_any(
        self,
        region: Region,
        patterns: Sequence[Pattern],
        timeout: float | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> Match | None:
        """Wait for the first of several patterns.

        Within one poll the patterns are searched in the given order against
        the same snapshot, so an earlier pattern wins when several match.

        Returns:
            Match of the winning pattern, or None on timeout
        """
        if not patterns:
            raise ValueError("patterns cannot be empty")

        def first_match(snapshot: np.ndarray) -> Match | None:
            for pattern in patterns:
                match = self._locator.find_best(snapshot, pattern, region.top_left)
                if match is not None:
                    logger.debug(f"wait_any: {pattern.name} matched first")
                    return match
            return None

        result = self.poll(
            region,
            probe=first_match,
            is_satisfied=lambda match: match is not None,
            satisfied_reason=StopReason.FOUND,
            timeout=timeout,
            cancel_token=cancel_token,
            pattern_names=[pattern.name for pattern in patterns],
        )
        return result.value

    def wait_vanish(
        self,
        region: Region,
        pattern: Pattern,
        timeout: float | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> bool:
        """Wait for a pattern to disappear.

        Returns:
            True if a poll found no match, False if the pattern was still
            present when the wait timed out or was cancelled
        """
        result = self.poll(
            region,
            probe=lambda snapshot: self._locator.find_best(
                snapshot, pattern, region.top_left
            ),
            is_satisfied=lambda match: match is None,
            satisfied_reason=StopReason.VANISHED,
            timeout=timeout,
            cancel_token=cancel_token,
            pattern_names=[pattern.name],
        )
        return result.stop_reason == StopReason.VANISHED

    def poll(
        self,
        region: Region,
        probe: Callable[[np.ndarray], Any],
        is_satisfied: Callable[[Any], bool],
        satisfied_reason: StopReason = StopReason.FOUND,
        timeout: float | None = None,
        cancel_token: CancellationToken | None = None,
        pattern_names: list[str] | None = None,
    ) -> WaitResult:
        """Run the capture/probe loop shared by every wait.

        Args:
            region: Screen region captured on every poll
            probe: Search run on each fresh snapshot
            is_satisfied: Whether a probe value ends the wait successfully
            satisfied_reason: Stop reason reported when is_satisfied holds
            timeout: Seconds before giving up (None uses default_timeout)
            cancel_token: Optional token checked between polls
            pattern_names: Names used in logs and debug output

        Returns:
            WaitResult holding the last probe value and why the loop stopped
        """
        timeout = self._default_timeout if timeout is None else timeout
        pattern_names = pattern_names or []

        conditions = [SatisfiedCondition(satisfied_reason)]
        if cancel_token is not None:
            conditions.append(CancelledCondition(cancel_token))
        conditions.append(TimeoutCondition(timeout))
        stop_conditions = StopConditionChain(conditions)

        debug_logger = None
        if self._debug_dir is not None:
            debug_logger = DebugFrameLogger(output_dir=self._debug_dir)

        logger.debug(
            f"Waiting on {pattern_names} in {region.to_tuple()}: "
            f"timeout={timeout}s, poll_interval={self._poll_interval}s"
        )

        stopwatch = Stopwatch.start_new()
        polls = 0
        while True:
            snapshot = self._capture.snapshot(region)
            value = probe(snapshot)

            if debug_logger:
                debug_logger.log_frame(
                    poll_number=polls,
                    snapshot=snapshot,
                    origin=region.top_left,
                    pattern_names=pattern_names,
                    matches=_as_matches(value),
                )

            polls += 1
            state = WaitState(
                polls=polls,
                elapsed=stopwatch.elapsed,
                satisfied=is_satisfied(value),
            )

            stop_reason = stop_conditions.check(state)
            if stop_reason is not None:
                break

            if self._poll_interval > 0:
                time.sleep(min(self._poll_interval, max(timeout - state.elapsed, 0.0)))

        if debug_logger:
            debug_logger.save_summary(
                {
                    "stop_reason": stop_reason.value,
                    "polls": polls,
                    "elapsed": state.elapsed,
                    "timeout": timeout,
                }
            )

        if stop_reason in (StopReason.TIMED_OUT, StopReason.CANCELLED):
            logger.warning(
                f"Wait on {pattern_names} ended: {stop_reason.value} "
                f"after {polls} poll(s) ({state.elapsed:.2f}s)"
            )
        else:
            logger.info(
                f"Wait on {pattern_names} ended: {stop_reason.value} "
                f"after {polls} poll(s) ({state.elapsed:.2f}s)"
            )

        return WaitResult(
            value=value,
            stop_reason=stop_reason,
            polls=polls,
            elapsed=state.elapsed,
        )
