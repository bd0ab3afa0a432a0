"""Polling logic that turns single searches into time-bounded waits."""

from autoeyes.orchestration.pattern_waiter import PatternWaiter, WaitResult
from autoeyes.orchestration.stop_conditions import (
    CancellationToken,
    CancelledCondition,
    SatisfiedCondition,
    StopCondition,
    StopConditionChain,
    StopReason,
    Stopwatch,
    TimeoutCondition,
    WaitState,
)
from autoeyes.orchestration.debug_frame_logger import (
    DebugFrame,
    DebugFrameLogger,
)

__all__ = [
    "PatternWaiter",
    "WaitResult",
    "CancellationToken",
    "CancelledCondition",
    "SatisfiedCondition",
    "StopCondition",
    "StopConditionChain",
    "StopReason",
    "Stopwatch",
    "TimeoutCondition",
    "WaitState",
    "DebugFrame",
    "DebugFrameLogger",
]
