"""Stop condition strategies for wait operations.

This module provides composable stop conditions that decide when a polling
loop halts, plus the timing and cancellation primitives they read.
"""

import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from loguru import logger


class StopReason(Enum):
    """Reasons for stopping a wait."""

    FOUND = "found"
    COUNT_REACHED = "count_reached"
    VANISHED = "vanished"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class WaitState:
    """Immutable snapshot of a polling loop after one poll."""

    polls: int  # Polls completed, including the current one
    elapsed: float  # Seconds since the wait started
    satisfied: bool  # Whether the current poll met the wait's goal


class Stopwatch:
    """Monotonic elapsed-time counter started on construction."""

    def __init__(self) -> None:
        self._start = time.monotonic()

    @classmethod
    def start_new(cls) -> "Stopwatch":
        return cls()

    @property
    def elapsed(self) -> float:
        """Seconds since the stopwatch started."""
        return time.monotonic() - self._start


class CancellationToken:
    """Thread-safe flag a caller sets to end a wait early.

    Waits check the token between polls, never during a correlation pass.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class StopCondition(ABC):
    """Abstract base for stop condition strategies.

    Each concrete condition implements a single stop criterion.
    Conditions are checked in order by PatternWaiter.
    """

    @abstractmethod
    def check(self, state: WaitState) -> bool:
        pass

    @abstractmethod
    def get_reason(self) -> StopReason:
        pass


@dataclass
class SatisfiedCondition(StopCondition):
    """Stop as soon as a poll meets the wait's goal."""

    reason: StopReason = StopReason.FOUND

    def check(self, state: WaitState) -> bool:
        return state.satisfied

    def get_reason(self) -> StopReason:
        return self.reason


@dataclass
class TimeoutCondition(StopCondition):
    """Stop when the elapsed time reaches the timeout."""

    timeout: float

    def __post_init__(self):
        if self.timeout < 0:
            raise ValueError(f"timeout must not be negative, got {self.timeout}")

    def check(self, state: WaitState) -> bool:
        if state.elapsed >= self.timeout:
            logger.debug(
                f"Timeout reached: {state.elapsed:.3f}s >= {self.timeout}s "
                f"after {state.polls} poll(s)"
            )
            return True
        return False

    def get_reason(self) -> StopReason:
        return StopReason.TIMED_OUT


@dataclass
class CancelledCondition(StopCondition):
    """Stop when the caller cancels the token."""

    token: CancellationToken

    def check(self, state: WaitState) -> bool:
        if self.token.cancelled:
            logger.debug(f"Wait cancelled after {state.polls} poll(s)")
            return True
        return False

    def get_reason(self) -> StopReason:
        return StopReason.CANCELLED


class StopConditionChain:
    """Manages ordered list of stop conditions and evaluates them.

    Conditions are checked in the order they're added. First matching
    condition determines the stop reason.
    """

    def __init__(self, conditions: list[StopCondition]):
        self._conditions = conditions

    def check(self, state: WaitState) -> StopReason | None:
        for condition in self._conditions:
            if condition.check(state):
                return condition.get_reason()
        return None
