"""
Solution Context Module - Shared context and budget for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from .board import BoardState
from .level import Level

DEFAULT_MAX_MOVES = 50


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing the level, starting
    board, search budget, cancellation, and progress reporting.

    Attributes:
        level: Level being solved (shared read-only)
        board: Starting board (defaults to the level's initial state)
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = unlimited)
        max_expansions: Maximum states expanded (None = unlimited)
        max_moves: Longest move sequence considered (None = unlimited)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    level: Level
    board: Optional[BoardState] = None
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = 20.0
    max_expansions: Optional[int] = None
    max_moves: Optional[int] = DEFAULT_MAX_MOVES
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def __post_init__(self):
        if self.board is None:
            self.board = self.level.initial_state()
        _check_limit("timeout_sec", self.timeout_sec, 0, (int, float))
        _check_limit("max_expansions", self.max_expansions, 1, (int,))
        _check_limit("max_moves", self.max_moves, 0, (int,))

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and time.time() - self.start_time > self.timeout_sec:
            return True
        return False

    def expansions_exhausted(self, expanded: int) -> bool:
        """True once the expansion cap has been reached."""
        return self.max_expansions is not None and expanded >= self.max_expansions

    def depth_allowed(self, moves: int) -> bool:
        """True if a state reached after `moves` moves may still be expanded."""
        return self.max_moves is None or moves < self.max_moves

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.time() - self.start_time


def _check_limit(name: str, value: Optional[float], minimum: int, types: Tuple[type, ...]) -> None:
    """Reject a budget value of the wrong type or below its minimum (None = unlimited)."""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, types):
        kind = "an integer" if types == (int,) else "a number"
        raise ValueError(f"{name} must be {kind}, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
