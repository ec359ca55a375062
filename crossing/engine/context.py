"""
Search Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .puzzle import PuzzleConfig


@dataclass
class SearchContext:
    """
    Context passed to strategies containing the puzzle, limits,
    cancellation, and progress reporting.

    Attributes:
        puzzle: Puzzle configuration to solve
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = unlimited)
        max_rounds: Maximum expansion rounds (None = unlimited)
        max_frontier: Maximum paths held in one frontier (None = unlimited)
        workers: Threads used to expand a frontier (1 = sequential)
        start_time: When computation started; reset by the strategy at the
            start of every solve
        progress_callback: Optional callback for progress updates
    """
    puzzle: PuzzleConfig
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = 20.0
    max_rounds: Optional[int] = None
    max_frontier: Optional[int] = None
    workers: int = 1
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[int, str], None]] = None

    @classmethod
    def from_settings(cls, puzzle: PuzzleConfig,
                      settings: Dict[str, Any]) -> "SearchContext":
        """
        Build a context from a settings dict (see crossing.settings).

        Args:
            puzzle: Puzzle configuration
            settings: Dict with timeout_sec, max_rounds, max_frontier, workers

        Returns:
            SearchContext instance
        """
        return cls(
            puzzle=puzzle,
            timeout_sec=settings.get("timeout_sec"),
            max_rounds=settings.get("max_rounds"),
            max_frontier=settings.get("max_frontier"),
            workers=max(1, int(settings.get("workers") or 1)),
        )

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def cancel(self) -> None:
        """Request that a running search stops at the next round."""
        self.cancel_flag.set()

    def report_progress(self, round_number: int, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            round_number: Expansion round just finished
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(round_number, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.time() - self.start_time
