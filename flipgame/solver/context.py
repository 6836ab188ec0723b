"""
Solution Context Module - Shared context for batch planning.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import Board


@dataclass
class SolutionContext:
    """
    Context passed to a batch planner: the board to solve and an optional
    progress sink.

    Attributes:
        board: Board to plan against (never mutated; planners copy it)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    board: Board
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None

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
