"""
Strategies Package - Concrete planner implementations.

Import this module to register all built-in planners.
"""

from .resumable import ResumablePlanner
from .monotonic import MonotonicPlanner
from .batch import BatchPlanner, solve_board

__all__ = [
    "ResumablePlanner",
    "MonotonicPlanner",
    "BatchPlanner",
    "solve_board",
]
