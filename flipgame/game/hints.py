"""
Hint Module - Read-only view of the automated player's next move.
"""

from typing import Optional

from ..solver import Board, Move, PhasePlanner


class HintProvider:
    """
    Advisory wrapper over a planner.

    Never pushes a snapshot, flips the board or moves the planner, so
    repeated calls return the same hint until the board or planner
    position changes.
    """

    def __init__(self, planner: PhasePlanner):
        self.planner = planner

    def hint(self, board: Board) -> Optional[Move]:
        """Move the automated player would make on this board, or None."""
        return self.planner.next_move(board)
