"""
Game Errors - Recoverable failures surfaced at the turn boundary.
"""

from typing import Optional


class FlipGameError(Exception):
    """Base class for rejected game operations. Never fatal to the process."""


class InvalidMove(FlipGameError):
    """
    Move rejected before any mutation: off the board or not the human's turn.

    Attributes:
        row: Requested row
        col: Requested column
        reason: Why the move was rejected
    """

    def __init__(self, row: Optional[int], col: Optional[int], reason: str):
        self.row = row
        self.col = col
        self.reason = reason
        super().__init__(f"Invalid move ({row},{col}): {reason}")


class CannotUndo(FlipGameError):
    """
    Undo rejected: nothing to undo, or the game is over.

    Attributes:
        reason: Why the undo was rejected
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Cannot undo: {reason}")
