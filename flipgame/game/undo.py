"""
Undo Module - Snapshot stack owned by a session.

A full GameState snapshot is pushed immediately before every committed
flip, human or automated, and never for rejected moves. The stack length
therefore always equals committed flips minus undos performed.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, TYPE_CHECKING

from ..solver import Board, Move
from .errors import CannotUndo

if TYPE_CHECKING:
    from .session import Session, TurnState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    """
    Immutable copy of everything a flip can change.

    Attributes:
        grid: Board cells as tuple of tuples
        user_moves: Human move counter
        computer_moves: Automated move counter
        state: Turn state at the time of the snapshot
        planner_state: Planner position from PhasePlanner.snapshot()
        last_automated_move: Most recent automated flip, if still highlighted
    """
    grid: Tuple[Tuple[int, ...], ...]
    user_moves: int
    computer_moves: int
    state: 'TurnState'
    planner_state: Any
    last_automated_move: Optional[Move]

    @classmethod
    def capture(cls, session: 'Session') -> 'GameState':
        """
        Snapshot a live session.

        Args:
            session: Session to copy

        Returns:
            GameState sharing no mutable data with the session
        """
        grid = tuple(tuple(row) for row in session.board.to_rows())
        return cls(
            grid=grid,
            user_moves=session.user_moves,
            computer_moves=session.computer_moves,
            state=session.state,
            planner_state=session.planner.snapshot(),
            last_automated_move=session.last_automated_move,
        )

    def restore_into(self, session: 'Session') -> None:
        """Write this snapshot back into a session (board, counters, planner)."""
        session.board = Board.from_rows(self.grid)
        session.user_moves = self.user_moves
        session.computer_moves = self.computer_moves
        session.state = self.state
        session.planner.restore(self.planner_state)
        session.last_automated_move = self.last_automated_move
        session.advisory_move = None
        session.winner = None


class UndoManager:
    """
    Stack of GameState snapshots for one session.

    Only push() and undo() change the stack; nothing else in the engine
    touches it directly.
    """

    def __init__(self):
        self._stack: List[GameState] = []

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, session: 'Session') -> GameState:
        """
        Snapshot the session before a committed mutation.

        Args:
            session: Session about to be mutated

        Returns:
            The pushed snapshot
        """
        snapshot = GameState.capture(session)
        self._stack.append(snapshot)
        return snapshot

    def undo(self, session: 'Session', allow_after_over: bool = False) -> GameState:
        """
        Restore the most recent snapshot into the session.

        Args:
            session: Session to roll back
            allow_after_over: Permit undo once the game has a winner

        Returns:
            The snapshot that was restored

        Raises:
            CannotUndo: If the stack is empty, or the game is over and
                allow_after_over is False
        """
        if not self._stack:
            raise CannotUndo("no moves to undo")
        if session.is_over and not allow_after_over:
            raise CannotUndo("game is over")

        snapshot = self._stack.pop()
        snapshot.restore_into(session)
        logger.info(
            f"Undo: restored moves user={snapshot.user_moves} computer={snapshot.computer_moves}, "
            f"{len(self._stack)} snapshot(s) left"
        )
        return snapshot
