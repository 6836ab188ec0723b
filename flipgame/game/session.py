"""
Session Module - The live, mutable aggregate of one game.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from ..solver import Board, Move, PhasePlanner
from .undo import UndoManager


class TurnState(Enum):
    """
    Turn state machine states.

    States:
        AWAITING_HUMAN: Waiting for the human to flip (initial state)
        AUTOMATED_TURN: Human has moved; automated reply pending
        OVER: Board is all on; terminal except for undo when enabled
    """
    AWAITING_HUMAN = auto()
    AUTOMATED_TURN = auto()
    OVER = auto()


class Winner(Enum):
    """Who made the flip that turned the last cell on."""
    HUMAN = auto()
    COMPUTER = auto()


@dataclass
class Session:
    """
    One game in progress.

    Created by TurnEngine.new_game() and replaced wholesale by the next
    new game; nothing is shared between sessions.

    Attributes:
        board: Live board, mutated in place by committed flips
        planner: Phase planner for the automated player
        generation: Engine-issued id, used to reject stale deferred commits
        user_moves: Committed human flips
        computer_moves: Committed automated flips
        state: Current turn state
        winner: Set when state is OVER
        last_automated_move: Most recent automated flip (cleared by a human move)
        advisory_move: Winning flip left for the human, if one was offered
        undo_stack: Snapshots pushed before each committed flip
    """
    board: Board
    planner: PhasePlanner
    generation: int = 0
    user_moves: int = 0
    computer_moves: int = 0
    state: TurnState = TurnState.AWAITING_HUMAN
    winner: Optional[Winner] = None
    last_automated_move: Optional[Move] = None
    advisory_move: Optional[Move] = None
    undo_stack: UndoManager = field(default_factory=UndoManager)

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def total_moves(self) -> int:
        return self.user_moves + self.computer_moves

    @property
    def is_over(self) -> bool:
        return self.state is TurnState.OVER

    @property
    def phase_label(self) -> str:
        """Label of the planner's current region, independent of the board."""
        return self.planner.phase_label
