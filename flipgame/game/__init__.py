"""
Game Package - Sessions, turn alternation, undo and hints.

Public API:
    - TurnEngine: new_game / apply_human_move / begin_automated_turn /
      commit_automated_move / run_automated_turn / undo / hint / is_over
    - Session, TurnState, Winner: Live game aggregate and its states
    - GameState, UndoManager: Undo snapshots
    - HintProvider: Read-only next-move advice
    - TurnOutcome, OutcomeKind: Result of an automated turn
    - GameListener, HighlightKind: Presentation event hooks
    - FlipGameError, InvalidMove, CannotUndo: Rejected operations

Usage:
    from flipgame.game import TurnEngine

    engine = TurnEngine()
    session = engine.new_game(4, seed=1)
    engine.apply_human_move(session, 0, 0)
    if not session.is_over:
        outcome = engine.run_automated_turn(session)
"""

from .errors import FlipGameError, InvalidMove, CannotUndo
from .events import GameListener, HighlightKind, RecordingListener
from .undo import GameState, UndoManager
from .session import Session, TurnState, Winner
from .hints import HintProvider
from .engine import TurnEngine, TurnOutcome, OutcomeKind

__all__ = [
    "FlipGameError",
    "InvalidMove",
    "CannotUndo",
    "GameListener",
    "HighlightKind",
    "RecordingListener",
    "GameState",
    "UndoManager",
    "Session",
    "TurnState",
    "Winner",
    "HintProvider",
    "TurnEngine",
    "TurnOutcome",
    "OutcomeKind",
]
