"""
Game Events - Hooks the engine calls so a presentation layer can react.

The core never formats presentation strings or touches widgets; it only
reports what happened. Subclass GameListener and override the hooks you
need.
"""

from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ..solver import Move, Phase, Region

if TYPE_CHECKING:
    from .session import Session, Winner


class HighlightKind(Enum):
    """Why a move is being highlighted."""
    HUMAN = auto()
    AUTOMATED = auto()
    ADVISORY = auto()
    HINT = auto()


class GameListener:
    """No-op base listener."""

    def on_region_highlighted(self, region: Region, phase: Phase) -> None:
        """Automated player is about to work on this region."""

    def on_move_highlighted(self, move: Move, kind: HighlightKind) -> None:
        """A move was played, proposed as the final move, or hinted."""

    def on_board_changed(self, session: 'Session') -> None:
        """Board or counters changed (commit or undo)."""

    def on_game_over(self, winner: 'Winner', session: 'Session') -> None:
        """Board reached all-on."""


class RecordingListener(GameListener):
    """
    Listener that keeps every event in a list, for drivers and tests.

    Attributes:
        events: (hook name, payload) tuples in emission order
    """

    def __init__(self):
        self.events = []

    def on_region_highlighted(self, region: Region, phase: Phase) -> None:
        self.events.append(("region", region))

    def on_move_highlighted(self, move: Move, kind: HighlightKind) -> None:
        self.events.append(("move", (move, kind)))

    def on_board_changed(self, session: 'Session') -> None:
        self.events.append(("board", session.board.count_off()))

    def on_game_over(self, winner: 'Winner', session: 'Session') -> None:
        self.events.append(("over", winner))

    def of_kind(self, name: str) -> list:
        """Payloads of one hook, in order."""
        return [payload for event, payload in self.events if event == name]

    def last(self, name: str) -> Optional[object]:
        """Most recent payload of one hook, or None."""
        payloads = self.of_kind(name)
        return payloads[-1] if payloads else None
