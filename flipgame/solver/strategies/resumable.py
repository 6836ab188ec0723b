"""
Resumable Planner - Squares, then halves, then the full board.

Position is a tagged phase (Squares(i), Halves(i) or Full()). The planner
keeps working on the same region turn after turn, re-solving it against
the live board each time, and only moves on once it is on or found to be
unsolvable. The index resets when the phase class advances and never goes
backwards except through undo.
"""

import logging

from ..base import PhasePlanner, PlanStep
from ..board import Board
from ..factory import register_planner
from ..region import Full, LINEAR_ORDER, Phase, Squares

logger = logging.getLogger(__name__)


@register_planner
class ResumablePlanner(PhasePlanner):
    """
    Phase planner that resumes the current region on every turn.

    After each committed automated move the current region is checked once
    and, if it is now all on, the planner steps to the next region. The
    full board is always solved directly.
    """
    name = "resumable"
    description = "Resumable - squares, halves, full; resumes the current region each turn"

    def __init__(self, size: int):
        super().__init__(size)
        self._phase: Phase = Squares(0)

    @property
    def phase(self) -> Phase:
        return self._phase

    def snapshot(self) -> Phase:
        # Phases are frozen dataclasses
        return self._phase

    def restore(self, state: Phase) -> None:
        self._phase = state

    def reset(self) -> None:
        self._phase = Squares(0)

    def skips_when_on(self, phase: Phase) -> bool:
        return not isinstance(phase, Full)

    def adopt(self, step: PlanStep) -> None:
        if LINEAR_ORDER.index(step.phase) > LINEAR_ORDER.index(self._phase):
            logger.info(f"[{self.name}] now working on {step.phase.label}")
            self._phase = step.phase

    def advance_if_solved(self, board: Board) -> bool:
        self._check_board(board)
        if isinstance(self._phase, Full):
            return False
        if not board.is_all_on(self.region):
            return False

        following = self._phase.next()
        logger.info(f"[{self.name}] {self._phase.label} solved, next: {following.label}")
        self._phase = following
        return True
