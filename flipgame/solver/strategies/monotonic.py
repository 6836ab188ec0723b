"""
Monotonic Planner - One pass over a fixed linear order of seven regions.

Position is a single integer into [TL, TR, BL, BR, TOP, BOTTOM, FULL].
The index only ever increases: a region, once passed (solved, found
already on, or abandoned for lack of a solution), is never revisited even
if later flips turn some of its cells off again. An abandoned region can
therefore stay unsolved until the full-board pass.
"""

import logging

from ..base import PhasePlanner, PlanStep
from ..board import Board
from ..factory import register_planner
from ..region import LINEAR_ORDER, Phase

logger = logging.getLogger(__name__)

LAST_INDEX = len(LINEAR_ORDER) - 1


@register_planner
class MonotonicPlanner(PhasePlanner):
    """
    Phase planner whose region index never decreases.

    Attributes:
        index: Position in the linear region order (0..6)
    """
    name = "monotonic"
    description = "Monotonic - fixed seven-region order, never revisits a passed region"

    def __init__(self, size: int):
        super().__init__(size)
        self.index = 0

    @property
    def phase(self) -> Phase:
        return LINEAR_ORDER[self.index]

    def snapshot(self) -> int:
        return self.index

    def restore(self, state: int) -> None:
        if not 0 <= state <= LAST_INDEX:
            raise ValueError(f"Region index must be 0..{LAST_INDEX}, got {state}")
        self.index = state

    def reset(self) -> None:
        self.index = 0

    def adopt(self, step: PlanStep) -> None:
        target = LINEAR_ORDER.index(step.phase)
        if target > self.index:
            logger.info(f"[{self.name}] passed {len(step.skipped)} region(s), now on {step.phase.label}")
            self.index = target

    def advance_if_solved(self, board: Board) -> bool:
        self._check_board(board)
        start = self.index
        while self.index < LAST_INDEX and board.is_all_on(self.region):
            self.index += 1
        if self.index != start:
            logger.info(f"[{self.name}] advanced {self.index - start} region(s), now on {self.phase_label}")
        return self.index != start
