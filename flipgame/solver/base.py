"""
Base Planner Module - Abstract base class for region-progression planners.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .board import Board, validate_size
from .move import Move
from .region import Phase, Region
from .region_solver import RegionSolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanStep:
    """
    Outcome of one planning query.

    Attributes:
        phase: Phase the move was planned in (where planning stopped)
        region: Bounds of that phase on the board
        move: First flip of the region's solution, or None if nothing works
        skipped: Phases passed over on the way (already on or unsolvable)
    """
    phase: Phase
    region: Region
    move: Optional[Move]
    skipped: Tuple[Phase, ...] = ()


class PhasePlanner(ABC):
    """
    Abstract base class for all planners.

    A planner tracks which region the automated player is working on and,
    given the live board, proposes the next flip. Planning is pure: plan()
    and next_move() never change the board or the planner position. The
    engine persists progress separately through adopt() and
    advance_if_solved() once a move has actually been committed.

    Subclasses define name and description class attributes and the
    position bookkeeping.

    Attributes:
        name: Short identifier for the planner
        description: Human-readable description for UI
        size: Board side the planner was created for
    """
    name: str = "base"
    description: str = "Base planner"

    def __init__(self, size: int):
        validate_size(size)
        self.size = size
        self._solver = RegionSolver()

    @property
    @abstractmethod
    def phase(self) -> Phase:
        """Phase the planner is currently positioned on."""

    @abstractmethod
    def snapshot(self) -> Any:
        """Immutable copy of the planner position, for undo."""

    @abstractmethod
    def restore(self, state: Any) -> None:
        """Restore a position previously returned by snapshot()."""

    @abstractmethod
    def adopt(self, step: PlanStep) -> None:
        """
        Persist the position a committed move was planned from.

        Args:
            step: Result of plan() for the move about to be committed
        """

    @abstractmethod
    def advance_if_solved(self, board: Board) -> bool:
        """
        Advance past the current region if the board now has it all on.

        Args:
            board: Live board after a committed move

        Returns:
            True if the position moved forward
        """

    @abstractmethod
    def reset(self) -> None:
        """Return to the first region."""

    def skips_when_on(self, phase: Phase) -> bool:
        """Whether plan() passes over this phase when its region is already on."""
        return True

    def plan(self, board: Board) -> PlanStep:
        """
        Resolve the next move against the live board.

        Starting from the current phase, regions that are already on are
        passed over, as are regions with no solution; the first region
        that yields flips supplies the move. Runs the solver afresh on
        every call since human moves can invalidate any earlier plan.

        Args:
            board: Live board (not modified)

        Returns:
            PlanStep describing where planning stopped
        """
        self._check_board(board)
        phase = self.phase
        skipped: List[Phase] = []

        while True:
            region = phase.region(self.size)

            if self.skips_when_on(phase) and board.is_all_on(region):
                logger.debug(f"[{self.name}] {phase.label} already on, moving on")
            else:
                moves = self._solver.solve(board, region)
                if moves:
                    return PlanStep(phase, region, moves[0], tuple(skipped))
                logger.debug(f"[{self.name}] {phase.label} has no solution, moving on")

            following = phase.next()
            if following is None:
                return PlanStep(phase, region, None, tuple(skipped))
            skipped.append(phase)
            phase = following

    def next_move(self, board: Board) -> Optional[Move]:
        """
        Propose the next flip without committing anything.

        Args:
            board: Live board

        Returns:
            Move to play, or None if no region yields a move
        """
        return self.plan(board).move

    def record_move(self, move: Move) -> None:
        """Notification of a committed flip (human or automated)."""

    @property
    def region(self) -> Region:
        """Bounds of the current phase."""
        return self.phase.region(self.size)

    @property
    def phase_label(self) -> str:
        """Display label of the current phase."""
        return self.phase.label

    def _check_board(self, board: Board) -> None:
        if board.size != self.size:
            raise ValueError(
                f"Planner built for {self.size}x{self.size}, got {board.size}x{board.size} board"
            )
