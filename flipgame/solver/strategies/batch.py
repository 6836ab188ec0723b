"""
Batch Planner - Compute the whole move list up front, then replay it.

All seven regions are solved in order on a private scratch copy of the
board and the resulting flips are cached. Moves are then served one per
turn without looking at the live board again. This is only sound when
every flip played (human or automated) comes from the same list, as in
non-interactive drivers; the live planners are the right choice when a
human can play freely.
"""

import logging
import time
from typing import List, Optional, Tuple

from ..base import PhasePlanner, PlanStep
from ..board import Board
from ..context import SolutionContext
from ..factory import register_planner
from ..move import Move
from ..region import Full, Phase, REGION_ORDERS
from ..region_solver import RegionSolver
from ..solution import CachedSolution, Solution, SolutionMetrics

logger = logging.getLogger(__name__)


@register_planner
class BatchPlanner(PhasePlanner):
    """
    Planner that precomputes a full solution and serves it move by move.

    The plan is computed lazily against the first board the planner is
    asked about. record_move() keeps the cursor in step with flips that are
    actually committed.

    Attributes:
        order: Region order name ("linear" or "nested")
    """
    name = "batch"
    description = "Batch - precomputed plan over all regions, replayed one move per turn"

    def __init__(self, size: int, order: str = "linear"):
        super().__init__(size)
        if order not in REGION_ORDERS:
            available = ", ".join(REGION_ORDERS)
            raise ValueError(f"Unknown region order: {order}. Available: {available}")
        self.order = order
        self._cache: Optional[CachedSolution] = None

    @property
    def cached_solution(self) -> Optional[CachedSolution]:
        """Get current cached solution."""
        return self._cache

    @property
    def phase(self) -> Phase:
        if self._cache is None:
            return REGION_ORDERS[self.order][0]
        return self._cache.current_phase or Full()

    def solve(self, context: SolutionContext) -> Solution:
        """
        Solve every region of the order in turn on a copy of the board.

        Regions already on are skipped; regions with no solution are logged
        and skipped, leaving them for the later, larger regions.

        Args:
            context: Solution context with the board and progress sink

        Returns:
            Solution with moves, per-move phases and board states
        """
        start_time = time.perf_counter()
        self._check_board(context.board)

        scratch = context.board.copy()
        solver = RegionSolver()
        order = REGION_ORDERS[self.order]
        moves: List[Move] = []
        phases: List[Phase] = []
        board_states: List[Board] = [scratch.copy()]
        solved = 0
        skipped = 0

        for position, phase in enumerate(order):
            region = phase.region(self.size)
            context.report_progress(position / len(order), f"Solving {phase.label}")

            if scratch.is_all_on(region):
                skipped += 1
                continue

            region_moves = solver.solve(scratch, region)
            if region_moves is None:
                logger.info(f"[{self.name}] no solution for {phase.label}, skipping")
                skipped += 1
                continue

            solved += 1
            for move in region_moves:
                scratch.apply(move)
                moves.append(move)
                phases.append(phase)
                board_states.append(scratch.copy())

        context.report_progress(1.0, f"{len(moves)} flips planned")
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        solution = Solution(
            moves=moves,
            phases=phases,
            board_states=board_states,
            is_complete=scratch.is_all_on(),
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                regions_solved=solved,
                regions_skipped=skipped,
                masks_tried=solver.masks_tried,
                planner_name=self.name,
            ),
        )
        logger.info(
            f"[{self.name}] planned {solution.move_count} flips over {solved} regions "
            f"({elapsed_ms:.1f}ms), complete={solution.is_complete}"
        )
        return solution

    def plan(self, board: Board) -> PlanStep:
        self._check_board(board)
        if self._cache is None:
            self._cache = CachedSolution(solution=self.solve(SolutionContext(board=board)))

        cache = self._cache
        expected = cache.expected_board_before
        if expected is not None and expected != board:
            logger.debug(f"[{self.name}] live board differs from the plan before flip {cache.move_index}")

        move = cache.current_move
        if move is not None:
            upcoming = ", ".join(str(m) for m in cache.peek_moves())
            logger.debug(f"[{self.name}] next flips: {upcoming}")

        phase = self.phase
        return PlanStep(phase, phase.region(self.size), move)

    def record_move(self, move: Move) -> None:
        if self._cache is None:
            return
        expected = self._cache.current_move
        if move == expected:
            self._cache.advance()
        else:
            logger.warning(
                f"[{self.name}] flip {move} diverges from planned {expected}; "
                f"remaining {self._cache.moves_remaining} flip(s) no longer match the board"
            )

    def snapshot(self) -> Tuple[Optional[Solution], int]:
        if self._cache is None:
            return (None, 0)
        return (self._cache.solution, self._cache.move_index)

    def restore(self, state: Tuple[Optional[Solution], int]) -> None:
        solution, move_index = state
        if solution is None:
            self._cache = None
        else:
            self._cache = CachedSolution(solution=solution, move_index=move_index)

    def reset(self) -> None:
        self._cache = None

    def adopt(self, step: PlanStep) -> None:
        # Position follows record_move()
        pass

    def advance_if_solved(self, board: Board) -> bool:
        return False


def solve_board(board: Board, order: str = "linear") -> Solution:
    """
    Plan a full solution for a board in one pass.

    Args:
        board: Board to solve (not modified)
        order: Region order name ("linear" or "nested")

    Returns:
        Solution; is_complete tells whether the moves turn every cell on
    """
    planner = BatchPlanner(board.size, order=order)
    return planner.solve(SolutionContext(board=board))
