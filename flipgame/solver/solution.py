"""
Solution Module - Result of batch planning and cached move playback.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board
from .move import Move
from .region import Phase


@dataclass
class SolutionMetrics:
    """
    Performance metrics for a batch plan.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        regions_solved: Regions for which the solver produced flips
        regions_skipped: Regions already on or with no solution
        masks_tried: First-row patterns evaluated across all regions
        planner_name: Name of planner that computed this solution
    """
    computation_time_ms: float = 0.0
    regions_solved: int = 0
    regions_skipped: int = 0
    masks_tried: int = 0
    planner_name: str = ""


@dataclass
class Solution:
    """
    Full move list computed against a private copy of the board.

    Attributes:
        moves: Ordered flips to execute
        phases: Phase each move was planned in (parallel to moves)
        board_states: Board before the first move, then after each move
        is_complete: True if the last board state is all on
        metrics: Performance statistics
    """
    moves: List[Move] = field(default_factory=list)
    phases: List[Phase] = field(default_factory=list)
    board_states: List[Board] = field(default_factory=list)
    is_complete: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        """Check if solution has any moves."""
        return len(self.moves) > 0

    @property
    def final_board(self) -> Optional[Board]:
        """Board after the last move, or None for an empty solution."""
        if not self.board_states:
            return None
        return self.board_states[-1]

    def get_board_after_move(self, index: int) -> Board:
        """
        Get board state after executing move at index.

        Args:
            index: Move index (0-based)

        Returns:
            Board after move (index+1 in board_states)

        Raises:
            IndexError: If index out of range
        """
        return self.board_states[index + 1]


@dataclass
class CachedSolution:
    """
    Batch solution served one move per turn.

    Attributes:
        solution: The complete solution from the batch planner
        move_index: Current position in move sequence (0 = first move)
    """
    solution: Solution
    move_index: int = 0

    @property
    def current_move(self) -> Optional[Move]:
        """Get next move to play, or None if exhausted."""
        if self.move_index < len(self.solution.moves):
            return self.solution.moves[self.move_index]
        return None

    @property
    def current_phase(self) -> Optional[Phase]:
        """Phase the next move was planned in."""
        if self.move_index < len(self.solution.phases):
            return self.solution.phases[self.move_index]
        return None

    @property
    def expected_board_before(self) -> Optional[Board]:
        """Get expected board state before current move executes."""
        if self.move_index < len(self.solution.board_states):
            return self.solution.board_states[self.move_index]
        return None

    @property
    def is_exhausted(self) -> bool:
        """True if all moves have been consumed."""
        return self.move_index >= len(self.solution.moves)

    @property
    def moves_remaining(self) -> int:
        """Number of moves left in the solution."""
        return max(0, len(self.solution.moves) - self.move_index)

    @property
    def total_moves(self) -> int:
        return len(self.solution.moves)

    def advance(self) -> Optional[Move]:
        """
        Move to next move in sequence.

        Returns:
            The move that was just completed, or None if exhausted
        """
        if self.is_exhausted:
            return None
        completed_move = self.current_move
        self.move_index += 1
        return completed_move

    def peek_moves(self, count: int = 3) -> List[Move]:
        """
        Preview upcoming moves without advancing.

        Args:
            count: Number of moves to preview

        Returns:
            List of upcoming moves (may be shorter than count)
        """
        start = self.move_index
        end = min(start + count, len(self.solution.moves))
        return self.solution.moves[start:end]
