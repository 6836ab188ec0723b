"""
Region Solver Module - First-row enumeration plus chase-down for one region.

For a region of width w, each of the 2^w first-row flip patterns is tried in
ascending mask order on a scratch copy. Once the first row is fixed, every
later row is forced: a cell left off can only be corrected, without
disturbing rows above it, by flipping the cell directly below it. The first
pattern whose chase leaves the whole region on wins.

Flips are clipped at the board edges, not the region edges, so solving a
region can disturb cells outside it. A region may therefore have no
solution even when the board as a whole is solvable; callers treat None as
"skip this region", never as a fatal error.
"""

import logging
from typing import List, Optional

from .board import Board, OFF
from .move import Move
from .region import Region

logger = logging.getLogger(__name__)


class RegionSolver:
    """
    Brute-force solver for a single rectangular region.

    Stateless apart from a running count of masks tried, which batch
    planning reports in its metrics.

    Attributes:
        masks_tried: First-row patterns evaluated since construction
    """

    def __init__(self):
        self.masks_tried = 0

    def solve(self, board: Board, region: Region) -> Optional[List[Move]]:
        """
        Compute flips that turn every cell of the region on.

        The board is not modified. Masks are tried from 0 upward so the
        result is deterministic; a region that is already on yields an
        empty list from mask 0.

        Args:
            board: Board snapshot to solve against
            region: Rectangle to solve

        Returns:
            Ordered list of moves, or None if no first-row pattern works
        """
        width = region.width

        for mask in range(1 << width):
            self.masks_tried += 1
            scratch = board.copy()
            moves: List[Move] = []

            # First row guess
            for offset in range(width):
                if mask & (1 << offset):
                    move = Move(region.r1, region.c1 + offset)
                    scratch.apply(move)
                    moves.append(move)

            # Chase down
            cells = scratch.cells
            for row in range(region.r1 + 1, region.r2 + 1):
                for col in range(region.c1, region.c2 + 1):
                    if cells[row - 1, col] == OFF:
                        move = Move(row, col)
                        scratch.apply(move)
                        moves.append(move)

            if scratch.is_all_on(region):
                logger.debug(
                    f"Region {region} solved with mask {mask:#0{width + 2}b}: "
                    f"{len(moves)} flips"
                )
                return moves

        logger.debug(f"Region {region}: no solution among {1 << width} masks")
        return None


def solve_region(board: Board, region: Region) -> Optional[List[Move]]:
    """
    Solve one region with a throwaway RegionSolver.

    Args:
        board: Board snapshot to solve against
        region: Rectangle to solve

    Returns:
        Ordered list of moves, or None if the region cannot be solved alone
    """
    return RegionSolver().solve(board, region)
