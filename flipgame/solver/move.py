"""
Move Module - A single flip on the board.
"""

from dataclasses import dataclass
from typing import Tuple

from .board import FLIP_OFFSETS


@dataclass(frozen=True)
class Move:
    """
    Flip centred on one cell.

    Attributes:
        row: Row index of the flip centre
        col: Column index of the flip centre
    """
    row: int
    col: int

    def is_valid(self, size: int) -> bool:
        """Check the centre lies on an N×N board."""
        return 0 <= self.row < size and 0 <= self.col < size

    def affected_cells(self, size: int) -> Tuple[Tuple[int, int], ...]:
        """
        Cells toggled by this flip on an N×N board.

        Args:
            size: Board side length

        Returns:
            Tuple of (row, col) positions, centre first, clipped at the edges
        """
        cells = []
        for dr, dc in FLIP_OFFSETS:
            r, c = self.row + dr, self.col + dc
            if 0 <= r < size and 0 <= c < size:
                cells.append((r, c))
        return tuple(cells)

    def __str__(self):
        return f"({self.row},{self.col})"
