"""
Board Module - Mutable N×N on/off grid for the Flip puzzle.
"""

from typing import List, Optional, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .move import Move
    from .region import Region


OFF = 0
ON = 1

# Flip centre plus its four cardinal neighbours
FLIP_OFFSETS = ((0, 0), (1, 0), (-1, 0), (0, 1), (0, -1))


class Board:
    """
    N×N binary board owned by a single game session.

    Cells are stored in a uint8 numpy array holding OFF (0) or ON (1).
    The board is mutated in place by flip(); use copy() to try moves
    without touching the canonical state.

    Attributes:
        cells: N×N numpy array of 0/1 values
    """

    def __init__(self, cells: np.ndarray):
        """
        Wrap an existing grid.

        Args:
            cells: Square 2D array of 0/1 values with an even side >= 2

        Raises:
            ValueError: If the grid is not square, not even-sized or not binary
        """
        grid = np.array(cells, dtype=np.uint8)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Board must be square, got shape {grid.shape}")
        validate_size(grid.shape[0])
        if np.any(grid > ON):
            raise ValueError("Board cells must be 0 (off) or 1 (on)")
        self.cells = grid

    @classmethod
    def all_on(cls, size: int) -> 'Board':
        """Create a solved board of the given size."""
        validate_size(size)
        return cls(np.ones((size, size), dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """
        Create a Board from a row-major 2D list of 0/1 integers.

        Args:
            rows: N rows of N integers

        Returns:
            Board instance owning a copy of the data
        """
        if not rows or any(len(row) != len(rows) for row in rows):
            raise ValueError("Board rows must form a non-empty square grid")
        values = {value for row in rows for value in row}
        if not values <= {OFF, ON}:
            raise ValueError(f"Board cells must be 0 or 1, got {sorted(values)}")
        return cls(np.array(rows, dtype=np.uint8))

    @classmethod
    def scrambled(cls, size: int, seed: Optional[int] = None,
                  flips: Optional[int] = None) -> 'Board':
        """
        Create a solvable puzzle by applying random flips to a solved board.

        Args:
            size: Board side (even, >= 2)
            seed: Seed for numpy's default_rng, None for a fresh puzzle
            flips: Number of random flips (default 2N plus up to N-1 more)

        Returns:
            Scrambled Board
        """
        board = cls.all_on(size)
        rng = np.random.default_rng(seed)
        if flips is None:
            flips = size * 2 + int(rng.integers(0, size))
        for _ in range(flips):
            board.flip(int(rng.integers(0, size)), int(rng.integers(0, size)))
        # Flips can cancel out; a puzzle must start unsolved
        if board.is_all_on():
            board.flip(int(rng.integers(0, size)), int(rng.integers(0, size)))
        return board

    @property
    def size(self) -> int:
        """Side length N."""
        return self.cells.shape[0]

    @property
    def half(self) -> int:
        """Side length of a quadrant (N/2)."""
        return self.size // 2

    def flip(self, row: int, col: int) -> None:
        """
        Toggle (row, col) and its up/down/left/right neighbours in place.

        Neighbours outside the board are skipped; there is no wraparound.
        Flipping the same cell twice restores the previous state.

        Args:
            row: Row of the flip centre
            col: Column of the flip centre
        """
        n = self.size
        for dr, dc in FLIP_OFFSETS:
            r, c = row + dr, col + dc
            if 0 <= r < n and 0 <= c < n:
                self.cells[r, c] ^= 1

    def apply(self, move: 'Move') -> None:
        """Flip at a Move's coordinates."""
        self.flip(move.row, move.col)

    def is_all_on(self, region: Optional['Region'] = None) -> bool:
        """
        Check whether every cell (or every cell of a region) is on.

        Args:
            region: Optional rectangle to restrict the check to

        Returns:
            True if no cell in scope is off
        """
        if region is None:
            return bool(np.all(self.cells == ON))
        window = self.cells[region.r1:region.r2 + 1, region.c1:region.c2 + 1]
        return bool(np.all(window == ON))

    def count_off(self) -> int:
        """Number of cells currently off."""
        return int(self.cells.size - np.count_nonzero(self.cells))

    def get_cell(self, row: int, col: int) -> int:
        """Value at (row, col)."""
        return int(self.cells[row, col])

    def copy(self) -> 'Board':
        """Value copy of this board."""
        return Board(self.cells.copy())

    def to_rows(self) -> List[List[int]]:
        """Row-major 2D list of 0/1 integers."""
        return self.cells.tolist()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool(np.array_equal(self.cells, other.cells))

    # Mutable: not usable as a dict key
    __hash__ = None

    def __repr__(self):
        return f"Board(size={self.size}, off={self.count_off()})"


def validate_size(size: int) -> None:
    """
    Check a board side length.

    Raises:
        ValueError: If size is odd or smaller than 2
    """
    if size < 2 or size % 2 != 0:
        raise ValueError(f"Board size must be an even integer >= 2, got {size}")
