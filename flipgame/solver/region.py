"""
Region Module - Rectangular solving scopes and the phases that select them.

The board is partitioned with half = N/2 into four squares, two halves
and the full board. A phase names one of those seven regions; its bounds
are always derived from the board size, never stored.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .board import validate_size


@dataclass(frozen=True)
class Region:
    """
    Axis-aligned rectangle of cells, bounds inclusive.

    Attributes:
        r1: Top row
        r2: Bottom row
        c1: Left column
        c2: Right column
    """
    r1: int
    r2: int
    c1: int
    c2: int

    @property
    def width(self) -> int:
        return self.c2 - self.c1 + 1

    @property
    def height(self) -> int:
        return self.r2 - self.r1 + 1

    def contains(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies inside the rectangle."""
        return self.r1 <= row <= self.r2 and self.c1 <= col <= self.c2


SQUARE_NAMES = ("Top-Left", "Top-Right", "Bottom-Left", "Bottom-Right")
HALF_NAMES = ("Top", "Bottom")


@dataclass(frozen=True)
class Squares:
    """Working on one of the four N/2 × N/2 quadrants (0=TL, 1=TR, 2=BL, 3=BR)."""
    index: int = 0

    def __post_init__(self):
        if not 0 <= self.index < len(SQUARE_NAMES):
            raise ValueError(f"Square index must be 0..3, got {self.index}")

    def next(self) -> 'Phase':
        if self.index < len(SQUARE_NAMES) - 1:
            return Squares(self.index + 1)
        return Halves(0)

    def region(self, size: int) -> Region:
        validate_size(size)
        half = size // 2
        top = self.index < 2
        left = self.index % 2 == 0
        r1, r2 = (0, half - 1) if top else (half, size - 1)
        c1, c2 = (0, half - 1) if left else (half, size - 1)
        return Region(r1, r2, c1, c2)

    @property
    def label(self) -> str:
        return f"{SQUARE_NAMES[self.index]} square"


@dataclass(frozen=True)
class Halves:
    """Working on the top (0) or bottom (1) N/2 × N strip."""
    index: int = 0

    def __post_init__(self):
        if not 0 <= self.index < len(HALF_NAMES):
            raise ValueError(f"Half index must be 0..1, got {self.index}")

    def next(self) -> 'Phase':
        if self.index < len(HALF_NAMES) - 1:
            return Halves(self.index + 1)
        return Full()

    def region(self, size: int) -> Region:
        validate_size(size)
        half = size // 2
        if self.index == 0:
            return Region(0, half - 1, 0, size - 1)
        return Region(half, size - 1, 0, size - 1)

    @property
    def label(self) -> str:
        return f"{HALF_NAMES[self.index]} half"


@dataclass(frozen=True)
class Full:
    """Working on the whole board. Last phase; there is nothing after it."""

    def next(self) -> Optional['Phase']:
        return None

    def region(self, size: int) -> Region:
        validate_size(size)
        return Region(0, size - 1, 0, size - 1)

    @property
    def label(self) -> str:
        return "Full board"


Phase = Union[Squares, Halves, Full]

# Live planners: every square, then both halves, then the board
LINEAR_ORDER: Tuple[Phase, ...] = (
    Squares(0), Squares(1), Squares(2), Squares(3),
    Halves(0), Halves(1),
    Full(),
)

# Console solver order: each half split into its two squares, then the half
NESTED_ORDER: Tuple[Phase, ...] = (
    Squares(0), Squares(1), Halves(0),
    Squares(2), Squares(3), Halves(1),
    Full(),
)

REGION_ORDERS = {
    "linear": LINEAR_ORDER,
    "nested": NESTED_ORDER,
}


def phase_kind(phase: Phase) -> str:
    """Short name of the phase class: "squares", "halves" or "full"."""
    if isinstance(phase, Squares):
        return "squares"
    if isinstance(phase, Halves):
        return "halves"
    return "full"
