"""
Text I/O Module - Board <-> plain-text 0/1 grid, for console drivers.

Format: a line holding the board size N, then N lines of N
space-separated 0/1 values, row-major. Blank lines are ignored when
reading. Writing produces one row per line.
"""

from typing import IO, List

from .solver import Board, validate_size


def parse_board(text: str) -> Board:
    """
    Parse a size line "N" followed by N rows of N 0/1 values.

    Args:
        text: Board text

    Returns:
        Parsed Board

    Raises:
        ValueError: On a missing or invalid size, the wrong number of rows,
            a row of the wrong width, or a value other than 0/1
    """
    lines = [line.split() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("Board text is empty")

    header = lines[0]
    if len(header) != 1:
        raise ValueError(f"First line must hold only the board size, got {' '.join(header)!r}")
    try:
        size = int(header[0])
    except ValueError:
        raise ValueError(f"Board size must be an integer, got {header[0]!r}")
    validate_size(size)

    rows = lines[1:]
    if len(rows) != size:
        raise ValueError(f"Expected {size} rows for a {size}x{size} board, got {len(rows)}")

    cells: List[List[int]] = []
    for index, row in enumerate(rows):
        if len(row) != size:
            raise ValueError(f"Row {index} has {len(row)} values, expected {size}")
        for token in row:
            if token not in ("0", "1"):
                raise ValueError(f"Cell values must be 0 or 1, got {token!r}")
        cells.append([int(token) for token in row])

    return Board.from_rows(cells)


def format_board(board: Board) -> str:
    """
    Render a board as N lines of space-separated 0/1 values.

    Args:
        board: Board to render

    Returns:
        Text without the size line, terminated by a newline
    """
    return "".join(" ".join(str(v) for v in row) + "\n" for row in board.to_rows())


def read_board(stream: IO[str]) -> Board:
    """Read a whole board (size line included) from a text stream."""
    return parse_board(stream.read())


def write_board(board: Board, stream: IO[str], include_size: bool = False) -> None:
    """
    Write a board to a text stream.

    Args:
        board: Board to write
        stream: Destination
        include_size: Prefix the size line so the output can be read back
    """
    if include_size:
        stream.write(f"{board.size}\n")
    stream.write(format_board(board))
