"""
lines.py - Line enumeration and window scanning for win detection

A line is a maximal straight run of board coordinates (a row, a column or
a diagonal). Lines are plain tuples of (row, col) pairs so the scan does
not depend on how the grid is stored.
"""

from enum import Enum
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from fourinarow.utils import ROWS, COLS, CONNECT_N, Cell, Owner

Coord = Tuple[int, int]
Line = Tuple[Coord, ...]


class Direction(Enum):
    """Directions a line can run in, as (row step, col step)."""
    HORIZONTAL = (0, 1)
    VERTICAL = (1, 0)
    DIAGONAL_UP_RIGHT = (1, 1)
    DIAGONAL_UP_LEFT = (1, -1)


def _walk(row: int, col: int, direction: Direction, rows: int, cols: int) -> Line:
    dr, dc = direction.value
    cells = []
    while 0 <= row < rows and 0 <= col < cols:
        cells.append((row, col))
        row += dr
        col += dc
    return tuple(cells)


def _anchors(direction: Direction, rows: int, cols: int) -> List[Coord]:
    """Starting cells such that every line in ``direction`` starts exactly once."""
    if direction is Direction.HORIZONTAL:
        return [(row, 0) for row in range(rows)]
    if direction is Direction.VERTICAL:
        return [(0, col) for col in range(cols)]
    if direction is Direction.DIAGONAL_UP_RIGHT:
        # Bottom row, then the left edge above it
        return [(0, col) for col in range(cols)] + [(row, 0) for row in range(1, rows)]
    # Bottom row, then the right edge above it
    return [(0, col) for col in range(cols)] + [(row, cols - 1) for row in range(1, rows)]


def board_lines(rows: int = ROWS, cols: int = COLS) -> List[Line]:
    """
    Enumerate every maximal line of a rows x cols grid.

    Order is fixed: all rows, all columns, up-right diagonals, then
    up-left diagonals. Diagonals of any length (down to a single corner
    cell) are included; callers filter by length.
    """
    lines = []
    for direction in Direction:
        for row, col in _anchors(direction, rows, cols):
            lines.append(_walk(row, col, direction, rows, cols))
    return lines


def scannable_lines(rows: int = ROWS, cols: int = COLS, length: int = CONNECT_N) -> List[Line]:
    """Lines long enough to hold a winning window."""
    return [line for line in board_lines(rows, cols) if len(line) >= length]


def windows(line: Sequence[Coord], length: int = CONNECT_N) -> Iterator[Tuple[Coord, ...]]:
    """Yield every run of ``length`` consecutive coordinates of a line."""
    for start in range(len(line) - length + 1):
        yield tuple(line[start:start + length])


def window_owner(cells: Sequence[Cell]) -> Optional[Owner]:
    """
    Owner of a window when every cell holds that owner's piece.

    A window with any empty cell or with mixed owners yields None.
    """
    distinct = set(cells)
    if len(distinct) != 1:
        return None
    cell = distinct.pop()
    return cell.owner if cell.taken else None


def find_winning_window(lines: Sequence[Line], cell_at: Callable[[int, int], Cell],
                        length: int = CONNECT_N) -> Optional[Tuple[Owner, Tuple[Coord, ...]]]:
    """
    Scan lines in order and return the first winning window.

    Args:
        lines: Lines to scan, each at least ``length`` long
        cell_at: Lookup from (row, col) to the cell stored there
        length: Window size

    Returns:
        (owner, window coordinates) of the first win, or None
    """
    for line in lines:
        for window in windows(line, length):
            owner = window_owner([cell_at(row, col) for row, col in window])
            if owner is not None:
                return owner, window
    return None


# Precomputed once for the fixed board size
LINES: List[Line] = scannable_lines()
