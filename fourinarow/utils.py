"""
utils.py - Constants, value types and helpers for the four-in-a-row engine

This module provides the board dimensions, the Owner enumeration, the
two-case Cell type, the Move value and the text rendering shared by the
board, the game wrapper and the interfaces.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a line needed to win

EMPTY_GLYPH = "_"


class QuitGame(Exception):
    """Raised by an interactive move provider when the user quits."""


class IllegalMoveError(Exception):
    """Raised by the game loop when a provider keeps submitting rejected moves."""


class Owner(Enum):
    """The two players. BLACK always moves first."""
    BLACK = 1
    WHITE = 2

    def opponent(self) -> 'Owner':
        """Get the other player."""
        return Owner.WHITE if self is Owner.BLACK else Owner.BLACK

    @property
    def glyph(self) -> str:
        return "●" if self is Owner.BLACK else "○"

    def __str__(self):
        return self.glyph


class Empty:
    """An unoccupied cell. ``EMPTY`` is the only instance."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def taken(self) -> bool:
        return False

    def __repr__(self):
        return "EMPTY"

    def __str__(self):
        return EMPTY_GLYPH

    def __reduce__(self):
        return (Empty, ())


EMPTY = Empty()


@dataclass(frozen=True)
class Occupied:
    """A cell holding one owner's piece."""
    owner: Owner

    @property
    def taken(self) -> bool:
        return True

    def __str__(self):
        return self.owner.glyph


Cell = Union[Empty, Occupied]


@dataclass(frozen=True)
class Move:
    """
    A column to drop a piece into, tagged with the owner of the piece.

    Only in-range columns can be represented; use ``Move.create`` to get
    ``None`` instead of an exception for a bad column.
    """
    owner: Owner
    column: int

    def __post_init__(self):
        if not is_valid_column(self.column):
            raise ValueError(f"Column {self.column} out of range 0..{COLS - 1}")

    @classmethod
    def create(cls, owner: Owner, column: int) -> Optional['Move']:
        """Build a move, or return None when the column is off the board."""
        if not is_valid_column(column):
            return None
        return cls(owner, column)

    def __str__(self):
        return str(self.column + 1)


def is_valid_column(column: int) -> bool:
    """Check if a column index lies on the board."""
    return (isinstance(column, (int, np.integer)) and not isinstance(column, bool)
            and 0 <= column < COLS)


def encode_cell(cell: Cell) -> int:
    """Numeric code of a cell: 0 for empty, otherwise the owner value."""
    return cell.owner.value if cell.taken else 0


def render_grid(grid: np.ndarray) -> str:
    """
    Render a grid of cells as a bordered text box.

    Column headers are 1-based and the top row is printed first.

    Args:
        grid: ROWS x COLS array of cells, row 0 at the bottom

    Returns:
        Multi-line string representation of the grid
    """
    rows, cols = grid.shape
    rule = "─" * (2 * cols + 1)

    lines = [f"┌{rule}┐"]
    lines.append("│" + "".join(f" {i + 1}" for i in range(cols)) + " │")
    lines.append(f"├{rule}┤")
    for row in range(rows - 1, -1, -1):
        lines.append("│" + "".join(f" {grid[row, col]}" for col in range(cols)) + " │")
    lines.append(f"└{rule}┘")

    return "\n".join(lines)
