"""
board.py - Board representation and core game mechanics

This module implements the Board class which owns the grid of cells,
drops pieces by gravity, lists legal moves and detects wins and draws by
scanning every row, column and diagonal.
"""

from typing import Iterable, List, Optional, Tuple

import numpy as np

from fourinarow.debug import debug
from fourinarow.game.lines import LINES, Coord, find_winning_window
from fourinarow.utils import (ROWS, COLS, EMPTY, EMPTY_GLYPH, Cell, Move, Occupied,
                              Owner, encode_cell, render_grid)

# Characters accepted by Board.from_rows
_ROW_CHARS = {
    "X": Occupied(Owner.BLACK),
    Owner.BLACK.glyph: Occupied(Owner.BLACK),
    "O": Occupied(Owner.WHITE),
    Owner.WHITE.glyph: Occupied(Owner.WHITE),
    ".": EMPTY,
    EMPTY_GLYPH: EMPTY,
}


class Board:
    """
    A four-in-a-row board.

    Rows are indexed from the bottom (0) to the top (ROWS - 1). The board
    is agnostic to turn order: it will drop either owner's piece.
    """

    def __init__(self):
        """Initialize an empty board."""
        debug.trace("Initializing new Board", "board")
        self.grid = np.full((ROWS, COLS), EMPTY, dtype=object)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> 'Board':
        """
        Build a board from text rows, top row first.

        'X' or '●' is a black piece, 'O' or '○' a white piece and '.' or
        '_' an empty cell. Whitespace inside a row is ignored.

        Raises:
            ValueError: If the shape is wrong, a character is unknown or a
                piece is floating above an empty cell
        """
        rows = ["".join(row.split()) for row in rows]
        if len(rows) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(rows)}")

        board = cls()
        for i, text in enumerate(rows):
            if len(text) != COLS:
                raise ValueError(f"Row {i + 1} must have {COLS} cells, got {len(text)}")
            row = ROWS - 1 - i
            for col, char in enumerate(text.upper()):
                if char not in _ROW_CHARS:
                    raise ValueError(f"Unknown cell character {char!r} in row {i + 1}")
                board.grid[row, col] = _ROW_CHARS[char]

        for col in range(COLS):
            height = board.column_height(col)
            if any(board.grid[row, col].taken for row in range(height, ROWS)):
                raise ValueError(f"Column {col + 1} has a piece above an empty cell")

        return board

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Cells are immutable values so a shallow array copy is enough.
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row, col]

    def column_height(self, column: int) -> int:
        """Number of pieces currently in a column."""
        for row in range(ROWS):
            if not self.grid[row, column].taken:
                return row
        return ROWS

    def is_column_full(self, column: int) -> bool:
        return self.grid[ROWS - 1, column].taken

    def is_full(self) -> bool:
        """Check if the top row is completely occupied."""
        return all(self.is_column_full(col) for col in range(COLS))

    def legal_moves(self, owner: Owner) -> List[Move]:
        """
        Get one move per column that still has room, in column order.

        Args:
            owner: Owner attached to every produced move

        Returns:
            List of moves, at most COLS long
        """
        return [Move(owner, col) for col in range(COLS) if not self.is_column_full(col)]

    def apply(self, move: Move) -> bool:
        """
        Drop a piece into the move's column.

        Args:
            move: The move to apply

        Returns:
            True if the piece landed, False if the column was full
        """
        column = move.column
        for row in range(ROWS):
            if not self.grid[row, column].taken:
                self.grid[row, column] = Occupied(move.owner)
                debug.trace(f"Placed {move.owner.name} at ({row}, {column})", "board")
                return True

        debug.debug(f"Column {column} is full, {move.owner.name} piece rejected", "board")
        return False

    def _winning_window(self) -> Optional[Tuple[Owner, Tuple[Coord, ...]]]:
        return find_winning_window(LINES, self.cell)

    def winner(self) -> Optional[Owner]:
        """
        Get the owner with four in a line, if any.

        Returns:
            The winning owner, or None while nobody has won
        """
        found = self._winning_window()
        return found[0] if found else None

    def winning_line(self) -> List[Coord]:
        """
        Get the (row, col) cells of the winning window.

        Returns:
            List of coordinates, or an empty list if there is no winner
        """
        found = self._winning_window()
        return list(found[1]) if found else []

    def is_over(self) -> bool:
        """Check if the board is full or someone has won."""
        return self.is_full() or self.winner() is not None

    def move_count(self) -> int:
        return sum(self.column_height(col) for col in range(COLS))

    def get_state(self) -> np.ndarray:
        """
        Get the board as integer codes.

        Returns:
            ROWS x COLS int8 array (0 empty, 1 black, 2 white), row 0 at the bottom
        """
        return np.vectorize(encode_cell, otypes=[np.int8])(self.grid)

    def render(self) -> str:
        return render_grid(self.grid)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    __hash__ = None
