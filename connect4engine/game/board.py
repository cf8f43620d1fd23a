"""
board.py - Board representation for Connect Four

The Board is a plain state container: a ROWS x COLS grid of cell values with
row 0 at the top. It answers where a disc would land and writes or clears
single cells. Rules, turn order and history live in the controller.
"""

from typing import List, Optional, Sequence

import numpy as np

from connect4engine.debug import debug
from connect4engine.errors import InvalidColumn
from connect4engine.utils import ROWS, COLS, Cell, Side, is_valid_position, render_board_ascii


class Board:
    """
    A Connect Four grid.

    Gameplay only ever writes at ``landing_row(col)``, so the occupied cells
    of each column stay a contiguous block resting on the bottom row.
    """

    def __init__(self):
        self.grid = np.zeros((ROWS, COLS), dtype=int)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from text rows, top row first.

        Each row holds COLS characters: 'X' for the first side, 'O' for the
        second and '.' for an empty cell. Whitespace is ignored.
        """
        if len(rows) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(rows)}")

        board = cls()
        symbols = {'.': Cell.EMPTY, 'X': Cell.FIRST, 'O': Cell.SECOND}
        for row, text in enumerate(rows):
            chars = "".join(text.split()).upper()
            if len(chars) != COLS:
                raise ValueError(f"Row {row} must have {COLS} cells: {text!r}")
            for col, char in enumerate(chars):
                if char not in symbols:
                    raise ValueError(f"Unknown cell symbol {char!r} in row {row}")
                board.grid[row, col] = symbols[char].value
        return board

    @classmethod
    def from_values(cls, values: Sequence[int]) -> 'Board':
        """Build a board from ROWS * COLS cell values in row-major order."""
        if len(values) != ROWS * COLS:
            raise ValueError(f"Position must have {ROWS * COLS} values, got {len(values)}")

        allowed = {cell.value for cell in Cell}
        if any(int(v) not in allowed for v in values):
            raise ValueError(f"Cell values must be one of {sorted(allowed)}")

        board = cls()
        board.grid = np.array(values, dtype=int).reshape(ROWS, COLS)
        return board

    def copy(self) -> 'Board':
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def _check_column(self, col: int) -> int:
        if isinstance(col, bool) or not isinstance(col, (int, np.integer)):
            raise InvalidColumn(col)
        if not (0 <= col < COLS):
            raise InvalidColumn(col)
        return int(col)

    def landing_row(self, col: int) -> Optional[int]:
        """
        Find where a disc dropped into ``col`` would settle.

        Returns:
            The lowest empty row of the column, or None if it is full

        Raises:
            InvalidColumn: if ``col`` is outside the board
        """
        col = self._check_column(col)
        for row in range(ROWS - 1, -1, -1):
            if self.grid[row, col] == Cell.EMPTY.value:
                return row
        return None

    def place(self, row: int, col: int, side: Side) -> None:
        """Write ``side`` into an empty cell."""
        if not is_valid_position(row, col):
            raise ValueError(f"Position ({row}, {col}) is off the board")
        if self.grid[row, col] != Cell.EMPTY.value:
            raise ValueError(f"Cell ({row}, {col}) is already occupied")

        debug.trace(f"Placing {side} at ({row}, {col})", "board")
        self.grid[row, col] = Cell.of(side).value

    def clear(self, row: int, col: int) -> None:
        """Reset a cell to empty."""
        if not is_valid_position(row, col):
            raise ValueError(f"Position ({row}, {col}) is off the board")

        debug.trace(f"Clearing ({row}, {col})", "board")
        self.grid[row, col] = Cell.EMPTY.value

    def cell_at(self, row: int, col: int) -> Cell:
        if not is_valid_position(row, col):
            raise ValueError(f"Position ({row}, {col}) is off the board")
        return Cell(int(self.grid[row, col]))

    def is_full(self) -> bool:
        # The top row fills last in every column.
        return bool(np.all(self.grid[0] != Cell.EMPTY.value))

    def is_valid_move(self, col: int) -> bool:
        try:
            return self.landing_row(col) is not None
        except InvalidColumn:
            return False

    def get_valid_moves(self) -> List[int]:
        return [col for col in range(COLS) if self.grid[0, col] == Cell.EMPTY.value]

    def move_count(self) -> int:
        return int(np.count_nonzero(self.grid != Cell.EMPTY.value))

    def has_gravity_consistency(self) -> bool:
        """Check that no occupied cell sits above an empty one."""
        occupied = self.grid != Cell.EMPTY.value
        # Any empty cell directly below an occupied one breaks the invariant.
        floating = occupied[:-1, :] & ~occupied[1:, :]
        return not bool(np.any(floating))

    def get_state(self) -> np.ndarray:
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        return self.render()
