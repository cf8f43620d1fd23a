"""
utils.py - Constants, enumerations and helpers shared by the engine

Sides, cell values and game outcomes live here together with the board
geometry, so every other module agrees on how a grid of ints is read.
"""

from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import numpy as np

# Board geometry
ROWS = 6
COLS = 7
CONNECT_N = 4  # Discs in a line needed to win


def _preference_order(cols: int) -> List[int]:
    """Center column first, then alternating left/right outward."""
    center = cols // 2
    order = [center]
    for offset in range(1, cols):
        for col in (center - offset, center + offset):
            if 0 <= col < cols:
                order.append(col)
    return order


# Column order the heuristic AI falls back to: [3, 2, 4, 1, 5, 0, 6]
PREFERENCE_ORDER = _preference_order(COLS)


class Side(Enum):
    """One of the two players."""
    FIRST = 1
    SECOND = 2

    def other(self) -> 'Side':
        return Side.SECOND if self == Side.FIRST else Side.FIRST

    @classmethod
    def from_string(cls, text: str) -> 'Side':
        """Parse 'first'/'second' or the disc symbols 'x'/'o'."""
        key = text.strip().lower()
        if key in ('first', '1', 'x'):
            return cls.FIRST
        if key in ('second', '2', 'o'):
            return cls.SECOND
        raise ValueError(f"Unknown side: {text!r}")

    def __str__(self):
        return "X" if self == Side.FIRST else "O"


class Cell(Enum):
    """Contents of a single board cell. Values match Side values."""
    EMPTY = 0
    FIRST = 1
    SECOND = 2

    @classmethod
    def of(cls, side: Side) -> 'Cell':
        return cls(side.value)

    @property
    def side(self) -> Optional[Side]:
        if self == Cell.EMPTY:
            return None
        return Side(self.value)

    def __str__(self):
        if self == Cell.EMPTY:
            return "."
        return str(self.side)


class GameStatus(Enum):
    """Outcome of a game so far."""
    IN_PROGRESS = auto()
    FIRST_WIN = auto()
    SECOND_WIN = auto()
    DRAW = auto()

    @classmethod
    def won_by(cls, side: Side) -> 'GameStatus':
        return cls.FIRST_WIN if side == Side.FIRST else cls.SECOND_WIN

    @property
    def winner(self) -> Optional[Side]:
        if self == GameStatus.FIRST_WIN:
            return Side.FIRST
        if self == GameStatus.SECOND_WIN:
            return Side.SECOND
        return None

    def is_game_over(self) -> bool:
        return self != GameStatus.IN_PROGRESS


class Direction(Enum):
    """Axes a line of discs can run along."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()    # bottom-left to top-right
    DIAGONAL_DOWN = auto()  # top-left to bottom-right


DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
}


def is_valid_position(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid of cell values as ASCII art.

    Args:
        grid: ROWS x COLS array of Cell values

    Returns:
        Multi-line string with column numbers underneath
    """
    border = "|" + "-" * (COLS * 2 - 1) + "|"
    lines = [border]
    for row in range(ROWS):
        cells = []
        for col in range(COLS):
            value = int(grid[row, col])
            cells.append(" " if value == Cell.EMPTY.value else str(Side(value)))
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)
    lines.append("|" + " ".join(str(col) for col in range(COLS)) + "|")
    return "\n".join(lines)
