"""
errors.py - Failures reported by the Connect Four engine

Every failure is local and recoverable by the caller; none of them should
take the host application down.
"""

from typing import Optional

from connect4engine.utils import COLS, GameStatus


class EngineError(Exception):
    """Base class for all engine failures."""


class InvalidColumn(EngineError, ValueError):
    """Column index outside 0..COLS-1."""

    def __init__(self, column):
        self.column = column
        super().__init__(f"Column must be between 0 and {COLS - 1}, got {column!r}")


class ColumnFull(EngineError):
    """The column has no empty cell left. Try another column."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class GameOver(EngineError):
    """A move was attempted after the game reached a terminal state."""

    def __init__(self, status: Optional[GameStatus] = None):
        self.status = status
        detail = f" ({status.name})" if status is not None else ""
        super().__init__(f"Game is over{detail}; reset or undo to continue")


class NothingToUndo(EngineError):
    """Undo was requested with an empty move log."""

    def __init__(self):
        super().__init__("No moves to undo")


class NoLegalMove(EngineError, RuntimeError):
    """The AI was asked for a move on a full board. Indicates a caller bug."""

    def __init__(self):
        super().__init__("No legal move: the board is full")
