"""
move_log.py - Ordered record of applied moves

The log doubles as the undo stack: the last recorded move is the first one
taken back.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from connect4engine.utils import Side


@dataclass(frozen=True)
class Move:
    """The exact cell written and by whom."""
    row: int
    col: int
    side: Side


class MoveLog:
    def __init__(self):
        self._moves: List[Move] = []

    def record(self, move: Move) -> None:
        self._moves.append(move)

    def undo_one(self) -> Optional[Move]:
        """Remove and return the most recent move, or None if the log is empty."""
        if not self._moves:
            return None
        return self._moves.pop()

    def last(self) -> Optional[Move]:
        return self._moves[-1] if self._moves else None

    def clear(self) -> None:
        self._moves.clear()

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(tuple(self._moves))

    def __repr__(self) -> str:
        return f"MoveLog({self._moves!r})"
