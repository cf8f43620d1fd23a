"""
heuristic.py - Rule-based Connect Four opponent

The HeuristicPlayer does not search. It looks one disc ahead and applies a
fixed list of rules, taking the first one that yields a legal column:

1. Win now if any column completes a line for us
2. Block any column where the opponent would complete a line
3. Otherwise prefer central columns, which take part in more lines
4. Failing that, the lowest legal column
"""

from typing import List, Optional

from connect4engine.debug import debug
from connect4engine.errors import NoLegalMove
from connect4engine.game.board import Board
from connect4engine.game.detector import check_win_at_position
from connect4engine.utils import PREFERENCE_ORDER, Side


class HeuristicPlayer:
    """
    A Connect Four player driven by win/block/center rules.

    The board passed in is never modified; candidate moves are tried on a
    scratch copy and taken back again.
    """

    RULE_WIN = "win"
    RULE_BLOCK = "block"
    RULE_PREFERENCE = "preference"
    RULE_FALLBACK = "fallback"

    def __init__(self, preference_order: Optional[List[int]] = None):
        if preference_order is None:
            preference_order = PREFERENCE_ORDER
        self.preference_order = list(preference_order)
        self.last_rule: Optional[str] = None

    def choose_column(self, board: Board, side: Side) -> int:
        """
        Pick a column for ``side`` to play.

        Args:
            board: Current position
            side: The side the AI is playing

        Returns:
            A legal column index

        Raises:
            NoLegalMove: if the board is full
        """
        legal = board.get_valid_moves()
        if not legal:
            raise NoLegalMove()

        scratch = board.copy()

        col = self._find_winning_column(scratch, legal, side)
        if col is not None:
            return self._decide(col, self.RULE_WIN, side)

        col = self._find_winning_column(scratch, legal, side.other())
        if col is not None:
            return self._decide(col, self.RULE_BLOCK, side)

        for col in self.preference_order:
            if col in legal:
                return self._decide(col, self.RULE_PREFERENCE, side)

        return self._decide(min(legal), self.RULE_FALLBACK, side)

    def _find_winning_column(self, scratch: Board, legal: List[int], side: Side) -> Optional[int]:
        """First column, ascending, where ``side`` would complete a line."""
        for col in legal:
            row = scratch.landing_row(col)
            scratch.place(row, col, side)
            try:
                wins = check_win_at_position(scratch, row, col, side)
            finally:
                scratch.clear(row, col)
            if wins:
                return col
        return None

    def _decide(self, col: int, rule: str, side: Side) -> int:
        self.last_rule = rule
        debug.debug(f"{side} plays column {col} ({rule})", "ai")
        return col


def choose_column(board: Board, side: Side) -> int:
    """Pick a column for ``side`` with a default HeuristicPlayer."""
    return HeuristicPlayer().choose_column(board, side)
