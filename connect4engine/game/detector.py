"""
detector.py - Win and draw detection for Connect Four

A new line of four can only appear through the disc just placed, so every
check here scans outward from a single cell instead of the whole board.
"""

from typing import List, Optional, Tuple

from connect4engine.debug import debug
from connect4engine.game.board import Board
from connect4engine.game.move_log import Move
from connect4engine.utils import CONNECT_N, DIRECTION_VECTORS, GameStatus, Side, is_valid_position

Coord = Tuple[int, int]


def _run(board: Board, row: int, col: int, dr: int, dc: int, value: int) -> List[Coord]:
    """Cells holding ``value`` walking from (row, col) in one direction, exclusive."""
    cells = []
    r, c = row + dr, col + dc
    while is_valid_position(r, c) and board.grid[r, c] == value:
        cells.append((r, c))
        r += dr
        c += dc
    return cells


def _line_through(board: Board, row: int, col: int, value: int) -> List[Coord]:
    for dr, dc in DIRECTION_VECTORS.values():
        backward = _run(board, row, col, -dr, -dc, value)
        forward = _run(board, row, col, dr, dc, value)
        if 1 + len(backward) + len(forward) >= CONNECT_N:
            return list(reversed(backward)) + [(row, col)] + forward
    return []


def check_win_at_position(board: Board, row: int, col: int, side: Side) -> bool:
    """
    Check whether ``side`` has CONNECT_N in a line through (row, col).

    The cell itself counts as one of the line regardless of its contents,
    which lets callers test a hypothetical placement.
    """
    for dr, dc in DIRECTION_VECTORS.values():
        count = 1
        count += len(_run(board, row, col, dr, dc, side.value))
        count += len(_run(board, row, col, -dr, -dc, side.value))
        if count >= CONNECT_N:
            return True
    return False


def evaluate(board: Board, last_row: int, last_col: int, last_side: Side) -> GameStatus:
    """
    Classify the board after ``last_side`` placed a disc at (last_row, last_col).

    Returns:
        ``GameStatus.won_by(last_side)`` if that disc completes a line,
        DRAW if the board is then full, IN_PROGRESS otherwise
    """
    if check_win_at_position(board, last_row, last_col, last_side):
        debug.debug(f"{last_side} completes a line at ({last_row}, {last_col})", "detector")
        return GameStatus.won_by(last_side)

    if board.is_full():
        debug.debug("Board is full with no line", "detector")
        return GameStatus.DRAW

    return GameStatus.IN_PROGRESS


def evaluate_last(board: Board, move: Optional[Move]) -> GameStatus:
    """Classify the board given its most recent move, or None for no moves yet."""
    if move is None:
        return GameStatus.IN_PROGRESS
    return evaluate(board, move.row, move.col, move.side)


def winning_line(board: Board, row: int, col: int) -> List[Coord]:
    """
    Cells of a completed line through the disc at (row, col).

    Returns:
        (row, col) pairs ordered along the line, or an empty list if the cell
        is empty or not part of a line
    """
    side = board.cell_at(row, col).side
    if side is None:
        return []
    return _line_through(board, row, col, side.value)
