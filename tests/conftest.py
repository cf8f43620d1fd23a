import pytest

from connect4engine.game.board import Board
from connect4engine.game.rules import GameController
from connect4engine.utils import ROWS, COLS, Side

# Alternating moves that fill the board without ever making four in a line.
# The finished board follows the pattern side = (col // 2 + row) % 2.
DRAW_SEQUENCE = [2] + [0] * 6 + [1] * 6 + [4] * 6 + [5] * 6 + [2] * 5 + [3] * 6 + [6] * 6


def _pattern_side(row, col):
    return Side.FIRST if (col // 2 + row) % 2 == 0 else Side.SECOND


@pytest.fixture
def draw_sequence():
    return list(DRAW_SEQUENCE)


@pytest.fixture
def full_draw_board():
    board = Board()
    for row in range(ROWS):
        for col in range(COLS):
            board.place(row, col, _pattern_side(row, col))
    return board


@pytest.fixture
def controller():
    return GameController()


@pytest.fixture
def play():
    def _play(game, columns):
        return [game.apply_move(col) for col in columns]
    return _play
