"""
connect4engine - Connect Four game engine with a heuristic computer opponent

This package provides the board, win and draw detection, move history with
undo, a turn-keeping game controller, a rule-based AI, and thin text and
Gymnasium front ends that drive the controller.
"""

__version__ = '0.1.0'

from connect4engine.errors import (EngineError, InvalidColumn, ColumnFull, GameOver,
                                   NothingToUndo, NoLegalMove)
from connect4engine.utils import ROWS, COLS, CONNECT_N, Cell, GameStatus, Side
from connect4engine.game.rules import GameController, GameState, MoveResult, UndoResult

__all__ = [
    'EngineError', 'InvalidColumn', 'ColumnFull', 'GameOver', 'NothingToUndo', 'NoLegalMove',
    'ROWS', 'COLS', 'CONNECT_N', 'Cell', 'GameStatus', 'Side',
    'GameController', 'GameState', 'MoveResult', 'UndoResult',
]
