"""
connect4engine.game - Core game mechanics for Connect Four

Board state, win/draw detection and the move log. The controller and the
Gymnasium environment live in connect4engine.game.rules, which also pulls in
the AI, so they are not imported here.
"""

from connect4engine.game.board import Board
from connect4engine.game.detector import evaluate, evaluate_last, winning_line
from connect4engine.game.move_log import Move, MoveLog

__all__ = ['Board', 'evaluate', 'evaluate_last', 'winning_line', 'Move', 'MoveLog']
