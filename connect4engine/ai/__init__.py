"""
connect4engine.ai - Computer opponents for Connect Four
"""

from connect4engine.ai.heuristic import HeuristicPlayer, choose_column

__all__ = ['HeuristicPlayer', 'choose_column']
