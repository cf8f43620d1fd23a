"""
rules.py - Game control and Gymnasium environment for Connect Four

This module provides:
1. GameController, which owns turn order, move history, undo and game status
2. A gymnasium-compatible environment where an agent plays the heuristic AI
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4engine.ai.heuristic import HeuristicPlayer
from connect4engine.debug import debug, DebugLevel
from connect4engine.errors import ColumnFull, GameOver, InvalidColumn, NoLegalMove, NothingToUndo
from connect4engine.game.board import Board
from connect4engine.game.detector import evaluate, winning_line
from connect4engine.game.move_log import Move, MoveLog
from connect4engine.utils import ROWS, COLS, Cell, GameStatus, Side


@dataclass
class GameState:
    """Everything that makes up one game. Replaced wholesale on reset."""
    board: Board = field(default_factory=Board)
    side_to_move: Side = Side.FIRST
    move_log: MoveLog = field(default_factory=MoveLog)
    status: GameStatus = GameStatus.IN_PROGRESS
    ai_enabled: bool = False
    ai_side: Side = Side.SECOND


@dataclass(frozen=True)
class MoveResult:
    row: int
    col: int
    side: Side
    status: GameStatus
    side_to_move: Side


@dataclass(frozen=True)
class UndoResult:
    reverted: Tuple[Move, ...]  # most recent first
    status: GameStatus
    side_to_move: Side

    @property
    def move(self) -> Move:
        return self.reverted[0]


class GameController:
    """
    High-level Connect Four game manager.

    The controller applies moves, keeps the move log, derives the game status
    and reports whose turn it is. It never plays the AI's move by itself: when
    ``is_ai_turn()`` is true the caller asks ``choose_column()`` and feeds the
    answer back into ``apply_move()`` on its own schedule.
    """

    def __init__(self, ai_enabled: bool = False, ai_side: Side = Side.SECOND,
                 first_side: Side = Side.FIRST, ai_player: Optional[HeuristicPlayer] = None):
        debug.debug("Initializing GameController", "game")
        self.first_side = first_side
        self.ai_player = ai_player or HeuristicPlayer()
        self.state = GameState(side_to_move=first_side, ai_enabled=ai_enabled, ai_side=ai_side)

    def reset(self) -> GameState:
        """Start a new game, keeping the AI configuration."""
        debug.debug("Resetting game", "game")
        self.state = GameState(
            side_to_move=self.first_side,
            ai_enabled=self.state.ai_enabled,
            ai_side=self.state.ai_side,
        )
        return self.state

    def apply_move(self, col: int) -> MoveResult:
        """
        Drop a disc for the side to move.

        Args:
            col: Column to drop into (0-indexed)

        Returns:
            The written cell, the resulting status and the next side to move

        Raises:
            GameOver: if the game has already been won or drawn
            InvalidColumn: if ``col`` is outside the board
            ColumnFull: if the column has no empty cell
        """
        state = self.state
        if state.status.is_game_over():
            raise GameOver(state.status)

        row = state.board.landing_row(col)
        if row is None:
            debug.debug(f"Rejected move: column {col} is full", "game")
            raise ColumnFull(col)

        col = int(col)
        side = state.side_to_move
        state.board.place(row, col, side)
        move = Move(row, col, side)
        state.move_log.record(move)

        debug.start_timer("win_check")
        state.status = evaluate(state.board, row, col, side)
        debug.end_timer("win_check", "game")

        if state.status.is_game_over():
            debug.info(f"Game over after {side} at ({row}, {col}): {state.status.name}", "game")
        else:
            state.side_to_move = side.other()

        debug.debug(f"{side} played ({row}, {col}); {state.side_to_move} to move", "game")
        return MoveResult(row, col, side, state.status, state.side_to_move)

    def undo_one(self) -> UndoResult:
        """
        Take back the last move.

        When playing against the AI, an undo that would leave the AI to move
        also takes back the move before it, returning control to the human.
        Undo after a win or draw is allowed and resumes play.

        Raises:
            NothingToUndo: if no moves have been made
        """
        state = self.state
        reverted = [self._pop_move()]

        if state.ai_enabled and state.side_to_move == state.ai_side and len(state.move_log):
            reverted.append(self._pop_move())

        # Only non-terminal positions are ever extended, so any undo lands on one.
        state.status = GameStatus.IN_PROGRESS
        debug.debug(f"Undid {len(reverted)} move(s); {state.side_to_move} to move", "game")
        return UndoResult(tuple(reverted), state.status, state.side_to_move)

    def _pop_move(self) -> Move:
        move = self.state.move_log.undo_one()
        if move is None:
            raise NothingToUndo()
        self.state.board.clear(move.row, move.col)
        self.state.side_to_move = move.side
        return move

    def choose_column(self, side: Optional[Side] = None) -> int:
        """
        Ask the heuristic AI for a column.

        Args:
            side: Side to choose for; defaults to the side to move

        Raises:
            NoLegalMove: if the board is full
        """
        side = side or self.state.side_to_move
        try:
            return self.ai_player.choose_column(self.state.board, side)
        except NoLegalMove:
            debug.error("AI asked to move on a full board", "game")
            raise

    def set_ai(self, enabled: bool, side: Optional[Side] = None) -> None:
        """Turn the computer opponent on or off, optionally choosing its side."""
        self.state.ai_enabled = enabled
        if side is not None:
            self.state.ai_side = side
        debug.info(f"AI {'enabled' if enabled else 'disabled'} as {self.state.ai_side}", "game")

    def switch_ai_side(self) -> Side:
        self.state.ai_side = self.state.ai_side.other()
        debug.info(f"AI now plays {self.state.ai_side}", "game")
        return self.state.ai_side

    def cell_at(self, row: int, col: int) -> Cell:
        return self.state.board.cell_at(row, col)

    def status(self) -> GameStatus:
        return self.state.status

    def side_to_move(self) -> Side:
        return self.state.side_to_move

    def is_ai_enabled(self) -> bool:
        return self.state.ai_enabled

    def ai_side(self) -> Side:
        return self.state.ai_side

    def is_ai_turn(self) -> bool:
        state = self.state
        return (state.ai_enabled and not state.status.is_game_over()
                and state.side_to_move == state.ai_side)

    def is_game_over(self) -> bool:
        return self.state.status.is_game_over()

    def get_winner(self) -> Optional[Side]:
        return self.state.status.winner

    def get_valid_moves(self) -> List[int]:
        if self.state.status.is_game_over():
            return []
        return self.state.board.get_valid_moves()

    def last_move(self) -> Optional[Move]:
        return self.state.move_log.last()

    def moves(self) -> Tuple[Move, ...]:
        return tuple(self.state.move_log)

    def winning_line(self) -> List[Tuple[int, int]]:
        """Cells of the completed line if the game was won, else empty."""
        last = self.last_move()
        if last is None or self.state.status.winner is None:
            return []
        return winning_line(self.state.board, last.row, last.col)

    def board_snapshot(self) -> Board:
        return self.state.board.copy()

    def status_message(self) -> str:
        """One-line status suitable for a status bar."""
        state = self.state
        if state.status == GameStatus.DRAW:
            return "It's a draw!"
        if state.status.winner is not None:
            return f"{state.status.winner} wins!"

        side = state.side_to_move
        if state.ai_enabled:
            who = "Computer" if side == state.ai_side else "You"
            return f"{side}'s turn ({who})"
        player_number = 1 if side == Side.FIRST else 2
        return f"{side}'s turn (Player {player_number})"

    def render(self) -> str:
        return self.state.board.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    The agent plays ``agent_side``; the heuristic AI answers every agent move
    and opens the game when the agent plays second.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, agent_side: Side = Side.FIRST, render_mode: Optional[str] = None):
        debug.debug("Initializing ConnectFourEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(low=0, high=2, shape=(ROWS, COLS), dtype=np.int8)

        self.agent_side = agent_side
        self.render_mode = render_mode
        self.game = GameController(ai_enabled=True, ai_side=agent_side.other())

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.game.reset()
        if self.game.is_ai_turn():
            self._opponent_move()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play the agent's move, then the opponent's reply.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        if self.game.is_game_over():
            raise GameOver(self.game.status())

        try:
            self.game.apply_move(int(action))
        except (InvalidColumn, ColumnFull) as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        if self.game.is_ai_turn():
            self._opponent_move()

        status = self.game.status()
        if status.winner == self.agent_side:
            reward = self.reward_win
        elif status.winner is not None:
            reward = self.reward_lose
        elif status == GameStatus.DRAW:
            reward = self.reward_draw
        else:
            reward = self.reward_step

        terminated = status.is_game_over()
        if terminated:
            debug.info(f"Episode finished: {status.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def _opponent_move(self) -> None:
        col = self.game.choose_column()
        self.game.apply_move(col)

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.game.state.board.get_state().astype(np.int8)

    def _get_info(self) -> Dict:
        last = self.game.last_move()
        return {
            'valid_moves': self.game.get_valid_moves(),
            'side_to_move': self.game.side_to_move().name,
            'status': self.game.status().name,
            'moves_made': len(self.game.moves()),
            'last_move': (last.row, last.col) if last else None,
            'winning_line': self.game.winning_line(),
        }


if __name__ == "__main__":
    # Heuristic AI against itself
    debug.configure(level=DebugLevel.INFO)

    game = GameController()
    while not game.is_game_over():
        col = game.choose_column()
        result = game.apply_move(col)
        print(f"{result.side} plays column {col} ({game.ai_player.last_rule})")
    print(game.render())
    print(game.status_message())

    print("\nUndoing last move:")
    game.undo_one()
    print(game.render())
    print(game.status_message())
