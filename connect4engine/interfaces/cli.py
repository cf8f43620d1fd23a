"""
cli.py - Command-line interface for playing and analysing Connect Four

This module provides a terminal front end that drives GameController: an
interactive game against a friend or the heuristic AI, and an analyser for
positions given on the command line.
"""

import argparse
import sys
import time
from typing import List, Optional, Tuple, Union

from connect4engine.ai.heuristic import HeuristicPlayer
from connect4engine.debug import debug, DebugLevel
from connect4engine.errors import EngineError
from connect4engine.game.board import Board
from connect4engine.game.detector import winning_line
from connect4engine.game.rules import GameController
from connect4engine.utils import ROWS, COLS, Side

# Commands accepted at the move prompt
QUIT = 'q'
UNDO = 'u'
RESTART = 'r'
SWITCH = 's'
COMMANDS = (QUIT, UNDO, RESTART, SWITCH)


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, ai_delay: float = 0.5):
        self.game = GameController()
        self.args = None
        self.ai_delay = ai_delay

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and apply the logging settings."""
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug_level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log_file', type=str, help='Also write log output to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        play_parser.add_argument('--ai', choices=['heuristic', 'none'], default='heuristic',
                                 help='Computer opponent (default: heuristic)')
        play_parser.add_argument('--ai-side', dest='ai_side', choices=['first', 'second'],
                                 default='second', help='Side the computer plays')

        analyze_parser = subparsers.add_parser('analyze', help='Analyse a board position')
        analyze_parser.add_argument('--position', type=str, required=True,
                                    help=f'{ROWS * COLS} comma-separated cell values '
                                         f'(0 empty, 1 first, 2 second), top row first')
        analyze_parser.add_argument('--side', choices=['first', 'second'], default='first',
                                    help='Side to suggest a move for')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command selected on the command line. Returns an exit code."""
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'analyze':
            return self.analyze_position()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self) -> None:
        """Play a Connect Four game interactively."""
        ai_enabled = self.args.ai != 'none'
        self.game = GameController(ai_enabled=ai_enabled,
                                   ai_side=Side.from_string(self.args.ai_side))

        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{COLS - 1}) to drop a disc.")
        print("Other commands: 'u' to undo, 'r' to restart, 's' to switch AI side, 'q' to quit.")
        self.show_board()

        while True:
            if self.game.is_ai_turn():
                self.play_ai_move()
                continue

            if self.game.is_game_over():
                self.announce_result()

            command = self.get_human_move()
            if command is None:
                continue
            if command == QUIT:
                print("Quitting game.")
                return
            if command == UNDO:
                self.undo()
            elif command == RESTART:
                self.game.reset()
                print("Game restarted.")
                self.show_board()
            elif command == SWITCH:
                side = self.game.switch_ai_side()
                print(f"Computer now plays {side}.")
                print(self.game.status_message())
            else:
                self.play_human_move(command)

    def get_human_move(self) -> Optional[Union[int, str]]:
        """
        Read one line of input from the player.

        Returns:
            A column index, a command letter, or None if the input was invalid
        """
        prompt = "Command (u/r/s/q): " if self.game.is_game_over() else \
            f"{self.game.side_to_move()} move (0-{COLS - 1}, u/r/s/q): "
        try:
            user_input = input(prompt).strip().lower()
        except EOFError:
            return QUIT

        if user_input in COMMANDS:
            return user_input

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def play_human_move(self, col: int) -> None:
        try:
            self.game.apply_move(col)
        except EngineError as e:
            print(f"{e}. Try again.")
            return
        self.show_board()

    def play_ai_move(self) -> None:
        print("Computer is thinking...")
        if self.ai_delay:
            time.sleep(self.ai_delay)

        col = self.game.choose_column()
        self.game.apply_move(col)
        print(f"Computer plays column {col} ({self.game.ai_player.last_rule}).")
        self.show_board()

    def undo(self) -> None:
        try:
            result = self.game.undo_one()
        except EngineError as e:
            print(f"{e}.")
            return
        print(f"Undid {len(result.reverted)} move(s).")
        self.show_board()

    def show_board(self) -> None:
        print(self.game.render())
        print(self.game.status_message())

    def announce_result(self) -> None:
        line = self.game.winning_line()
        if line:
            print(f"Winning line: {line}")
        print("Game over! Press 'r' for a new game or 'u' to take back a move.")

    def analyze_position(self) -> int:
        """Report valid moves, completed lines and a suggested move for a position."""
        try:
            values = [int(v) for v in self.args.position.split(',')]
            board = Board.from_values(values)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        print("Loaded position:")
        print(board.render())

        if not board.has_gravity_consistency():
            print("Warning: position has discs floating above empty cells")

        line = self._find_line(board)
        if line:
            print(f"Line for {board.cell_at(*line[0]).side} through {line}")
        else:
            print("No completed line")

        valid_moves = board.get_valid_moves()
        print(f"Valid moves: {valid_moves}")
        if line or not valid_moves:
            if not line:
                print("Board is full")
            return 0

        side = Side.from_string(self.args.side)
        player = HeuristicPlayer()
        col = player.choose_column(board, side)
        print(f"Suggested move for {side}: column {col} ({player.last_rule})")
        return 0

    @staticmethod
    def _find_line(board: Board) -> List[Tuple[int, int]]:
        for row in range(ROWS):
            for col in range(COLS):
                line = winning_line(board, row, col)
                if line:
                    return line
        return []


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
