import pytest

from connect4engine.interfaces.cli import SimpleCLI
from connect4engine.utils import ROWS, COLS


@pytest.fixture
def feed_input(monkeypatch):
    def _feed(lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return _feed


def run_cli(argv):
    return SimpleCLI(ai_delay=0).run(argv)


def test_two_player_game_to_a_win(feed_input, capsys):
    feed_input(["0", "1", "0", "1", "0", "1", "0", "q"])
    assert run_cli(["play", "--ai", "none"]) == 0

    out = capsys.readouterr().out
    assert "X wins!" in out
    assert "Winning line: [(2, 0), (3, 0), (4, 0), (5, 0)]" in out
    assert "Quitting game." in out


def test_undo_against_computer(feed_input, capsys):
    feed_input(["3", "u", "q"])
    assert run_cli(["play"]) == 0

    out = capsys.readouterr().out
    assert "Computer plays column 3 (preference)." in out
    assert "Undid 2 move(s)." in out


def test_computer_opens_when_playing_first(feed_input, capsys):
    feed_input(["q"])
    run_cli(["play", "--ai-side", "first"])
    assert "Computer plays column 3" in capsys.readouterr().out


def test_bad_input_and_engine_errors_are_reported(feed_input, capsys):
    feed_input(["abc", "9", "u", "q"])
    run_cli(["play", "--ai", "none"])

    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Column must be between 0 and 6" in out
    assert "No moves to undo." in out


def test_restart_and_switch(feed_input, capsys):
    feed_input(["2", "r", "s", "q"])
    run_cli(["play"])

    out = capsys.readouterr().out
    assert "Game restarted." in out
    assert "Computer now plays X." in out
    # After switching, the computer is to move and plays immediately.
    assert out.count("Computer plays column") == 2


def test_end_of_input_quits(feed_input, capsys):
    feed_input([])
    assert run_cli(["play", "--ai", "none"]) == 0
    assert "Quitting game." in capsys.readouterr().out


def test_analyze_suggests_a_block(capsys):
    values = [0] * (ROWS * COLS)
    for row in (3, 4, 5):
        values[row * COLS + 5] = 1
    values[5 * COLS + 0] = 2
    values[5 * COLS + 1] = 2

    assert run_cli(["analyze", "--position", ",".join(map(str, values)), "--side", "second"]) == 0
    out = capsys.readouterr().out
    assert "No completed line" in out
    assert "Suggested move for O: column 5 (block)" in out


def test_analyze_reports_a_line(capsys):
    values = [0] * (ROWS * COLS)
    for col in range(4):
        values[5 * COLS + col] = 1

    assert run_cli(["analyze", "--position", ",".join(map(str, values))]) == 0
    out = capsys.readouterr().out
    assert "Line for X through [(5, 0), (5, 1), (5, 2), (5, 3)]" in out
    assert "Suggested move" not in out


def test_analyze_rejects_bad_position(capsys):
    assert run_cli(["analyze", "--position", "1,2,3"]) == 1
    assert "Error parsing position" in capsys.readouterr().out


def test_no_command():
    assert run_cli([]) == 1
