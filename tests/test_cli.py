"""Tests for the command-line front end."""

import io

import pytest
from rich.console import Console

from tictactoe_rules.cli.main import main, parse_move
from tictactoe_rules.core import GameState, PositionTaken, RowOutOfBounds
from tictactoe_rules.utils.rich_display import BoardDisplay, describe_error


def fake_input(monkeypatch, lines):
    """Feed lines to input(), then raise EOFError."""
    remaining = iter(lines)

    def _input(*args):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", _input)


def test_parse_move():
    """Test accepted move formats."""
    assert parse_move("1,2") == (1, 2)
    assert parse_move("1 2") == (1, 2)
    assert parse_move(" 0 , 0 ") == (0, 0)
    assert parse_move("-1 5") == (-1, 5)


@pytest.mark.parametrize("text", ["", "1", "1,2,3", "a,b", "1;2"])
def test_parse_move_rejects_garbage(text):
    """Test malformed move text."""
    with pytest.raises(ValueError):
        parse_move(text)


def test_no_command_prints_help(capsys):
    """Test running without a subcommand."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_replay_win(capsys):
    """Test replaying a winning game."""
    code = main(["replay", "0,0", "0,1", "1,0", "1,1", "2,0"])

    assert code == 0
    assert "X wins" in capsys.readouterr().out


def test_replay_draw(capsys):
    """Test replaying a drawn game."""
    moves = ["0,0", "0,1", "0,2", "1,1", "1,0", "1,2", "2,1", "2,0", "2,2"]

    assert main(["replay", *moves]) == 0
    assert "Draw" in capsys.readouterr().out


def test_replay_rejected_move(capsys):
    """Test that a rejected move stops the replay."""
    code = main(["replay", "0,0", "0,0"])

    out = capsys.readouterr().out
    assert code == 2
    assert "Move 2" in out
    assert "position already taken" in out


def test_replay_out_of_bounds(capsys):
    """Test that the engine's bounds error is reported."""
    assert main(["replay", "3,0"]) == 2
    assert "row out of bounds" in capsys.readouterr().out


def test_replay_malformed_move(capsys):
    """Test that unparseable moves are reported."""
    assert main(["replay", "middle"]) == 2
    assert "Move 1" in capsys.readouterr().out


def test_play_to_win(monkeypatch, capsys):
    """Test a full interactive game, including a rejected move."""
    fake_input(monkeypatch, ["0 0", "0 0", "0 1", "1 0", "1 1", "2 0"])

    assert main(["play"]) == 0

    out = capsys.readouterr().out
    assert "already marked" in out
    assert "X wins" in out


def test_play_quit(monkeypatch, capsys):
    """Test quitting an interactive game."""
    fake_input(monkeypatch, ["1 1", "q"])

    assert main(["play"]) == 0
    assert "abandoned" in capsys.readouterr().out


def test_play_eof(monkeypatch):
    """Test that closed input ends the game quietly."""
    fake_input(monkeypatch, ["bogus"])

    assert main(["play"]) == 0


def test_describe_error():
    """Test that each placement error gets its own message."""
    assert describe_error(RowOutOfBounds(3, 0)) == "Row must be 0, 1 or 2 (got 3, 0)"
    assert "already marked" in describe_error(PositionTaken(1, 1))


def test_render_board_highlights_winner():
    """Test board rendering to a captured console."""
    state = GameState()
    for row, col in [(0, 0), (0, 1), (1, 1), (1, 0), (2, 2)]:
        state.place(row, col)

    output = Console(file=io.StringIO(), width=40)
    display = BoardDisplay(output)
    display.show_board(state)
    display.show_outcome(state)

    text = output.file.getvalue()
    assert text.count("X") == 4  # 3 marks plus the outcome line
    assert text.count("O") == 2
    assert "X wins" in text
    assert "after 5 moves" in text
