"""Tests for the terminal interface."""

import pytest

from connectfour.game.board import Board
from connectfour.game.session import MoveRequest, Player, RequestKind
from connectfour.interfaces.cli import (ConsoleGame, ConsoleMoveSource, glyph_for,
                                        parse_dimensions, parse_games_count,
                                        parse_move, render_board)
from connectfour.utils import MoveStatus, PlayerSlot


def scripted_input(*lines):
    remaining = list(lines)

    def read_line():
        if not remaining:
            raise EOFError
        return remaining.pop(0)
    return read_line


@pytest.fixture
def output():
    return []


@pytest.mark.parametrize("text,expected", [
    ("", (6, 7)),
    ("5x5", (5, 5)),
    (" 8 X 6 ", (8, 6)),
    ("9 x 9", (9, 9)),
])
def test_parse_dimensions(text, expected):
    assert parse_dimensions(text) == expected


@pytest.mark.parametrize("text,message", [
    ("abc", "Invalid input"),
    (" ", "Invalid input"),
    ("6x", "Invalid input"),
    ("4 x 7", "Board rows should be from 5 to 9"),
    ("6 x 10", "Board columns should be from 5 to 9"),
])
def test_parse_dimensions_errors(text, message):
    with pytest.raises(ValueError, match=message):
        parse_dimensions(text)


def test_parse_games_count():
    assert parse_games_count("") == 1
    assert parse_games_count("3") == 3
    for bad in ("0", "-2", "two", " 3"):
        with pytest.raises(ValueError):
            parse_games_count(bad)


def test_parse_move():
    assert parse_move("end") == MoveRequest.quit()
    assert parse_move("1") == MoveRequest.drop(0)
    assert parse_move("0") == MoveRequest.drop(-1)
    assert parse_move("abc").kind == RequestKind.MALFORMED


def test_glyphs():
    assert glyph_for(PlayerSlot.FIRST) == "o"
    assert glyph_for(PlayerSlot.SECOND) == "*"
    assert glyph_for(None) == " "


def test_render_board():
    board = Board(5, 5)
    board.apply_move(0, PlayerSlot.FIRST)
    board.apply_move(0, PlayerSlot.SECOND)
    lines = render_board(board.snapshot()).split("\n")

    assert lines[0] == " 1 2 3 4 5 "
    assert lines[1] == "║ ║ ║ ║ ║ ║"
    assert lines[4] == "║*║ ║ ║ ║ ║"
    assert lines[5] == "║o║ ║ ║ ║ ║"
    assert lines[6] == "╚═╩═╩═╩═╩═╝"
    assert len(lines) == 7


def test_console_move_source_reads_and_reports(output):
    board = Board(6, 7)
    ann = Player("Ann", PlayerSlot.FIRST)
    source = ConsoleMoveSource(scripted_input("", "  4  ", "end"), output.append)

    assert source.next_move(ann, board) == MoveRequest.drop(3)
    assert output[-1] == "Ann's turn:"
    # Board is only redrawn after it changes
    assert source.next_move(ann, board) == MoveRequest.quit()
    assert sum(1 for line in output if line.startswith(" 1 2")) == 1

    source.report(MoveStatus.OUT_OF_RANGE, MoveRequest.drop(8), ann, board)
    source.report(MoveStatus.COLUMN_FULL, MoveRequest.drop(2), ann, board)
    source.report(MoveStatus.MALFORMED, MoveRequest.malformed("x"), ann, board)
    assert output[-3:] == ["The column number is out of range (1 - 7)",
                           "Column 3 is full",
                           "Incorrect column number"]


def test_console_move_source_eof_quits(output):
    source = ConsoleMoveSource(scripted_input(), output.append)
    request = source.next_move(Player("Ann", PlayerSlot.FIRST), Board())
    assert request.kind == RequestKind.QUIT


def test_single_game_from_arguments(output):
    moves = ["1", "2", "1", "2", "1", "2", "1"]
    game = ConsoleGame(scripted_input(*moves), output.append)
    code = game.run(["--player1", "Ann", "--player2", "Bob",
                     "--rows", "6", "--cols", "7", "--games", "1"])

    assert code == 0
    assert output[:4] == ["Connect Four", "Ann VS Bob", "6 X 7 board", "Single Game"]
    assert "Player Ann won" in output
    assert output[-1] == "Game over!"
    assert not any(line.startswith("Score") for line in output)


def test_interactive_match_with_bad_input(output):
    lines = ["Ann", "Bob", "3x3", "", "x", "2",
             "8", "foo", "1", "end"]
    game = ConsoleGame(scripted_input(*lines), output.append)
    assert game.run([]) == 0

    assert "Board rows should be from 5 to 9" in output
    assert "Invalid input" in output
    assert "Total 2 games" in output
    assert "Game #1" in output
    assert "The column number is out of range (1 - 7)" in output
    assert "Incorrect column number" in output
    assert "Game #2" not in output
    assert output[-1] == "Game over!"


def test_two_game_match_prints_scores(output):
    game_moves = ["1", "2", "1", "2", "1", "2", "1"]
    game = ConsoleGame(scripted_input(*(game_moves * 2)), output.append)
    game.run(["--player1", "Ann", "--player2", "Bob", "--games", "2",
              "--rows", "5", "--cols", "5"])

    assert "Player Ann won" in output
    assert "Player Bob won" in output
    assert sum(1 for line in output if line.startswith("Score")) == 2
    assert "Score\nAnn: 2 Bob: 2" in output
    assert output[-1] == "Game over!"


def test_invalid_games_argument(output):
    game = ConsoleGame(scripted_input(), output.append)
    assert game.run(["--player1", "A", "--player2", "B",
                     "--rows", "6", "--cols", "7", "--games", "0"]) == 2
    assert "Number of games should be at least 1" in output


def test_rows_without_cols_is_rejected():
    with pytest.raises(SystemExit):
        ConsoleGame(scripted_input()).parse_args(["--rows", "6"])
