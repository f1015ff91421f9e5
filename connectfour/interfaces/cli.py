"""
cli.py - Command-line interface for playing Connect Four in a terminal

This module holds everything that touches text: parsing what the players type,
prompting, and drawing the board. The game engine never calls into it; the
Match hands it boards and results through the observer hooks.
"""

import argparse
import re
import sys
from typing import Callable, List, Optional, Tuple

from connectfour.debug import DebugLevel, debug
from connectfour.game.board import Board, Snapshot
from connectfour.game.match import Match, MatchObserver
from connectfour.game.scoreboard import Scoreboard
from connectfour.game.session import MoveRequest, MoveSource, Player, Session
from connectfour.utils import (DEFAULT_COLS, DEFAULT_GAMES, DEFAULT_ROWS,
                               END_GAME_COMMAND, GameConfig, MoveStatus,
                               PlayerSlot, SessionResult, validate_dimensions)

GAME_NAME = "Connect Four"
END_GAME = "Game over!"
DRAW = "It is a draw"
INVALID_INPUT = "Invalid input"
INCORRECT_COLUMN = "Incorrect column number"
FIRST_PLAYER_NAME_PROMPT = "First player's name:"
SECOND_PLAYER_NAME_PROMPT = "Second player's name:"
BOARD_DIMENSIONS_PROMPT = ("Set the board dimensions (Rows x Columns)\n"
                           f"Press Enter for default ({DEFAULT_ROWS} x {DEFAULT_COLS})")
GAME_TYPE_PROMPT = ("Do you want to play single or multiple games?\n"
                    "For a single game, input 1 or press Enter\n"
                    "Input a number of games:")

VERT_LINE = "║"
HOR_LINE = "═"
LEFT_BOTTOM_CORNER = "╚"
BOTTOM_T_SHAPE = "╩"
RIGHT_BOTTOM_CORNER = "╝"

SLOT_GLYPHS = {PlayerSlot.FIRST: "o", PlayerSlot.SECOND: "*"}
EMPTY_GLYPH = " "

BOARD_SIZE_RE = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")
NUMBER_RE = re.compile(r"\d+")

ReadLine = Callable[[], str]
Write = Callable[[str], None]


# --- Parsing ---

def parse_dimensions(text: str) -> Tuple[int, int]:
    """
    Parse a board size such as ``"6 x 7"``. Empty input selects the default.

    Raises:
        ValueError: On malformed input or out-of-bounds dimensions
    """
    if text == "":
        return DEFAULT_ROWS, DEFAULT_COLS
    match = BOARD_SIZE_RE.match(text)
    if not match:
        raise ValueError(INVALID_INPUT)
    return validate_dimensions(int(match.group(1)), int(match.group(2)))


def parse_games_count(text: str) -> int:
    if text == "":
        return DEFAULT_GAMES
    if not NUMBER_RE.fullmatch(text) or int(text) < 1:
        raise ValueError(INVALID_INPUT)
    return int(text)


def parse_move(text: str) -> MoveRequest:
    """Columns are typed 1-based; ``end`` quits the game."""
    if text == END_GAME_COMMAND:
        return MoveRequest.quit()
    if NUMBER_RE.fullmatch(text):
        return MoveRequest.drop(int(text) - 1)
    return MoveRequest.malformed(text)


# --- Rendering ---

def glyph_for(slot: Optional[PlayerSlot]) -> str:
    return EMPTY_GLYPH if slot is None else SLOT_GLYPHS[slot]


def render_board(snapshot: Snapshot) -> str:
    cols = len(snapshot[0])
    lines = [" " + " ".join(str(i) for i in range(1, cols + 1)) + " "]
    for row in snapshot:
        lines.append(VERT_LINE + VERT_LINE.join(glyph_for(cell) for cell in row) + VERT_LINE)
    lines.append(LEFT_BOTTOM_CORNER + BOTTOM_T_SHAPE.join(HOR_LINE * cols) + RIGHT_BOTTOM_CORNER)
    return "\n".join(lines)


def format_scores(scoreboard: Scoreboard) -> str:
    (p1, s1), (p2, s2) = scoreboard.summary()
    return f"Score\n{p1}: {s1} {p2}: {s2}"


# --- Console adapters ---

class ConsoleMoveSource(MoveSource):
    """Reads moves from a terminal, showing the board whenever it changes."""

    def __init__(self, read_line: ReadLine = input, write: Write = print):
        self._read_line = read_line
        self._write = write
        self._shown = None

    def next_move(self, player: Player, board: Board) -> MoveRequest:
        state = (id(board), board.last_move)
        if state != self._shown:
            self._write(render_board(board.snapshot()))
            self._shown = state

        self._write(f"{player}'s turn:")
        try:
            text = ""
            while not text:
                text = self._read_line().strip()
        except EOFError:
            debug.info("End of input, treating as quit", "cli")
            return MoveRequest.quit()
        return parse_move(text.split()[0])

    def report(self, status: MoveStatus, request: MoveRequest,
               player: Player, board: Board) -> None:
        if status == MoveStatus.OUT_OF_RANGE:
            self._write(f"The column number is out of range (1 - {board.cols})")
        elif status == MoveStatus.COLUMN_FULL:
            self._write(f"Column {request.column + 1} is full")
        else:
            self._write(INCORRECT_COLUMN)


class ConsoleObserver(MatchObserver):
    """Prints game headers, final boards, results and scores."""

    def __init__(self, config: GameConfig, write: Write = print):
        self.config = config
        self._write = write
        self._session: Optional[Session] = None

    def session_started(self, number: int, session: Session) -> None:
        self._session = session
        if self.config.is_multi_game:
            self._write(f"Game #{number}")

    def session_finished(self, number: int, result: SessionResult, board: Board) -> None:
        if result == SessionResult.QUIT:
            return
        self._write(render_board(board.snapshot()))
        if result == SessionResult.DRAW:
            self._write(DRAW)
        else:
            self._write(f"Player {self._session.player_for(result.winner)} won")

    def scores_updated(self, scoreboard: Scoreboard) -> None:
        self._write(format_scores(scoreboard))

    def match_finished(self, scoreboard: Scoreboard) -> None:
        self._write(END_GAME)


def prompt_until_valid(prompt: str, parse: Callable[[str], object],
                       read_line: ReadLine = input, write: Write = print):
    """Ask repeatedly until ``parse`` accepts the answer."""
    while True:
        write(prompt)
        text = read_line()
        try:
            return parse(text)
        except ValueError as e:
            write(str(e))


class ConsoleGame:
    """Sets up a match from arguments and prompts, then plays it."""

    def __init__(self, read_line: ReadLine = input, write: Write = print):
        self.read_line = read_line
        self.write = write
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        parser = argparse.ArgumentParser(description='Play Connect Four in the terminal')
        parser.add_argument('--player1', type=str, help='First player name (skips the prompt)')
        parser.add_argument('--player2', type=str, help='Second player name (skips the prompt)')
        parser.add_argument('--rows', type=int, help='Board rows, 5 to 9 (requires --cols)')
        parser.add_argument('--cols', type=int, help='Board columns, 5 to 9 (requires --rows)')
        parser.add_argument('--games', type=int, help='Number of games in the match')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug mode (equivalent to --debug_level debug)')
        parser.add_argument('--debug_level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default='error', help='Logging verbosity')
        parser.add_argument('--log_file', type=str, help='Also write log records to this file')

        self.args = parser.parse_args(argv)
        if (self.args.rows is None) != (self.args.cols is None):
            parser.error("--rows and --cols must be given together")
        return self.args

    def configure_debug(self) -> None:
        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def read_players(self) -> Tuple[Player, Player]:
        name1 = self.args.player1
        if name1 is None:
            self.write(FIRST_PLAYER_NAME_PROMPT)
            name1 = self.read_line()
        name2 = self.args.player2
        if name2 is None:
            self.write(SECOND_PLAYER_NAME_PROMPT)
            name2 = self.read_line()
        return Player(name1, PlayerSlot.FIRST), Player(name2, PlayerSlot.SECOND)

    def read_config(self) -> GameConfig:
        if self.args.rows is not None:
            rows, cols = validate_dimensions(self.args.rows, self.args.cols)
        else:
            rows, cols = prompt_until_valid(BOARD_DIMENSIONS_PROMPT, parse_dimensions,
                                            self.read_line, self.write)
        games = self.args.games
        if games is None:
            games = prompt_until_valid(GAME_TYPE_PROMPT, parse_games_count,
                                       self.read_line, self.write)
        return GameConfig(rows=rows, cols=cols, games=games)

    def run(self, argv: Optional[List[str]] = None) -> int:
        if self.args is None:
            self.parse_args(argv)
        self.configure_debug()

        self.write(GAME_NAME)
        try:
            player1, player2 = self.read_players()
            config = self.read_config()
        except ValueError as e:
            self.write(str(e))
            return 2
        except (EOFError, KeyboardInterrupt):
            self.write(END_GAME)
            return 0

        self.write(f"{player1} VS {player2}")
        self.write(f"{config.rows} X {config.cols} board")
        if config.is_multi_game:
            self.write(f"Total {config.games} games")
        else:
            self.write("Single Game")

        match = Match(config, player1, player2)
        source = ConsoleMoveSource(self.read_line, self.write)
        try:
            match.play(source, ConsoleObserver(config, self.write))
        except KeyboardInterrupt:
            debug.info("Interrupted", "cli")
            self.write(END_GAME)
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return ConsoleGame().run(argv)


if __name__ == "__main__":
    sys.exit(main())
