"""
utils.py - Constants, enumerations and configuration for Connect Four

This module holds the values shared by the board, the session state machine and
the scoreboard: player slots, move and game outcomes, and the immutable game
configuration.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

# Game constants
LINE_TARGET = 4  # Pieces in a row needed to win, whatever the board size
MIN_ROWS = 5
MAX_ROWS = 9
MIN_COLS = 5
MAX_COLS = 9
DEFAULT_ROWS = 6
DEFAULT_COLS = 7
DEFAULT_GAMES = 1

EMPTY = 0  # Grid value of an unoccupied cell
END_GAME_COMMAND = "end"

WIN_POINTS = 2
DRAW_POINTS = 1


class PlayerSlot(Enum):
    """The two seats at the board. Values double as grid cell markers."""
    FIRST = 1
    SECOND = 2

    def other(self) -> 'PlayerSlot':
        return PlayerSlot.SECOND if self == PlayerSlot.FIRST else PlayerSlot.FIRST


class Outcome(Enum):
    """Board state after a successful move."""
    FIRST_WINS = auto()
    SECOND_WINS = auto()
    DRAW = auto()
    CONTINUE = auto()

    @classmethod
    def win(cls, slot: PlayerSlot) -> 'Outcome':
        return cls.FIRST_WINS if slot == PlayerSlot.FIRST else cls.SECOND_WINS

    @property
    def winner(self) -> Optional[PlayerSlot]:
        if self == Outcome.FIRST_WINS:
            return PlayerSlot.FIRST
        if self == Outcome.SECOND_WINS:
            return PlayerSlot.SECOND
        return None

    def is_terminal(self) -> bool:
        return self != Outcome.CONTINUE


class SessionResult(Enum):
    """How a single game ended."""
    PLAYER1_WON = auto()
    PLAYER2_WON = auto()
    DRAW = auto()
    QUIT = auto()

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> 'SessionResult':
        if outcome == Outcome.FIRST_WINS:
            return cls.PLAYER1_WON
        if outcome == Outcome.SECOND_WINS:
            return cls.PLAYER2_WON
        if outcome == Outcome.DRAW:
            return cls.DRAW
        raise ValueError(f"{outcome} does not end a game")

    @property
    def winner(self) -> Optional[PlayerSlot]:
        if self == SessionResult.PLAYER1_WON:
            return PlayerSlot.FIRST
        if self == SessionResult.PLAYER2_WON:
            return PlayerSlot.SECOND
        return None


class MoveStatus(Enum):
    """What happened to a submitted move request."""
    ACCEPTED = auto()
    OUT_OF_RANGE = auto()
    COLUMN_FULL = auto()
    MALFORMED = auto()
    QUIT = auto()

    def is_rejection(self) -> bool:
        return self in (MoveStatus.OUT_OF_RANGE, MoveStatus.COLUMN_FULL, MoveStatus.MALFORMED)


def validate_dimensions(rows: int, cols: int) -> Tuple[int, int]:
    """
    Check board dimensions against the allowed bounds.

    Raises:
        ValueError: If either dimension is out of bounds
    """
    if not MIN_ROWS <= rows <= MAX_ROWS:
        raise ValueError(f"Board rows should be from {MIN_ROWS} to {MAX_ROWS}")
    if not MIN_COLS <= cols <= MAX_COLS:
        raise ValueError(f"Board columns should be from {MIN_COLS} to {MAX_COLS}")
    return rows, cols


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings for a match: board size and number of games."""
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    games: int = DEFAULT_GAMES

    def __post_init__(self):
        validate_dimensions(self.rows, self.cols)
        if self.games < 1:
            raise ValueError("Number of games should be at least 1")

    @property
    def is_multi_game(self) -> bool:
        return self.games > 1
