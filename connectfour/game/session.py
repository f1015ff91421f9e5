"""
session.py - Turn state machine for a single Connect Four game

A Session owns one Board and two Players. It pulls moves from a MoveSource,
applies them, and decides whether the turn passes, repeats, or the game ends.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, Optional

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import (DEFAULT_COLS, DEFAULT_ROWS, MoveStatus,
                               PlayerSlot, SessionResult)


@dataclass(frozen=True)
class Player:
    """A named participant bound to one slot for the whole match."""
    name: str
    slot: PlayerSlot

    def __str__(self) -> str:
        return self.name


class RequestKind(Enum):
    DROP = auto()
    QUIT = auto()
    MALFORMED = auto()


class MoveRequest(NamedTuple):
    """One attempt by the active player, as delivered by a MoveSource."""
    kind: RequestKind
    column: Optional[int] = None
    raw: str = ""

    @classmethod
    def drop(cls, column: int) -> 'MoveRequest':
        return cls(RequestKind.DROP, column)

    @classmethod
    def quit(cls) -> 'MoveRequest':
        return cls(RequestKind.QUIT)

    @classmethod
    def malformed(cls, raw: str) -> 'MoveRequest':
        return cls(RequestKind.MALFORMED, raw=raw)


class MoveSource(ABC):
    """Where a Session gets its moves from (keyboard, script, network...)."""

    @abstractmethod
    def next_move(self, player: Player, board: Board) -> MoveRequest:
        """Block until ``player`` submits a request."""

    def report(self, status: MoveStatus, request: MoveRequest,
               player: Player, board: Board) -> None:
        """Called when a request was rejected and the same player must retry."""


class Session:
    """
    One game from an empty board to a win, draw or quit.

    The session is either awaiting a move from ``active_player`` or finished
    with ``result``. Nothing leaves the finished state.
    """

    def __init__(self, player1: Player, player2: Player,
                 rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
                 starting_slot: PlayerSlot = PlayerSlot.FIRST):
        if player1.slot != PlayerSlot.FIRST or player2.slot != PlayerSlot.SECOND:
            raise ValueError("player1 must hold the FIRST slot and player2 the SECOND")

        self.player1 = player1
        self.player2 = player2
        self.board = Board(rows, cols)
        self._active = player1 if starting_slot == PlayerSlot.FIRST else player2
        self._result: Optional[SessionResult] = None
        self.moves_made = 0
        debug.debug(f"New session {player1} vs {player2}, {self._active} starts", "session")

    @property
    def active_player(self) -> Player:
        return self._active

    @property
    def result(self) -> Optional[SessionResult]:
        return self._result

    @property
    def is_finished(self) -> bool:
        return self._result is not None

    def player_for(self, slot: PlayerSlot) -> Player:
        return self.player1 if slot == PlayerSlot.FIRST else self.player2

    def submit(self, request: MoveRequest) -> MoveStatus:
        """
        Apply one move request from the active player.

        Rejected requests leave the board and the active player untouched.

        Returns:
            The status of the request

        Raises:
            RuntimeError: If the session has already finished
        """
        if self.is_finished:
            raise RuntimeError(f"Session already finished ({self._result.name})")

        if request.kind == RequestKind.QUIT:
            debug.info(f"{self._active} quit the game", "session")
            self._finish(SessionResult.QUIT)
            return MoveStatus.QUIT

        if request.kind == RequestKind.MALFORMED:
            debug.debug(f"Malformed input from {self._active}: {request.raw!r}", "session")
            return MoveStatus.MALFORMED

        col = request.column
        if not self.board.in_range(col):
            debug.debug(f"Column {col} out of range for {self._active}", "session")
            return MoveStatus.OUT_OF_RANGE

        if not self.board.apply_move(col, self._active.slot):
            return MoveStatus.COLUMN_FULL

        self.moves_made += 1
        outcome = self.board.evaluate_outcome()
        if outcome.is_terminal():
            self._finish(SessionResult.from_outcome(outcome))
        else:
            self._active = self.player_for(self._active.slot.other())
        return MoveStatus.ACCEPTED

    def run(self, source: MoveSource) -> SessionResult:
        """Pull moves from ``source`` until the game ends."""
        while not self.is_finished:
            player = self._active
            request = source.next_move(player, self.board)
            status = self.submit(request)
            if status.is_rejection():
                source.report(status, request, player, self.board)
        return self._result

    def _finish(self, result: SessionResult) -> None:
        self._result = result
        debug.info(f"Session finished: {result.name} after {self.moves_made} moves", "session")
