"""Shared fixtures for the Connect Four tests."""

from typing import Iterable, List, Tuple

import pytest

from connectfour.game.board import Board
from connectfour.game.session import MoveRequest, MoveSource, Player
from connectfour.utils import MoveStatus, PlayerSlot


class ScriptedMoveSource(MoveSource):
    """Feeds a fixed list of requests and records every rejection."""

    def __init__(self, requests: Iterable[MoveRequest]):
        self.requests = list(requests)
        self.asked: List[str] = []
        self.reports: List[Tuple[MoveStatus, str]] = []

    def next_move(self, player: Player, board: Board) -> MoveRequest:
        self.asked.append(player.name)
        if not self.requests:
            raise AssertionError("script ran out of moves")
        return self.requests.pop(0)

    def report(self, status, request, player, board) -> None:
        self.reports.append((status, player.name))


def drops(*columns) -> List[MoveRequest]:
    return [MoveRequest.drop(c) for c in columns]


def no_win_slot(row: int, col: int) -> PlayerSlot:
    """Checkerboard of 2x1 blocks: never four in a row in any direction."""
    return PlayerSlot.FIRST if (col // 2 + row) % 2 == 0 else PlayerSlot.SECOND


def fill_columns(board: Board, columns: Iterable[int]) -> None:
    for col in columns:
        for row in range(board.rows - 1, -1, -1):
            assert board.apply_move(col, no_win_slot(row, col))


@pytest.fixture
def players():
    return Player("Ann", PlayerSlot.FIRST), Player("Bob", PlayerSlot.SECOND)


@pytest.fixture
def board():
    return Board(6, 7)
