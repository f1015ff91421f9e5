"""
scoreboard.py - Points and history across a multi-game match
"""

from typing import Dict, List, Tuple

from connectfour.debug import debug
from connectfour.game.session import Player
from connectfour.utils import DRAW_POINTS, WIN_POINTS, PlayerSlot, SessionResult


class Scoreboard:
    """Accumulates points for two players over a sequence of sessions."""

    def __init__(self, player1: Player, player2: Player):
        self.player1 = player1
        self.player2 = player2
        self._scores: Dict[Player, int] = {player1: 0, player2: 0}
        self._history: List[SessionResult] = []

    @property
    def history(self) -> Tuple[SessionResult, ...]:
        return tuple(self._history)

    def next_sequence_number(self) -> int:
        """1-based number the next registered session will receive."""
        return len(self._history) + 1

    def register_session(self, result: SessionResult) -> int:
        """
        Record a finished session.

        Returns:
            The 1-based sequence number of the session within the match
        """
        self._history.append(result)
        debug.debug(f"Registered session #{len(self._history)}: {result.name}", "scoreboard")
        return len(self._history)

    def update_scores(self, result: SessionResult) -> None:
        if result == SessionResult.PLAYER1_WON:
            self._scores[self.player1] += WIN_POINTS
        elif result == SessionResult.PLAYER2_WON:
            self._scores[self.player2] += WIN_POINTS
        elif result == SessionResult.DRAW:
            self._scores[self.player1] += DRAW_POINTS
            self._scores[self.player2] += DRAW_POINTS
        else:
            return
        debug.debug(f"Scores now {self.summary()}", "scoreboard")

    @staticmethod
    def starting_slot_for(sequence_number: int) -> PlayerSlot:
        """Even-numbered sessions are opened by the second player."""
        return PlayerSlot.SECOND if sequence_number % 2 == 0 else PlayerSlot.FIRST

    def points(self, player: Player) -> int:
        return self._scores[player]

    def summary(self) -> Tuple[Tuple[Player, int], Tuple[Player, int]]:
        return ((self.player1, self._scores[self.player1]),
                (self.player2, self._scores[self.player2]))
