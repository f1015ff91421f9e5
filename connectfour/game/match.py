"""
match.py - Runs a sequence of sessions and keeps the score

The Match is the only owner of the Scoreboard. It builds a fresh Session for
each game, alternates who starts, and tells an observer what happened so a
front end can display it.
"""

from typing import Optional

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.scoreboard import Scoreboard
from connectfour.game.session import MoveSource, Player, Session
from connectfour.utils import GameConfig, SessionResult


class MatchObserver:
    """Hooks called by a Match. Every hook defaults to doing nothing."""

    def session_started(self, number: int, session: Session) -> None:
        pass

    def session_finished(self, number: int, result: SessionResult, board: Board) -> None:
        pass

    def scores_updated(self, scoreboard: Scoreboard) -> None:
        pass

    def match_finished(self, scoreboard: Scoreboard) -> None:
        pass


class Match:
    """A series of ``config.games`` sessions between the same two players."""

    def __init__(self, config: GameConfig, player1: Player, player2: Player):
        self.config = config
        self.player1 = player1
        self.player2 = player2
        self.scoreboard = Scoreboard(player1, player2)

    def play(self, source: MoveSource,
             observer: Optional[MatchObserver] = None) -> Scoreboard:
        """
        Play sessions until the match size is reached or someone quits.

        Returns:
            The scoreboard holding every registered session
        """
        observer = observer or MatchObserver()
        scoreboard = self.scoreboard
        debug.info(f"Starting match of {self.config.games} game(s) on "
                   f"{self.config.rows}x{self.config.cols}", "match")

        while scoreboard.next_sequence_number() <= self.config.games:
            number = scoreboard.next_sequence_number()
            session = Session(self.player1, self.player2,
                              self.config.rows, self.config.cols,
                              starting_slot=Scoreboard.starting_slot_for(number))
            observer.session_started(number, session)

            result = session.run(source)
            scoreboard.register_session(result)
            scoreboard.update_scores(result)
            observer.session_finished(number, result, session.board)

            if result == SessionResult.QUIT:
                debug.info(f"Match stopped by quit in game #{number}", "match")
                break
            if self.config.is_multi_game:
                observer.scores_updated(scoreboard)

        observer.match_finished(scoreboard)
        return scoreboard
