"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board, the per-game session state machine, the
scoreboard and the match orchestrator.
"""

from connectfour.game.board import Board, LastMove
from connectfour.game.session import MoveRequest, MoveSource, Player, Session
from connectfour.game.scoreboard import Scoreboard
from connectfour.game.match import Match, MatchObserver

__all__ = ['Board', 'LastMove', 'MoveRequest', 'MoveSource', 'Player', 'Session',
           'Scoreboard', 'Match', 'MatchObserver']
