"""
connectfour - Connect Four game engine with a terminal front end

This package provides a gravity-drop board with four-in-a-row detection, a turn
state machine for single games, and a scoreboard for multi-game matches.
"""

# Version number
__version__ = '0.1.0'
