"""Whack-a-mole domain services: round state, high score, timers.

This package holds the game core. HTTP routes and socket handlers call
into ``GameSession``; nothing here knows about the transport.
"""

from .settings import GameSettings, load_settings
from .state import NO_TARGET, RoundState
from .highscore import HighScoreStore, HIGH_SCORE_KEY
from .session import GameSession

__all__ = [
    'GameSettings',
    'load_settings',
    'NO_TARGET',
    'RoundState',
    'HighScoreStore',
    'HIGH_SCORE_KEY',
    'GameSession',
]
