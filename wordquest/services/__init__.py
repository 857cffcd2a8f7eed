"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService, get_game_service
from .password_service import PasswordService, get_password_service
from .scorer import score
from .session import GuessSession, new_session

__all__ = [
    'GameService', 'get_game_service',
    'PasswordService', 'get_password_service',
    'score', 'GuessSession', 'new_session'
]
