"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GuessOutcome, LetterResult, SessionStatus
from .password import PasswordLevel, PasswordHints, PasswordVaultState

__all__ = [
    'GameState', 'GuessOutcome', 'LetterResult', 'SessionStatus',
    'PasswordLevel', 'PasswordHints', 'PasswordVaultState'
]
