"""
Error Types

Exceptions raised by the game services. Controllers and WebSocket handlers
translate them into HTTP status codes and error events.
"""

from enum import Enum
from typing import Optional


class WordQuestError(Exception):
    """Base class for all game errors."""
    retryable = False


class InvalidInputError(WordQuestError, ValueError):
    """Raised when the scorer receives words of different lengths."""


class ValidationReason(Enum):
    """Why a guess was rejected before scoring."""
    WRONG_LENGTH = "wrong_length"
    INVALID_CHARACTERS = "invalid_characters"
    NOT_IN_WORD_LIST = "not_in_word_list"


class ValidationError(InvalidInputError):
    """Raised when a guess fails length, character or dictionary checks."""

    def __init__(self, reason: ValidationReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


class SessionTerminated(WordQuestError):
    """Raised when a guess is submitted to a session that is already won or lost."""

    def __init__(self, message: str = "Game is already over"):
        super().__init__(message)


class SessionBusy(WordQuestError):
    """Raised when a guess arrives while a remote scoring call is outstanding."""
    retryable = True

    def __init__(self, message: str = "Still checking the previous guess"):
        super().__init__(message)


class WordSourceUnavailable(WordQuestError):
    """Raised when a word list cannot be loaded or contains no usable words."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Word source '{source}' unavailable: {reason}")
        self.source = source
        self.reason = reason


class RemoteScoringFailure(WordQuestError):
    """Raised when the remote scoring service fails or answers with a malformed payload."""
    retryable = True

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class GameNotFound(WordQuestError):
    """Raised when a game or vault id is not registered."""

    def __init__(self, game_id: str):
        super().__init__("Game not found")
        self.game_id = game_id
