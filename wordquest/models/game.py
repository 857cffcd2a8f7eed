"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterResult(Enum):
    """Per-letter evaluation of a guess. Values double as front-end CSS classes."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def rank(self) -> int:
        return _RANKS[self]


_RANKS = {
    LetterResult.ABSENT: 0,
    LetterResult.PRESENT: 1,
    LetterResult.CORRECT: 2,
}


class SessionStatus(Enum):
    """Lifecycle of a guess session."""
    IN_PROGRESS = "in_progress"
    AWAITING_REMOTE = "awaiting_remote"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionStatus.WON, SessionStatus.LOST)


@dataclass
class GuessOutcome:
    """What a single submitted guess produced."""
    guess: str
    results: List[LetterResult]
    letter_status: Dict[str, str]
    status: SessionStatus


@dataclass
class GameState:
    """Client-facing game state snapshot."""
    game_id: str
    game_mode: str  # "local" or "remote"
    status: str
    current_round: int
    max_rounds: int
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter results as strings for JSON serialization
    letter_status: Dict[str, str]
    current_row: int
    current_col: int
    pending_input: str
    answer: Optional[str] = None  # Only included when game is over
    message: str = ""
