"""
Game Service

Registry of live Word Quest sessions keyed by game id.
"""

import time
import uuid
from typing import Dict, List, Optional

from ..config.app_config import Config
from ..config.game_settings import WORD_LIST
from ..errors import GameNotFound
from ..models.game import GameState, GuessOutcome, SessionStatus
from .remote_scorer import RemoteScorer
from .session import GuessSession, new_session
from .word_source import build_word_source

GAME_MODES = ("local", "remote")


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Word selection through the configured word source
    - Routing guesses to local or remote scoring
    - Game state snapshots without exposing answers to clients
    """

    def __init__(self, config_class=Config, word_source=None, remote_scorer=None):
        self.config = config_class
        self.games: Dict[str, GuessSession] = {}  # Store active games by game_id
        self.word_source = word_source or build_word_source(
            config_class.WORD_LIST_SOURCE, WORD_LIST, config_class.WORD_LENGTH
        )
        self.remote_scorer = remote_scorer or RemoteScorer(
            config_class.REMOTE_SCORING_URL, timeout=config_class.REMOTE_TIMEOUT_SECONDS
        )

    def create_new_game(self, game_mode: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            game_mode: "local" (target drawn from the word source) or
                "remote" (scored by the remote service)

        Returns:
            str: Unique game ID for this session
        """
        game_mode = game_mode or self.config.DEFAULT_GAME_MODE
        if game_mode not in GAME_MODES:
            raise ValueError(f'Invalid game mode. Must be one of {", ".join(GAME_MODES)}')

        game_id = str(uuid.uuid4())
        self.games[game_id] = new_session(
            word_source=self.word_source if game_mode == "local" else None,
            remote_scorer=self.remote_scorer if game_mode == "remote" else None,
            max_rounds=self.config.MAX_ROUNDS,
            word_length=self.config.WORD_LENGTH,
            dictionary=frozenset(self.word_source.words),
            require_dictionary_word=self.config.REQUIRE_DICTIONARY_WORD
        )
        return game_id

    def get_session(self, game_id: str) -> GuessSession:
        if game_id not in self.games:
            raise GameNotFound(game_id)
        return self.games[game_id]

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        if game_id not in self.games:
            return None

        session = self.games[game_id]
        row, col = session.cursor

        return GameState(
            game_id=game_id,
            game_mode=session.mode,
            status=session.status.value,
            current_round=len(session.guesses),
            max_rounds=session.max_rounds,
            game_over=session.is_over,
            won=session.status == SessionStatus.WON,
            guesses=session.guesses.copy(),
            guess_results=[
                [(letter, result.value) for letter, result in zip(guess, results)]
                for guess, results in zip(session.guesses, session.results)
            ],
            letter_status=session.keyboard_snapshot(),
            current_row=row,
            current_col=col,
            pending_input=session.pending,
            # Create state object without exposing the answer unless game is over
            answer=session.target if session.is_over else None,
            message=session.message
        )

    def make_guess(self, game_id: str, guess: str) -> GuessOutcome:
        """
        Processes a guess and updates game state.

        Raises:
            GameNotFound, ValidationError, SessionTerminated, SessionBusy,
            RemoteScoringFailure: Propagated to the caller unchanged
        """
        return self.get_session(game_id).submit(guess)

    def press_key(self, game_id: str, key: str) -> Optional[GuessOutcome]:
        """Types, deletes or commits through the on-screen keyboard."""
        return self.get_session(game_id).press_key(key)

    def cleanup_idle_games(self, max_idle_seconds: float, now: Optional[float] = None) -> List[str]:
        """
        Drops sessions whose last activity is older than ``max_idle_seconds``.

        Returns:
            List of removed game IDs
        """
        now = time.time() if now is None else now
        expired = [
            game_id for game_id, session in list(self.games.items())
            if now - session.last_activity > max_idle_seconds
        ]
        for game_id in expired:
            self.games.pop(game_id, None)
        return expired

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        return self.games.pop(game_id, None) is not None


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=Config, **kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(config_class, **kwargs)
    return _game_service
