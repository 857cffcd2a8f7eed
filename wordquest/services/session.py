"""
Guess Session

Turn-based state machine for one Word Quest game. A session owns the
target word, the guess history, the cursor of the row being typed and the
keyboard state built from every scored guess.
"""

import re
import threading
import time
from typing import Collection, Dict, List, Optional

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH
from ..errors import SessionBusy, SessionTerminated, ValidationError, ValidationReason
from ..models.game import GuessOutcome, LetterResult, SessionStatus
from .scorer import is_solved, score


class GuessSession:
    """
    A single game of Word Quest.

    In local mode the session holds ``target`` and scores with the local
    scorer. In remote mode ``target`` is None and every guess is scored by
    ``remote_scorer``; the session sits in ``AWAITING_REMOTE`` while that
    call is outstanding and rejects other submissions until it resolves.
    """

    def __init__(self,
                 target: Optional[str] = None,
                 remote_scorer=None,
                 max_rounds: int = MAX_ROUNDS,
                 word_length: int = WORD_LENGTH,
                 dictionary: Optional[Collection[str]] = None,
                 require_dictionary_word: bool = False):
        if target is None and remote_scorer is None:
            raise ValueError("A session needs either a target word or a remote scorer")
        if target is not None and len(target) != word_length:
            raise ValueError(f"Target must be {word_length} letters")

        self.target = target.lower() if target is not None else None
        self.remote_scorer = remote_scorer
        self.max_rounds = max_rounds
        self.word_length = word_length
        self.dictionary = dictionary
        self.require_dictionary_word = require_dictionary_word

        self.status = SessionStatus.IN_PROGRESS
        self.guesses: List[str] = []
        self.results: List[List[LetterResult]] = []
        self.keyboard: Dict[str, LetterResult] = {}
        self.pending = ""
        self.message = f"Guess the {word_length}-letter word"
        self.last_activity = time.time()

        self._pattern = re.compile(rf"^[a-z]{{{word_length}}}$")
        self._lock = threading.Lock()

    @property
    def mode(self) -> str:
        return "remote" if self.remote_scorer is not None else "local"

    @property
    def cursor(self):
        """(row, col) of the next letter to be typed."""
        return len(self.guesses), len(self.pending)

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    def keyboard_snapshot(self) -> Dict[str, str]:
        return {letter: result.value for letter, result in self.keyboard.items()}

    def validate_guess(self, guess: str) -> str:
        """
        Normalizes a guess and checks length, characters and (optionally)
        dictionary membership.

        Raises:
            ValidationError: With the reason the guess was rejected
        """
        if not isinstance(guess, str):
            raise ValidationError(ValidationReason.INVALID_CHARACTERS, "Guess must be a valid string")

        normalized = guess.strip().lower()
        if len(normalized) != self.word_length:
            raise ValidationError(ValidationReason.WRONG_LENGTH,
                                  f"Finish the word ({self.word_length} letters)")
        if not self._pattern.match(normalized):
            raise ValidationError(ValidationReason.INVALID_CHARACTERS, "Use only letters A-Z")
        if self.require_dictionary_word and self.dictionary is not None and normalized not in self.dictionary:
            raise ValidationError(ValidationReason.NOT_IN_WORD_LIST, "Word not in word list")
        return normalized

    def submit(self, guess: str) -> GuessOutcome:
        """
        Scores a guess and advances the game.

        Raises:
            SessionTerminated: If the game is already won or lost
            SessionBusy: If a remote scoring call is still outstanding
            ValidationError: If the guess is malformed
            RemoteScoringFailure: If remote scoring failed; the guess is not recorded
        """
        with self._lock:
            self._check_accepting()
            normalized = self.validate_guess(guess)
            self.last_activity = time.time()
            if self.remote_scorer is None:
                results = score(self.target, normalized)
                return self._record(normalized, results, is_solved(results))
            self.status = SessionStatus.AWAITING_REMOTE

        # The lock is not held during the HTTP call; AWAITING_REMOTE rejects re-entry
        try:
            results, solved = self.remote_scorer.score(normalized)
        except Exception:
            with self._lock:
                self.status = SessionStatus.IN_PROGRESS
                self.message = "Could not check that word, try again"
            raise

        with self._lock:
            return self._record(normalized, results, solved)

    def _check_accepting(self) -> None:
        if self.status.is_terminal:
            raise SessionTerminated()
        if self.status == SessionStatus.AWAITING_REMOTE:
            raise SessionBusy()

    def _record(self, guess: str, results: List[LetterResult], solved: bool) -> GuessOutcome:
        self.guesses.append(guess)
        self.results.append(results)
        self._update_keyboard(guess, results)
        self.pending = ""

        if solved:
            self.status = SessionStatus.WON
            self.message = "You got it!"
        elif len(self.guesses) >= self.max_rounds:
            self.status = SessionStatus.LOST
            self.message = "Out of guesses!"
        else:
            self.status = SessionStatus.IN_PROGRESS
            self.message = ""

        return GuessOutcome(
            guess=guess,
            results=list(results),
            letter_status=self.keyboard_snapshot(),
            status=self.status
        )

    def _update_keyboard(self, guess: str, results: List[LetterResult]) -> None:
        # Status can only progress in priority order
        for letter, result in zip(guess, results):
            current = self.keyboard.get(letter)
            if current is None or result.rank > current.rank:
                self.keyboard[letter] = result

    # On-screen keyboard input

    def _accepts_input(self) -> bool:
        # The row stays fixed while it is being scored remotely
        return self.status == SessionStatus.IN_PROGRESS

    def type_letter(self, letter: str) -> bool:
        """Appends a letter to the row being typed. Returns False if it was ignored."""
        if not self._accepts_input() or len(self.pending) >= self.word_length:
            return False
        if not isinstance(letter, str) or len(letter) != 1 or not ('a' <= letter.lower() <= 'z'):
            return False
        self.pending += letter.lower()
        self.last_activity = time.time()
        return True

    def delete_letter(self) -> bool:
        if not self._accepts_input() or not self.pending:
            return False
        self.pending = self.pending[:-1]
        self.last_activity = time.time()
        return True

    def commit_row(self) -> GuessOutcome:
        """Submits the row being typed."""
        try:
            return self.submit(self.pending)
        except ValidationError as e:
            self.message = e.message
            raise

    def press_key(self, key: str) -> Optional[GuessOutcome]:
        """
        Dispatches a key from the on-screen or physical keyboard.

        ``Enter`` commits the row, ``Backspace`` deletes a letter and a single
        letter is typed. Other keys are ignored.
        """
        if key == "Enter":
            return self.commit_row()
        if key == "Backspace":
            self.delete_letter()
        else:
            self.type_letter(key)
        return None


def new_session(word_source=None,
                remote_scorer=None,
                max_rounds: int = MAX_ROUNDS,
                word_length: int = WORD_LENGTH,
                dictionary: Optional[Collection[str]] = None,
                require_dictionary_word: bool = False) -> GuessSession:
    """
    Starts a fresh session.

    With a remote scorer no target is drawn; otherwise the target comes from
    ``word_source.pick_target()``.
    """
    target = None
    if remote_scorer is None:
        if word_source is None:
            raise ValueError("A word source is required for local games")
        target = word_source.pick_target()
        if dictionary is None and hasattr(word_source, 'words'):
            dictionary = frozenset(word_source.words)

    return GuessSession(
        target=target,
        remote_scorer=remote_scorer,
        max_rounds=max_rounds,
        word_length=word_length,
        dictionary=dictionary,
        require_dictionary_word=require_dictionary_word
    )
