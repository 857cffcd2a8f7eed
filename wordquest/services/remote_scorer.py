"""
Remote Scorer

Client for the public Wordle scoring API. The service keeps the answer;
each call scores one guess and reports whether it was the answer.
"""

from typing import List, Tuple

import requests

from ..errors import RemoteScoringFailure
from ..models.game import LetterResult


class RemoteScorer:
    """
    Scores guesses through ``POST {url}`` with ``{"guess": word}``.

    Expected response::

        {"guess": "array", "was_correct": false,
         "character_info": [{"char": "a", "scoring": {"in_word": true, "correct_idx": false}}, ...]}
    """

    def __init__(self, url: str, timeout: float = 10, session: requests.Session = None):
        self.url = url
        self.timeout = timeout
        self.http = session or requests.Session()

    def score(self, guess: str) -> Tuple[List[LetterResult], bool]:
        """
        Returns the per-letter results and whether the guess was correct.

        Raises:
            RemoteScoringFailure: On network errors, non-2xx responses or a malformed payload
        """
        try:
            response = self.http.post(self.url, json={'guess': guess}, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise RemoteScoringFailure(f"Scoring service unreachable: {e}", e) from e
        except ValueError as e:
            raise RemoteScoringFailure("Scoring service returned invalid JSON", e) from e

        return translate_response(payload, len(guess))


def translate_response(payload, word_length: int) -> Tuple[List[LetterResult], bool]:
    """Maps the API response shape onto LetterResult values."""
    if not isinstance(payload, dict) or not isinstance(payload.get('was_correct'), bool):
        raise RemoteScoringFailure("Scoring service response has missing or non-boolean 'was_correct'")

    if payload['was_correct']:
        return [LetterResult.CORRECT] * word_length, True

    info = payload.get('character_info')
    if not isinstance(info, list) or len(info) != word_length:
        raise RemoteScoringFailure("Scoring service response has malformed 'character_info'")

    results = []
    for entry in info:
        scoring = entry.get('scoring') if isinstance(entry, dict) else None
        if not isinstance(scoring, dict):
            raise RemoteScoringFailure("Scoring service response has malformed letter scoring")
        correct_idx = scoring.get('correct_idx')
        in_word = scoring.get('in_word')
        if not isinstance(correct_idx, bool) or not isinstance(in_word, bool):
            raise RemoteScoringFailure("Scoring service letter flags must be booleans")
        if correct_idx:
            results.append(LetterResult.CORRECT)
        elif in_word:
            results.append(LetterResult.PRESENT)
        else:
            results.append(LetterResult.ABSENT)
    return results, False
