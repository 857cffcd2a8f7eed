"""
Word Sources

Supply target words to new guess sessions. Every source falls back to
``FALLBACK_WORD_LIST`` when it has nothing usable, records that it did so
in ``fallback_used`` and logs a warning.
"""

import json
import random
from typing import Iterable, List, Optional

import requests

from ..config.game_settings import FALLBACK_WORD_LIST, WORD_LENGTH
from ..errors import WordSourceUnavailable
from ..utils.game_logger import game_logger


def normalize_word_list(words: Iterable, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Lowercases words and drops anything that is not a plain alphabetic word
    of the right length. Order is kept and duplicates are removed.
    """
    normalized = []
    seen = set()
    dropped = 0
    for word in words:
        if not isinstance(word, str):
            dropped += 1
            continue
        word = word.strip().lower()
        if len(word) != word_length or not word.isalpha() or not word.isascii():
            dropped += 1
            continue
        if word not in seen:
            seen.add(word)
            normalized.append(word)
    if dropped:
        game_logger.logger.warning(f"Dropped {dropped} unusable word(s) from word list")
    return normalized


class StaticWordSource:
    """Samples targets uniformly at random from an in-memory list."""

    name = "static"

    def __init__(self, words: Iterable, word_length: int = WORD_LENGTH, rng: Optional[random.Random] = None):
        self.word_length = word_length
        self._rng = rng or random.Random()
        self._raw_words = words
        self.fallback_used = False
        self.last_error: Optional[WordSourceUnavailable] = None
        self.words = self._with_fallback(self._load)

    def _load(self) -> List[str]:
        return self._require_words(normalize_word_list(self._raw_words, self.word_length))

    def _require_words(self, words: List[str]) -> List[str]:
        if not words:
            raise WordSourceUnavailable(self.name, "no usable words")
        return words

    def _with_fallback(self, loader) -> List[str]:
        try:
            return loader()
        except WordSourceUnavailable as e:
            self.fallback_used = True
            self.last_error = e
            game_logger.log_word_source_fallback(e.source, e.reason, len(FALLBACK_WORD_LIST))
            return list(FALLBACK_WORD_LIST)

    def pick_target(self) -> str:
        return self._rng.choice(self.words)

    def __contains__(self, word: str) -> bool:
        return word in self.words


class ResourceWordSource(StaticWordSource):
    """
    Loads a JSON array of words from a file path or an http(s) URL.

    The resource is read once at construction time. Any failure (missing
    file, network error, bad JSON, empty list) switches to the fallback list.
    """

    def __init__(self, location: str, word_length: int = WORD_LENGTH,
                 rng: Optional[random.Random] = None, timeout: float = 10):
        self.location = location
        self.name = location
        self.timeout = timeout
        super().__init__((), word_length=word_length, rng=rng)

    def _load(self) -> List[str]:
        raw = self._fetch() if self.location.startswith(('http://', 'https://')) else self._read_file()
        if not isinstance(raw, list):
            raise WordSourceUnavailable(self.location, "resource must contain a JSON array of words")
        return self._require_words(normalize_word_list(raw, self.word_length))

    def _fetch(self):
        try:
            response = requests.get(self.location, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            raise WordSourceUnavailable(self.location, str(e)) from e

    def _read_file(self):
        try:
            with open(self.location, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise WordSourceUnavailable(self.location, str(e)) from e


def build_word_source(location: Optional[str], default_words: Iterable, word_length: int = WORD_LENGTH):
    """Creates the word source for a configured location, or the bundled list when unset."""
    if location:
        return ResourceWordSource(location, word_length=word_length)
    return StaticWordSource(default_words, word_length=word_length)
