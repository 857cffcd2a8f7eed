"""
Scorer

Implements the authentic Wordle letter evaluation algorithm.
"""

from typing import List, Optional

from ..errors import InvalidInputError
from ..models.game import LetterResult


def score(target: str, guess: str) -> List[LetterResult]:
    """
    Classifies each letter of ``guess`` against ``target``.

    Exact matches are claimed first so that a displaced copy of a letter can
    never take a target slot that an exact match needs. Each target slot is
    claimed at most once, so repeated letters in the guess are only marked
    as often as they occur in the target.

    Args:
        target: The secret word
        guess: The word being scored (already validated by the caller)

    Returns:
        List[LetterResult]: One result per guess position

    Raises:
        InvalidInputError: If the two words differ in length
    """
    if len(target) != len(guess):
        raise InvalidInputError(
            f"Guess length {len(guess)} does not match target length {len(target)}"
        )

    result: List[Optional[LetterResult]] = [None] * len(guess)
    claimed = [False] * len(target)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result[i] = LetterResult.CORRECT
            claimed[i] = True

    # Second pass: displaced letters take the first unclaimed matching slot
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        for k, target_letter in enumerate(target):
            if not claimed[k] and target_letter == letter:
                result[i] = LetterResult.PRESENT
                claimed[k] = True
                break
        else:
            result[i] = LetterResult.ABSENT

    return result  # type: ignore[return-value]


def is_solved(results: List[LetterResult]) -> bool:
    """True when every position was scored correct."""
    return bool(results) and all(r == LetterResult.CORRECT for r in results)
