"""
Testing the letter scoring algorithm.
"""

import pytest

from wordquest.errors import InvalidInputError
from wordquest.models.game import LetterResult
from wordquest.services.scorer import is_solved, score

C = LetterResult.CORRECT
P = LetterResult.PRESENT
A = LetterResult.ABSENT


def test_exact_match_is_all_correct():
    assert score("graph", "graph") == [C, C, C, C, C]
    assert is_solved(score("graph", "graph")) is True


def test_no_shared_letters_is_all_absent():
    assert score("debug", "stack") == [A, A, A, A, A]


def test_duplicates_in_both_words():
    # target a,r,r,a,y / guess r,a,d,a,r
    # pass 1: index 3 'a' is exact
    # pass 2: 'r' claims target[1], 'a' claims target[0], 'd' absent, 'r' claims target[2]
    assert score("array", "radar") == [P, P, A, C, P]


def test_repeated_guess_letter_capped_by_target_count():
    # graph has a single 'a' and a single 'r'
    assert score("graph", "array") == [P, C, A, A, A]


def test_exact_match_takes_priority_over_earlier_displaced_letter():
    # float has one 'l'; the exact match at index 1 claims it before index 0 is considered
    assert score("float", "llama") == [A, C, P, A, A]


def test_letter_count_invariant():
    target, guess = "merge", "eerie"
    results = score(target, guess)
    for letter in set(guess):
        marked = sum(1 for g, r in zip(guess, results) if g == letter and r != A)
        assert marked <= target.count(letter)


def test_result_length_matches_target():
    results = score("cache", "batch")
    assert len(results) == 5
    assert all(isinstance(r, LetterResult) for r in results)


def test_length_mismatch_raises():
    with pytest.raises(InvalidInputError):
        score("graph", "abc")


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        score("graph", "graphs")


def test_is_solved_false_for_partial_and_empty():
    assert is_solved([C, C, P, C, C]) is False
    assert is_solved([]) is False
