"""
Testing the remote scoring client and its response translation.
"""

import pytest
import requests

from wordquest.errors import RemoteScoringFailure
from wordquest.models.game import LetterResult
from wordquest.services.remote_scorer import RemoteScorer, translate_response

C = LetterResult.CORRECT
P = LetterResult.PRESENT
A = LetterResult.ABSENT


def _info(word, flags):
    # flags: "c" correct, "p" present, "a" absent
    return [
        {"char": ch, "scoring": {"in_word": f in "cp", "correct_idx": f == "c"}}
        for ch, f in zip(word, flags)
    ]


class FakeResponse:
    def __init__(self, payload=None, status_code=200, bad_json=False):
        self.payload = payload
        self.status_code = status_code
        self.bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.bad_json:
            raise ValueError("not json")
        return self.payload


class FakeHttp:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def post(self, url, json, timeout):
        self.requests.append((url, json, timeout))
        if self.error:
            raise self.error
        return self.response


def test_translates_per_letter_scoring():
    payload = {"guess": "train", "was_correct": False, "character_info": _info("train", "acpaa")}
    results, solved = translate_response(payload, 5)
    assert results == [A, C, P, A, A]
    assert solved is False


def test_was_correct_forces_all_correct():
    # Per-letter detail is ignored once the service says the word is right
    payload = {"guess": "graph", "was_correct": True, "character_info": _info("graph", "aaaaa")}
    results, solved = translate_response(payload, 5)
    assert results == [C] * 5
    assert solved is True


def test_in_word_without_correct_idx_is_present():
    payload = {"was_correct": False, "character_info": _info("stack", "ppppp")}
    assert translate_response(payload, 5)[0] == [P] * 5


@pytest.mark.parametrize("payload", [
    None,
    [],
    {"character_info": []},
    {"was_correct": False},
    {"was_correct": False, "character_info": _info("abc", "aaa")},
    {"was_correct": False, "character_info": ["a", "b", "c", "d", "e"]},
    {"was_correct": "false", "character_info": []},
    {"was_correct": 1, "character_info": _info("train", "aaaaa")},
    {"was_correct": None, "character_info": _info("train", "aaaaa")},
    {"was_correct": False, "character_info": [{"char": c, "scoring": {"in_word": "true", "correct_idx": "false"}} for c in "train"]},
    {"was_correct": False, "character_info": [{"char": c, "scoring": {"in_word": False}} for c in "train"]},
])
def test_malformed_payload_raises(payload):
    with pytest.raises(RemoteScoringFailure):
        translate_response(payload, 5)


def test_score_posts_guess():
    http = FakeHttp(FakeResponse({"was_correct": False, "character_info": _info("train", "aaaaa")}))
    scorer = RemoteScorer("https://scoring.test/api/wordle", timeout=4, session=http)

    results, solved = scorer.score("train")

    assert results == [A] * 5
    assert http.requests == [("https://scoring.test/api/wordle", {"guess": "train"}, 4)]


def test_network_error_is_retryable_failure():
    scorer = RemoteScorer("https://scoring.test", session=FakeHttp(error=requests.ConnectionError("down")))
    with pytest.raises(RemoteScoringFailure) as exc_info:
        scorer.score("train")
    assert exc_info.value.retryable is True
    assert isinstance(exc_info.value.cause, requests.ConnectionError)


def test_http_error_status_raises():
    scorer = RemoteScorer("https://scoring.test", session=FakeHttp(FakeResponse(status_code=500)))
    with pytest.raises(RemoteScoringFailure):
        scorer.score("train")


def test_invalid_json_raises():
    scorer = RemoteScorer("https://scoring.test", session=FakeHttp(FakeResponse(bad_json=True)))
    with pytest.raises(RemoteScoringFailure):
        scorer.score("train")
