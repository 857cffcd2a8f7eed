"""
Shared fixtures: a deterministic word source, a scripted remote scorer and
a Flask app wired to fresh service instances.
"""

import pytest

from wordquest import create_app
from wordquest.config import TestingConfig
from wordquest.errors import RemoteScoringFailure
from wordquest.services.game_service import initialize_game_service
from wordquest.services.password_service import initialize_password_service
from wordquest.services.scorer import score
from wordquest.services.word_source import StaticWordSource


class ScriptedRemoteScorer:
    """Stands in for the HTTP client: scores against a known answer or fails on demand."""

    def __init__(self, answer="graph"):
        self.answer = answer
        self.calls = []
        self.fail_next = False

    def score(self, guess):
        self.calls.append(guess)
        if self.fail_next:
            self.fail_next = False
            raise RemoteScoringFailure("Scoring service unreachable")
        return score(self.answer, guess), guess == self.answer


@pytest.fixture
def remote_scorer():
    return ScriptedRemoteScorer()


@pytest.fixture
def game_service(remote_scorer):
    return initialize_game_service(
        TestingConfig,
        word_source=StaticWordSource(["graph"]),
        remote_scorer=remote_scorer
    )


@pytest.fixture
def password_service():
    return initialize_password_service()


@pytest.fixture
def app(game_service, password_service):
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
