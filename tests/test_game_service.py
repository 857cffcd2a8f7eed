"""
Testing the game registry and state snapshots.
"""

import pytest

from wordquest.config import TestingConfig
from wordquest.errors import GameNotFound, SessionTerminated, ValidationError, ValidationReason
from wordquest.services.game_service import GameService
from wordquest.services.word_source import StaticWordSource


class DictionaryConfig(TestingConfig):
    REQUIRE_DICTIONARY_WORD = True


def test_new_game_state_hides_answer(game_service):
    game_id = game_service.create_new_game("local")
    state = game_service.get_game_state(game_id)

    assert state.game_id == game_id
    assert state.game_mode == "local"
    assert state.status == "in_progress"
    assert state.current_round == 0
    assert state.max_rounds == 6
    assert state.answer is None
    assert state.letter_status == {}


def test_default_mode_comes_from_config(game_service):
    game_id = game_service.create_new_game()
    assert game_service.get_game_state(game_id).game_mode == TestingConfig.DEFAULT_GAME_MODE


def test_invalid_mode_rejected(game_service):
    with pytest.raises(ValueError):
        game_service.create_new_game("absurdle")


def test_guess_updates_state_and_reveals_answer_when_over(game_service):
    game_id = game_service.create_new_game("local")
    game_service.make_guess(game_id, "train")
    state = game_service.get_game_state(game_id)

    assert state.current_round == 1
    assert state.guess_results[0][1] == ("r", "correct")
    assert state.letter_status["t"] == "absent"
    assert state.answer is None

    game_service.make_guess(game_id, "graph")
    state = game_service.get_game_state(game_id)
    assert state.won is True
    assert state.game_over is True
    assert state.answer == "graph"

    with pytest.raises(SessionTerminated):
        game_service.make_guess(game_id, "graph")


def test_remote_game_never_reveals_answer(game_service):
    game_id = game_service.create_new_game("remote")
    game_service.make_guess(game_id, "graph")
    state = game_service.get_game_state(game_id)
    assert state.won is True
    assert state.answer is None


def test_unknown_game(game_service):
    assert game_service.get_game_state("missing") is None
    with pytest.raises(GameNotFound):
        game_service.make_guess("missing", "graph")
    assert game_service.delete_game("missing") is False


def test_delete_game(game_service):
    game_id = game_service.create_new_game("local")
    assert game_service.delete_game(game_id) is True
    assert game_id not in game_service.games


def test_cleanup_idle_games(game_service):
    stale = game_service.create_new_game("local")
    fresh = game_service.create_new_game("local")
    game_service.games[stale].last_activity = 100.0
    game_service.games[fresh].last_activity = 1000.0

    expired = game_service.cleanup_idle_games(max_idle_seconds=500, now=1100.0)

    assert expired == [stale]
    assert list(game_service.games) == [fresh]


def test_dictionary_flag_from_config(remote_scorer):
    service = GameService(DictionaryConfig, word_source=StaticWordSource(["graph", "train"]),
                          remote_scorer=remote_scorer)
    game_id = service.create_new_game("local")
    service.make_guess(game_id, "train")
    with pytest.raises(ValidationError) as exc_info:
        service.make_guess(game_id, "zzzzz")
    assert exc_info.value.reason == ValidationReason.NOT_IN_WORD_LIST


def test_delete_after_idle_cleanup_reports_missing(game_service):
    game_id = game_service.create_new_game("local")
    game_service.games[game_id].last_activity = 0.0
    assert game_service.cleanup_idle_games(max_idle_seconds=10, now=100.0) == [game_id]

    assert game_service.delete_game(game_id) is False
