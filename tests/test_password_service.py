"""
Testing the password vault game.
"""

import pytest

from wordquest.config.game_settings import PASSWORD_LEVELS
from wordquest.errors import GameNotFound
from wordquest.services.password_service import PasswordVault, analyze_password_guess


def test_hints_for_wrong_guess():
    hints = analyze_password_guess("grasp", "graph")
    assert hints.length_hint == "Your guess has 5 characters, password has 5."
    # g, r, a, p of the password appear in the guess
    assert hints.overlap_hint == "You used 4 character(s) that also appear in the password."
    assert hints.position_hint == "3 character(s) are in the correct position."


def test_hints_are_case_sensitive():
    hints = analyze_password_guess("neura", "Neura")
    assert hints.position_hint == "4 character(s) are in the correct position."
    assert hints.overlap_hint == "You used 4 character(s) that also appear in the password."


def test_overlap_counts_repeated_password_characters():
    # The single 's' and both '2' characters of the password
    hints = analyze_password_guess("s2", "secure2023")
    assert hints.overlap_hint == "You used 3 character(s) that also appear in the password."


def test_position_matches_use_shorter_length():
    hints = analyze_password_guess("shipfast", "shipfast!")
    assert hints.position_hint == "8 character(s) are in the correct position."
    assert hints.length_hint == "Your guess has 8 characters, password has 9."


def test_blank_guess_not_counted():
    vault = PasswordVault()
    assert vault.guess("   ") is False
    assert vault.attempts == 0
    assert vault.message == "Enter a guess first."


def test_solving_levels():
    vault = PasswordVault()
    assert vault.guess("graph!") is False
    assert vault.guess("graph") is True
    assert vault.attempts == 2
    assert vault.message == "Correct! You cracked the password in 2 attempt(s)."
    assert vault.has_next_level is True

    assert vault.next_level() is True
    assert vault.level.password == "Neura"
    assert vault.attempts == 0
    assert vault.solved is False


def test_last_level_has_no_next():
    vault = PasswordVault()
    for _ in range(len(PASSWORD_LEVELS) - 1):
        assert vault.next_level() is True
    assert vault.has_next_level is False
    assert vault.next_level() is False

    vault.restart()
    assert vault.level_index == 0


def test_service_state_hides_password(password_service):
    vault_id = password_service.create_vault()
    state = password_service.guess(vault_id, "wrong")

    assert state.attempts == 1
    assert state.hints["length"] == "Your guess has 5 characters, password has 5."
    assert "graph" not in str(state)


def test_unknown_vault(password_service):
    with pytest.raises(GameNotFound):
        password_service.get_state("missing")


def test_cleanup_idle_vaults(password_service):
    stale = password_service.create_vault()
    fresh = password_service.create_vault()
    password_service.vaults[stale].last_activity = 100.0
    password_service.vaults[fresh].last_activity = 1000.0

    expired = password_service.cleanup_idle_vaults(max_idle_seconds=500, now=1100.0)

    assert expired == [stale]
    assert list(password_service.vaults) == [fresh]


def test_guess_refreshes_activity(password_service):
    vault_id = password_service.create_vault()
    password_service.vaults[vault_id].last_activity = 0.0
    password_service.guess(vault_id, "wrong")
    assert password_service.vaults[vault_id].last_activity > 0.0
