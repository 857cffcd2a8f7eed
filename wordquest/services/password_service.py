"""
Password Vault Service

A levelled password-guessing game. Each wrong guess earns structured
hints about length, shared characters and exact positions.
"""

import time
import uuid
from typing import Dict, List, Optional, Sequence

from ..config.game_settings import PASSWORD_LEVELS
from ..errors import GameNotFound
from ..models.password import PasswordHints, PasswordLevel, PasswordVaultState


def analyze_password_guess(guess: str, secret: str) -> PasswordHints:
    """
    Compares a guess to the secret, case-sensitively.

    The overlap count walks the secret, so a secret character that repeats
    is counted once per occurrence if it appears anywhere in the guess.
    """
    guess = guess or ""
    secret = secret or ""
    guess_chars = set(guess)
    overlap = sum(1 for char in secret if char in guess_chars)
    position_matches = sum(1 for g, s in zip(guess, secret) if g == s)

    return PasswordHints(
        length_hint=f"Your guess has {len(guess)} characters, password has {len(secret)}.",
        overlap_hint=f"You used {overlap} character(s) that also appear in the password.",
        position_hint=f"{position_matches} character(s) are in the correct position."
    )


class PasswordVault:
    """Progress through the password levels for one player."""

    def __init__(self, levels: Sequence[PasswordLevel] = PASSWORD_LEVELS):
        if not levels:
            raise ValueError("Password vault needs at least one level")
        self.levels = list(levels)
        self.level_index = 0
        self.attempts = 0
        self.solved = False
        self.message = ""
        self.hints: Optional[PasswordHints] = None
        self.last_activity = time.time()

    @property
    def level(self) -> PasswordLevel:
        return self.levels[self.level_index]

    @property
    def has_next_level(self) -> bool:
        return self.level_index < len(self.levels) - 1

    def _reset_level(self) -> None:
        self.last_activity = time.time()
        self.attempts = 0
        self.solved = False
        self.message = ""
        self.hints = None

    def guess(self, text: str) -> bool:
        """Returns True when the guess cracks the current level."""
        text = text or ""
        self.last_activity = time.time()
        if not text.strip():
            self.message = "Enter a guess first."
            return False

        self.attempts += 1
        if text == self.level.password:
            self.solved = True
            self.hints = None
            self.message = f"Correct! You cracked the password in {self.attempts} attempt(s)."
            return True

        self.hints = analyze_password_guess(text, self.level.password)
        self.message = self.hints.as_message()
        return False

    def next_level(self) -> bool:
        if not self.has_next_level:
            return False
        self.level_index += 1
        self._reset_level()
        return True

    def restart(self) -> None:
        self.level_index = 0
        self._reset_level()


class PasswordService:
    """Registry of password vaults keyed by vault id."""

    def __init__(self, levels: Sequence[PasswordLevel] = PASSWORD_LEVELS):
        self.levels = levels
        self.vaults: Dict[str, PasswordVault] = {}

    def create_vault(self) -> str:
        vault_id = str(uuid.uuid4())
        self.vaults[vault_id] = PasswordVault(self.levels)
        return vault_id

    def get_vault(self, vault_id: str) -> PasswordVault:
        if vault_id not in self.vaults:
            raise GameNotFound(vault_id)
        return self.vaults[vault_id]

    def get_state(self, vault_id: str) -> PasswordVaultState:
        vault = self.get_vault(vault_id)
        return PasswordVaultState(
            vault_id=vault_id,
            level_index=vault.level_index,
            level_count=len(vault.levels),
            title=vault.level.title,
            prompt=vault.level.prompt,
            attempts=vault.attempts,
            solved=vault.solved,
            has_next_level=vault.has_next_level,
            message=vault.message,
            hints={
                'length': vault.hints.length_hint,
                'overlap': vault.hints.overlap_hint,
                'position': vault.hints.position_hint
            } if vault.hints else None
        )

    def guess(self, vault_id: str, text: str) -> PasswordVaultState:
        self.get_vault(vault_id).guess(text)
        return self.get_state(vault_id)

    def next_level(self, vault_id: str) -> PasswordVaultState:
        self.get_vault(vault_id).next_level()
        return self.get_state(vault_id)

    def restart(self, vault_id: str) -> PasswordVaultState:
        self.get_vault(vault_id).restart()
        return self.get_state(vault_id)

    def delete_vault(self, vault_id: str) -> bool:
        return self.vaults.pop(vault_id, None) is not None

    def cleanup_idle_vaults(self, max_idle_seconds: float, now: Optional[float] = None) -> List[str]:
        """Drops vaults untouched for longer than ``max_idle_seconds`` and returns their ids."""
        now = time.time() if now is None else now
        expired = [
            vault_id for vault_id, vault in list(self.vaults.items())
            if now - vault.last_activity > max_idle_seconds
        ]
        for vault_id in expired:
            self.vaults.pop(vault_id, None)
        return expired


# Global service instance
_password_service = None


def get_password_service() -> Optional[PasswordService]:
    """Get the global password service instance."""
    return _password_service


def initialize_password_service() -> PasswordService:
    """Initialize the global password service instance."""
    global _password_service
    _password_service = PasswordService()
    return _password_service
