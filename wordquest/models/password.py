"""
Password Vault Data Models
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PasswordLevel:
    title: str
    prompt: str
    password: str


@dataclass
class PasswordHints:
    """Structured feedback for a wrong password guess."""
    length_hint: str
    overlap_hint: str
    position_hint: str

    def as_message(self) -> str:
        return f"{self.length_hint} {self.overlap_hint} {self.position_hint}"


@dataclass
class PasswordVaultState:
    """Client-facing vault snapshot (never includes the password)."""
    vault_id: str
    level_index: int
    level_count: int
    title: str
    prompt: str
    attempts: int
    solved: bool
    has_next_level: bool
    message: str = ""
    hints: Optional[dict] = None
