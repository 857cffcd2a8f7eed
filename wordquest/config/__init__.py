"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, word lists and vault levels (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LIST, FALLBACK_WORD_LIST, MAX_ROUNDS, WORD_LENGTH, PASSWORD_LEVELS,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LIST', 'FALLBACK_WORD_LIST', 'MAX_ROUNDS', 'WORD_LENGTH', 'PASSWORD_LEVELS',
    'validate_word_list_integrity', 'get_word_statistics'
]
