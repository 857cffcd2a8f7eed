"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_flag(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Base configuration class with all settings."""
    
    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG')
    TESTING = False
    
    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    
    # Game Settings
    MAX_ROUNDS = int(os.getenv('MAX_ROUNDS', 6))
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', 5))
    DEFAULT_GAME_MODE = os.getenv('DEFAULT_GAME_MODE', 'local')
    # File path or http(s) URL of a JSON word array; bundled list when unset
    WORD_LIST_SOURCE = os.getenv('WORD_LIST_SOURCE')
    REQUIRE_DICTIONARY_WORD = _env_flag('REQUIRE_DICTIONARY_WORD')
    
    # Remote Scoring Settings
    REMOTE_SCORING_URL = os.getenv('REMOTE_SCORING_URL', 'https://wordle-api.vercel.app/api/wordle')
    REMOTE_TIMEOUT_SECONDS = float(os.getenv('REMOTE_TIMEOUT_SECONDS', 10))
    
    # Session Housekeeping
    SESSION_IDLE_TIMEOUT_SECONDS = int(os.getenv('SESSION_IDLE_TIMEOUT_SECONDS', 3600))
    CLEANUP_INTERVAL_SECONDS = int(os.getenv('CLEANUP_INTERVAL_SECONDS', 60))
    
    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    WORD_LIST_SOURCE = None
    REQUIRE_DICTIONARY_WORD = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
