"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from typing import Optional
from dotenv import load_dotenv

CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))

# Load environment variables from config.env
load_dotenv(os.path.join(CONFIG_DIR, 'config.env'))


def _optional_int(value: Optional[str]) -> Optional[int]:
    """Convert an optional environment string to int, treating blanks as unset."""
    if value is None or not value.strip():
        return None
    return int(value)


class Config:
    """Base configuration class with all settings."""
    
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False
    
    # Word Source Settings
    WORD_SOURCE = os.getenv('WORD_SOURCE') or os.path.join(CONFIG_DIR, 'words.txt')
    MIN_WORD_COUNT = int(os.getenv('MIN_WORD_COUNT', 10))
    
    # Game Settings
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', 5))
    MAX_ATTEMPTS = int(os.getenv('MAX_ATTEMPTS', 6))
    RANDOM_SEED = _optional_int(os.getenv('RANDOM_SEED'))
    
    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR') or None


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    MIN_WORD_COUNT = 1
    RANDOM_SEED = 0
    LOG_DIR = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name: Optional[str] = None):
    """Return the configuration class selected by name or the WORDLE_ENV variable."""
    key = (name or os.getenv('WORDLE_ENV', 'default')).strip().lower()
    return config.get(key, config['default'])
