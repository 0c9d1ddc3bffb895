"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: environment-based application configuration
- game_settings.py: game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import WORD_LENGTH, MAX_ATTEMPTS, MIN_WORD_COUNT, validate_word_list_integrity

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'WORD_LENGTH', 'MAX_ATTEMPTS', 'MIN_WORD_COUNT', 'validate_word_list_integrity'
]
