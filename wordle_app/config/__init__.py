"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: application configuration (environment-based)
- game_settings.py: game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ALPHABET, FALLBACK_SOLUTION, KEYBOARD_ROWS, MAX_ROUNDS, WORD_LENGTH, WORD_LIST,
    validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALPHABET', 'FALLBACK_SOLUTION', 'KEYBOARD_ROWS', 'MAX_ROUNDS', 'WORD_LENGTH',
    'WORD_LIST', 'validate_word_list_integrity'
]
