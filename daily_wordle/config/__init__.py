"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Puzzle constants and the word source loader
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import WORD_LENGTH, MAX_ATTEMPTS, DEFAULT_WORD_FILE, load_word_source

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_ATTEMPTS', 'DEFAULT_WORD_FILE', 'load_word_source'
]
