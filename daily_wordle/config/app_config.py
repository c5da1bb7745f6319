"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 3000))

    # Database Settings
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'wordle_game')

    # Authentication Settings (tokens are issued elsewhere, only verified here)
    JWT_SECRET = os.getenv('JWT_SECRET')

    # Puzzle Settings
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH')

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
    JWT_SECRET = 'testing-jwt-secret-do-not-use-in-production'
    MONGO_DB_NAME = 'wordle_game_test'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
