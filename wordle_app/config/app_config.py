"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
The same settings drive both the authority server and the offline-capable client.
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
    PORT = int(os.getenv('PORT', 5000))

    # Remote Authority Settings (client side)
    API_BASE_URL = os.getenv('API_BASE_URL', 'http://127.0.0.1:5000/api')
    REMOTE_TIMEOUT_SECONDS = float(os.getenv('REMOTE_TIMEOUT_SECONDS', 5))
    DIAGNOSTIC_MODE = os.getenv('DIAGNOSTIC_MODE', 'False').lower() == 'true'

    # Game Settings
    FALLBACK_SOLUTION = os.getenv('FALLBACK_SOLUTION', 'REACT').upper()
    MESSAGE_DISMISS_SECONDS = float(os.getenv('MESSAGE_DISMISS_SECONDS', 2))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    DIAGNOSTIC_MODE = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    DIAGNOSTIC_MODE = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
