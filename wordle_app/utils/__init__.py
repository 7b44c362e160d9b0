"""
Utilities Package

Contains utility functions and the shared game logger.
"""

from .helpers import get_user_identity
from .game_logger import GameLogger, game_logger

__all__ = ['get_user_identity', 'GameLogger', 'game_logger']
