"""
Services Package

Contains the game engine, scoring, the reconciliation layer and the
authority-side game service.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .game_session import GameSession
from .reconciliation import ReconciliationService
from .remote_client import RemoteGameClient
from .scoring import aggregate, score

__all__ = [
    'GameService', 'get_game_service', 'initialize_game_service',
    'GameSession', 'ReconciliationService', 'RemoteGameClient',
    'aggregate', 'score'
]
