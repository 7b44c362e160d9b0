"""
Game Service

Authoritative, in-memory store of games played through the HTTP API.
Each game is a GameState advanced by the same engine the client uses offline.
"""

import random
import threading
import uuid
from dataclasses import replace
from typing import Dict, List, Optional

from ..config import game_settings
from ..models.game import GameState, GameStatus, KeyStatus, SubmitResult
from . import game_engine
from .scoring import normalize_word


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Word selection and secret answer storage
    - Guess evaluation through the game engine
    - Wire payloads that reveal the answer only when allowed
    """

    def __init__(self, word_list: Optional[List[str]] = None):
        self.games: Dict[str, GameState] = {}
        self.word_list = list(word_list or game_settings.WORD_LIST)
        self._lock = threading.Lock()

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        state = game_engine.new_game(random.choice(self.word_list))

        with self._lock:
            self.games[game_id] = state
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        with self._lock:
            return self.games.get(game_id)

    def make_guess(self, game_id: str, guess: str) -> Optional[SubmitResult]:
        """
        Processes a guess and stores the resulting state.

        Args:
            game_id: Unique game identifier
            guess: The 5-letter word guess

        Returns:
            SubmitResult, or None if the game does not exist

        Raises:
            ValidationError: If the guess is malformed or the game is over
        """
        normalized_guess = normalize_word(guess.strip() if isinstance(guess, str) else guess)

        with self._lock:
            state = self.games.get(game_id)
            if state is None:
                return None

            result = game_engine.submit_guess(replace(state, current_guess=normalized_guess))
            self.games[game_id] = result.state
        return result

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None

    @staticmethod
    def key_statuses_payload(state: GameState) -> Dict[str, str]:
        """Key statuses that have been set, keyed by letter."""
        return {
            letter: status.value
            for letter, status in state.key_statuses.items()
            if status is not KeyStatus.UNSET
        }

    def to_payload(self, game_id: str, state: GameState, reveal_solution: bool = False) -> Dict:
        """
        Serialize a game for the wire.

        The solution is included once the game is over, or when
        reveal_solution is set (development servers only).
        """
        game_over = game_engine.is_over(state)
        payload = {
            'success': True,
            'gameId': game_id,
            'rows': [row.to_dict() for row in state.rows],
            'keyStatuses': self.key_statuses_payload(state),
            'gameOver': game_over,
            'won': state.status is GameStatus.WON,
            'currentRound': len(game_engine.scored_rows(state)),
        }
        if game_over or reveal_solution:
            payload['solution'] = state.solution
        return payload


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_list: Optional[List[str]] = None) -> GameService:
    """
    Initialize the global game service instance.

    The bundled solution pool is validated first when no word list is given.

    Raises:
        ValueError: If the bundled word list fails validation
    """
    global _game_service
    if word_list is None:
        game_settings.validate_word_list_integrity()
    _game_service = GameService(word_list)
    return _game_service
