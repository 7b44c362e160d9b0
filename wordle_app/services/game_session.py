"""
Game Session

Owns the single live GameState and turns discrete key presses into engine
and reconciliation calls. Each action either commits a whole new state or
leaves the previous one in place; failures become player-facing messages.
"""

import time
from typing import Any, Callable, Dict, Optional, Tuple

from ..config.app_config import Config
from ..models.errors import InvariantViolation, ValidationError
from ..models.game import GameState, GameStatus, GuessRow, KeyStatus, RemoteSession
from ..utils.game_logger import game_logger
from . import game_engine
from .reconciliation import ReconciliationService

ENTER = 'ENTER'
BACKSPACE = 'BACKSPACE'
LOADING_MESSAGE = "Starting new game..."


class GameSession:
    """
    Hosting shell for one player.

    Read-only projections (rows, current_guess, key_statuses, status, message)
    are meant for rendering. ``press`` accepts 'A'-'Z', 'ENTER' and
    'BACKSPACE'; lowercase letters are uppercased.
    """

    def __init__(self,
                 reconciler: Optional[ReconciliationService] = None,
                 dismiss_after: float = Config.MESSAGE_DISMISS_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self.reconciler = reconciler or ReconciliationService()
        self.dismiss_after = dismiss_after
        self.clock = clock

        self.is_loading = False
        self._state: GameState = game_engine.new_game()
        self._session: Optional[RemoteSession] = None
        self._persistent = ""
        self._transient: Optional[str] = None
        self._transient_expires_at = 0.0

    # ------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def session(self) -> Optional[RemoteSession]:
        return self._session

    @property
    def rows(self) -> Tuple[GuessRow, ...]:
        return self._state.rows

    @property
    def current_guess(self) -> str:
        return self._state.current_guess

    @property
    def key_statuses(self) -> Dict[str, KeyStatus]:
        return dict(self._state.key_statuses)

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def message(self) -> str:
        """Transient text while it is fresh, otherwise the persistent text."""
        if self._transient is not None and self.clock() >= self._transient_expires_at:
            self._transient = None
        if self._transient is not None:
            return self._transient
        return self._persistent

    def _show(self, text: str):
        self._persistent = text
        self._transient = None

    def _flash(self, text: str):
        """Show text for dismiss_after seconds, then fall back to the persistent text."""
        self._transient = text
        self._transient_expires_at = self.clock() + self.dismiss_after

    # ------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------

    def new_game(self):
        """Replace the live game with a fresh one."""
        self.is_loading = True
        self._show(LOADING_MESSAGE)
        try:
            start = self.reconciler.start_game()
        finally:
            self.is_loading = False

        self._state = start.state
        self._session = start.session
        self._show(start.message)

    def press(self, key: str):
        """
        Handle one key press. Ignored while a request is in flight.

        Once the game is over letters and backspace do nothing, while ENTER
        still flashes the rejection over the result.
        """
        if self.is_loading:
            return

        key = key.upper() if isinstance(key, str) else ''
        if key == ENTER:
            self.submit()
        elif game_engine.is_over(self._state):
            return
        elif key == BACKSPACE:
            self._state = game_engine.backspace(self._state)
        else:
            self._state = game_engine.append_letter(self._state, key)

    def submit(self):
        """Submit the buffered guess through the reconciliation layer."""
        if self.is_loading:
            return

        self.is_loading = True
        try:
            outcome = self.reconciler.submit_guess(self._state, self._session)
        except ValidationError as e:
            self._flash(str(e))
            return
        except InvariantViolation as e:
            game_logger.log_client_event('submit_aborted', self._game_id(), error=str(e))
            self._show(str(e))
            return
        finally:
            self.is_loading = False

        self._state = outcome.state
        if outcome.state.status is GameStatus.IN_PROGRESS:
            self._show("")
            self._flash(outcome.message)
        else:
            self._show(outcome.message)

    def debug_snapshot(self) -> Dict[str, Any]:
        """Local view of the game next to the authority's, for diagnostics."""
        return {
            'gameId': self._game_id(),
            'solution': self._state.solution,
            'rows': [row.to_dict() for row in self._state.rows],
            'currentGuess': self._state.current_guess,
            'status': self._state.status.value,
            'remoteState': self.reconciler.fetch_game_state(self._session),
        }

    def _game_id(self) -> Optional[str]:
        return self._session.game_id if self._session else None
