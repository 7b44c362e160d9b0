"""
Reconciliation Service

Decides, per action, whether the remote authority's answer is adopted or the
game is computed locally. The player is never left without an outcome: every
remote failure falls through to the local engine for the same action.
"""

from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, Tuple

from ..config.app_config import Config
from ..config.game_settings import ALPHABET, MAX_ROUNDS, WORD_LENGTH
from ..models.errors import InvalidInput, MalformedPayload, RemoteError
from ..models.game import (
    EmptyRow, GameStart, GameState, GameStatus, GuessRow, KeyStatus, KeyStatuses,
    LetterStatus, LocalOutcome, Outcome, RemoteOutcome, RemoteSession, ScoredRow
)
from ..utils.game_logger import game_logger
from . import game_engine
from .scoring import normalize_word

OFFLINE_START_MESSAGE = "Game started! (offline mode)"
ONLINE_START_MESSAGE = "Guess the 5-letter word!"
UNREVEALED_LOSS_MESSAGE = "Game over!"

# Status vocabulary accepted from the authority, including the HIT/PRESENT/MISS spelling
_LETTER_STATUS_ALIASES = {
    'correct': LetterStatus.CORRECT,
    'hit': LetterStatus.CORRECT,
    'present': LetterStatus.PRESENT,
    'absent': LetterStatus.ABSENT,
    'miss': LetterStatus.ABSENT,
}

_KEY_STATUS_ALIASES = {
    'unset': KeyStatus.UNSET,
    'unused': KeyStatus.UNSET,
    'correct': KeyStatus.CORRECT,
    'hit': KeyStatus.CORRECT,
    'present': KeyStatus.PRESENT,
    'absent': KeyStatus.ABSENT,
    'miss': KeyStatus.ABSENT,
}


def _letter_status(value: Any) -> LetterStatus:
    if isinstance(value, str) and value.lower() in _LETTER_STATUS_ALIASES:
        return _LETTER_STATUS_ALIASES[value.lower()]
    raise MalformedPayload(f"Unknown letter status {value!r}")


def _word(value: Any) -> str:
    try:
        return normalize_word(value)
    except InvalidInput as e:
        raise MalformedPayload(str(e)) from e


def normalize_row(raw: Any) -> GuessRow:
    """
    Convert one remote row into the canonical GuessRow.

    Accepted shapes: None (empty), {"word", "statuses"}, or a list of
    {"letter", "status"} cells. A bare word without statuses is rejected
    because it cannot be scored without the solution.
    """
    if raw is None:
        return EmptyRow()

    if isinstance(raw, Mapping) and 'word' in raw:
        word = _word(raw.get('word'))
        statuses = raw.get('statuses')
        if not isinstance(statuses, (list, tuple)) or len(statuses) != WORD_LENGTH:
            raise MalformedPayload(f"Row {word} needs {WORD_LENGTH} statuses")
        return ScoredRow(word=word, statuses=tuple(_letter_status(s) for s in statuses))

    if isinstance(raw, (list, tuple)) and len(raw) == WORD_LENGTH and all(isinstance(c, Mapping) for c in raw):
        word = _word(''.join(str(cell.get('letter', '')) for cell in raw))
        return ScoredRow(word=word, statuses=tuple(_letter_status(cell.get('status')) for cell in raw))

    raise MalformedPayload(f"Unrecognized row payload {raw!r}")


def normalize_rows(raw: Any) -> Tuple[GuessRow, ...]:
    if not isinstance(raw, (list, tuple)) or len(raw) != MAX_ROUNDS:
        raise MalformedPayload(f"Expected {MAX_ROUNDS} rows, got {raw!r}")
    return tuple(normalize_row(row) for row in raw)


def normalize_key_statuses(raw: Any) -> KeyStatuses:
    """Convert a remote {letter: status} map; letters missing from it stay UNSET."""
    if not isinstance(raw, Mapping):
        raise MalformedPayload(f"Expected a key status object, got {raw!r}")

    keys = {letter: KeyStatus.UNSET for letter in ALPHABET}
    for letter, value in raw.items():
        upper = str(letter).upper()
        if upper not in keys:
            raise MalformedPayload(f"Unknown key {letter!r}")
        if not isinstance(value, str) or value.lower() not in _KEY_STATUS_ALIASES:
            raise MalformedPayload(f"Unknown key status {value!r} for {letter!r}")
        keys[upper] = _KEY_STATUS_ALIASES[value.lower()]
    return keys


def _remote_rows(payload: Mapping) -> Optional[Any]:
    if payload.get('rows') is not None:
        return payload['rows']
    return payload.get('guesses')


def _remote_status(payload: Mapping) -> GameStatus:
    game_over = payload.get('gameOver', False)
    if not isinstance(game_over, bool):
        raise MalformedPayload(f"gameOver must be a boolean, got {game_over!r}")
    if not game_over:
        return GameStatus.IN_PROGRESS
    return GameStatus.WON if payload.get('won') else GameStatus.LOST


class ReconciliationService:
    """
    Arbitrates between the remote authority and the local engine.

    Args:
        client: Object offering start_game, submit_guess, get_key_statuses and
            get_game_state (normally a RemoteGameClient); None runs purely offline
        diagnostic_mode: Adopt the solution sent by the authority on start
        fallback_solution: Solution used for local play
    """

    def __init__(self,
                 client=None,
                 diagnostic_mode: bool = Config.DIAGNOSTIC_MODE,
                 fallback_solution: Optional[str] = None):
        self.client = client
        self.diagnostic_mode = diagnostic_mode
        self.fallback_solution = fallback_solution

    # ------------------------------------------------------------
    # New game
    # ------------------------------------------------------------

    def start_game(self) -> GameStart:
        """Start a game on the authority, or locally if that fails."""
        if self.client is not None:
            try:
                return self._start_remote()
            except RemoteError as e:
                game_logger.log_remote_failure('start_game', e)

        state = game_engine.new_game(self.fallback_solution)
        game_logger.log_client_event('new_game', mode='offline')
        return GameStart(state=state, session=None, message=OFFLINE_START_MESSAGE)

    def _start_remote(self) -> GameStart:
        payload = self.client.start_game()
        if not isinstance(payload, Mapping):
            raise MalformedPayload(f"Unusable start response {payload!r}")
        game_id = payload.get('gameId')
        if not game_id:
            raise MalformedPayload("Start response carries no gameId")

        rows = _remote_rows(payload)
        solution = self.fallback_solution
        if self.diagnostic_mode and payload.get('solution'):
            solution = _word(payload['solution'])

        state = game_engine.new_game(
            solution,
            rows=normalize_rows(rows) if rows is not None else None,
            status=_remote_status(payload),
        )
        state = replace(state, key_statuses=self._fetch_key_statuses(game_id, state.key_statuses))

        game_logger.log_client_event('new_game', game_id, mode='online')
        return GameStart(
            state=state,
            session=RemoteSession(game_id=str(game_id)),
            message=payload.get('message') or ONLINE_START_MESSAGE,
        )

    def _fetch_key_statuses(self, game_id: str, default: KeyStatuses) -> KeyStatuses:
        """Best-effort follow-up call; a failure keeps the defaults."""
        try:
            return normalize_key_statuses(self.client.get_key_statuses(game_id))
        except RemoteError as e:
            game_logger.log_remote_failure('get_key_statuses', e, game_id)
            return default

    # ------------------------------------------------------------
    # Guess submission
    # ------------------------------------------------------------

    def submit_guess(self,
                     state: GameState,
                     session: Optional[RemoteSession] = None,
                     guess: Optional[str] = None) -> Outcome:
        """
        Submit the buffered guess (or ``guess``, which replaces the buffer).

        Raises:
            GameAlreadyOver, IncompleteGuess, InvalidInput, NoRowsAvailable: Before any remote call
        """
        if guess is not None:
            state = replace(state, current_guess=guess.upper())
        game_engine.check_submittable(state)
        normalize_word(state.current_guess)

        if session is not None and self.client is not None:
            outcome = self._try_remote(state, session)
            if outcome is not None:
                return outcome

        return self._submit_local(state, session)

    def _try_remote(self, state: GameState, session: RemoteSession) -> Optional[RemoteOutcome]:
        try:
            payload = self.client.submit_guess(session.game_id, state.current_guess)
            return self._adopt_remote(state, payload)
        except RemoteError as e:
            game_logger.log_remote_failure('submit_guess', e, session.game_id,
                                           guess=state.current_guess, fallback='local')
            return None

    def _adopt_remote(self, state: GameState, payload: Mapping) -> RemoteOutcome:
        """Build the state dictated by the authority; raises MalformedPayload if it cannot."""
        if not isinstance(payload, Mapping):
            raise MalformedPayload(f"Unusable guess response {payload!r}")

        status = _remote_status(payload)
        rows = _remote_rows(payload)
        new_rows = normalize_rows(rows) if rows is not None else state.rows
        key_statuses = state.key_statuses
        if payload.get('keyStatuses') is not None:
            key_statuses = normalize_key_statuses(payload['keyStatuses'])

        # Outside diagnostic mode the local solution is only the offline fallback,
        # so a loss names a word only when the authority reveals one.
        solution = state.solution
        if payload.get('solution'):
            solution = _word(payload['solution'])
        revealed = bool(payload.get('solution')) or self.diagnostic_mode

        if status is GameStatus.WON:
            message = game_engine.WIN_MESSAGE
        elif status is GameStatus.LOST:
            message = game_engine.LOSS_MESSAGE.format(solution=solution) if revealed else UNREVEALED_LOSS_MESSAGE
        else:
            message = payload.get('message') or game_engine.CONTINUE_MESSAGE

        new_state = replace(
            state,
            solution=solution,
            rows=new_rows,
            current_guess="",
            status=status,
            key_statuses=key_statuses,
        )
        return RemoteOutcome(state=new_state, message=message)

    def _submit_local(self, state: GameState, session: Optional[RemoteSession]) -> LocalOutcome:
        result = game_engine.submit_guess(state)
        game_id = session.game_id if session else None
        game_logger.log_client_event('submit_guess', game_id, mode='local',
                                     status=result.state.status.value)

        win_synced = None
        if result.state.status is GameStatus.WON and session is not None and self.client is not None:
            win_synced = self._sync_win(session, state.current_guess)

        return LocalOutcome(state=result.state, message=result.message, win_synced=win_synced)

    def _sync_win(self, session: RemoteSession, guess: str) -> bool:
        """Tell the authority about a locally detected win. Never raises."""
        try:
            self.client.submit_guess(session.game_id, guess)
        except RemoteError as e:
            game_logger.log_remote_failure('sync_win', e, session.game_id)
            return False
        game_logger.log_client_event('sync_win', session.game_id)
        return True

    # ------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------

    def fetch_game_state(self, session: Optional[RemoteSession]) -> Optional[Dict[str, Any]]:
        """Authority's snapshot of the game, or None when offline or unreachable."""
        if session is None or self.client is None:
            return None
        try:
            return self.client.get_game_state(session.game_id)
        except RemoteError as e:
            game_logger.log_remote_failure('get_game_state', e, session.game_id)
            return None
