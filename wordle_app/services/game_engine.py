"""
Game Engine

State machine for a single game. Every function takes a GameState and
returns a new one; nothing here performs I/O.

    IN_PROGRESS --exact match--> WON
    IN_PROGRESS --sixth row scored without a match--> LOST
"""

import re
from dataclasses import replace
from typing import Iterable, List, Optional

from ..config.game_settings import FALLBACK_SOLUTION, MAX_ROUNDS, WORD_LENGTH
from ..models.errors import GameAlreadyOver, IncompleteGuess, InvalidInput, NoRowsAvailable
from ..models.game import (
    EmptyRow, GameState, GameStatus, GuessRow, KeyStatuses, ScoredRow, SubmitResult
)
from .scoring import aggregate, empty_key_statuses, normalize_word, score

_LETTER_PATTERN = re.compile(r'[A-Z]')

WIN_MESSAGE = "You won!"
LOSS_MESSAGE = "Game over! The word was {solution}"
CONTINUE_MESSAGE = "Keep guessing!"


def new_game(solution: Optional[str] = None,
             rows: Optional[Iterable[GuessRow]] = None,
             status: Optional[GameStatus] = None,
             key_statuses: Optional[KeyStatuses] = None) -> GameState:
    """
    Create a fresh game.

    With no arguments the game starts empty against the fallback solution.
    Rows, status and key statuses supplied by the remote authority are
    adopted as given.

    Raises:
        InvalidInput: If the solution is malformed or rows is not six long
    """
    solution = normalize_word(solution or FALLBACK_SOLUTION)

    if rows is None:
        rows = (EmptyRow(),) * MAX_ROUNDS
    else:
        rows = tuple(rows)
        if len(rows) != MAX_ROUNDS:
            raise InvalidInput(f"A game holds exactly {MAX_ROUNDS} rows, got {len(rows)}")

    keys = empty_key_statuses()
    if key_statuses:
        keys.update(key_statuses)

    return GameState(
        solution=solution,
        rows=rows,
        current_guess="",
        status=status or GameStatus.IN_PROGRESS,
        key_statuses=keys,
    )


def current_row_index(state: GameState) -> Optional[int]:
    """Index of the first empty row, or None when every row is scored."""
    for index, row in enumerate(state.rows):
        if isinstance(row, EmptyRow):
            return index
    return None


def scored_rows(state: GameState) -> List[ScoredRow]:
    return [row for row in state.rows if isinstance(row, ScoredRow)]


def is_over(state: GameState) -> bool:
    return state.status is not GameStatus.IN_PROGRESS


def append_letter(state: GameState, ch: str) -> GameState:
    """Add one letter to the guess buffer. Anything not accepted is ignored."""
    if is_over(state) or len(state.current_guess) >= WORD_LENGTH:
        return state
    if not isinstance(ch, str) or not _LETTER_PATTERN.fullmatch(ch):
        return state
    return replace(state, current_guess=state.current_guess + ch)


def backspace(state: GameState) -> GameState:
    if not state.current_guess:
        return state
    return replace(state, current_guess=state.current_guess[:-1])


def check_submittable(state: GameState) -> int:
    """
    Validate that the buffered guess may be submitted.

    Returns:
        int: Index of the row the guess will occupy

    Raises:
        GameAlreadyOver: If the game is won or lost
        IncompleteGuess: If the buffer does not hold five letters
        NoRowsAvailable: If no empty row is left
    """
    if is_over(state):
        raise GameAlreadyOver()
    if len(state.current_guess) != WORD_LENGTH:
        raise IncompleteGuess()
    row_index = current_row_index(state)
    if row_index is None:
        raise NoRowsAvailable()
    return row_index


def submit_guess(state: GameState) -> SubmitResult:
    """
    Score the buffered guess and advance the game.

    The new state has the scored row written at the current row index,
    cumulative key statuses updated, an empty buffer and the resulting status.
    The input state is left untouched when any check fails.
    """
    row_index = check_submittable(state)
    guess = normalize_word(state.current_guess)

    statuses = score(guess, state.solution)
    rows = list(state.rows)
    rows[row_index] = ScoredRow(word=guess, statuses=statuses)

    if guess == state.solution:
        status = GameStatus.WON
        message = WIN_MESSAGE
    elif row_index >= MAX_ROUNDS - 1:
        status = GameStatus.LOST
        message = LOSS_MESSAGE.format(solution=state.solution)
    else:
        status = GameStatus.IN_PROGRESS
        message = CONTINUE_MESSAGE

    new_state = replace(
        state,
        rows=tuple(rows),
        current_guess="",
        status=status,
        key_statuses=aggregate(state.key_statuses, guess, statuses),
    )
    return SubmitResult(state=new_state, message=message)
