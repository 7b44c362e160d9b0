"""
Letter Scoring and Key Status Aggregation

Pure functions shared by the local engine and the authority server.
"""

import re
from typing import Dict, Optional, Sequence, Tuple

from ..config.game_settings import ALPHABET, WORD_LENGTH
from ..models.errors import InvalidInput
from ..models.game import KeyStatus, KeyStatuses, LetterStatus

_WORD_PATTERN = re.compile(r'[A-Za-z]{%d}' % WORD_LENGTH)


def normalize_word(word: str) -> str:
    """
    Validate a guess or solution and return it uppercased.

    Raises:
        InvalidInput: If the word is not exactly five letters A-Z
    """
    if not isinstance(word, str) or not _WORD_PATTERN.fullmatch(word):
        raise InvalidInput(f"Expected {WORD_LENGTH} letters A-Z, got {word!r}")
    return word.upper()


def score(guess: str, solution: str) -> Tuple[LetterStatus, ...]:
    """
    Score a guess against the solution, position by position.

    A letter in the right place is CORRECT. Otherwise it is PRESENT when it
    occurs anywhere in the solution and ABSENT when it does not. Presence is a
    membership test: a repeated guess letter is PRESENT at every misplaced
    occurrence even if the solution holds that letter only once.

    Raises:
        InvalidInput: If either word is not exactly five letters A-Z
    """
    guess = normalize_word(guess)
    solution = normalize_word(solution)

    result = []
    for position, letter in enumerate(guess):
        if letter == solution[position]:
            result.append(LetterStatus.CORRECT)
        elif letter in solution:
            result.append(LetterStatus.PRESENT)
        else:
            result.append(LetterStatus.ABSENT)
    return tuple(result)


def empty_key_statuses() -> KeyStatuses:
    """Key map with every letter UNSET."""
    return {letter: KeyStatus.UNSET for letter in ALPHABET}


def aggregate(prior: Optional[KeyStatuses],
              guess: str,
              statuses: Sequence[LetterStatus]) -> KeyStatuses:
    """
    Fold one scored guess into the cumulative keyboard statuses.

    Each key keeps the strongest status seen so far in the order
    CORRECT > PRESENT > ABSENT > UNSET, so an ABSENT never demotes a key that
    was already PRESENT or CORRECT, whether it shows up later in the same
    guess or in a later one.

    Returns a new mapping covering all 26 letters; ``prior`` is not modified.
    """
    guess = normalize_word(guess)
    if len(statuses) != len(guess):
        raise InvalidInput(f"Expected {len(guess)} letter statuses, got {len(statuses)}")

    merged: Dict[str, KeyStatus] = empty_key_statuses()
    if prior:
        merged.update(prior)

    for letter, letter_status in zip(guess, statuses):
        candidate = KeyStatus.from_letter_status(letter_status)
        if candidate.priority > merged[letter].priority:
            merged[letter] = candidate

    return merged
