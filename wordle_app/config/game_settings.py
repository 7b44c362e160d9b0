"""
Game Configuration Constants Module

Game rule constants shared by the local engine, the reconciliation layer
and the authority server. The solution pool used by the server is loaded
from wordles.json next to this module.
"""

import json
import os
from typing import List, Final, Tuple

from .app_config import Config

WORD_LENGTH: Final[int] = 5
"""Number of letters in every guess and solution."""

MAX_ROUNDS: Final[int] = 6
"""
Number of attempt rows per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

KEYBOARD_ROWS: Final[Tuple[Tuple[str, ...], ...]] = (
    ('Q', 'W', 'E', 'R', 'T', 'Y', 'U', 'I', 'O', 'P'),
    ('A', 'S', 'D', 'F', 'G', 'H', 'J', 'K', 'L'),
    ('ENTER', 'Z', 'X', 'C', 'V', 'B', 'N', 'M', 'BACKSPACE'),
)

FALLBACK_SOLUTION: Final[str] = Config.FALLBACK_SOLUTION
"""Solution used whenever a game is started without the remote authority."""


def _load_word_list() -> List[str]:
    """
    Load the solution pool from wordles.json.

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    uppercase_words = [word.upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not all(char in ALPHABET for char in word):
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return uppercase_words


WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the solution pool.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not WORD_LIST:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(WORD_LIST):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha() or not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not an uppercase A-Z word")

    if len(WORD_LIST) != len(set(WORD_LIST)):
        duplicates = sorted({word for word in WORD_LIST if WORD_LIST.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True
