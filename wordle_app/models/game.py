"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple, Union


class LetterStatus(Enum):
    """Feedback for one letter of a scored guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class KeyStatus(Enum):
    """Cumulative feedback for one keyboard key."""
    UNSET = "unset"
    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"

    @property
    def priority(self) -> int:
        return _KEY_PRIORITY[self]

    @classmethod
    def from_letter_status(cls, status: LetterStatus) -> 'KeyStatus':
        return cls(status.value)


_KEY_PRIORITY = {
    KeyStatus.UNSET: 0,
    KeyStatus.ABSENT: 1,
    KeyStatus.PRESENT: 2,
    KeyStatus.CORRECT: 3,
}


class GameStatus(Enum):
    """Lifecycle of one game. WON and LOST are terminal."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class EmptyRow:
    """An attempt slot that has not been used yet."""

    def to_dict(self) -> None:
        return None


@dataclass(frozen=True)
class ScoredRow:
    """An attempt slot holding a submitted guess and its letter feedback."""
    word: str
    statuses: Tuple[LetterStatus, ...]

    def to_dict(self) -> Dict:
        return {'word': self.word, 'statuses': [status.value for status in self.statuses]}


GuessRow = Union[EmptyRow, ScoredRow]

KeyStatuses = Dict[str, KeyStatus]


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of one game.

    Instances are never mutated; every engine operation returns a new
    GameState. The hosting shell owns the single live instance.
    """
    solution: str
    rows: Tuple[GuessRow, ...]
    current_guess: str = ""
    status: GameStatus = GameStatus.IN_PROGRESS
    key_statuses: KeyStatuses = field(default_factory=dict)


@dataclass(frozen=True)
class RemoteSession:
    """Identity correlating the local GameState with a game on the authority."""
    game_id: str


@dataclass(frozen=True)
class SubmitResult:
    """Result of a successful local guess submission."""
    state: GameState
    message: str


@dataclass(frozen=True)
class GameStart:
    """Result of starting a game through the reconciliation layer."""
    state: GameState
    session: Optional[RemoteSession]
    message: str


@dataclass(frozen=True)
class RemoteOutcome:
    """The authority scored the guess; its data replaced the local state."""
    state: GameState
    message: str


@dataclass(frozen=True)
class LocalOutcome:
    """The guess was scored locally after the remote path was skipped or failed."""
    state: GameState
    message: str
    win_synced: Optional[bool] = None


Outcome = Union[RemoteOutcome, LocalOutcome]
