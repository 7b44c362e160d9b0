"""
Data Models Package

Contains all data models, result types and exceptions used throughout the application.
"""

from .errors import (
    GameAlreadyOver, IncompleteGuess, InvalidInput, InvariantViolation, MalformedPayload,
    NoRowsAvailable, RemoteError, RemoteUnavailable, ValidationError, WordleError
)
from .game import (
    EmptyRow, GameStart, GameState, GameStatus, GuessRow, KeyStatus, KeyStatuses,
    LetterStatus, LocalOutcome, Outcome, RemoteOutcome, RemoteSession, ScoredRow, SubmitResult
)

__all__ = [
    'EmptyRow', 'GameStart', 'GameState', 'GameStatus', 'GuessRow', 'KeyStatus', 'KeyStatuses',
    'LetterStatus', 'LocalOutcome', 'Outcome', 'RemoteOutcome', 'RemoteSession', 'ScoredRow',
    'SubmitResult',
    'GameAlreadyOver', 'IncompleteGuess', 'InvalidInput', 'InvariantViolation', 'MalformedPayload',
    'NoRowsAvailable', 'RemoteError', 'RemoteUnavailable', 'ValidationError', 'WordleError'
]
