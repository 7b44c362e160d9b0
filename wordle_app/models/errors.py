"""
Game Exceptions

Every failure raised by the engine, the reconciliation layer and the remote
client derives from WordleError so callers can contain an action's failure
with a single except clause.
"""


class WordleError(Exception):
    """Base class for all game errors."""


class ValidationError(WordleError):
    """Malformed player input. Recovered locally and shown as a transient message."""


class InvalidInput(ValidationError):
    """A guess or solution is not exactly five letters A-Z."""


class IncompleteGuess(ValidationError):
    """Submit was requested before five letters were typed."""

    def __init__(self, message: str = "Word must be 5 letters!"):
        super().__init__(message)


class GameAlreadyOver(ValidationError):
    """A guess was submitted after the game reached won or lost."""

    def __init__(self, message: str = "Game is already over"):
        super().__init__(message)


class InvariantViolation(WordleError):
    """Internal state is inconsistent; the current action is aborted."""


class NoRowsAvailable(InvariantViolation):
    """Submit was requested while every row is already scored."""

    def __init__(self, message: str = "No more guesses available"):
        super().__init__(message)


class RemoteError(WordleError):
    """Any failure of the remote authority. Always recovered by local fallback."""


class RemoteUnavailable(RemoteError):
    """Transport failure, timeout or non-success HTTP response."""


class MalformedPayload(RemoteError):
    """The authority answered but its payload cannot be normalized."""
