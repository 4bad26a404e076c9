"""
Custom exceptions used across layers.

NOTE: An illegal move is NOT an error. The controller simply ignores it (and resets the selection).
These exceptions are for situations where the caller did something that should never happen.
"""


class GameError(Exception):
    """Base class for all errors raised by the chess core."""


class GameStateError(GameError):
    """Board or game is not in a state that allows the requested operation (ex. two pieces placed on one square)."""


class InvalidRequestError(GameError):
    """Input coming from outside the domain layer could not be interpreted."""
