"""Exceptions raised by the shortest-path engine.

An unreachable target is not an error: it is reported through the result
object (see ``ShortestPathResult.target_distance``).
"""


class ShortestPathError(Exception):
    """Base class for engine errors."""


class EncodingOverflow(ShortestPathError):
    """A configuration does not fit in the preallocated node range."""

    def __init__(self, message: str, requested: int = None, capacity: int = None):
        super().__init__(message)
        self.requested = requested
        self.capacity = capacity


class InvariantViolation(ShortestPathError):
    """The caller broke a precondition of the engine.

    Raised for negative weights, weights above the declared maximum and
    priorities pushed outside the bucket queue's window. These are
    programming errors and are never retried.
    """
