"""
Shared exception types for fair_random.
Every package-raised error carries an ErrorKind so callers can branch on the kind
without importing each subclass. Stable surface; extend only.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_RANGE = "invalid_range"
    INVALID_COUNT = "invalid_count"
    EMPTY_SEED = "empty_seed"
    MALFORMED_INPUT = "malformed_input"
    SESSION_STATE = "session_state"
    STREAM_EXHAUSTED = "stream_exhausted"


class FairRandomError(Exception):
    """Base exception for fair_random; catch this for any package-raised error."""

    kind: ErrorKind = ErrorKind.MALFORMED_INPUT

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.kind.value)


class InvalidRangeError(FairRandomError):
    """Range is zero or negative. Raised before the stream is touched."""

    kind = ErrorKind.INVALID_RANGE


class InvalidCountError(FairRandomError):
    """Draw count outside [1, 2**32 - 1]."""

    kind = ErrorKind.INVALID_COUNT


class EmptySeedError(FairRandomError):
    """Seed is empty, has the wrong size, or is a degenerate sentinel."""

    kind = ErrorKind.EMPTY_SEED


class MalformedInputError(FairRandomError):
    """Validator argument or input that cannot be interpreted."""

    kind = ErrorKind.MALFORMED_INPUT


class SessionStateError(FairRandomError):
    """Operation not allowed in the session's current state (e.g. seed delivered twice)."""

    kind = ErrorKind.SESSION_STATE


class StreamExhaustedError(FairRandomError):
    kind = ErrorKind.STREAM_EXHAUSTED


__all__ = [
    "EmptySeedError",
    "ErrorKind",
    "FairRandomError",
    "InvalidCountError",
    "InvalidRangeError",
    "MalformedInputError",
    "SessionStateError",
    "StreamExhaustedError",
]
