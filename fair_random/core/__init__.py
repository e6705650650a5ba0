"""
Stable facade: seed expansion, value types and errors. No stream state, stats or cli.
Do not add exports without updating __all__.
"""

from __future__ import annotations

from .errors import (
    EmptySeedError,
    ErrorKind,
    FairRandomError,
    InvalidCountError,
    InvalidRangeError,
    MalformedInputError,
    SessionStateError,
    StreamExhaustedError,
)
from .seeding import SEED_EXPANSION_VERSION, SEED_SIZE, derive_seed, expand, seed_fingerprint, validate_seed
from .types import DrawRequest, DrawResult, PermutationRequest

# Do not add exports without updating __all__.
__all__ = [
    "SEED_EXPANSION_VERSION",
    "SEED_SIZE",
    "DrawRequest",
    "DrawResult",
    "EmptySeedError",
    "ErrorKind",
    "FairRandomError",
    "InvalidCountError",
    "InvalidRangeError",
    "MalformedInputError",
    "PermutationRequest",
    "SessionStateError",
    "StreamExhaustedError",
    "derive_seed",
    "expand",
    "seed_fingerprint",
    "validate_seed",
]
