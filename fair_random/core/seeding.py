"""
Canonical seed expansion: one high-entropy seed plus a counter -> one 64-bit word.
All draws derive their randomness via expand(seed, counter). Never use Python's
built-in hash() or the random module here (not stable across processes, not one-way).

Contract: SEED_EXPANSION_VERSION
- Output is the first 8 bytes (big-endian) of SHA-256(seed || counter_be64).
- If you change the hash, the counter encoding, or the word size, bump
  SEED_EXPANSION_VERSION. Published draws can only be re-verified against the
  version that produced them.
"""

from __future__ import annotations

import hashlib
from typing import Union

from .errors import EmptySeedError

# Version of the expansion scheme; bump when hashing / encoding changes
SEED_EXPANSION_VERSION = 1

# Seed size delivered by the session collaborator (checksum256)
SEED_SIZE = 32

U64_MODULUS = 2**64
U64_MAX = U64_MODULUS - 1

SeedLike = Union[bytes, bytearray, memoryview, str]


def expand(seed: bytes, counter: int) -> int:
    """
    Deterministic 64-bit word for (seed, counter). Pure; same inputs always give the
    same word, and any change to either input gives an unrelated word.
    """
    if not 0 <= counter <= U64_MAX:
        raise ValueError(f"counter must be in [0, 2**64), got {counter}")
    h = hashlib.sha256()
    h.update(bytes(seed))
    h.update(counter.to_bytes(8, byteorder="big", signed=False))
    return int.from_bytes(h.digest()[:8], byteorder="big", signed=False)


def _from_hex(text: str) -> bytes:
    s = text.strip()
    if s[:2].lower() == "0x":
        s = s[2:]
    try:
        return bytes.fromhex(s)
    except ValueError as e:
        raise EmptySeedError(f"seed is not valid hex: {e}") from e


def validate_seed(seed: SeedLike, size: int = SEED_SIZE) -> bytes:
    """
    Normalize seed to immutable bytes and reject degenerate values.
    Accepts raw bytes or a hex string (optionally 0x-prefixed).
    Raises EmptySeedError when the seed is empty, not `size` bytes long, or every byte
    is identical (covers the all-zero sentinel).
    """
    if isinstance(seed, str):
        raw = _from_hex(seed)
    elif isinstance(seed, (bytes, bytearray, memoryview)):
        raw = bytes(seed)
    else:
        raise EmptySeedError(f"seed must be bytes or hex string, got {type(seed).__name__}")
    if not raw:
        raise EmptySeedError("seed is empty")
    if len(raw) != size:
        raise EmptySeedError(f"seed must be {size} bytes, got {len(raw)}")
    if raw.count(raw[0]) == len(raw):
        raise EmptySeedError("seed is degenerate (all bytes identical)")
    return raw


def seed_fingerprint(seed: bytes) -> str:
    """Short SHA-256 hex prefix for logs and artifacts. Never log the seed itself."""
    return hashlib.sha256(bytes(seed)).hexdigest()[:12]


def derive_seed(master: Union[str, int], index: int, version: int = SEED_EXPANSION_VERSION) -> bytes:
    """
    Derive a stable SEED_SIZE-byte session seed from a master key and an index.
    Same (master, index, version) yields the same seed across process runs. Used for
    reproducible validation batches; live sessions receive their seed from outside.
    """
    payload = f"{master}|{index}|{version}".encode("utf-8")
    return hashlib.sha256(payload).digest()


__all__ = [
    "SEED_EXPANSION_VERSION",
    "SEED_SIZE",
    "U64_MAX",
    "U64_MODULUS",
    "SeedLike",
    "derive_seed",
    "expand",
    "seed_fingerprint",
    "validate_seed",
]
