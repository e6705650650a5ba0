"""
NumberStream: a seed bound to a monotonically increasing counter.
One stream per session, used sequentially; the seed is never mutated and the counter
only moves forward through next_u64().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional

from .config import seed_size
from .core.errors import StreamExhaustedError
from .core.seeding import U64_MAX, SeedLike, expand, seed_fingerprint, validate_seed

logger = logging.getLogger(__name__)


@dataclass
class GeneratorState:
    seed: bytes
    counter: int = 0


class NumberStream:
    """
    Ordered sequence of raw 64-bit words: word i is expand(seed, i).

    Raises EmptySeedError on construction if the seed is degenerate.
    """

    def __init__(self, seed: SeedLike, size: Optional[int] = None) -> None:
        self._state: GeneratorState
        self.initialize(seed, size=size)

    def initialize(self, seed: SeedLike, size: Optional[int] = None) -> None:
        """Bind to seed and reset the counter to 0. size defaults to config seed.size."""
        raw = validate_seed(seed, size=seed_size() if size is None else size)
        self._state = GeneratorState(seed=raw, counter=0)
        logger.debug("stream initialized seed_fp=%s", seed_fingerprint(raw))

    @property
    def seed(self) -> bytes:
        return self._state.seed

    @property
    def counter(self) -> int:
        return self._state.counter

    @property
    def state(self) -> GeneratorState:
        """Copy of the current state; mutating it does not affect the stream."""
        return replace(self._state)

    def next_u64(self) -> int:
        counter = self._state.counter
        if counter > U64_MAX:
            raise StreamExhaustedError("counter space exhausted for this seed")
        word = expand(self._state.seed, counter)
        self._state.counter = counter + 1
        return word

    def peek_u64(self, offset: int = 0) -> int:
        """Word that next_u64() would return after `offset` further draws. No side effects."""
        if offset < 0:
            raise ValueError(f"offset must be non-negative, got {offset}")
        counter = self._state.counter + offset
        if counter > U64_MAX:
            raise StreamExhaustedError("counter space exhausted for this seed")
        return expand(self._state.seed, counter)

    def take(self, n: int) -> List[int]:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return [self.next_u64() for _ in range(n)]

    def __repr__(self) -> str:
        return f"NumberStream(seed_fp={seed_fingerprint(self._state.seed)!r}, counter={self._state.counter})"


__all__ = ["GeneratorState", "NumberStream"]
