"""
Value types for the draw interface. Requests are tagged by `kind`; dispatch on the tag,
not on subclasses. All types are immutable and passed by value between sessions and core.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union, overload

from .errors import InvalidCountError, InvalidRangeError
from .seeding import U64_MAX

MAX_DRAW_COUNT = 2**32 - 1


@dataclass(frozen=True)
class DrawRequest:
    """`count` independent values, each uniform over [0, range)."""

    range: int
    count: int = 1
    kind: str = field(default="uniform", init=False)

    def __post_init__(self) -> None:
        if self.range <= 0 or self.range > U64_MAX:
            raise InvalidRangeError(f"range must be in [1, 2**64), got {self.range}")
        if not 1 <= self.count <= MAX_DRAW_COUNT:
            raise InvalidCountError(f"count must be in [1, 2**32), got {self.count}")


@dataclass(frozen=True)
class PermutationRequest:
    """Shuffled list(range(size)), e.g. a deck order."""

    size: int
    kind: str = field(default="permutation", init=False)

    def __post_init__(self) -> None:
        if not 1 <= self.size <= MAX_DRAW_COUNT:
            raise InvalidCountError(f"size must be in [1, 2**32), got {self.size}")


Request = Union[DrawRequest, PermutationRequest]


@dataclass(frozen=True)
class DrawResult:
    """
    Ordered draw output. values[i] was produced before values[i + 1].
    first_counter/next_counter bracket the stream words consumed, so a verifier can
    replay exactly that window from the revealed seed.
    """

    values: Tuple[int, ...]
    range: int
    first_counter: int
    next_counter: int
    policy: str
    kind: str = "uniform"

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    @overload
    def __getitem__(self, i: int) -> int: ...

    @overload
    def __getitem__(self, i: slice) -> Tuple[int, ...]: ...

    def __getitem__(self, i):
        return self.values[i]

    @property
    def words_consumed(self) -> int:
        return self.next_counter - self.first_counter


__all__ = ["MAX_DRAW_COUNT", "DrawRequest", "DrawResult", "PermutationRequest", "Request"]
