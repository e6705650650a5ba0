"""
Range reduction: map a raw 64-bit word into [0, range_).

Two policies:
- MODULO: raw % range_. Constant time and replayable from the revealed seed (value i of a
  draw is next_u64() % range_). Biased whenever range_ does not divide 2**64: the lowest
  2**64 % range_ residues are favored by modulo_bias(range_), below range_ / 2**64.
- REJECTION: resample while raw >= rejection_limit(range_). Exactly uniform; consumes an
  extra word with probability (2**64 % range_) / 2**64.

MODULO is the default (see config draws.reduction_policy).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from .config import reduction_policy
from .core.errors import InvalidRangeError
from .core.seeding import U64_MAX, U64_MODULUS

if TYPE_CHECKING:
    from .stream import NumberStream


class ReductionPolicy(str, Enum):
    MODULO = "modulo"
    REJECTION = "rejection"


def resolve_policy(policy: Optional[Union[ReductionPolicy, str]] = None) -> ReductionPolicy:
    """Explicit policy, else the configured default. Unknown names raise ValueError."""
    if policy is None:
        policy = reduction_policy()
    if isinstance(policy, ReductionPolicy):
        return policy
    return ReductionPolicy(str(policy).lower())


def check_range(range_: int) -> int:
    if range_ <= 0:
        raise InvalidRangeError(f"range must be >= 1, got {range_}")
    if range_ > U64_MAX:
        raise InvalidRangeError(f"range must fit in 64 bits, got {range_}")
    return range_


def reduce(raw: int, range_: int) -> int:
    """raw % range_ with range_ checked first (no division by zero, no wraparound)."""
    check_range(range_)
    if not 0 <= raw <= U64_MAX:
        raise ValueError(f"raw word must be in [0, 2**64), got {raw}")
    return raw % range_


def rejection_limit(range_: int) -> int:
    """Raw words >= this value fall in the partial final bucket."""
    check_range(range_)
    return U64_MODULUS - (U64_MODULUS % range_)


def modulo_bias(range_: int) -> float:
    """
    Relative excess probability of each favored residue under MODULO:
    P(favored) * range_ - 1 == (range_ - 2**64 % range_) / 2**64, or 0 when range_ divides 2**64.
    """
    check_range(range_)
    rem = U64_MODULUS % range_
    if rem == 0:
        return 0.0
    return (range_ - rem) / U64_MODULUS


def reduce_from_stream(
    stream: "NumberStream",
    range_: int,
    policy: Optional[Union[ReductionPolicy, str]] = None,
) -> int:
    """Draw one bounded value from stream under policy."""
    check_range(range_)
    policy = resolve_policy(policy)
    if policy is ReductionPolicy.MODULO:
        return stream.next_u64() % range_
    limit = rejection_limit(range_)
    while True:
        raw = stream.next_u64()
        if raw < limit:
            return raw % range_


__all__ = [
    "ReductionPolicy",
    "check_range",
    "modulo_bias",
    "reduce",
    "reduce_from_stream",
    "rejection_limit",
    "resolve_policy",
]
