"""
Draw interface exposed to the session collaborator.
Arguments are validated before any entropy is consumed: a failed request leaves the
stream's counter where it was.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from .core.seeding import seed_fingerprint
from .core.types import DrawRequest, DrawResult, PermutationRequest, Request
from .reduction import ReductionPolicy, reduce_from_stream, resolve_policy
from .stream import NumberStream

logger = logging.getLogger(__name__)

PolicyArg = Optional[Union[ReductionPolicy, str]]


def request_draws(stream: NumberStream, range_: int, count: int, policy: PolicyArg = None) -> DrawResult:
    """
    `count` bounded values in [0, range_), in draw order.
    Raises InvalidRangeError / InvalidCountError without touching the stream.
    """
    return execute(stream, DrawRequest(range=range_, count=count), policy=policy)


def _draw_uniform(stream: NumberStream, request: DrawRequest, policy: ReductionPolicy) -> List[int]:
    return [reduce_from_stream(stream, request.range, policy) for _ in range(request.count)]


def _draw_permutation(stream: NumberStream, request: PermutationRequest, policy: ReductionPolicy) -> List[int]:
    # Fisher-Yates, high index first; one bounded draw per swap
    items = list(range(request.size))
    for i in range(request.size - 1, 0, -1):
        j = reduce_from_stream(stream, i + 1, policy)
        items[i], items[j] = items[j], items[i]
    return items


def execute(stream: NumberStream, request: Request, policy: PolicyArg = None) -> DrawResult:
    """Run a tagged request against stream."""
    resolved = resolve_policy(policy)
    first = stream.counter
    if request.kind == "uniform":
        values = _draw_uniform(stream, request, resolved)
        range_ = request.range
    elif request.kind == "permutation":
        values = _draw_permutation(stream, request, resolved)
        range_ = request.size
    else:
        raise ValueError(f"unknown request kind: {request.kind!r}")
    result = DrawResult(
        values=tuple(values),
        range=range_,
        first_counter=first,
        next_counter=stream.counter,
        policy=resolved.value,
        kind=request.kind,
    )
    logger.debug(
        "draw kind=%s n=%d range=%d policy=%s seed_fp=%s words=%d",
        result.kind,
        len(result),
        result.range,
        result.policy,
        seed_fingerprint(stream.seed),
        result.words_consumed,
    )
    return result


__all__ = ["execute", "request_draws"]
