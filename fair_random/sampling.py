"""
Batch sampler: one fresh session (and seed) per output line, feeding the offline validator.

With a master key every session seed is derive_seed(master, i), so the whole batch can be
regenerated bit for bit. Without one, seeds come from the OS CSPRNG.
"""

from __future__ import annotations

import logging
import secrets
from typing import Callable, IO, Iterable, Iterator, List, Optional, Union

from .config import progress_every, seed_size
from .core.seeding import derive_seed
from .core.types import DrawRequest
from .reduction import ReductionPolicy, resolve_policy
from .session import DrawSession

logger = logging.getLogger(__name__)


def session_seed(master: Optional[Union[str, int]], index: int, size: Optional[int] = None) -> bytes:
    if master is None:
        return secrets.token_bytes(seed_size() if size is None else size)
    return derive_seed(master, index)


def sample_lines(
    iterations: int,
    range_: int,
    columns: int = 1,
    master: Optional[Union[str, int]] = None,
    policy: Optional[Union[ReductionPolicy, str]] = None,
) -> Iterator[List[int]]:
    """
    Lines of `columns` values in [0, range_), each from its own session.
    Arguments are checked here, before the first line is produced.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")
    request = DrawRequest(range=range_, count=columns)
    # Config is read once per batch, not once per session
    return _iter_lines(request, iterations, master, resolve_policy(policy), seed_size())


def _iter_lines(
    request: DrawRequest,
    iterations: int,
    master: Optional[Union[str, int]],
    resolved: ReductionPolicy,
    size: int,
) -> Iterator[List[int]]:
    for i in range(iterations):
        session = DrawSession(session_id=i, request=request, policy=resolved, seed_size=size)
        yield list(session.deliver_seed(session_seed(master, i, size)))


def write_lines(
    lines: Iterable[List[int]],
    out: IO[str],
    total: Optional[int] = None,
    on_progress: Optional[Callable[[int, int], None]] = None,
) -> int:
    """Write tab-separated lines; call on_progress(done, total) every progress_every() lines."""
    every = progress_every()
    n = 0
    for line in lines:
        out.write("\t".join(str(v) for v in line))
        out.write("\n")
        n += 1
        if on_progress is not None and total and (n % every == 0 or n == total):
            on_progress(n, total)
    logger.info("wrote %d sample lines", n)
    return n


__all__ = ["sample_lines", "session_seed", "write_lines"]
