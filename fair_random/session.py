"""
Seed-supply boundary for one game session.

The session holds its pending request by value; there is no process-wide state, so
concurrent sessions cannot see each other's range or count. The seed arrives exactly
once, already verified by the collaborator that ran the commit-reveal exchange.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from .core.errors import SessionStateError
from .core.seeding import SeedLike, seed_fingerprint
from .core.types import DrawResult, Request
from .draws import execute
from .reduction import ReductionPolicy
from .stream import NumberStream

logger = logging.getLogger(__name__)


@dataclass
class DrawSession:
    session_id: Union[int, str]
    request: Request
    policy: Optional[Union[ReductionPolicy, str]] = None
    seed_size: Optional[int] = None
    _result: Optional[DrawResult] = field(default=None, init=False, repr=False)
    _seed_fp: Optional[str] = field(default=None, init=False, repr=False)

    @property
    def seeded(self) -> bool:
        return self._seed_fp is not None

    @property
    def result(self) -> Optional[DrawResult]:
        return self._result

    def deliver_seed(self, seed: SeedLike) -> DrawResult:
        """
        Bind a fresh stream to seed and run the pending request.
        Raises SessionStateError on a second delivery and EmptySeedError on a degenerate seed
        (the session stays unseeded in that case).
        """
        if self.seeded:
            raise SessionStateError(f"session {self.session_id}: seed already delivered")
        stream = NumberStream(seed, size=self.seed_size)
        self._result = execute(stream, self.request, policy=self.policy)
        self._seed_fp = seed_fingerprint(stream.seed)
        logger.debug(
            "session %s finished kind=%s n=%d seed_fp=%s",
            self.session_id,
            self._result.kind,
            len(self._result),
            self._seed_fp,
        )
        return self._result


__all__ = ["DrawSession"]
