"""
Top-level public API surface. Stable facades only.
Seeded draws: NumberStream -> reduction -> request_draws; offline checks live in stats.
Does not import cli.
"""

from __future__ import annotations

from . import artifacts, core, stats
from ._version import __version__
from .draws import execute, request_draws
from .reduction import ReductionPolicy, modulo_bias, reduce
from .session import DrawSession
from .stream import GeneratorState, NumberStream

# Do not add exports without updating __all__.
__all__ = [
    "__version__",
    "DrawSession",
    "GeneratorState",
    "NumberStream",
    "ReductionPolicy",
    "artifacts",
    "core",
    "execute",
    "modulo_bias",
    "reduce",
    "request_draws",
    "stats",
]
