"""
End-to-end uniformity check: many distinct seeds, one bounded draw each, bucketed.
Passes when the min-max bucket spread stays within max_spread of the expected bucket
frequency.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..config import uniformity_defaults
from ..reduction import ReductionPolicy
from ..sampling import sample_lines
from .distribution import DistributionReport, FrequencyHistogram, validate_values


@dataclass
class UniformityResult:
    report: DistributionReport
    histogram: FrequencyHistogram
    max_spread: float
    passed: bool


def check_uniformity(
    n_seeds: Optional[int] = None,
    range_: Optional[int] = None,
    interval_count: Optional[int] = None,
    master: Optional[Union[str, int]] = None,
    max_spread: Optional[float] = None,
    policy: Optional[Union[ReductionPolicy, str]] = None,
) -> UniformityResult:
    """Arguments left as None come from config (uniformity.*)."""
    cfg = uniformity_defaults()
    n_seeds = int(cfg["seeds"]) if n_seeds is None else n_seeds
    range_ = int(cfg["range"]) if range_ is None else range_
    interval_count = int(cfg["intervals"]) if interval_count is None else interval_count
    master = cfg["master"] if master is None else master
    max_spread = float(cfg["max_spread"]) if max_spread is None else max_spread

    values = (line[0] for line in sample_lines(n_seeds, range_, columns=1, master=master, policy=policy))
    report, histogram = validate_values(values, range_, interval_count=interval_count)
    passed = report.draws > 0 and report.spread_to_target <= max_spread
    return UniformityResult(report=report, histogram=histogram, max_spread=max_spread, passed=passed)


__all__ = ["UniformityResult", "check_uniformity"]
