"""
Stable facade: offline statistical validation of produced draws.
Does not import cli. Do not add exports without updating __all__.
"""

from __future__ import annotations

from .avalanche import AvalancheResult, avalanche_profile, counter_avalanche_profile
from .distribution import (
    DistributionReport,
    FrequencyHistogram,
    format_report,
    interval_layout,
    validate_stream,
    validate_values,
    write_report_artifacts,
)
from .uniformity import UniformityResult, check_uniformity

# Do not add exports without updating __all__.
__all__ = [
    "AvalancheResult",
    "DistributionReport",
    "FrequencyHistogram",
    "UniformityResult",
    "avalanche_profile",
    "check_uniformity",
    "counter_avalanche_profile",
    "format_report",
    "interval_layout",
    "validate_stream",
    "validate_values",
    "write_report_artifacts",
]
