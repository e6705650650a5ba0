"""
Distribution validator: bucket a stream of bounded draws and report how flat it is.
Offline and diagnostic only; nothing here is called on the draw path.

Bucketing layout:
- interval_count = finish // 10 when finish > 1000, else finish (one bucket per value)
- interval_size = finish // interval_count (floor); the last bucket absorbs the remainder
  values [interval_count * interval_size, finish).

Input policy: tokens that are not unsigned decimal integers are skipped and counted,
they never end the run. Values >= finish are counted as out_of_range and not bucketed.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np
import pandas as pd
from scipy.stats import chisquare

from ..artifacts import write_df_csv, write_hashes, write_json_sorted
from ..config import chunk_size, coarse_factor, coarse_threshold, max_intervals
from ..core.errors import MalformedInputError

logger = logging.getLogger(__name__)


def interval_layout(finish: int, interval_count: Optional[int] = None) -> Tuple[int, int]:
    """Return (interval_count, interval_size) for values drawn from [0, finish)."""
    if finish < 1:
        raise MalformedInputError(f"finish must be >= 1, got {finish}")
    if interval_count is None:
        interval_count = finish // coarse_factor() if finish > coarse_threshold() else finish
    if not 1 <= interval_count <= finish:
        raise MalformedInputError(f"interval count must be in [1, {finish}], got {interval_count}")
    if interval_count > max_intervals():
        raise MalformedInputError(
            f"{interval_count} intervals exceeds the limit of {max_intervals()}; pass an explicit interval count"
        )
    return interval_count, finish // interval_count


class FrequencyHistogram:
    """Observation count per bucket over all interval_count buckets (empty buckets are 0)."""

    def __init__(self, finish: int, interval_count: Optional[int] = None) -> None:
        self.finish = int(finish)
        self.interval_count, self.interval_size = interval_layout(self.finish, interval_count)
        self.counts = np.zeros(self.interval_count, dtype=np.int64)
        self.out_of_range = 0

    @property
    def draws(self) -> int:
        return int(self.counts.sum())

    def bucket_of(self, value: int) -> int:
        if not 0 <= value < self.finish:
            raise ValueError(f"value {value} outside [0, {self.finish})")
        return min(value // self.interval_size, self.interval_count - 1)

    def bucket_bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """Inclusive lower and exclusive upper value bound per bucket."""
        lower = np.arange(self.interval_count, dtype=np.float64) * self.interval_size
        upper = lower + self.interval_size
        upper[-1] = self.finish
        return lower, upper

    def add(self, values: Iterable[int]) -> None:
        vals = list(values)
        in_range = [v for v in vals if 0 <= v < self.finish]
        self.out_of_range += len(vals) - len(in_range)
        if not in_range:
            return
        arr = np.array(in_range, dtype=np.uint64)
        idx = np.minimum(arr // np.uint64(self.interval_size), np.uint64(self.interval_count - 1))
        np.add.at(self.counts, idx.astype(np.int64), 1)

    def to_frame(self) -> pd.DataFrame:
        lower = np.arange(self.interval_count, dtype=np.uint64) * np.uint64(self.interval_size)
        upper = lower + np.uint64(self.interval_size)
        upper[-1] = np.uint64(self.finish)
        return pd.DataFrame(
            {
                "bucket": np.arange(self.interval_count),
                "lower": lower,
                "upper": upper,
                "frequency": self.counts,
            }
        )


class TokenReader:
    """Iterate unsigned integers from whitespace-separated lines, counting skipped tokens."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = lines
        self.skipped = 0
        self.first_skipped: Optional[str] = None

    def __iter__(self) -> Iterator[int]:
        for line in self._lines:
            for tok in line.split():
                if tok.isascii() and tok.isdigit():
                    yield int(tok)
                    continue
                self.skipped += 1
                if self.first_skipped is None:
                    self.first_skipped = tok
                    logger.warning("skipping non-numeric token %r (further skips are counted, not logged)", tok)


@dataclass
class DistributionReport:
    finish: int
    interval_count: int
    interval_size: int
    draws: int
    out_of_range: int
    skipped_tokens: int
    max_freq: int
    min_freq: int
    spread_abs: int
    spread_rel: float
    target_freq: float
    max_deviation_abs: float
    max_deviation_rel: float
    spread_to_target: float
    chi2_statistic: Optional[float] = None
    chi2_pvalue: Optional[float] = None

    def to_dict(self) -> dict:
        return asdict(self)


def summarize(histogram: FrequencyHistogram, skipped_tokens: int = 0) -> DistributionReport:
    """Spread, target deviation and chi-square goodness of fit for a filled histogram."""
    counts = histogram.counts
    draws = int(counts.sum())
    max_freq = int(counts.max())
    min_freq = int(counts.min())
    spread = max_freq - min_freq
    target = draws / histogram.interval_count
    max_dev = float(np.max(np.abs(counts - target)))
    chi2_stat: Optional[float] = None
    chi2_p: Optional[float] = None
    if draws > 0 and histogram.interval_count >= 2:
        # Expected counts follow bucket widths; the last bucket may be wider
        lower, upper = histogram.bucket_bounds()
        expected = draws * (upper - lower) / histogram.finish
        res = chisquare(counts.astype(np.float64), f_exp=expected)
        chi2_stat = float(res.statistic)
        chi2_p = float(res.pvalue)
    return DistributionReport(
        finish=histogram.finish,
        interval_count=histogram.interval_count,
        interval_size=histogram.interval_size,
        draws=draws,
        out_of_range=histogram.out_of_range,
        skipped_tokens=skipped_tokens,
        max_freq=max_freq,
        min_freq=min_freq,
        spread_abs=spread,
        spread_rel=spread / histogram.finish,
        target_freq=target,
        max_deviation_abs=max_dev,
        max_deviation_rel=max_dev / target if target > 0 else 0.0,
        spread_to_target=spread / target if target > 0 else 0.0,
        chi2_statistic=chi2_stat,
        chi2_pvalue=chi2_p,
    )


def validate_values(
    values: Iterable[int],
    finish: int,
    interval_count: Optional[int] = None,
) -> Tuple[DistributionReport, FrequencyHistogram]:
    """Validate in-memory values (already integers)."""
    return _consume(values, finish, interval_count, skipped=lambda: 0)


def validate_stream(
    lines: Iterable[str],
    finish: int,
    interval_count: Optional[int] = None,
) -> Tuple[DistributionReport, FrequencyHistogram]:
    """
    Single forward pass over text lines; memory is O(interval_count) plus one chunk.
    Returns the report and the histogram it was computed from.
    """
    reader = TokenReader(lines)
    return _consume(reader, finish, interval_count, skipped=lambda: reader.skipped)


def _consume(values, finish, interval_count, skipped) -> Tuple[DistributionReport, FrequencyHistogram]:
    histogram = FrequencyHistogram(finish, interval_count)
    chunk = chunk_size()
    buf: List[int] = []
    for v in values:
        buf.append(v)
        if len(buf) >= chunk:
            histogram.add(buf)
            buf = []
    if buf:
        histogram.add(buf)
    if histogram.out_of_range:
        logger.warning("%d values outside [0, %d) were not bucketed", histogram.out_of_range, finish)
    report = summarize(histogram, skipped_tokens=skipped())
    logger.info(
        "validated draws=%d intervals=%d spread_abs=%d skipped=%d",
        report.draws,
        report.interval_count,
        report.spread_abs,
        report.skipped_tokens,
    )
    return report, histogram


def _fmt(x: Optional[float]) -> str:
    if x is None:
        return "n/a"
    return f"{x:.6g}"


def format_report(report: DistributionReport, histogram: FrequencyHistogram) -> str:
    """Human-readable report: per-bucket frequencies, spread, target deviation, chi-square."""
    lines = [
        f"Intervals: {report.interval_count} x {report.interval_size} (finish={report.finish})",
        f"Draws: {report.draws}  skipped tokens: {report.skipped_tokens}  out of range: {report.out_of_range}",
        "",
        "Freqs:",
        " ".join(str(int(c)) for c in histogram.counts),
        "",
        f"min max freq diff(abs): {report.spread_abs}",
        f"min max freq diff(rel): {_fmt(report.spread_rel)}",
        f"target freq: {_fmt(report.target_freq)}",
        f"max target deviation(abs): {_fmt(report.max_deviation_abs)}",
        f"max target deviation(rel): {_fmt(report.max_deviation_rel)}",
        f"chi-square: statistic={_fmt(report.chi2_statistic)} p-value={_fmt(report.chi2_pvalue)}",
    ]
    return "\n".join(lines) + "\n"


def write_report_artifacts(
    report: DistributionReport,
    histogram: FrequencyHistogram,
    out_dir: str | Path,
) -> List[str]:
    """
    Write distribution_report.json, bucket_frequencies.csv and hashes.json (SHA-256 of the
    other two) to out_dir. Returns paths.
    """
    out_dir = Path(out_dir)
    p_json = out_dir / "distribution_report.json"
    write_json_sorted(report.to_dict(), p_json)
    p_csv = out_dir / "bucket_frequencies.csv"
    write_df_csv(histogram.to_frame(), p_csv)
    p_hashes = out_dir / "hashes.json"
    write_hashes([p_json, p_csv], p_hashes)
    return [str(p_json), str(p_csv), str(p_hashes)]


__all__ = [
    "DistributionReport",
    "FrequencyHistogram",
    "TokenReader",
    "format_report",
    "interval_layout",
    "summarize",
    "validate_stream",
    "validate_values",
    "write_report_artifacts",
]
