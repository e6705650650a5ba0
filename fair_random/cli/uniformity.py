#!/usr/bin/env python3
"""
Uniformity CLI: draw once from each of many distinct seeds and check bucket spread.
Exit 0 when spread_abs / target_freq <= --max-spread, 1 otherwise.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from fair_random.core.errors import FairRandomError
from fair_random.reduction import ReductionPolicy
from fair_random.stats.distribution import format_report, write_report_artifacts
from fair_random.stats.uniformity import check_uniformity


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ap = argparse.ArgumentParser(prog="fair-random uniformity", description="Multi-seed uniformity check")
    ap.add_argument("--seeds", type=int, default=None, help="Number of distinct seeds (config uniformity.seeds)")
    ap.add_argument("--range", dest="range_", type=int, default=None, help="Draw range (config uniformity.range)")
    ap.add_argument("--intervals", type=int, default=None, help="Bucket count (config uniformity.intervals)")
    ap.add_argument("--max-spread", type=float, default=None, help="Allowed spread relative to target frequency")
    ap.add_argument("--seed", type=str, default=None, help="Master key for session seeds (config uniformity.master)")
    ap.add_argument("--policy", choices=[p.value for p in ReductionPolicy], default=None)
    ap.add_argument("--out-dir", type=str, default=None, help="Write JSON/CSV report artifacts here")
    args = ap.parse_args(argv)

    try:
        result = check_uniformity(
            n_seeds=args.seeds,
            range_=args.range_,
            interval_count=args.intervals,
            master=args.seed,
            max_spread=args.max_spread,
            policy=args.policy,
        )
        if args.out_dir:
            write_report_artifacts(result.report, result.histogram, args.out_dir)
    except (FairRandomError, OSError) as e:
        print(f"uniformity check failed: {e}", file=sys.stderr)
        return 1
    sys.stdout.write(format_report(result.report, result.histogram))
    status = "PASS" if result.passed else "FAIL"
    print(f"{status}: spread/target={result.report.spread_to_target:.6g} (max {result.max_spread:.6g})")
    return 0 if result.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
