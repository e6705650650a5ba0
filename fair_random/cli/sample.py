#!/usr/bin/env python3
"""
Sampler CLI: generate draw lines, one independent session seed per line, for the validator.
Example: fair-random sample --seed batch-1 --count 100000 --range 100 | fair-random-validate 100
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from fair_random.core.errors import FairRandomError
from fair_random.reduction import ReductionPolicy
from fair_random.sampling import sample_lines, write_lines


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ap = argparse.ArgumentParser(prog="fair-random sample", description="Generate lines of seeded draws")
    ap.add_argument("--seed", "-s", type=str, default=None, help="Master key for session seeds (default: OS entropy)")
    ap.add_argument("--count", "-c", type=int, default=10, help="Number of lines (sessions)")
    ap.add_argument("--range", "-r", dest="range_", type=int, default=2**64 - 1, help="Exclusive upper bound")
    ap.add_argument("--columns", type=int, default=1, help="Values per line")
    ap.add_argument("--out", "-o", type=str, default=None, help="Output file (default: stdout)")
    ap.add_argument(
        "--policy",
        choices=[p.value for p in ReductionPolicy],
        default=None,
        help="Range reduction policy (default: config draws.reduction_policy)",
    )
    args = ap.parse_args(argv)

    if args.count < 0:
        print("--count must be non-negative", file=sys.stderr)
        return 1

    start = time.monotonic()
    try:
        lines = sample_lines(args.count, args.range_, args.columns, master=args.seed, policy=args.policy)
        if args.out:
            print(f"Results will be saved to '{args.out}' file")

            def _progress(done: int, total: int) -> None:
                print(f"Current status: {done}/{total}, processed {done / total * 100:.2f}%", flush=True)

            with open(args.out, "w", encoding="utf-8") as f:
                write_lines(lines, f, total=args.count, on_progress=_progress)
        else:
            write_lines(lines, sys.stdout)
    except (FairRandomError, OSError) as e:
        print(f"sample failed: {e}", file=sys.stderr)
        return 1
    if args.out:
        print(f"Sampling completed, elapsed time: {time.monotonic() - start:.3f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
