#!/usr/bin/env python3
"""
Distribution validator CLI: bucket unsigned integers read from stdin and report flatness.
Usage: fair-random-validate FINISH [--intervals N] [--out-dir DIR] < draws.txt

Exactly one positional FINISH (exclusive upper bound). A missing, extra or malformed
argument exits 1 and writes nothing to stdout.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from fair_random.core.errors import FairRandomError, MalformedInputError
from fair_random.core.seeding import U64_MAX
from fair_random.stats.distribution import format_report, validate_stream, write_report_artifacts


class _ArgumentParser(argparse.ArgumentParser):
    """Usage errors raise instead of printing usage and exiting 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise MalformedInputError(message)


def _unsigned(text: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise argparse.ArgumentTypeError(f"expected an unsigned integer, got {text!r}")
    value = int(text)
    if value < 1 or value > U64_MAX:
        raise argparse.ArgumentTypeError(f"expected a value in [1, 2**64), got {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(
        prog="fair-random-validate",
        description="Bucket draws from stdin and report min-max spread and deviation from the target frequency",
    )
    ap.add_argument("finish", type=_unsigned, help="Exclusive upper bound of the drawn values")
    ap.add_argument("--intervals", type=_unsigned, default=None, help="Override the bucket count")
    ap.add_argument("--out-dir", type=str, default=None, help="Also write JSON/CSV report artifacts here")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = build_parser().parse_args(argv)
        report, histogram = validate_stream(sys.stdin, args.finish, interval_count=args.intervals)
        paths = write_report_artifacts(report, histogram, args.out_dir) if args.out_dir else []
    except (FairRandomError, OSError) as e:
        print(f"fair-random-validate: {e}", file=sys.stderr)
        return 1
    sys.stdout.write(format_report(report, histogram))
    if paths:
        print(f"Wrote {len(paths)} artifacts to {args.out_dir}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
