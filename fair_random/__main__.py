"""Allow python -m fair_random to print help."""
from __future__ import annotations

from . import __version__

_HELP = f"""\
fair-random {__version__}

Available CLI commands:
  fair-random sample        Generate lines of seeded draws (one session seed per line)
  fair-random validate N    Bucket draws from stdin, report spread (alias: fair-random-validate)
  fair-random uniformity    Multi-seed uniformity check (exit 1 on failure)

Typical offline run:
  fair-random sample --seed batch-1 --count 100000 --range 100 | fair-random-validate 100

Or directly:
  python -m pytest -q       Run test suite
"""


def main() -> int:
    print(_HELP)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
