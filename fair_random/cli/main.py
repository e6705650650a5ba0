"""
Top-level CLI dispatcher: fair-random <command> [args...].
All commands dispatch to package CLI modules.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

_COMMANDS = {
    "validate": "Bucket draws from stdin and report flatness",
    "sample": "Generate lines of seeded draws",
    "uniformity": "Multi-seed uniformity check",
}


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = argparse.ArgumentParser(
        prog="fair-random",
        description="Seeded draws and offline distribution validation",
    )
    subparsers = parser.add_subparsers(dest="command", help="command")
    for name, help_text in _COMMANDS.items():
        subparsers.add_parser(name, help=help_text, add_help=False)

    args, rest = parser.parse_known_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    cmd = args.command
    if cmd == "validate":
        from fair_random.cli import validate as mod

        return mod.main(rest)
    if cmd == "sample":
        from fair_random.cli import sample as mod

        return mod.main(rest)
    if cmd == "uniformity":
        from fair_random.cli import uniformity as mod

        return mod.main(rest)

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
