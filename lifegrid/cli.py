"""Command line entry: read a game file, run its task, write the result."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .grid import parse_game
from .tasks import run_game


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lifegrid",
        description="Run a Game of Life task described in an input file.",
    )
    parser.add_argument("input", help="file holding the task header and the grid")
    parser.add_argument("output", help="file to write the task's output to")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    args = _parser().parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as error:
        print(f"cannot open {args.input}: {error}", file=sys.stderr)
        return 1
    try:
        game = parse_game(text)
    except ValueError as error:
        print(f"invalid input in {args.input}: {error}", file=sys.stderr)
        return 1
    output = run_game(game)
    try:
        Path(args.output).write_text(output)
    except OSError as error:
        print(f"cannot open {args.output}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())