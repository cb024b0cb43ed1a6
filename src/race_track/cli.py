"""
Command line entry point for the race track solver.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import RunConfig
from .logger import configure_logging, logger
from .provider import CaseParseError, CaseProvider
from .runner import format_result, solve_cases

SAMPLE_INPUT = """2
5 5
4 0 4 4
1
1 4 2 3
3 3
0 0 2 2
2
1 1 0 2
0 2 1 1
"""


def read_input(source: Optional[str], use_sample: bool) -> str:
    """Return the problem text from a file, stdin (``-``) or the sample."""
    if use_sample:
        return SAMPLE_INPUT
    if source is None or source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def run(text: str, config: RunConfig) -> List[str]:
    """Parse and solve ``text``, returning the printable block per case."""
    cases = CaseProvider().get(text)
    results = solve_cases(
        cases, workers=config.workers, progress=config.show_progress
    )
    return [format_result(case_result) for case_result in results]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Race track solver: minimum acceleration hops across a grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --sample            # Solve the built-in two-case sample
  python main.py cases.txt           # Solve cases from a file
  cat cases.txt | python main.py -   # Solve cases from stdin
  python main.py cases.txt -w 4 -v   # Four workers, debug logging
        """,
    )

    parser.add_argument(
        "input", nargs="?", default=None, help="Problem file, or - for stdin"
    )
    parser.add_argument(
        "--sample", action="store_true", help="Solve the built-in sample input"
    )
    parser.add_argument(
        "-w", "--workers", type=int, default=None, help="Worker threads (default: auto)"
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar over cases"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    try:
        config = RunConfig(
            workers=args.workers, show_progress=args.progress, verbose=args.verbose
        )
    except ValueError as e:
        parser.error(str(e))

    configure_logging(config.verbose)
    log = logger.bind(component="cli")

    try:
        text = read_input(args.input, args.sample)
        blocks = run(text, config)
    except OSError as e:
        log.error(f"Could not read input: {e}")
        return 1
    except CaseParseError as e:
        log.error(f"Invalid input: {e}")
        return 1

    for block in blocks:
        print(block)
    return 0


if __name__ == "__main__":
    sys.exit(main())
