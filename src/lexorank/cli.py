"""
Command line interface for lexorank.

Usage:
    lexorank compare AA AB
    lexorank valid "A!"
    lexorank before C
    lexorank after "~"
    lexorank between AA AB
"""

import argparse
import logging
import sys
from typing import List, Optional

from .lexorank import LexoRank
from .models import LexoRankKind
from .strategies import UnsupportedStrategyError
from .utils import ValidationHelper

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    """Setup logging on stderr so stdout only carries results."""

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)

    root_logger.addHandler(stderr_handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexorank",
        description="Generate and compare list positions.",
    )
    parser.add_argument(
        "--strategy",
        default=None,
        help=f"Ranking strategy ({', '.join(k.value for k in LexoRankKind)}); "
             "defaults to $LEXORANK_STRATEGY or figma",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    compare_parser = subparsers.add_parser("compare", help="Compare two positions")
    compare_parser.add_argument("first")
    compare_parser.add_argument("second")

    valid_parser = subparsers.add_parser("valid", help="Check whether a position is valid")
    valid_parser.add_argument("position")

    before_parser = subparsers.add_parser("before", help="Position before the given one")
    before_parser.add_argument("position")

    after_parser = subparsers.add_parser("after", help="Position after the given one")
    after_parser.add_argument("position")

    between_parser = subparsers.add_parser("between", help="Position between two positions")
    between_parser.add_argument("first")
    between_parser.add_argument("second")

    return parser


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 2


def run_command(rank: LexoRank, args: argparse.Namespace) -> int:
    """Execute a parsed command and print its result; returns the exit code."""
    command = args.command
    validator = ValidationHelper(rank)

    if command == "compare":
        print(rank.compare_positions(args.first, args.second).name.lower())
        return 0

    if command == "valid":
        error = validator.validate_position(args.position)
        if error:
            print(error)
            return 1
        print("valid")
        return 0

    if command == "between":
        error = validator.validate_ordered_pair(args.first, args.second)
        if error:
            return _fail(error)
        print(rank.position_between(args.first, args.second))
        return 0

    error = validator.validate_position(args.position)
    if error:
        return _fail(error)

    if command == "before":
        print(rank.position_before(args.position))
    else:
        print(rank.position_after(args.position))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lexorank command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        rank = LexoRank(args.strategy)
    except UnsupportedStrategyError as e:
        return _fail(str(e))

    logger.debug(f"Running {args.command} with {rank!r}")
    return run_command(rank, args)


if __name__ == "__main__":
    sys.exit(main())
