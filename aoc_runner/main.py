"""
AoC Runner - command line entry point
"""

import argparse
import logging
import sys
from typing import List, Optional

from aoc_runner.core.config import Settings, settings as default_settings
from aoc_runner.core.exceptions import AocError, ConfigurationError
from aoc_runner.core.runner import Runner, RunOptions

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc-run",
        description="Run Advent of Code solutions with timing and answer history",
    )
    parser.add_argument("year", type=int, help="Puzzle year, e.g. 2022")
    parser.add_argument("day", type=int, help="Last day to run (1-25)")
    parser.add_argument("--only", action="store_true",
                        help="Run only DAY instead of days 1..DAY")
    parser.add_argument("--sample", metavar="NAME",
                        help="Use input/YEAR/sample/NAME instead of the real input (implies --only)")
    parser.add_argument("--quiet", action="store_true",
                        help="Hide the solvers' own debug output")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    parser.add_argument("--base-path", help="Directory holding input/ and results/")
    parser.add_argument("--log-level", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default from LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings: Settings = default_settings
    if args.base_path:
        settings = settings.model_copy(update={"BASE_PATH": args.base_path})

    logging.basicConfig(
        level=(args.log_level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )

    options = RunOptions(
        one_day_only=args.only or bool(args.sample),
        sample_input=args.sample,
        display_output=not args.quiet,
        color=not args.no_color,
    )

    try:
        Runner(settings=settings, options=options).run_target(args.year, args.day)
    except ConfigurationError as exc:
        logger.error(f"Configuration error: {exc}")
        return 1
    except AocError as exc:
        logger.error(f"Run aborted: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
