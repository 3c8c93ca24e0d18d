#!/usr/bin/env python3
"""
aoc2024 - Main Entry Point
Runs and times the grid-search puzzle solvers
"""

import sys
import logging
import argparse
from typing import List, Optional

from .algorithms.shortest_path import ShortestPathError
from .benchmark import (
    BenchmarkReport,
    available_days,
    get_day,
    read_input,
    run_all,
    run_day,
)
from .shared.configuration.settings import ApplicationSettings, load_settings
from .shared.utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def setup_environment(args) -> ApplicationSettings:
    """Load settings, apply command line overrides and start logging."""
    settings = load_settings(getattr(args, 'config', None))

    if getattr(args, 'log_level', None):
        settings.logging.level = args.log_level.upper()
    if getattr(args, 'runs', None) is not None:
        settings.benchmark.num_runs = args.runs
    if getattr(args, 'input_dir', None):
        settings.benchmark.input_dir = args.input_dir
    if getattr(args, 'no_checks', False):
        settings.solver.debug_checks = False

    errors = settings.errors()
    if errors:
        raise ValueError("Invalid settings: " + "; ".join(errors))

    setup_logging(settings.logging)
    return settings


def run_all_mode(args) -> int:
    settings = setup_environment(args)
    if args.days:
        settings.benchmark.days = args.days
        errors = settings.errors()
        if errors:
            raise ValueError("Invalid settings: " + "; ".join(errors))

    report = BenchmarkReport()
    run_all(settings.benchmark, settings.solver.to_solver_config(), report=report)
    print(report.render(settings.benchmark.slow_threshold_us))
    return 0


def run_day_mode(args) -> int:
    settings = setup_environment(args)
    day = get_day(args.day)

    if args.input:
        with open(args.input, 'r', encoding='utf-8') as handle:
            text = handle.read()
    else:
        text = read_input(day, settings.benchmark.input_dir)

    parts = [args.part] if args.part else None
    report = BenchmarkReport()
    results = run_day(day, text, report, settings.benchmark.num_runs,
                      config=settings.solver.to_solver_config(), parts=parts)

    for result in results:
        print(f"[{result.name}] {result.solution}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='aoc2024',
        description="aoc2024 - grid search puzzle solvers and timing harness",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s all                          # Time every registered day
  %(prog)s all --days 16 20 --runs 3    # Time selected days
  %(prog)s day 16                       # Solve both parts of day 16
  %(prog)s day 18 --part b -i in.txt    # Solve one part from a given file
        """
    )

    parser.add_argument('-c', '--config', help='Settings file (JSON)')
    parser.add_argument('--log-level', choices=['debug', 'info', 'warning', 'error'],
                        help='Override the configured log level')
    parser.add_argument('--input-dir', help='Directory holding day_XX.txt inputs')
    parser.add_argument('--no-checks', action='store_true',
                        help='Skip weight and queue invariant checks')
    parser.add_argument('--version', action='version', version='%(prog)s 0.1.0')

    subparsers = parser.add_subparsers(dest='mode', help='Operation mode')

    all_parser = subparsers.add_parser('all', help='Time every registered day')
    all_parser.add_argument('--days', type=int, nargs='+', help='Restrict to these days')
    all_parser.add_argument('--runs', type=int, help='Runs per part (median is reported)')

    day_parser = subparsers.add_parser('day', help='Solve a single day')
    day_parser.add_argument('day', type=int, choices=available_days(), help='Day number')
    day_parser.add_argument('--part', choices=['a', 'b'], help='Only this part')
    day_parser.add_argument('-i', '--input', help='Input file (default: <input-dir>/day_XX.txt)')
    day_parser.add_argument('--runs', type=int, default=1, help='Runs per part (default: 1)')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.mode:
        parser.print_help()
        return 0

    try:
        if args.mode == 'all':
            return run_all_mode(args)
        if args.mode == 'day':
            return run_day_mode(args)
        parser.error(f"Unknown mode: {args.mode}")
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 130
    except (OSError, KeyError, ValueError, ShortestPathError) as e:
        logger.error(f"{args.mode} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
