import argparse
import logging
import sys
from collections.abc import Sequence

from random_source import RandomSource, SeededRandomSource, SystemRandomSource

from .report import LineReporter
from .scanner import DEFAULT_MAX, run
from .trials import MAX_TRIALS


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        msg = f'expected a positive integer, but got: {value}'
        raise argparse.ArgumentTypeError(msg)
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fermat-scan',
        description="Scan [3, max) for probable primes using Fermat's little theorem",
    )
    parser.add_argument('--max', type=int, default=DEFAULT_MAX, dest='max_', help='exclusive upper bound')
    parser.add_argument('--trials', type=positive_int, default=MAX_TRIALS, help='witnesses tested per candidate')
    parser.add_argument('--seed', type=int, help='seed for reproducible runs')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='log to stderr, repeat for more')
    return parser


def configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    source: RandomSource = SystemRandomSource() if args.seed is None else SeededRandomSource(args.seed)
    run(LineReporter(sys.stdout), source, args.max_, args.trials)
    return 0
