import logging
from collections.abc import Iterator
from dataclasses import dataclass

from random_source import RandomSource

from .report import Reporter
from .trials import MAX_TRIALS, Composite, Outcome, classify

LOWER_BOUND = 3
DEFAULT_MAX = 1000

logger = logging.getLogger(__name__)


@dataclass
class ScanSummary:
    candidates: int = 0
    probable_primes: int = 0
    composites: int = 0
    liars: int = 0

    def add(self, outcome: Outcome) -> None:
        self.candidates += 1
        if isinstance(outcome, Composite):
            self.composites += 1
            if outcome.liar is not None:
                self.liars += 1
        else:
            self.probable_primes += 1


# Every integer in [3, max_) is scanned, even ones included
def scan(
    source: RandomSource,
    max_: int = DEFAULT_MAX,
    trials: int = MAX_TRIALS,
) -> Iterator[tuple[int, Outcome]]:
    for p in range(LOWER_BOUND, max_):
        yield p, classify(p, source, trials)


def run(
    reporter: Reporter,
    source: RandomSource,
    max_: int = DEFAULT_MAX,
    trials: int = MAX_TRIALS,
) -> ScanSummary:
    summary = ScanSummary()
    for p, outcome in scan(source, max_, trials):
        reporter.report(p, outcome)
        summary.add(outcome)

    logger.info(
        'scanned %d candidates: %d probable primes, %d composites (%d with a fermat liar)',
        summary.candidates,
        summary.probable_primes,
        summary.composites,
        summary.liars,
    )
    return summary
