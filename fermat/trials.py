import logging
from dataclasses import dataclass

from random_source import RandomSource

from .witness import check_candidate, congruence_holds, draw_witness

MAX_TRIALS = 20

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbablePrime:
    pass


@dataclass(frozen=True)
class Composite:
    witness: int
    liar: int | None = None


Outcome = ProbablePrime | Composite


def classify(p: int, source: RandomSource, trials: int = MAX_TRIALS) -> Outcome:
    """
    Runs up to `trials` Fermat tests on p and stops at the first composite witness.

    Only the witness of the trial right before the failing one is reported as a liar.
    """
    check_candidate(p)
    if trials < 1:
        msg = f'Number of trials must be positive, but got: {trials}'
        raise ValueError(msg)

    last_passing: int | None = None
    for trial in range(trials):
        a = draw_witness(p, source)
        if not congruence_holds(p, a):
            logger.debug('p=%d trial=%d a=%d composite witness', p, trial, a)
            return Composite(a, last_passing)
        logger.debug('p=%d trial=%d a=%d passed', p, trial, a)
        last_passing = a

    return ProbablePrime()
