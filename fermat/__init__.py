from .report import LineReporter, ListReporter, Reporter, format_outcome
from .scanner import DEFAULT_MAX, ScanSummary, run, scan
from .trials import MAX_TRIALS, Composite, Outcome, ProbablePrime, classify
from .witness import congruence_holds, draw_witness

__all__ = [
    'DEFAULT_MAX',
    'MAX_TRIALS',
    'Composite',
    'LineReporter',
    'ListReporter',
    'Outcome',
    'ProbablePrime',
    'Reporter',
    'ScanSummary',
    'classify',
    'congruence_holds',
    'draw_witness',
    'format_outcome',
    'run',
    'scan',
]
