import sys
from typing import TextIO

from typing_extensions import override

from .trials import Composite, Outcome


def format_outcome(p: int, outcome: Outcome) -> str:
    if not isinstance(outcome, Composite):
        return f'{p} is a probable prime'

    line = f'{p} is composite - {outcome.witness} is a composite witness'
    if outcome.liar is not None:
        line += f' - {outcome.liar} is a fermat liar for {p}'
    return line


class Reporter:
    def report(self, p: int, outcome: Outcome) -> None:
        raise NotImplementedError


class LineReporter(Reporter):
    stream: TextIO

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    @override
    def report(self, p: int, outcome: Outcome) -> None:
        self.stream.write(format_outcome(p, outcome) + '\n')


class ListReporter(Reporter):
    lines: list[str]

    def __init__(self):
        self.lines = []

    @override
    def report(self, p: int, outcome: Outcome) -> None:
        self.lines.append(format_outcome(p, outcome))
