import pytest

from random_source import SeededRandomSource

from ..trials import MAX_TRIALS, Composite, ProbablePrime, classify
from ..witness import congruence_holds
from .scripted import ScriptedSource


def test_prime() -> None:
    source = SeededRandomSource()
    for _ in range(20):
        assert classify(7, source) == ProbablePrime()


def test_degenerate_prime() -> None:
    source = ScriptedSource([2] * MAX_TRIALS)
    assert classify(3, source) == ProbablePrime()
    assert source.draws == MAX_TRIALS


def test_no_liar_on_first_failure() -> None:
    source = ScriptedSource([2, 4])
    assert classify(15, source) == Composite(2, None)
    assert source.draws == 1


def test_liar_on_second_failure() -> None:
    assert classify(15, ScriptedSource([4, 2])) == Composite(2, 4)


def test_only_last_liar_reported() -> None:
    source = ScriptedSource([4, 11, 14, 2, 11])
    assert classify(15, source) == Composite(2, 14)
    assert source.draws == 4


def test_failure_on_last_trial() -> None:
    source = ScriptedSource([4] * (MAX_TRIALS - 2) + [11, 2])
    assert classify(15, source) == Composite(2, 11)
    assert source.draws == MAX_TRIALS


def test_liars_surviving_all_trials() -> None:
    assert classify(15, ScriptedSource([4, 11] * 10)) == ProbablePrime()


def test_custom_trials() -> None:
    source = ScriptedSource([4, 11, 2])
    assert classify(15, source, trials=2) == ProbablePrime()
    assert source.draws == 2


def test_carmichael_seeded_runs() -> None:
    for seed in range(100):
        assert classify(561, SeededRandomSource(seed)) == ProbablePrime()


def test_composite_outcome_is_consistent() -> None:
    source = SeededRandomSource(2024)
    for p in (9, 15, 21, 91, 341, 999):
        outcome = classify(p, source)
        if isinstance(outcome, Composite):
            assert not congruence_holds(p, outcome.witness)
            if outcome.liar is not None:
                assert congruence_holds(p, outcome.liar)


def test_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        classify(2, SeededRandomSource())
    with pytest.raises(ValueError):
        classify(7, SeededRandomSource(), trials=0)


def test_source_failure_propagates() -> None:
    with pytest.raises(RuntimeError):
        classify(7, ScriptedSource([2, 3]))
