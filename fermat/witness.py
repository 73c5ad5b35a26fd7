from random_source import RandomSource


def check_candidate(p: int) -> None:
    if not isinstance(p, int) or isinstance(p, bool):
        msg = f'Expected int candidate, but got: {type(p)}'
        raise TypeError(msg)
    if p < 3:
        msg = f'Candidate must be at least 3, but got: {p}'
        raise ValueError(msg)


def check_witness(p: int, a: int) -> None:
    check_candidate(p)
    if not isinstance(a, int) or isinstance(a, bool):
        msg = f'Expected int witness, but got: {type(a)}'
        raise TypeError(msg)
    if not 2 <= a <= p - 1:
        msg = f'Witness must be in [2, {p - 1}], but got: {a}'
        raise ValueError(msg)


# Fermat's little theorem: p prime, 1 < a < p => (a^p - a) % p == 0
def congruence_holds(p: int, a: int, *, exact: bool = False) -> bool:
    check_witness(p, a)
    if exact:
        return (a**p - a) % p == 0
    return (pow(a, p, p) - a) % p == 0


# Returns a random witness from range [2, p - 1]
def draw_witness(p: int, source: RandomSource) -> int:
    a = source.randbelow(p - 2) + 2
    check_witness(p, a)
    return a
