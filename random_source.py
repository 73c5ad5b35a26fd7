import random
import secrets
from typing_extensions import override


class RandomSource:
    def randbelow(self, n: int) -> int:
        raise NotImplementedError


class SystemRandomSource(RandomSource):
    @override
    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


# Seeded once, then only advanced
class SeededRandomSource(RandomSource):
    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)  # noqa: S311

    @override
    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)
