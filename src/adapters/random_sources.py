"""Fuentes de aleatoriedad concretas.

Ambas cumplen `core.interfaces.random_source.RandomSource`:
- `PseudoRandomSource`: Mersenne Twister (`random.Random`), sembrable.
- `SystemRandomSource`: entropía del sistema operativo (`random.SystemRandom`).
"""

from __future__ import annotations

import random

from core.interfaces.random_source import RandomSource


class PseudoRandomSource(RandomSource):
    """Default source; pass a `seed` for reproducible output."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        return self._random.randint(low, high)


class SystemRandomSource(RandomSource):
    """Source backed by `os.urandom`; used by `--secure`."""

    def __init__(self) -> None:
        self._random = random.SystemRandom()

    def randint(self, low: int, high: int) -> int:
        return self._random.randint(low, high)


def build_random_source(*, secure: bool = False, seed: int | None = None) -> RandomSource:
    if secure:
        return SystemRandomSource()
    return PseudoRandomSource(seed)
