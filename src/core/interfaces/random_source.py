"""Contrato de la fuente de aleatoriedad.

Por qué Protocol:
- Contrato estructural (duck typing): `random.Random`, `random.SystemRandom`
  o un stub de tests lo cumplen sin heredar de nada.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Minimal contract for the generators' randomness."""

    def randint(self, low: int, high: int) -> int:
        """Return a uniformly distributed integer in `[low, high]`, both inclusive."""

        ...
