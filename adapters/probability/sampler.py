"""
Adapter: RandomSampler (menu "Probability").
Losowanie bez zwracania, ze zwracaniem i tasowanie; z ziarnem wyniki są powtarzalne.
"""
from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSampler:
    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        """k elementów bez zwracania."""
        if not 0 <= k <= len(population):
            raise ValueError(
                f"k musi być w zakresie 0..{len(population)}, jest {k}"
            )
        return self._rng.sample(list(population), k)

    def choices(self, population: Sequence[T], k: int) -> list[T]:
        """k elementów ze zwracaniem."""
        if k < 0:
            raise ValueError(f"k musi być >= 0, jest {k}")
        if not population and k:
            raise ValueError("Nie można losować z pustej populacji")
        return self._rng.choices(list(population), k=k)

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Zwraca nową, przetasowaną listę; wejście bez zmian."""
        shuffled = list(items)
        self._rng.shuffle(shuffled)
        return shuffled
