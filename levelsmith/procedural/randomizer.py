from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomProvider(ABC):
    """
    Source of uniform floats in [0, 1). Everything random in level generation
    goes through one of these, so a fixed-seed provider makes a whole level
    reproducible.
    """

    @abstractmethod
    def next(self) -> float:
        """Return a float in [0, 1)."""

    def chance(self, probability: float) -> bool:
        return self.next() < probability

    def below(self, upper: int) -> int:
        """Uniform integer in [0, upper)."""
        if upper <= 0:
            raise ValueError("upper must be positive")
        return min(int(self.next() * upper), upper - 1)

    def choice(self, options: Sequence[T]) -> T:
        return options[self.below(len(options))]

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self.next()


class Randomizer(RandomProvider):
    """
    Seeded provider backed by ``random.Random``. Use a seed to get the same
    levels across runs.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next(self) -> float:
        return self.rng.random()
