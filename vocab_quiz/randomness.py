"""Injectable randomness for quiz generation.

Everything random in a quiz (candidate order, question kinds, distractors,
true/false coin flips) goes through a ``RandomSource`` so tests can script it.
"""
from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


class RandomSource(ABC):
    @abstractmethod
    def random(self) -> float:
        """Return a float uniformly drawn from [0, 1)."""
        ...

    def index(self, n: int) -> int:
        # Clamp guards against sources that return exactly 1.0
        return min(int(self.random() * n), n - 1)

    def shuffled(self, items: Iterable[T]) -> list[T]:
        """Return a uniformly shuffled copy of *items* (Fisher-Yates)."""
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = self.index(i + 1)
            out[i], out[j] = out[j], out[i]
        return out

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        return items[self.index(len(items))]

    def coin(self) -> bool:
        return self.random() < 0.5


class PythonRandom(RandomSource):
    """Backed by a ``random.Random``; the process-wide generator by default."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng

    def random(self) -> float:
        if self._rng is None:
            return random.random()
        return self._rng.random()


_default = PythonRandom()


def default_source() -> RandomSource:
    return _default
