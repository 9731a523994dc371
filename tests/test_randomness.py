"""Tests for the random source helpers."""
from __future__ import annotations

import random

import pytest

from vocab_quiz.randomness import PythonRandom, RandomSource, default_source


class ConstantRandom(RandomSource):
    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


class TestRandomSource:
    def test_shuffle_low_rotates(self):
        assert ConstantRandom(0.0).shuffled([1, 2, 3, 4]) == [2, 3, 4, 1]

    def test_shuffle_high_keeps_order(self):
        assert ConstantRandom(0.99).shuffled([1, 2, 3, 4]) == [1, 2, 3, 4]

    def test_shuffle_does_not_mutate(self):
        items = [1, 2, 3]
        ConstantRandom(0.0).shuffled(items)
        assert items == [1, 2, 3]

    def test_shuffle_empty_and_single(self):
        assert ConstantRandom(0.5).shuffled([]) == []
        assert ConstantRandom(0.5).shuffled(["a"]) == ["a"]

    def test_choice(self):
        assert ConstantRandom(0.0).choice(["a", "b", "c"]) == "a"
        assert ConstantRandom(0.5).choice(["a", "b", "c"]) == "b"
        assert ConstantRandom(0.99).choice(["a", "b", "c"]) == "c"

    def test_choice_clamps_one(self):
        assert ConstantRandom(1.0).choice(["a", "b"]) == "b"

    def test_choice_empty(self):
        with pytest.raises(IndexError):
            ConstantRandom(0.0).choice([])

    def test_coin(self):
        assert ConstantRandom(0.49).coin() is True
        assert ConstantRandom(0.5).coin() is False


class TestPythonRandom:
    def test_seeded_reproducible(self):
        a = PythonRandom(random.Random(42)).shuffled(range(20))
        b = PythonRandom(random.Random(42)).shuffled(range(20))
        assert a == b
        assert sorted(a) == list(range(20))

    def test_range(self):
        rng = PythonRandom(random.Random(0))
        for _ in range(200):
            assert 0.0 <= rng.random() < 1.0

    def test_default_source(self):
        assert isinstance(default_source(), PythonRandom)
        assert 0.0 <= default_source().random() < 1.0
