"""
Random Source Helpers

The simulator draws every random decision from an injected source with a
single ``random()`` method returning a float in [0, 1). A
``numpy.random.Generator`` satisfies this directly, as does
``random.Random``. Integer picks are derived from ``random()`` so that any
conforming source reproduces the same game for the same draws.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

import numpy as np

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Uniform random number source."""

    def random(self) -> float:
        """Return the next float in [0, 1)."""
        ...


def make_rng(seed: int | np.random.SeedSequence | None = None) -> np.random.Generator:
    """Create a fresh generator (unseeded when seed is None)."""
    return np.random.default_rng(seed)


def spawn_rngs(seed: int | None, count: int) -> list[np.random.Generator]:
    """
    Create independent generators for a batch of games.

    Each child stream is statistically independent of the others, so the
    games can be simulated in any order or in parallel.

    Args:
        seed: Root seed (None for OS entropy)
        count: Number of generators

    Returns:
        List of generators, one per game
    """
    root = np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in root.spawn(count)]


def draw(rng: RandomSource) -> float:
    """Next uniform draw as a plain float."""
    return float(rng.random())


def randint(rng: RandomSource, n: int) -> int:
    """Uniform integer in [0, n)."""
    return int(draw(rng) * n)


def choice(rng: RandomSource, items: Sequence[T]) -> T:
    """Uniform pick from a non-empty sequence."""
    return items[randint(rng, len(items))]


def sample(rng: RandomSource, items: Sequence[T], k: int) -> list[T]:
    """Pick up to k distinct items uniformly, without replacement."""
    pool = list(items)
    picked: list[T] = []
    for _ in range(min(k, len(pool))):
        picked.append(pool.pop(randint(rng, len(pool))))
    return picked
