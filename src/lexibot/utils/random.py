"""Randomness helpers.

Every component that needs randomness receives a generator handle instead
of reaching for a module-level global, so tests can inject a seeded or stub
generator.
"""

from __future__ import annotations

import time
from typing import Optional, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class IntegerSource(Protocol):
    """The slice of :class:`numpy.random.Generator` the bot relies on."""

    def integers(self, low: int, high: int) -> int: ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a generator seeded with ``seed`` or the high-resolution clock."""
    if seed is None:
        seed = time.perf_counter_ns()
    return np.random.default_rng(seed)


def uniform_index(rng: IntegerSource, length: int) -> int:
    """Draw an index uniformly from ``range(length)``."""
    if length <= 0:
        raise ValueError("Cannot draw an index from an empty range")
    return int(rng.integers(0, length))


def choose(rng: IntegerSource, items: Sequence[T]) -> T:
    return items[uniform_index(rng, len(items))]
