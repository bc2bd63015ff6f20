"""Random helpers backed by the system's entropy source."""

from __future__ import annotations

import random
from typing import TypeVar

T = TypeVar("T")

_rng = random.SystemRandom()


def random_range(begin: int, end: int) -> int:
    """Return a random integer in the inclusive range [begin, end]."""
    return _rng.randint(begin, end)


def one_of(first: T, *args: T) -> T:
    """Return one of the given values, picked uniformly."""
    return _rng.choice((first, *args))