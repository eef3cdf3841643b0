"""In-place Fisher-Yates shuffle driven by a RandomSource."""

from __future__ import annotations
from typing import MutableSequence, Optional, TypeVar

from ..interfaces import RandomSource
from ..utils.random_source import random_int

T = TypeVar("T")


def shuffle(items: MutableSequence[T], rng: Optional[RandomSource] = None) -> None:
    n = len(items)
    while n > 0:
        j = random_int(0, n, rng)
        items[n - 1], items[j] = items[j], items[n - 1]
        n -= 1
