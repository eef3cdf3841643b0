"""
Cryptographically backed random draws used for randomized settings and shuffling.

Every helper takes an optional RandomSource so tests can script exact draws;
the default is a shared SystemRandomSource, which holds no mutable state of
its own and is safe to use from concurrent calls.
"""

from __future__ import annotations
import secrets
from typing import Optional

from ..interfaces import RandomSource


class SystemRandomSource:
    """Uniform integers in [min_value, max_value) from the OS CSPRNG."""

    def randint(self, min_value: int, max_value: int) -> int:
        span = max_value - min_value
        if span <= 0:
            raise ValueError(
                f"Empty range: [{min_value}, {max_value}) has no values to draw."
            )
        return secrets.randbelow(span) + min_value


DEFAULT_RANDOM = SystemRandomSource()


def random_int(
    min_value: int, max_value: int, rng: Optional[RandomSource] = None
) -> int:
    return (rng or DEFAULT_RANDOM).randint(min_value, max_value)


def random_float(
    min_value: float, max_value: float, rng: Optional[RandomSource] = None
) -> float:
    """
    Uniform float with two-decimal granularity: an integer draw over
    [min*100, max*100) divided by 100.
    """
    lo = int(round(min_value * 100))
    hi = int(round(max_value * 100))
    return random_int(lo, hi, rng) / 100
