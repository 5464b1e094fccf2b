"""Seeded pseudo-random generator for reproducible orderings.

A 32-bit linear congruential generator with the Numerical Recipes constants.
The same seed yields the same float stream in every process and on every
client, which is what keeps a user's ordering stable. It is NOT suitable for
anything security-sensitive.
"""

from typing import Callable

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2**32


class SeededRandom:
    """Stateful LCG producing floats in [0, 1).

    Each call advances the state exactly once. Instances are cheap and must
    not be shared between orderings; build a fresh one per call.
    """

    __slots__ = ("state",)

    def __init__(self, seed: int):
        self.state = seed % LCG_MODULUS

    def __call__(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS

    def __repr__(self) -> str:
        return f"SeededRandom(state={self.state})"


def make_generator(seed: int) -> Callable[[], float]:
    """Build a fresh generator for one ordering call."""
    return SeededRandom(seed)
