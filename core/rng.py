"""Seedable PRNG for reproducible polynomial and point-set generation.

Use set_seed(n) at test start for reproducibility.
Default (no seed) draws from os.urandom.
"""

import os
import random as _random


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses os.urandom."""

    def __init__(self, seed=None):
        self._seed = seed
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = None

    def randbelow(self, n: int) -> int:
        if self._rng is not None:
            return self._rng.randrange(n)
        nbytes = max(1, (n.bit_length() + 7) // 8) + 8
        return int.from_bytes(os.urandom(nbytes), 'big') % n

    def shuffle(self, items: list):
        if self._rng is not None:
            self._rng.shuffle(items)
        else:
            _random.SystemRandom().shuffle(items)


_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = OS randomness."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)


def randrange(lo: int, hi: int) -> int:
    """Uniform integer in [lo, hi)."""
    return lo + _global_rng.randbelow(hi - lo)


def shuffle(items: list):
    _global_rng.shuffle(items)
