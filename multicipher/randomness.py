"""
Randomness for One-Time Pad key generation
===========================================
The only source of entropy in multicipher. Key generation asks a
RandomSource for uniform integers in [0, n); which generator answers is
a policy the caller chooses.

    SystemRandomSource  -- OS entropy via `secrets`. Default.
    SeededRandomSource  -- general-purpose Mersenne Twister PRNG, the kind
                           of generator classroom implementations use.
                           Reproducible for a fixed seed, so handy in tests.

Neither makes these ciphers secure: the letters are uniform, the
ciphers are still textbook.
"""

import random
import secrets


class RandomSource:
    """Supplies uniform integers for key generation."""

    def randbelow(self, n: int) -> int:
        raise NotImplementedError


class SystemRandomSource(RandomSource):
    """Operating-system entropy. Thread-safe."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)

    def __repr__(self):
        return "SystemRandomSource()"


class SeededRandomSource(RandomSource):
    """Owns a private random.Random; same seed, same sequence."""

    def __init__(self, seed=None):
        self._seed = seed
        self._rng  = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)

    def __repr__(self):
        return f"SeededRandomSource(seed={self._seed!r})"
