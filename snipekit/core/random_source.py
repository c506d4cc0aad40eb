"""
Random byte source for credential obfuscation.

Path: snipekit/core/random_source.py

The default source is seeded once, at construction, from the process id
and the current time. That seed is low-assurance and only good enough for
a memory-scraping deterrent. Use SystemRandomSource where a stronger
source is wanted; the contract is the same.
"""

import os
import random
import time
from typing import Optional


class RandomSource:
    """
    Pseudo-random byte generator.

    Usage:
        rng = RandomSource.from_process()
        pad = rng.token(16)
        rng.fill(buffer)  # overwrite in place
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize source.

        Args:
            seed: Explicit seed. If None, derive one from pid and time.
        """
        if seed is None:
            seed = os.getpid() * int(time.time())
        self._rng = self._make_rng(seed)

    @classmethod
    def from_process(cls) -> "RandomSource":
        """Create a source seeded from process identity and current time."""
        return cls()

    def _make_rng(self, seed: Optional[int]) -> random.Random:
        return random.Random(seed)

    def byte(self) -> int:
        """Return one random byte value (0-255)."""
        return self._rng.getrandbits(8)

    def fill(self, buffer: bytearray) -> None:
        """Overwrite every byte of buffer in place."""
        for i in range(len(buffer)):
            buffer[i] = self.byte()

    def token(self, length: int) -> bytearray:
        """Return a new bytearray of random bytes."""
        buffer = bytearray(length)
        self.fill(buffer)
        return buffer


class SystemRandomSource(RandomSource):
    """Random source backed by the operating system's generator."""

    def __init__(self):
        super().__init__(seed=0)

    def _make_rng(self, seed: Optional[int]) -> random.Random:
        # SystemRandom ignores the seed
        return random.SystemRandom()
