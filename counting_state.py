#!/usr/bin/env python3
"""
Instrumented permutation state for testing duplex generators.
"""

from keccak_state import KeccakState
from duplex_random import DuplexRandom


class CountingKeccakState(KeccakState):
    """Keccak state that records every pad, and the state before every permutation."""

    def __init__(self, capacity_bits, rounds=24):
        super().__init__(capacity_bits, rounds)
        self.permutations = 0
        self.pads = []
        self.history = []

    def pad(self, bit_position, bits=0, bit_count=0):
        self.pads.append((bit_position, bits, bit_count))
        super().pad(bit_position, bits, bit_count)

    def permute(self):
        self.permutations += 1
        self.history.append(self.snapshot())
        super().permute()

    def snapshot(self):
        """Return a copy of the full 200-byte state."""
        return bytes(self._state)


class CountingDuplexRandom(DuplexRandom):
    """Duplex generator over a CountingKeccakState that counts self-seeding."""

    Permutation = CountingKeccakState

    def __init__(self, capacity_bits):
        super().__init__(capacity_bits)
        self.reseeds = 0

    @property
    def state(self):
        return self._state

    def reseed(self):
        self.reseeds += 1
        super().reseed()


def seeded_generator(seed, capacity_bits=1085, cls=CountingDuplexRandom):
    """Construct a generator and seed it with a fixed value."""
    rng = cls(capacity_bits)
    rng.seed(seed)
    return rng
