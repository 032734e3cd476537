"""
Pure Python implementation of a random generator on the Keccak duplex construction.

Seed material is absorbed with a trailing domain bit of 1, output is squeezed
with a domain bit of 0, so absorb and squeeze calls over the same bytes never
collide. Instances are not thread safe; give each thread its own generator or
serialize access externally.
"""

import logging

from keccak_state import KeccakState
from .forgetting import ForgettingBuffer, check_bounds, secure_zero
from .presets import CAPACITY_PRESETS
from .seed_generator import SeedGenerator, MIN_SEED_LENGTH_BYTES


logger = logging.getLogger(__name__)

# Rate bits reserved for the domain bit and pad10*1
PAD_BITS = 3


class DuplexRandom:
    """
    Cryptographic random generator with re-seeding and forward secrecy.

    capacity_bits should be about twice the desired security level. Pick
    capacity_bits = n*64 - 3 with n in [4, 25) so each permutation yields a
    whole number of 64-bit words; higher n is more secure and slower.

    Seeding with a fixed value before the first output gives a reproducible
    stream whose security is that of the seed. An unseeded generator seeds
    itself from the master seed generator on first use.
    """

    Permutation = KeccakState

    def __init__(self, capacity_bits):
        self._state = self.Permutation(capacity_bits)
        self.capacity_bits = capacity_bits
        self.rate_bytes = (self._state.rate_bits - PAD_BITS) >> 3
        if self.rate_bytes < 1:
            raise ValueError(f"Capacity of {capacity_bits} bits leaves no rate for output")
        self._pos = 0
        self._seeded = False
        self._pending = ForgettingBuffer()

    @classmethod
    def from_preset(cls, name):
        """Create a generator from a named entry of CAPACITY_PRESETS."""
        try:
            capacity_bits = CAPACITY_PRESETS[name]
        except KeyError:
            raise ValueError(f"Unknown capacity preset: {name}") from None
        return cls(capacity_bits)

    @property
    def seeded(self):
        return self._seeded

    def seed(self, data, off=0, length=None):
        """
        (Re)seed with data[off:off+length].

        Seeds accumulate and are only absorbed once at least
        MIN_SEED_LENGTH_BYTES have been supplied in total.
        """
        if length is None:
            length = len(data) - off
        check_bounds(data, off, length)

        if len(self._pending) + length >= MIN_SEED_LENGTH_BYTES:
            self._pending.flush(self._feed)
            self._feed(data, off, length)
        else:
            self._pending.write(data, off, length)

    def absorb(self, data, off=0, length=None):
        """Absorb data[off:off+length] immediately, bypassing the seed buffer."""
        if length is None:
            length = len(data) - off
        check_bounds(data, off, length)
        self._feed(data, off, length)

    def reseed(self):
        """(Re)seed from the master seed generator."""
        seed_length = max((self.capacity_bits >> 4) + 1, MIN_SEED_LENGTH_BYTES)
        logger.debug("Seeding %d-bit capacity generator with %d master bytes",
                     self.capacity_bits, seed_length)
        seed = bytearray(seed_length)
        try:
            get_seed_bytes(seed)
            self._feed(seed, 0, seed_length)
        finally:
            secure_zero(seed)

    def get_bytes(self, buf, off=0, length=None):
        """Fill buf[off:off+length] with random bytes and return buf."""
        with memoryview(buf) as view:
            if view.readonly:
                raise TypeError("Output buffer must be writable, e.g. a bytearray")
        if length is None:
            length = len(buf) - off
        check_bounds(buf, off, length)

        if not self._seeded:
            self.reseed()

        while length > 0:
            chunk = min(length, self.rate_bytes - self._pos)
            if chunk == 0:
                # Squeeze: domain bit 0, pad and permute
                self._state.pad(0, 0, 1)
                self._state.permute()
                self._pos = 0
                continue
            self._state.read_bytes(self._pos, buf, off, chunk)
            off += chunk
            length -= chunk
            self._pos += chunk
        return buf

    def random_bytes(self, n):
        """Return n random bytes."""
        buf = bytearray(n)
        self.get_bytes(buf)
        return bytes(buf)

    randbytes = random_bytes

    def randint(self, a, b):
        """Return a uniformly distributed integer in [a, b]."""
        if a > b:
            raise ValueError("a must be <= b")
        range_size = b - a + 1
        nbits = (range_size - 1).bit_length()
        nbytes = (nbits + 7) // 8
        while True:
            value = int.from_bytes(self.random_bytes(nbytes), 'big') >> (nbytes * 8 - nbits)
            if value < range_size:
                return a + value

    def forget(self):
        """Forget past state, so a later compromise cannot reveal earlier output."""
        self._pos = 0
        self._state.pad(0)
        self._state.permute()

        self._state.zero_bytes(0, self.rate_bytes)
        self._state.pad(self.rate_bytes << 3)
        self._state.permute()

    def _feed(self, data, off, length):
        # Absorb: domain bit 1, pad and permute after every full rate block
        # and once at the end, even when there is no input at all
        self._pos = 0
        while True:
            chunk = min(length, self.rate_bytes - self._pos)
            if chunk:
                self._state.xor_bytes(self._pos, data, off, chunk)
                off += chunk
                length -= chunk
                self._pos += chunk

            if self._pos == self.rate_bytes or length == 0:
                self._state.pad(self._pos << 3, 1, 1)
                self._state.permute()
                self._pos = 0
                if length == 0:
                    break
        self._seeded = True

    def __repr__(self):
        return f"DuplexRandom(capacity_bits={self.capacity_bits})"


_master = SeedGenerator(DuplexRandom)


def get_seed_bytes(buf, off=0, length=None):
    """Fill buf[off:off+length] from the process-wide master seed generator."""
    return _master.get_seed_bytes(buf, off, length)
