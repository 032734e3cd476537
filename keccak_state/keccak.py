"""
Pure Python implementation of the Keccak-p[1600] permutation state.

The state is kept as 200 bytes in the FIPS 202 byte order, so lane i occupies
bytes 8*i to 8*i+7 in little-endian order.
"""

from .base import PermutationState


_MASK = 0xFFFFFFFFFFFFFFFF

# Round constants for the 24 rounds of Keccak-f[1600]
ROUND_CONSTANTS = [
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001, 0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
]

# Rotation offsets r[x][y]
ROTATION_OFFSETS = [
    [0, 36, 3, 41, 18],
    [1, 44, 10, 45, 2],
    [62, 6, 43, 15, 61],
    [28, 55, 25, 21, 56],
    [27, 20, 39, 8, 14],
]


def _rol(x, n):
    return ((x << n) | (x >> (64 - n))) & _MASK


def keccak_p(lanes, rounds=24):
    """
    Apply Keccak-p[1600, rounds] in place to 25 lanes indexed x + 5*y.

    Reduced-round variants use the last `rounds` round constants, so
    rounds=24 is Keccak-f[1600].
    """
    if not 0 < rounds <= len(ROUND_CONSTANTS):
        raise ValueError("Keccak-p[1600] supports 1 to 24 rounds")

    s = lanes
    for rc in ROUND_CONSTANTS[len(ROUND_CONSTANTS) - rounds:]:
        # Theta
        c = [s[x] ^ s[x + 5] ^ s[x + 10] ^ s[x + 15] ^ s[x + 20] for x in range(5)]
        d = [c[(x - 1) % 5] ^ _rol(c[(x + 1) % 5], 1) for x in range(5)]
        for i in range(25):
            s[i] ^= d[i % 5]
        # Rho and Pi: (x, y) -> (y, 2x + 3y)
        b = [0] * 25
        for y in range(5):
            for x in range(5):
                b[y + 5 * ((2 * x + 3 * y) % 5)] = _rol(s[x + 5 * y], ROTATION_OFFSETS[x][y])
        # Chi
        for y in range(5):
            row = b[5 * y:5 * y + 5]
            for x in range(5):
                s[x + 5 * y] = row[x] ^ ((~row[(x + 1) % 5]) & row[(x + 2) % 5] & _MASK)
        # Iota
        s[0] ^= rc
    return s


class KeccakState(PermutationState):
    """Keccak-p[1600] state with a caller-chosen capacity."""

    width_bits = 1600

    def __init__(self, capacity_bits, rounds=24):
        super().__init__(capacity_bits)
        if not 0 < rounds <= len(ROUND_CONSTANTS):
            raise ValueError("Keccak-p[1600] supports 1 to 24 rounds")
        self.rounds = rounds
        self._state = bytearray(self.width_bits // 8)

    def xor_bytes(self, pos, data, off, length):
        self._check_rate_range(pos, length)
        state = self._state
        for i in range(length):
            state[pos + i] ^= data[off + i]

    def read_bytes(self, pos, buf, off, length):
        self._check_rate_range(pos, length)
        buf[off:off + length] = self._state[pos:pos + length]

    def zero_bytes(self, pos, length):
        self._check_rate_range(pos, length)
        for i in range(pos, pos + length):
            self._state[i] = 0

    def pad(self, bit_position, bits=0, bit_count=0):
        if bit_position < 0 or bit_count < 0 or bit_position + bit_count + 1 >= self.rate_bits:
            raise ValueError("Padding does not fit in the rate region")
        for i in range(bit_count):
            if (bits >> i) & 1:
                self._flip_bit(bit_position + i)
        self._flip_bit(bit_position + bit_count)
        self._flip_bit(self.rate_bits - 1)

    def permute(self):
        state = self._state
        lanes = [int.from_bytes(state[8 * i:8 * i + 8], 'little') for i in range(25)]
        keccak_p(lanes, self.rounds)
        for i, lane in enumerate(lanes):
            state[8 * i:8 * i + 8] = lane.to_bytes(8, 'little')

    def _flip_bit(self, bit):
        self._state[bit >> 3] ^= 1 << (bit & 7)

    def __repr__(self):
        return f"KeccakState(capacity_bits={self.capacity_bits}, rounds={self.rounds})"
