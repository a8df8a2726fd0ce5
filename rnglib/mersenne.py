# Mersenne Twister over 32-bit words.
# https://en.wikipedia.org/wiki/Mersenne_Twister#Pseudocode
#
# w = 32 | n = 624        | m = 397 | r = 31         | a = 0x9908B0DF
# u = 11 | d = 0xFFFFFFFF | s = 7   | b = 0x9D2C5680 |
# t = 15 | c = 0xEFC60000 | l = 1   | f = 1812433253 |
import logging
from typing import List, Optional

from .algorithm import RandomAlgorithm
from .clock import Clock, subsec_micros
from .errors import InvalidSeedError
from .values import U32

logger = logging.getLogger(__name__)

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_F = 1812433253


class MersenneTwister(RandomAlgorithm):
    """Mersenne Twister with a 624-word state; accepts any 32-bit seed, zero included."""

    domain = U32

    def __init__(self, seed: int):
        if not U32.contains(seed):
            raise InvalidSeedError(type(self).__name__, seed, "must fit in 32 bits")
        state: List[int] = [0] * _N
        state[0] = seed
        for i in range(1, _N):
            prev = state[i - 1]
            state[i] = U32.wrap(_F * (prev ^ (prev >> 30)) + i)
        self.state = state
        # Past the end, so the first draw twists.
        self.index = _N + 1

    @classmethod
    def default(cls, clock: Optional[Clock] = None) -> "MersenneTwister":
        seed = subsec_micros(clock)
        logger.debug("Seeding %s from clock with %d", cls.__name__, seed)
        return cls(seed)

    def _twist(self) -> None:
        state = self.state
        for i in range(_N):
            x = (state[i] & _UPPER_MASK) + (state[(i + 1) % _N] & _LOWER_MASK)
            y = x >> 1
            if x % 2 != 0:
                y ^= _MATRIX_A
            state[i] = state[(i + _M) % _N] ^ y
        self.index = 0

    def next_raw(self) -> int:
        if self.index >= _N:
            self._twist()

        y = self.state[self.index]
        y ^= (y >> 11) & 0xFFFFFFFF
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 1
        self.index += 1
        return y & 0xFFFFFFFF

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self.index})"
