# Linear xorshift generators.
# https://en.wikipedia.org/wiki/Xorshift#Example_implementation
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .algorithm import RandomAlgorithm
from .clock import Clock, micros, seconds, subsec_micros
from .errors import InvalidSeedError
from .values import U32, U64, U128

logger = logging.getLogger(__name__)


def _check_seed(algorithm: RandomAlgorithm, seed: int) -> None:
    domain = algorithm.domain
    if not domain.contains(seed):
        raise InvalidSeedError(type(algorithm).__name__, seed, f"must fit in {domain.bits} bits")
    if seed == 0:
        raise InvalidSeedError(type(algorithm).__name__, seed)


@dataclass
class XORShift32(RandomAlgorithm):
    state: int

    domain = U32

    def __post_init__(self) -> None:
        _check_seed(self, self.state)

    @classmethod
    def default(cls, clock: Optional[Clock] = None) -> "XORShift32":
        # Zero would never leave the all-zero state.
        seed = subsec_micros(clock) or 1
        logger.debug("Seeding %s from clock with %d", cls.__name__, seed)
        return cls(seed)

    def next_raw(self) -> int:
        x = self.state
        x ^= (x << 13) & 0xFFFFFFFF
        x ^= x >> 17
        x ^= (x << 5) & 0xFFFFFFFF
        self.state = x
        return x


@dataclass
class XORShift64(RandomAlgorithm):
    state: int

    domain = U64

    def __post_init__(self) -> None:
        _check_seed(self, self.state)

    @classmethod
    def default(cls, clock: Optional[Clock] = None) -> "XORShift64":
        seed = seconds(clock) or 1
        logger.debug("Seeding %s from clock with %d", cls.__name__, seed)
        return cls(seed)

    def next_raw(self) -> int:
        x = self.state
        x ^= U64.wrap(x << 13)
        x ^= x >> 7
        x ^= U64.wrap(x << 17)
        self.state = x
        return x


@dataclass
class XORShift128(RandomAlgorithm):
    state: int

    domain = U128

    def __post_init__(self) -> None:
        _check_seed(self, self.state)

    @classmethod
    def default(cls, clock: Optional[Clock] = None) -> "XORShift128":
        seed = micros(clock) or 1
        logger.debug("Seeding %s from clock with %d", cls.__name__, seed)
        return cls(seed)

    def next_raw(self) -> int:
        x = self.state
        x ^= U128.wrap(x << 11)
        x ^= x >> 8
        x ^= U128.wrap(x << 19)
        self.state = x
        return x


# https://en.wikipedia.org/wiki/Xorshift#xorshift+
@dataclass
class XORShift128Plus(RandomAlgorithm):
    """Two 64-bit registers; draws are the 64-bit sum widened to 128 bits.

    Only the second register advances. The first keeps its seed value, which
    makes the state map affine of order 16, so the output period divides 16.
    """

    state: Tuple[int, int]

    domain = U128

    def __post_init__(self) -> None:
        name = type(self).__name__
        first, second = self.state
        if not (U64.contains(first) and U64.contains(second)):
            raise InvalidSeedError(name, self.state, "halves must each fit in 64 bits")
        if first | second == 0:
            raise InvalidSeedError(name, self.state, "must have at least one non-zero bit")
        self.state = (first, second)

    @classmethod
    def default(cls, clock: Optional[Clock] = None) -> "XORShift128Plus":
        secs = seconds(clock)
        logger.debug("Seeding %s from clock with (%d, %d)", cls.__name__, secs, secs + 1)
        return cls((secs, U64.wrap(secs + 1)))

    def next_raw(self) -> int:
        x, y = self.state
        x ^= U64.wrap(x << 23)
        x ^= x >> 18
        x ^= y ^ (y >> 5)
        self.state = (self.state[0], x)
        return U64.wrap(x + y)
