"""The ``Random`` facade: floats, distributions and collection helpers.

Every operation draws through the single algorithm instance the facade owns.
A facade is not safe to share between threads without external locking.

    >>> rng = Random.from_seed(MersenneTwister, 10)
    >>> rng.randrange(range(0, 10))
    6

Do not use any of this for passwords, tokens or other secrets.
"""

import logging
import math
from typing import Generic, List, MutableSequence, Optional, Sequence, Set, Type, TypeVar

from .algorithm import RandomAlgorithm
from .clock import Clock
from .errors import AmountExceedsPopulationError, SeedError
from .mersenne import MersenneTwister
from .values import Closed, HalfOpen, NumberDomain, RangeLike

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=RandomAlgorithm)
T = TypeVar("T")


class Random(Generic[A]):
    """Derived random operations over one owned ``RandomAlgorithm``."""

    def __init__(self, algorithm: A):
        self.algorithm = algorithm

    @classmethod
    def from_seed(cls, algorithm_cls: Type[A], seed) -> "Random[A]":
        """Build a facade over ``algorithm_cls(seed)``.

        Raises ``InvalidSeedError`` when the algorithm rejects the seed.
        """
        return cls(algorithm_cls(seed))

    @classmethod
    def from_clock(cls, algorithm_cls: Type[A], clock: Optional[Clock] = None) -> "Random[A]":
        return cls(algorithm_cls.default(clock))

    @property
    def domain(self) -> NumberDomain:
        return self.algorithm.domain

    def randrange(self, range_: RangeLike) -> int:
        """Return a number inside ``range_``.

        ``range_`` may be any shape from ``rnglib.values``, a unit-step builtin
        ``range``, or an int ``n`` meaning ``[0, n)``.
        """
        return self.algorithm.randrange(range_)

    def random(self) -> float:
        """Return a float in ``[0, 1)`` (1.0 only through float rounding)."""
        domain = self.domain
        value = self.randrange(HalfOpen(domain.zero, domain.max))
        return domain.to_float(value) / domain.to_float(domain.max)

    def uniform(self, lower, upper) -> float:
        """Return a float from the uniform distribution over ``[lower, upper]``."""
        if upper < lower:
            raise ValueError(f"uniform() upper bound {upper} is below lower bound {lower}.")
        return float(lower) + float(upper - lower) * self.random()

    def triangular(self, lower, upper, mode) -> float:
        """Return a float from the triangular distribution with the given ``mode``."""
        if not lower <= mode <= upper:
            raise ValueError(
                f"triangular() needs lower <= mode <= upper, got {lower}, {mode}, {upper}."
            )
        value = self.random()
        span = float(upper - lower)
        if span == 0.0:
            return float(lower)

        if value <= float(mode - lower) / span:
            return math.sqrt(value * (span * float(mode - lower))) + float(lower)
        return float(upper) - math.sqrt((1.0 - value) * (span * float(upper - mode)))

    def randbytes(self, count: int) -> bytes:
        """Return ``count`` random bytes. Not suitable for secrets."""
        if count < 0:
            raise ValueError(f"Byte count must be non-negative, got {count}.")
        domain = self.domain
        byte_range = Closed(domain.zero, domain.byte_max)
        return bytes(domain.to_byte(self.randrange(byte_range)) for _ in range(count))

    def _index(self, length: int) -> int:
        domain = self.domain
        return domain.to_index(self.randrange(HalfOpen(domain.zero, domain.from_index(length))))

    def choose(self, seq: Sequence[T]) -> T:
        """Return a random element of the non-empty sequence ``seq``."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self._index(len(seq))]

    def shuffle(self, seq: MutableSequence) -> None:
        """Shuffle ``seq`` in place (Fisher-Yates)."""
        # https://en.wikipedia.org/wiki/Fisher%E2%80%93Yates_shuffle
        domain = self.domain
        for items in range(len(seq) - 1, 0, -1):
            pos = domain.to_index(self.randrange(Closed(domain.zero, domain.from_index(items))))
            if pos != items:
                seq[pos], seq[items] = seq[items], seq[pos]

    def sample(self, population: Sequence[T], amount: int) -> List[T]:
        """Return ``amount`` elements from distinct positions of ``population``.

        Positions are drawn with rejection of duplicates. The result is ordered
        by position in ``population``, not by draw order.

        Raises ``AmountExceedsPopulationError`` if ``amount > len(population)``.
        """
        length = len(population)
        if amount > length:
            raise AmountExceedsPopulationError(amount, length)
        if amount < 0:
            raise ValueError(f"Sample amount must be non-negative, got {amount}.")

        positions: Set[int] = set()
        while len(positions) < amount:
            positions.add(self._index(length))

        return [population[pos] for pos in sorted(positions)]


def random(seed: Optional[int] = None, clock: Optional[Clock] = None) -> Random[MersenneTwister]:
    """Quick-start Mersenne Twister facade.

    Seeded from ``seed`` when given; a rejected seed falls back to the clock.
    """
    if seed is None:
        return Random.from_clock(MersenneTwister, clock)
    try:
        return Random.from_seed(MersenneTwister, seed)
    except SeedError as exc:
        logger.warning("%s Falling back to a clock seed.", exc)
        return Random.from_clock(MersenneTwister, clock)
