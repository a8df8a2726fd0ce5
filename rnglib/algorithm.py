"""Interface every generator algorithm implements."""

import importlib
from abc import ABC, abstractmethod
from typing import Optional, Type

from .clock import Clock
from .values import U32, NumberDomain, RangeLike, bounds

ALGORITHM_MAPPING_NAMES = {
    "mt": "rnglib.mersenne.MersenneTwister",
    "xorshift32": "rnglib.xorshift.XORShift32",
    "xorshift64": "rnglib.xorshift.XORShift64",
    "xorshift128": "rnglib.xorshift.XORShift128",
    "xorshift128plus": "rnglib.xorshift.XORShift128Plus",
}


def algorithm_by_name(name: str) -> Type["RandomAlgorithm"]:
    """Resolve a short algorithm name such as ``"mt"`` to its class."""
    if name not in ALGORITHM_MAPPING_NAMES:
        raise ValueError(
            f"Invalid algorithm name: {name}. Choose one of {', '.join(ALGORITHM_MAPPING_NAMES)}."
        )
    module_name, class_name = ALGORITHM_MAPPING_NAMES[name].rsplit(".", 1)
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


class RandomAlgorithm(ABC):
    """A deterministic generator of unsigned integers in ``domain``.

    Subclasses are constructed from an explicit seed (raising
    ``InvalidSeedError`` when the seed is degenerate) or from the clock via
    ``default``. Each draw advances the state by exactly one step.
    """

    domain: NumberDomain = U32

    @classmethod
    @abstractmethod
    def default(cls, clock: Optional[Clock] = None) -> "RandomAlgorithm":
        """Build a generator seeded from ``clock`` (the system clock if omitted)."""

    @abstractmethod
    def next_raw(self) -> int:
        """Advance the state one step and return the unreduced draw."""

    def randrange(self, range_: RangeLike) -> int:
        """Draw one value inside ``range_``.

        The range is validated before the state advances, so a rejected range
        leaves the generator untouched.
        """
        start, end = bounds(range_, self.domain)
        return self.next_raw() % (end - start) + start
