"""Pseudo-random number generation with interchangeable algorithms.

Not for passwords or anything cryptographic.
"""

from .algorithm import ALGORITHM_MAPPING_NAMES, RandomAlgorithm, algorithm_by_name
from .errors import (
    AmountExceedsPopulationError,
    EmptyRangeError,
    InvalidSeedError,
    RangeError,
    RngError,
    SampleError,
    SeedError,
)
from .mersenne import MersenneTwister
from .rand import Random, random
from .report import DrawConfig, run_draws
from .values import (
    U32,
    U64,
    U128,
    Closed,
    From,
    Full,
    HalfOpen,
    NumberDomain,
    To,
    ToInclusive,
)
from .xorshift import XORShift32, XORShift64, XORShift128, XORShift128Plus

__all__ = [
    "ALGORITHM_MAPPING_NAMES",
    "AmountExceedsPopulationError",
    "Closed",
    "DrawConfig",
    "EmptyRangeError",
    "From",
    "Full",
    "HalfOpen",
    "InvalidSeedError",
    "MersenneTwister",
    "NumberDomain",
    "Random",
    "RandomAlgorithm",
    "RangeError",
    "RngError",
    "SampleError",
    "SeedError",
    "To",
    "ToInclusive",
    "U32",
    "U64",
    "U128",
    "XORShift128",
    "XORShift128Plus",
    "XORShift32",
    "XORShift64",
    "algorithm_by_name",
    "random",
    "run_draws",
]
