"""Number domains and range shapes shared by every generator.

A generator draws unsigned integers of one fixed width (its ``NumberDomain``).
Callers describe the values they want with one of six range shapes, which all
normalize to a half-open ``[start, end)`` pair before a draw is reduced.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .errors import EmptyRangeError, RangeError


@dataclass(frozen=True)
class NumberDomain:
    """Constants and conversions for one unsigned integer width."""

    name: str
    bits: int

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    @property
    def max(self) -> int:
        return self.mask

    @property
    def byte_max(self) -> int:
        return 0xFF

    def wrap(self, value: int) -> int:
        """Truncate ``value`` to this width, like an unsigned overflow."""
        return value & self.mask

    def contains(self, value: int) -> bool:
        return 0 <= value <= self.mask

    def to_byte(self, value: int) -> int:
        return value & 0xFF

    def to_index(self, value: int) -> int:
        return int(value)

    def to_float(self, value: int) -> float:
        return float(value)

    def from_index(self, index: int) -> int:
        return index & self.mask


U32 = NumberDomain("u32", 32)
U64 = NumberDomain("u64", 64)
U128 = NumberDomain("u128", 128)


@dataclass(frozen=True)
class HalfOpen:
    """``[low, high)``"""

    low: int
    high: int

    def start(self, domain: NumberDomain) -> int:
        return self.low

    def end(self, domain: NumberDomain) -> int:
        return self.high


@dataclass(frozen=True)
class Closed:
    """``[low, high]``"""

    low: int
    high: int

    def start(self, domain: NumberDomain) -> int:
        return self.low

    def end(self, domain: NumberDomain) -> int:
        # At domain.max this is one past the width; Python ints carry it exactly.
        return self.high + 1


@dataclass(frozen=True)
class From:
    """``[low, max)``"""

    low: int

    def start(self, domain: NumberDomain) -> int:
        return self.low

    def end(self, domain: NumberDomain) -> int:
        return domain.max


@dataclass(frozen=True)
class To:
    """``[0, high)``"""

    high: int

    def start(self, domain: NumberDomain) -> int:
        return domain.zero

    def end(self, domain: NumberDomain) -> int:
        return self.high


@dataclass(frozen=True)
class ToInclusive:
    """``[0, high]``"""

    high: int

    def start(self, domain: NumberDomain) -> int:
        return domain.zero

    def end(self, domain: NumberDomain) -> int:
        return self.high + 1


@dataclass(frozen=True)
class Full:
    """``[0, max)``"""

    def start(self, domain: NumberDomain) -> int:
        return domain.zero

    def end(self, domain: NumberDomain) -> int:
        return domain.max


RangeLike = Union[HalfOpen, Closed, From, To, ToInclusive, Full, range, int]


def as_shape(value: RangeLike):
    """Map builtin ``range`` objects and plain ints onto a range shape."""

    if isinstance(value, (HalfOpen, Closed, From, To, ToInclusive, Full)):
        return value
    if isinstance(value, range):
        if value.step != 1:
            raise RangeError(f"Only unit-step ranges can be drawn from, got step {value.step}.")
        return HalfOpen(value.start, value.stop)
    if isinstance(value, int) and not isinstance(value, bool):
        return To(value)
    raise TypeError(f"Unsupported range shape: {value!r}")


def bounds(value: RangeLike, domain: NumberDomain) -> Tuple[int, int]:
    """Normalize ``value`` to a non-empty half-open ``(start, end)`` pair."""

    shape = as_shape(value)
    start = shape.start(domain)
    end = shape.end(domain)
    if not domain.contains(start):
        raise RangeError(f"Range start {start} is outside the {domain.name} domain.")
    if not 0 <= end <= domain.max + 1:
        raise RangeError(f"Range end {end} is outside the {domain.name} domain.")
    if end <= start:
        raise EmptyRangeError(start, end)
    return start, end
