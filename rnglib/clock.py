"""Wall-clock seed source for default-constructed generators.

A clock is any zero-argument callable returning nanoseconds since the Unix
epoch. Tests pass a fixed clock to make default construction reproducible.
"""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], int]

FALLBACK_SEED = 1

_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MICRO = 1_000


def system_clock() -> int:
    return time.time_ns()


def fixed_clock(nanos: int) -> Clock:
    """Clock that always reports ``nanos``."""
    return lambda: nanos


def _now(clock: Optional[Clock]) -> Optional[int]:
    try:
        nanos = (clock or system_clock)()
    except OSError as exc:
        logger.debug("Clock unavailable (%s); using fallback seed", exc)
        return None
    if nanos < 0:
        logger.debug("Clock reports %d ns before the epoch; using fallback seed", nanos)
        return None
    return nanos


def subsec_micros(clock: Optional[Clock] = None) -> int:
    """Microseconds elapsed within the current second."""
    nanos = _now(clock)
    if nanos is None:
        return FALLBACK_SEED
    return (nanos % _NANOS_PER_SECOND) // _NANOS_PER_MICRO


def seconds(clock: Optional[Clock] = None) -> int:
    """Whole seconds since the epoch."""
    nanos = _now(clock)
    if nanos is None:
        return FALLBACK_SEED
    return nanos // _NANOS_PER_SECOND


def micros(clock: Optional[Clock] = None) -> int:
    """Whole microseconds since the epoch."""
    nanos = _now(clock)
    if nanos is None:
        return FALLBACK_SEED
    return nanos // _NANOS_PER_MICRO
