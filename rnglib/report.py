"""Seeded draw sessions rendered as JSON-ready reports."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .algorithm import algorithm_by_name
from .rand import Random
from .values import Closed, HalfOpen

Seed = Union[int, Tuple[int, int]]


@dataclass
class DrawConfig:
    """Configuration for one reproducible draw session."""

    algorithm: str = "mt"
    seed: Optional[Seed] = 10  # None seeds from the clock
    draws: int = 8
    low: int = 0
    high: int = 10
    inclusive: bool = False
    floats: int = 4
    byte_count: int = 8


def run_draws(cfg: DrawConfig) -> Dict[str, Any]:
    """Run the session described by ``cfg``; equal seeded configs give equal reports."""

    algorithm_cls = algorithm_by_name(cfg.algorithm)
    if cfg.seed is None:
        rng = Random.from_clock(algorithm_cls)
    else:
        rng = Random.from_seed(algorithm_cls, cfg.seed)

    shape = Closed(cfg.low, cfg.high) if cfg.inclusive else HalfOpen(cfg.low, cfg.high)
    draws = [rng.randrange(shape) for _ in range(cfg.draws)]
    floats = [rng.random() for _ in range(cfg.floats)]
    data = rng.randbytes(cfg.byte_count)

    return {
        "config": asdict(cfg),
        "algorithm": algorithm_cls.__name__,
        "domain": rng.domain.name,
        "draws": draws,
        "floats": floats,
        "bytes": data.hex(),
    }
