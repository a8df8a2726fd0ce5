"""Exceptions raised by rnglib."""


class RngError(Exception):
    """Base class for every error raised by rnglib."""


class SeedError(RngError, ValueError):
    """A generator could not be built from the supplied seed."""


class InvalidSeedError(SeedError):
    """The seed is out of range or would leave the generator stuck at zero."""

    def __init__(self, algorithm: str, seed, reason: str = "must not be all zero bits"):
        self.algorithm = algorithm
        self.seed = seed
        super().__init__(f"{algorithm} seed {reason}, got {seed!r}.")


class SampleError(RngError, ValueError):
    """A sample could not be drawn from the population."""


class AmountExceedsPopulationError(SampleError):
    def __init__(self, amount: int, population: int):
        self.amount = amount
        self.population = population
        super().__init__(
            f"Can't get a sample of {amount} from a population of {population}."
        )


class RangeError(RngError, ValueError):
    """A range cannot be used with the generator's number domain."""


class EmptyRangeError(RangeError):
    """A range holds no value of the generator's number domain."""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(f"Empty range [{start}, {end}).")
