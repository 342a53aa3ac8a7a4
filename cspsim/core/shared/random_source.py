from typing import Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """
    Source of uniform random draws used by the stochastic processes.

    ``numpy.random.Generator`` satisfies this protocol directly, so tests can
    pass a seeded generator or a small stub with scripted values.
    """

    def random(self) -> float:
        """Draw from [0, 1)."""
        ...

    def uniform(self, low: float, high: float) -> float:
        """Draw from [low, high)."""
        ...


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    """Create the default random source, seeded when ``seed`` is given."""
    return np.random.default_rng(seed)
