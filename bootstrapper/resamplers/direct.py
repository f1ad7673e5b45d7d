"""Bootstrap resampler drawing fresh indices on every iteration."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from bootstrapper.aggregators import Aggregator
from bootstrapper.resamplers.base import BaseResampler, as_sample
from bootstrapper.utils.seeding import DEFAULT_SEED, make_generator


class DirectResampler(BaseResampler):
    """Classic bootstrap: each replicate draws ``n`` indices with replacement.

    Works with any aggregator. The generator is seeded with ``DEFAULT_SEED``
    unless one is injected, so repeated runs are reproducible.
    """

    def __init__(
        self,
        aggregator: Aggregator,
        iterations: int,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        super().__init__(aggregator, iterations)
        self.rng = rng if rng is not None else make_generator(DEFAULT_SEED)

    def seed(self, seed: Optional[int] = DEFAULT_SEED) -> None:
        """Restart the random stream from ``seed``."""

        self.rng = make_generator(seed)

    def resample(self, values: Sequence[float]) -> None:
        """Run ``iterations`` replicates on ``values`` and accumulate them."""

        sample = as_sample(values)
        length = sample.size
        if length == 0:
            raise ValueError("Cannot resample an empty sequence of values")
        scratch = np.empty(length, dtype=np.float64)
        aggregates = np.empty(self.iterations, dtype=np.float64)
        for i in range(self.iterations):
            idx = self.rng.integers(0, length, size=length)
            np.take(sample, idx, out=scratch)
            aggregates[i] = self.aggregator.aggregate(scratch)
        self._accumulate(aggregates)
