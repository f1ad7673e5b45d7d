"""Bootstrap resampler reusing a precomputed table of draw counts."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from bootstrapper.aggregators import Aggregator
from bootstrapper.resamplers.base import BaseResampler, as_sample
from bootstrapper.utils.seeding import DEFAULT_SEED, make_generator


def draw_count_table(iterations: int, num_values: int, rng: np.random.Generator) -> np.ndarray:
    """Return an ``iterations x num_values`` table of bootstrap draw counts.

    Row ``i`` counts how often each position is hit by ``num_values`` uniform
    draws, so every row sums to ``num_values``.
    """

    draws = rng.integers(0, num_values, size=(iterations, num_values))
    offsets = np.arange(iterations, dtype=np.int64)[:, None] * num_values
    flat = np.bincount((draws + offsets).ravel(), minlength=iterations * num_values)
    return flat.reshape(iterations, num_values).astype(np.int64)


class PresampledResampler(BaseResampler):
    """Bootstrap resampler with draw counts fixed at construction.

    Each replicate scales ``values[j]`` by the number of times position ``j``
    was drawn instead of gathering the drawn values. The result matches an
    index resample only when the aggregator is linear in the multiset of
    values (sum, average). Order statistics such as quantiles see scaled
    values in their original positions and are not valid here, so non-linear
    aggregators are refused unless ``allow_nonlinear`` is set.

    Every call to :meth:`resample` must pass exactly ``num_values`` values.
    """

    def __init__(
        self,
        aggregator: Aggregator,
        iterations: int,
        num_values: int,
        rng: Optional[np.random.Generator] = None,
        allow_nonlinear: bool = False,
    ) -> None:
        super().__init__(aggregator, iterations)
        if not getattr(aggregator, "linear", False) and not allow_nonlinear:
            raise ValueError(
                f"{aggregator!r} is not linear; presampled counts only reproduce "
                "bootstrap replicates for linear aggregators (pass allow_nonlinear=True to override)"
            )
        if int(num_values) != num_values or num_values < 1:
            raise ValueError(f"num_values must be a positive integer, got {num_values}")
        self.num_values = int(num_values)
        generator = rng if rng is not None else make_generator(DEFAULT_SEED)
        self._counts = draw_count_table(self.iterations, self.num_values, generator)

    @property
    def counts(self) -> np.ndarray:
        view = self._counts.view()
        view.flags.writeable = False
        return view

    def resample(self, values: Sequence[float]) -> None:
        """Apply every row of the count table to ``values`` and accumulate."""

        sample = as_sample(values)
        if sample.size != self.num_values:
            raise ValueError(
                f"Expected {self.num_values} values to match the presampled table, got {sample.size}"
            )
        scratch = np.empty(self.num_values, dtype=np.float64)
        aggregates = np.empty(self.iterations, dtype=np.float64)
        for i in range(self.iterations):
            np.multiply(sample, self._counts[i], out=scratch)
            aggregates[i] = self.aggregator.aggregate(scratch)
        self._accumulate(aggregates)
