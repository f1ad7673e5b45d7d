"""Accumulation state shared by the bootstrap resamplers."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

from bootstrapper.aggregators import Aggregator
from bootstrapper.stats import merge_sorted, percentile_interval, quantile


def _check_iterations(iterations: int) -> int:
    if int(iterations) != iterations or iterations < 1:
        raise ValueError(f"iterations must be a positive integer, got {iterations}")
    return int(iterations)


def as_sample(values: Iterable[float]) -> np.ndarray:
    """Coerce observations to a one-dimensional float64 array."""

    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Resampling expects one-dimensional inputs, got shape {arr.shape}")
    return arr


class BaseResampler:
    """Base class holding the sorted collection of replicate aggregates.

    Instances are not thread-safe; run one resampler per worker and combine
    their results with :meth:`merge`.
    """

    def __init__(self, aggregator: Aggregator, iterations: int) -> None:
        if not callable(getattr(aggregator, "aggregate", None)):
            raise TypeError(f"aggregator must provide an aggregate() method, got: {type(aggregator)}")
        self.aggregator = aggregator
        self.iterations = _check_iterations(iterations)
        self._sample_aggregates = np.empty(0, dtype=np.float64)

    # ------------------------------------------------------------------
    def resample(self, values: Sequence[float]) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    def quantile(self, q: float) -> float:
        """Return the ``q`` quantile of the replicates, NaN before any resample."""

        return quantile(self._sample_aggregates, q)

    def interval(self, alpha: float = 0.05) -> Tuple[float, float]:
        """Percentile confidence interval at level ``1 - alpha``."""

        return percentile_interval(self._sample_aggregates, alpha)

    def reset(self) -> None:
        """Discard accumulated replicates; random state is left untouched."""

        self._sample_aggregates = np.empty(0, dtype=np.float64)

    def merge(self, other: "BaseResampler") -> None:
        """Fold another resampler's replicates into this one, keeping order.

        Both resamplers must compute the same statistic; aggregators are
        compared by type and ``repr``.
        """

        if type(other.aggregator) is not type(self.aggregator) or repr(other.aggregator) != repr(self.aggregator):
            raise ValueError(
                f"Cannot merge replicates of {other.aggregator!r} into replicates of {self.aggregator!r}"
            )
        self._sample_aggregates = merge_sorted(self._sample_aggregates, other._sample_aggregates)

    # ------------------------------------------------------------------
    @property
    def sample_aggregates(self) -> np.ndarray:
        view = self._sample_aggregates.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return int(self._sample_aggregates.size)

    # ------------------------------------------------------------------
    def _accumulate(self, aggregates: np.ndarray) -> None:
        combined = np.concatenate([self._sample_aggregates, aggregates])
        combined.sort()
        self._sample_aggregates = combined
