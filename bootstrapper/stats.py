"""Order-statistic helpers shared by aggregators and resamplers."""

from __future__ import annotations

import heapq
import math
from typing import Iterable, Sequence, Tuple

import numpy as np


def check_probability(q: float) -> float:
    """Return ``q`` as a float, rejecting values outside ``[0, 1]`` (and NaN)."""

    q = float(q)
    if not 0.0 <= q <= 1.0:
        raise ValueError(f"Quantile must lie in [0, 1], got {q}")
    return q


def quantile(sorted_values: Sequence[float], q: float) -> float:
    """Return the ``q`` quantile of an ascending sequence.

    The element at index ``floor(q * (n - 1))`` is returned as is, without
    interpolation. An empty sequence yields NaN whatever ``q`` is.
    """

    length = len(sorted_values)
    if length == 0:
        return math.nan
    q = check_probability(q)
    return float(sorted_values[int(q * (length - 1))])


def percentile_interval(sorted_values: Sequence[float], alpha: float = 0.05) -> Tuple[float, float]:
    """Equal-tailed ``1 - alpha`` interval read off an ascending sequence."""

    if not 0.0 < alpha < 1.0:
        raise ValueError(f"alpha must lie in (0, 1), got {alpha}")
    return quantile(sorted_values, alpha / 2.0), quantile(sorted_values, 1.0 - alpha / 2.0)


def merge_sorted(*collections: Iterable[float]) -> np.ndarray:
    """k-way merge of ascending collections into a single ascending array."""

    return np.fromiter(heapq.merge(*collections), dtype=np.float64)


__all__ = ["check_probability", "quantile", "percentile_interval", "merge_sorted"]
