"""Statistics that reduce a sequence of numbers to a single value."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import numpy as np

from bootstrapper.stats import check_probability, quantile


class Aggregator:
    """Base class for statistics computed on every bootstrap replicate.

    Subclasses implement :meth:`aggregate`. ``linear`` declares whether the
    result is an additive, position-independent function of the multiset of
    values; only linear aggregators may be used with count-scaled resampling
    (see :class:`bootstrapper.resamplers.PresampledResampler`).
    """

    linear: bool = False

    def aggregate(self, values: Sequence[float]) -> float:
        raise NotImplementedError

    def __call__(self, values: Sequence[float]) -> float:
        return self.aggregate(values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _naive_sum(values: Sequence[float]) -> float:
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return 0.0
    # cumsum accumulates left to right; np.sum uses pairwise reduction.
    return float(np.cumsum(arr)[-1])


class SumAggregator(Aggregator):
    """Sum of values; ``0.0`` for an empty sequence."""

    linear = True

    def aggregate(self, values: Sequence[float]) -> float:
        return _naive_sum(values)


class AverageAggregator(Aggregator):
    """Arithmetic mean; ``0.0`` for an empty sequence."""

    linear = True

    def aggregate(self, values: Sequence[float]) -> float:
        if len(values) == 0:
            return 0.0
        return _naive_sum(values) / len(values)


class QuantileAggregator(Aggregator):
    """The ``q`` quantile of the values.

    Lists and writable arrays are sorted in place, so callers that need their
    original ordering must pass a copy. Read-only arrays and immutable
    sequences are sorted into a copy.
    """

    def __init__(self, q: float) -> None:
        self.q = check_probability(q)

    def aggregate(self, values: Sequence[float]) -> float:
        writeable = getattr(getattr(values, "flags", None), "writeable", True)
        if hasattr(values, "sort") and writeable:
            values.sort()
        else:
            values = sorted(values)
        return quantile(values, self.q)

    def __repr__(self) -> str:
        return f"QuantileAggregator(q={self.q})"


class FunctionAggregator(Aggregator):
    """Adapter turning a plain callable into an :class:`Aggregator`."""

    def __init__(
        self,
        fn: Callable[[Sequence[float]], float],
        *,
        linear: bool = False,
        name: Optional[str] = None,
    ) -> None:
        if not callable(fn):
            raise TypeError(f"Expected a callable, got: {type(fn)}")
        self.fn = fn
        self.linear = linear
        self.name = name or getattr(fn, "__name__", "custom")

    def aggregate(self, values: Sequence[float]) -> float:
        return float(self.fn(values))

    def __repr__(self) -> str:
        return f"FunctionAggregator({self.name}, linear={self.linear})"


def create_aggregator(name: str, **kwargs: float) -> Aggregator:
    """Factory for constructing aggregators by name."""

    name = name.lower()
    if name == "sum":
        return SumAggregator()
    if name in {"average", "mean"}:
        return AverageAggregator()
    if name == "quantile":
        if "q" not in kwargs:
            raise ValueError("Quantile aggregator requires a 'q' argument")
        return QuantileAggregator(kwargs["q"])
    if name == "median":
        return QuantileAggregator(0.5)
    raise ValueError(f"Unknown aggregator: {name}")


__all__ = [
    "Aggregator",
    "SumAggregator",
    "AverageAggregator",
    "QuantileAggregator",
    "FunctionAggregator",
    "create_aggregator",
]
