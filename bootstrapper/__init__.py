"""Bootstrap estimates of the sampling distribution of a statistic."""

from .aggregators import (
    Aggregator,
    AverageAggregator,
    FunctionAggregator,
    QuantileAggregator,
    SumAggregator,
    create_aggregator,
)
from .resamplers import (
    BaseResampler,
    DirectResampler,
    PresampledResampler,
    ResamplerConfig,
    bootstrap_interval,
    build_from_config,
    create_resampler,
)
from .stats import merge_sorted, percentile_interval, quantile

__all__ = [
    "Aggregator",
    "SumAggregator",
    "AverageAggregator",
    "QuantileAggregator",
    "FunctionAggregator",
    "create_aggregator",
    "BaseResampler",
    "DirectResampler",
    "PresampledResampler",
    "ResamplerConfig",
    "bootstrap_interval",
    "build_from_config",
    "create_resampler",
    "merge_sorted",
    "percentile_interval",
    "quantile",
]
