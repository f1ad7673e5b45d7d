from __future__ import annotations

import math

import numpy as np
import pytest

from bootstrapper.aggregators import (
    AverageAggregator,
    FunctionAggregator,
    QuantileAggregator,
    SumAggregator,
)
from bootstrapper.resamplers import DirectResampler, PresampledResampler, draw_count_table
from bootstrapper.utils.seeding import make_generator

VALUES = [0.0, 1.0, 2.0, 3.0, 4.0]


def test_presampled_resampler_sum_quantiles():
    resampler = PresampledResampler(SumAggregator(), 2000, 5)
    resampler.resample(VALUES)
    assert resampler.quantile(0.5) == 10.0
    assert resampler.quantile(0) == 0.0
    assert resampler.quantile(1) == 20.0
    resampler.reset()
    assert math.isnan(resampler.quantile(1))


def test_count_table_rows_sum_to_num_values():
    resampler = PresampledResampler(SumAggregator(), 300, 7)
    counts = resampler.counts
    assert counts.shape == (300, 7)
    assert np.all(counts >= 0)
    assert np.all(counts.sum(axis=1) == 7)


def test_draw_count_table_is_deterministic():
    first = draw_count_table(50, 4, make_generator(0))
    second = draw_count_table(50, 4, make_generator(0))
    assert np.array_equal(first, second)
    assert np.all(first.sum(axis=1) == 4)


def test_reset_keeps_table_and_replays_same_replicates():
    resampler = PresampledResampler(AverageAggregator(), 200, 5)
    table = resampler.counts.copy()
    resampler.resample(VALUES)
    first_run = resampler.sample_aggregates.copy()
    resampler.reset()
    resampler.reset()
    assert len(resampler) == 0
    assert np.array_equal(resampler.counts, table)
    resampler.resample(VALUES)
    assert np.array_equal(first_run, resampler.sample_aggregates)


def test_resample_accumulates_and_stays_sorted():
    resampler = PresampledResampler(SumAggregator(), 100, 5)
    resampler.resample(VALUES)
    resampler.resample([4.0, 3.0, 2.0, 1.0, 0.0])
    assert len(resampler) == 200
    assert np.all(np.diff(resampler.sample_aggregates) >= 0)


def test_values_are_scaled_by_draw_counts():
    first_value = FunctionAggregator(lambda v: float(v[0]), name="first")
    resampler = PresampledResampler(first_value, 100, 3, allow_nonlinear=True)
    resampler.resample([2.0, 5.0, 7.0])
    expected = np.sort(2.0 * resampler.counts[:, 0])
    assert np.array_equal(resampler.sample_aggregates, expected)


def test_nonlinear_aggregator_is_refused_by_default():
    with pytest.raises(ValueError, match="not linear"):
        PresampledResampler(QuantileAggregator(0.5), 10, 5)
    resampler = PresampledResampler(QuantileAggregator(0.5), 10, 5, allow_nonlinear=True)
    resampler.resample(VALUES)
    assert len(resampler) == 10


def test_length_mismatch_raises():
    resampler = PresampledResampler(SumAggregator(), 10, 5)
    with pytest.raises(ValueError, match="Expected 5 values"):
        resampler.resample([1.0, 2.0, 3.0])
    assert len(resampler) == 0


def test_invalid_construction_raises():
    with pytest.raises(ValueError):
        PresampledResampler(SumAggregator(), 10, 0)
    with pytest.raises(ValueError):
        PresampledResampler(SumAggregator(), -1, 5)


def test_presampled_matches_direct_for_linear_aggregator():
    values = np.arange(10, dtype=np.float64)
    direct = DirectResampler(AverageAggregator(), 20_000)
    presampled = PresampledResampler(AverageAggregator(), 20_000, values.size)
    direct.resample(values)
    presampled.resample(values)
    for q in (0.1, 0.25, 0.5, 0.75, 0.9):
        assert abs(direct.quantile(q) - presampled.quantile(q)) <= 0.25
