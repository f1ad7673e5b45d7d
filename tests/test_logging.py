from __future__ import annotations

import csv
import json
import math

from bootstrapper.aggregators import SumAggregator
from bootstrapper.resamplers import DirectResampler, PresampledResampler
from bootstrapper.utils.logging import MetricsLogger

VALUES = [0.0, 1.0, 2.0, 3.0, 4.0]


def test_log_resampler_summarises_replicates(tmp_path):
    resampler = DirectResampler(SumAggregator(), 2000)
    resampler.resample(VALUES)
    logger = MetricsLogger(tmp_path / "run")
    row = logger.log_resampler("direct", resampler, alpha=0.5, seconds=0.25)

    assert row["strategy"] == "direct"
    assert row["aggregator"] == "SumAggregator()"
    assert row["iterations"] == 2000
    assert row["replicates"] == 2000
    assert row["median"] == 10.0
    assert row["low"] == resampler.quantile(0.25)
    assert row["high"] == resampler.quantile(0.75)
    assert row["seconds"] == 0.25


def test_metrics_logger_writes_csv_and_json(tmp_path):
    logger = MetricsLogger.for_run(tmp_path, "abc")
    assert logger.output_dir == tmp_path / "abc"
    assert logger.output_dir.is_dir()

    direct = DirectResampler(SumAggregator(), 20)
    presampled = PresampledResampler(SumAggregator(), 20, 5)
    direct.resample(VALUES)
    presampled.resample(VALUES)
    logger.log_resampler("direct", direct)
    logger.log_resampler("presampled", presampled)
    logger.flush_json()

    with logger.csv_path.open() as handle:
        rows = list(csv.DictReader(handle))
    assert [row["strategy"] for row in rows] == ["direct", "presampled"]
    assert [row["replicates"] for row in rows] == ["20", "20"]
    assert json.loads(logger.json_path.read_text())[1]["strategy"] == "presampled"


def test_log_resampler_before_resample_records_nan(tmp_path):
    logger = MetricsLogger(tmp_path)
    row = logger.log_resampler("direct", DirectResampler(SumAggregator(), 10))
    assert row["replicates"] == 0
    assert math.isnan(row["median"])
