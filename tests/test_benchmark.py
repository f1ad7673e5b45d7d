from __future__ import annotations

import json

from bootstrapper.utils.seeding import DEFAULT_SEED
from scripts.benchmark_resamplers import run_benchmark


def test_run_benchmark_logs_each_strategy(tmp_path):
    config = {
        "seed": 0,
        "iterations": 50,
        "num_values": 20,
        "repeats": 2,
        "aggregator": {"name": "average"},
        "strategies": ["direct", "presampled"],
    }
    rows = run_benchmark(config, tmp_path)
    assert [row["strategy"] for row in rows] == ["direct", "presampled"]
    for row in rows:
        assert row["low"] <= row["median"] <= row["high"]
        assert 0.0 <= row["low"] and row["high"] <= 1.0
        assert row["replicates"] == 100
        assert row["repeats"] == 2

    (run_dir,) = list(tmp_path.iterdir())
    assert len(json.loads((run_dir / "metrics.json").read_text())) == 2
    assert (run_dir / "metrics.csv").exists()


def test_run_benchmark_defaults_to_library_seed(tmp_path):
    config = {"iterations": 30, "num_values": 10, "aggregator": "sum", "strategies": ["direct"]}
    implicit = run_benchmark(config, tmp_path / "implicit")
    explicit = run_benchmark({**config, "seed": DEFAULT_SEED}, tmp_path / "explicit")
    for key in ("low", "median", "high"):
        assert implicit[0][key] == explicit[0][key]
