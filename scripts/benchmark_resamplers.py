"""Time the direct and presampled resamplers on random data."""

from __future__ import annotations

import argparse
import json
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from bootstrapper.resamplers import ResamplerConfig
from bootstrapper.utils.config import load_bootstrap_config
from bootstrapper.utils.logging import MetricsLogger
from bootstrapper.utils.seeding import DEFAULT_SEED, make_generator


def run_benchmark(
    config: Dict[str, Any],
    output_dir: Optional[Path] = None,
) -> List[Dict[str, Any]]:
    """Resample ``repeats`` times per strategy and log timings and quantiles."""

    strategies: List[str] = list(config.get("strategies", ["direct", "presampled"]))
    if not strategies:
        raise ValueError("No strategies specified in config")
    num_values = int(config.get("num_values", 1000))
    repeats = int(config.get("repeats", 1))
    seed = config.get("seed", DEFAULT_SEED)

    data = make_generator(seed).random(num_values)
    base_dir = Path(output_dir or config.get("output_dir", "outputs/benchmarks"))
    run_id = f"benchmark_{datetime.utcnow().strftime('%Y%m%d%H%M%S')}"
    logger = MetricsLogger.for_run(base_dir, run_id)

    for strategy in strategies:
        resampler_cfg = ResamplerConfig.from_dict(
            {**config, "strategy": strategy, "num_values": num_values}
        )
        start = time.perf_counter()
        resampler = resampler_cfg.build()
        setup_seconds = time.perf_counter() - start
        start = time.perf_counter()
        for _ in range(repeats):
            resampler.resample(data)
        elapsed = time.perf_counter() - start
        logger.log_resampler(
            strategy,
            resampler,
            alpha=0.1,
            num_values=num_values,
            repeats=repeats,
            setup_seconds=setup_seconds,
            resample_seconds=elapsed,
        )
    logger.flush_json()
    return logger.rows


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark bootstrap resamplers")
    parser.add_argument("--config", type=Path, required=True)
    parser.add_argument("--output-dir", type=Path, default=None)
    parser.add_argument("--dry-run", action="store_true")
    args = parser.parse_args()

    config = load_bootstrap_config(args.config)
    if args.dry_run:
        print(json.dumps({"status": "dry_run", "config": config}, indent=2))
        return
    rows = run_benchmark(config, args.output_dir)
    print(json.dumps(rows, indent=2))


if __name__ == "__main__":
    main()
