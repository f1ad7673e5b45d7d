"""Record bootstrap run summaries as CSV rows and a JSON dump."""
from __future__ import annotations

import csv
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Union

if TYPE_CHECKING:
    from bootstrapper.resamplers.base import BaseResampler

Scalar = Union[float, int, str]


@dataclass
class MetricsLogger:
    """Collects one summary row per resampler run inside ``output_dir``.

    Rows are appended to ``metrics.csv`` as they arrive; :meth:`flush_json`
    writes everything logged so far to ``metrics.json``.
    """

    output_dir: Path
    fieldnames: List[str] = field(default_factory=list)
    rows: List[Dict[str, Scalar]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.output_dir = Path(self.output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.csv_path = self.output_dir / "metrics.csv"
        self.json_path = self.output_dir / "metrics.json"

    @classmethod
    def for_run(cls, base: Path, run_id: str) -> "MetricsLogger":
        return cls(Path(base) / run_id)

    def log_resampler(
        self,
        strategy: str,
        resampler: "BaseResampler",
        alpha: float = 0.1,
        **extra: Scalar,
    ) -> Dict[str, Scalar]:
        """Summarise ``resampler``'s replicates and append the row."""

        low, high = resampler.interval(alpha)
        row: Dict[str, Scalar] = {
            "strategy": strategy,
            "aggregator": repr(resampler.aggregator),
            "iterations": resampler.iterations,
            "replicates": len(resampler),
            "alpha": alpha,
            "low": low,
            "median": resampler.quantile(0.5),
            "high": high,
        }
        row.update(extra)
        self._append(row)
        return row

    def _append(self, row: Dict[str, Scalar]) -> None:
        if not self.fieldnames:
            self.fieldnames = list(row)
        self.rows.append(row)
        write_header = not self.csv_path.exists() or self.csv_path.stat().st_size == 0
        with self.csv_path.open("a", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=self.fieldnames)
            if write_header:
                writer.writeheader()
            writer.writerow(row)

    def flush_json(self) -> None:
        with self.json_path.open("w") as handle:
            json.dump(self.rows, handle, indent=2)
