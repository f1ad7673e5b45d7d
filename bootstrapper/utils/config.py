"""YAML configuration for bootstrap runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

BOOTSTRAP_KEYS = frozenset(
    {
        "strategy",
        "strategies",
        "aggregator",
        "iterations",
        "num_values",
        "seed",
        "repeats",
        "allow_nonlinear",
        "output_dir",
    }
)
STRATEGIES = frozenset({"direct", "basic", "presampled"})


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def _find_include(parent: Path, name: str) -> Path:
    """Resolve a ``defaults`` entry to a file, trying ``.yaml``/``.yml`` suffixes
    and ``defaults.yaml`` inside a directory."""

    base = (parent / name).resolve()
    candidates = [base, base.with_suffix(".yaml"), base.with_suffix(".yml")]
    if base.is_dir():
        candidates = [base / "defaults.yaml", base / "defaults.yml"]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(f"Could not resolve defaults include: {base}")


def load_config(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping, layering it over any files listed in ``defaults``."""

    path = Path(path)
    with path.open("r") as handle:
        cfg = yaml.safe_load(handle) or {}
    if not isinstance(cfg, dict):
        raise TypeError(f"Config root must be a mapping, got: {type(cfg)} in {path}")

    includes = cfg.pop("defaults", [])
    if not isinstance(includes, (list, tuple)):
        raise TypeError(f"'defaults' must be a list, got: {type(includes)}")
    merged: Dict[str, Any] = {}
    for include in includes:
        if not isinstance(include, str):
            raise TypeError(f"defaults entries must be strings, got: {type(include)} in {path}")
        merged = _merge_dicts(merged, load_config(_find_include(path.parent, include)))
    return _merge_dicts(merged, cfg)


def load_bootstrap_config(path: Path) -> Dict[str, Any]:
    """Load a benchmark/resampling config and reject unknown keys or strategies."""

    cfg = load_config(path)
    unknown = sorted(set(cfg) - BOOTSTRAP_KEYS)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    strategies = cfg.get("strategies", [cfg.get("strategy", "direct")])
    bad = [s for s in strategies if str(s).lower() not in STRATEGIES]
    if bad:
        raise ValueError(f"Unknown resampling strategies in {path}: {bad}")
    iterations = cfg.get("iterations", 1)
    if not isinstance(iterations, int) or iterations < 1:
        raise ValueError(f"iterations must be a positive integer, got {iterations!r}")
    return cfg
