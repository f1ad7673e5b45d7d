"""Bootstrap resampling strategies and factories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from bootstrapper.aggregators import Aggregator, create_aggregator
from bootstrapper.resamplers.base import BaseResampler
from bootstrapper.resamplers.direct import DirectResampler
from bootstrapper.resamplers.presampled import PresampledResampler, draw_count_table
from bootstrapper.utils.seeding import DEFAULT_SEED, make_generator


def create_resampler(
    strategy: str,
    aggregator: Aggregator,
    iterations: int,
    num_values: Optional[int] = None,
    seed: Optional[int] = DEFAULT_SEED,
    allow_nonlinear: bool = False,
) -> BaseResampler:
    """Factory for constructing resamplers by strategy name."""

    strategy = strategy.lower()
    rng = make_generator(seed)
    if strategy in {"direct", "basic"}:
        return DirectResampler(aggregator, iterations, rng=rng)
    if strategy == "presampled":
        if num_values is None:
            raise ValueError("The presampled strategy requires num_values")
        return PresampledResampler(
            aggregator,
            iterations,
            num_values,
            rng=rng,
            allow_nonlinear=allow_nonlinear,
        )
    raise ValueError(f"Unknown resampling strategy: {strategy}")


@dataclass
class ResamplerConfig:
    """Settings needed to build an aggregator/resampler pair."""

    strategy: str = "direct"
    aggregator: Dict[str, Any] = field(default_factory=lambda: {"name": "average"})
    iterations: int = 2000
    num_values: Optional[int] = None
    seed: Optional[int] = DEFAULT_SEED
    allow_nonlinear: bool = False

    @classmethod
    def from_dict(cls, cfg: Mapping[str, Any]) -> "ResamplerConfig":
        aggregator = cfg.get("aggregator", {"name": "average"})
        if isinstance(aggregator, str):
            aggregator = {"name": aggregator}
        if not isinstance(aggregator, Mapping) or "name" not in aggregator:
            raise TypeError(f"'aggregator' must be a name or a mapping with a 'name' key, got: {aggregator!r}")
        return cls(
            strategy=str(cfg.get("strategy", "direct")),
            aggregator=dict(aggregator),
            iterations=int(cfg.get("iterations", 2000)),
            num_values=cfg.get("num_values"),
            seed=cfg.get("seed", DEFAULT_SEED),
            allow_nonlinear=bool(cfg.get("allow_nonlinear", False)),
        )

    def build(self) -> BaseResampler:
        params = dict(self.aggregator)
        aggregator = create_aggregator(params.pop("name"), **params)
        return create_resampler(
            self.strategy,
            aggregator,
            self.iterations,
            num_values=self.num_values,
            seed=self.seed,
            allow_nonlinear=self.allow_nonlinear,
        )


def build_from_config(cfg: Mapping[str, Any]) -> BaseResampler:
    return ResamplerConfig.from_dict(cfg).build()


def bootstrap_interval(
    values: Sequence[float],
    aggregator: Aggregator,
    iterations: int = 2000,
    alpha: float = 0.05,
    seed: Optional[int] = DEFAULT_SEED,
) -> Tuple[float, float]:
    """One-shot percentile interval for ``aggregator`` over ``values``."""

    resampler = DirectResampler(aggregator, iterations, rng=make_generator(seed))
    resampler.resample(values)
    return resampler.interval(alpha)


__all__ = [
    "BaseResampler",
    "DirectResampler",
    "PresampledResampler",
    "ResamplerConfig",
    "bootstrap_interval",
    "build_from_config",
    "create_resampler",
    "draw_count_table",
]
