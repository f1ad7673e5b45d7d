"""Utility exports for convenience."""

from .config import load_bootstrap_config, load_config
from .logging import MetricsLogger
from .seeding import DEFAULT_SEED, make_generator

__all__ = [
    "DEFAULT_SEED",
    "make_generator",
    "load_config",
    "load_bootstrap_config",
    "MetricsLogger",
]
