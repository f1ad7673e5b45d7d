"""Seeded random number generators for resampling."""
from __future__ import annotations

from typing import Optional

import numpy as np

DEFAULT_SEED = 5


def make_generator(seed: Optional[int] = DEFAULT_SEED) -> np.random.Generator:
    """Return a fresh generator; ``None`` draws entropy from the OS."""

    return np.random.default_rng(seed)
