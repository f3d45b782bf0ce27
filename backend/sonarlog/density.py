from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .models import BottomDensity


def bottom_index(signal_length: int, min_range: float, max_range: float, water_depth: float) -> Optional[int]:
    """
    Index of the bottom return inside a frame's sample run, or None when it
    falls outside the run.

    Ranges and depth must already be in metres; rounding only matches the
    recorder's software when the conversion happens before this division.
    """
    if max_range <= min_range:
        return None
    estimate = signal_length / (max_range - min_range) * water_depth
    if not math.isfinite(estimate):
        return None
    index = math.floor(estimate)
    if index < 0 or index >= signal_length:
        return None
    return index


def window_mean(samples: np.ndarray, start: int, count: int) -> float:
    """
    Mean of up to `count` samples from `start`. The divisor is the number of
    samples actually inside the run, not `count`.
    """
    window = samples[start:start + count]
    if window.size == 0:
        return 0.0
    return float(window.sum(dtype=np.int64)) / window.size


def sample_density(signal: bytes, index: int) -> BottomDensity:
    samples = np.frombuffer(signal, dtype=np.uint8)
    return BottomDensity(
        single=int(samples[index]),
        avg_10=window_mean(samples, index, 10),
        avg_100=window_mean(samples, index, 100),
    )
