"""
Speed-based pressure for the final outline.

The final pass ignores whatever pressure was recorded live and derives a
width multiplier from local speed relative to the resampling distance, so a
stroke looks the same whichever device drew it.
"""

from typing import List

import numpy as np

from ..config.settings import InkConfig
from ..utils.geometry import Sample, get_speed


def estimate_pressures(samples: List[Sample], min_distance: float) -> np.ndarray:
    """
    Derive a per-point pressure from segment speed.

    Args:
        samples: Resampled stroke
        min_distance: Resampling distance the speed is measured against

    Returns:
        Array of pressures in [0.1, 0.9]; a single point gets 0
    """
    count = len(samples)
    if count == 0:
        return np.zeros(0)
    if count == 1:
        return np.zeros(1)

    low = InkConfig.OFFLINE_MIN_PRESSURE
    high = InkConfig.OFFLINE_MAX_PRESSURE

    speeds = np.array([get_speed(samples[i-1], samples[i]) for i in range(1, count)])
    speeds = np.minimum(high, speeds / min_distance)
    pressures = np.minimum(high - speeds, high) + low
    pressures = np.clip(pressures, low, high)

    # The first point has no segment of its own
    return np.concatenate(([pressures[0]], pressures))


def smooth_pressures(pressures, half_window: int = InkConfig.SMOOTHING_HALF_WINDOW) -> np.ndarray:
    """
    Symmetric moving average over a pressure sequence.

    The window shrinks at both ends instead of padding or wrapping.

    Args:
        pressures: Sequence of per-point pressures
        half_window: Number of neighbours averaged on each side

    Returns:
        Smoothed pressures, same length as the input
    """
    values = np.asarray(pressures, dtype=float)
    count = len(values)
    smoothed = np.empty(count)
    for i in range(count):
        start = max(0, i - half_window)
        end = min(count - 1, i + half_window)
        smoothed[i] = values[start:end + 1].mean()
    return smoothed
