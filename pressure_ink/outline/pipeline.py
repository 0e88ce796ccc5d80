"""
Final outline pipeline for a finished stroke.
"""

import logging
from typing import List, Optional

from ..config.settings import InkConfig
from ..utils.geometry import Point, Sample
from .offline_pressure import estimate_pressures, smooth_pressures
from .path_builder import OutlinePath, PathBuilder, assign_directions
from .resampler import Resampler

logger = logging.getLogger(__name__)


def build_stroke_outline(samples: List[Sample], stroke_width: float,
                         is_pressure_brush: bool = True,
                         offset: Optional[Point] = None,
                         half_window: int = InkConfig.SMOOTHING_HALF_WINDOW) -> OutlinePath:
    """
    Build the final outline of a finished stroke.

    Resamples the raw samples, derives speed-based pressure, smooths it,
    assigns directions and builds the closed path. The caller's samples are
    left untouched.

    Args:
        samples: Raw samples of the finished stroke
        stroke_width: Full width of the stroke at pressure 1
        is_pressure_brush: Vary the width by pressure; full width otherwise
        offset: Translation applied to the outline
        half_window: Half-width of the pressure smoothing window

    Returns:
        Closed OutlinePath, or an empty one for degenerate strokes
    """
    resampler = Resampler(stroke_width)
    points = resampler.resample(samples)
    if len(points) < 2:
        logger.debug(f"Degenerate stroke with {len(points)} resampled points")
        return OutlinePath()

    pressures = smooth_pressures(estimate_pressures(points, resampler.min_distance), half_window)
    for point, pressure in zip(points, pressures):
        point.pressure = float(pressure)

    assign_directions(points)
    path = PathBuilder(stroke_width, is_pressure_brush, offset).build(points)
    logger.debug(f"Outline from {len(samples)} samples "
                 f"({len(points)} resampled): {len(path)} commands")
    return path
