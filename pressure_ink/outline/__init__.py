"""
Final outline construction.

This module provides the offline pipeline that turns a finished stroke into
a closed outline path: resampling, speed-based pressure, smoothing and path
building.
"""

from .resampler import Resampler, resample
from .offline_pressure import estimate_pressures, smooth_pressures
from .path_builder import (
    ClosePath,
    MoveTo,
    OutlinePath,
    PathBuilder,
    QuadraticCurveTo,
    assign_directions,
    build_outline
)
from .pipeline import build_stroke_outline

__all__ = [
    'Resampler',
    'resample',
    'estimate_pressures',
    'smooth_pressures',
    'ClosePath',
    'MoveTo',
    'OutlinePath',
    'PathBuilder',
    'QuadraticCurveTo',
    'assign_directions',
    'build_outline',
    'build_stroke_outline'
]
