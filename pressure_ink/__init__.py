"""
Pressure Ink Package
Turns noisy pointer samples into closed, pressure-sensitive stroke outlines.
"""

from .config.settings import BrushSettings, InkConfig
from .core.brush import PressureBrush
from .core.estimator import LivePressureEstimator, get_pressure
from .outline.path_builder import OutlinePath
from .outline.pipeline import build_stroke_outline

__version__ = "1.0.0"
__all__ = [
    "BrushSettings",
    "InkConfig",
    "PressureBrush",
    "LivePressureEstimator",
    "get_pressure",
    "OutlinePath",
    "build_stroke_outline"
]
