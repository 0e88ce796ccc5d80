"""
Configuration settings for pressure ink strokes.
"""

from dataclasses import dataclass


class InkConfig:
    """Configuration constants for pressure estimation and outline building."""

    # Live estimation (speeds in position units per millisecond)
    MAX_SPEED = 1.5
    MAX_PRESSURE_SEG = 0.2
    DEFAULT_FALLBACK_PRESSURE = 0.5
    HISTORY_LOOKBACK = 3

    # Smallest horizontal delta used for direction math
    MIN_DISTANCE = 0.00001

    # Final outline
    RESAMPLE_DIVISOR = 6
    SMOOTHING_HALF_WINDOW = 2
    OFFLINE_MIN_PRESSURE = 0.1
    OFFLINE_MAX_PRESSURE = 0.9

    DEFAULT_STROKE_WIDTH = 30


# Per-step clamp presets for the live estimator
PRESSURE_STEP_PRESETS = {
    "smooth": {"max_pressure_seg": 0.2, "description": "Small steps, steady width (default)"},
    "balanced": {"max_pressure_seg": 0.35, "description": "Moderate steps"},
    "responsive": {"max_pressure_seg": 0.5, "description": "Large steps, follows speed closely"},
}


def get_preset_config(preset_name: str) -> dict:
    """
    Get configuration for a named pressure step preset.

    Args:
        preset_name: Name of the preset

    Returns:
        Dictionary with max_pressure_seg value and description
    """
    return PRESSURE_STEP_PRESETS.get(preset_name, PRESSURE_STEP_PRESETS["smooth"])


@dataclass
class BrushSettings:
    """Brush configuration handed over by the host tool."""
    stroke_width: float = InkConfig.DEFAULT_STROKE_WIDTH
    is_pressure_brush: bool = True
    fallback_pressure: float = InkConfig.DEFAULT_FALLBACK_PRESSURE
    max_pressure_seg: float = InkConfig.MAX_PRESSURE_SEG

    def __post_init__(self):
        if not self.stroke_width > 0:
            raise ValueError(f"stroke_width must be positive, got {self.stroke_width}")
        if not 0 <= self.fallback_pressure <= 1:
            raise ValueError(f"fallback_pressure must be in [0, 1], got {self.fallback_pressure}")
        if not self.max_pressure_seg > 0:
            raise ValueError(f"max_pressure_seg must be positive, got {self.max_pressure_seg}")

    @classmethod
    def from_preset(cls, preset_name: str, **kwargs) -> 'BrushSettings':
        """Build settings using the step clamp of a named preset."""
        preset = get_preset_config(preset_name)
        return cls(max_pressure_seg=preset["max_pressure_seg"], **kwargs)
