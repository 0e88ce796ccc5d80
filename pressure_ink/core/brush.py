"""
Pressure brush coordinating live estimation and the final outline.
"""

import logging
from typing import List, Optional

from ..config.settings import BrushSettings
from ..outline.path_builder import OutlinePath, PathBuilder
from ..outline.pipeline import build_stroke_outline
from ..utils.geometry import Point, Sample
from ..utils.logger import StrokeLogger
from .estimator import LivePressureEstimator
from .events import InputEvent

logger = logging.getLogger(__name__)


class PressureBrush:
    """Drives one stroke at a time from pointer events to a closed outline."""

    def __init__(self, settings: Optional[BrushSettings] = None,
                 stroke_logger: Optional[StrokeLogger] = None,
                 offset: Optional[Point] = None):
        self.settings = settings or BrushSettings()
        self.logger = stroke_logger
        self.offset = offset
        self.estimator = LivePressureEstimator(
            fallback_value=self.settings.fallback_pressure,
            max_pressure_seg=self.settings.max_pressure_seg,
        )
        self.is_drawing = False

    @property
    def samples(self) -> List[Sample]:
        """Samples of the current stroke with their live pressures."""
        return self.estimator.samples

    def on_stroke_start(self, event: InputEvent) -> Sample:
        """Begin a new stroke at the event position."""
        if self.is_drawing:
            logger.warning("Stroke started while another was in progress; discarding it")
        self.estimator.reset()
        self.is_drawing = True
        sample = self.estimator.add_sample(event)
        if self.logger:
            self.logger.log_stroke_start(sample, event.KIND)
        return sample

    def on_stroke_move(self, event: InputEvent) -> Optional[Sample]:
        """Add a sample to the current stroke; ignored outside a stroke."""
        if not self.is_drawing:
            return None
        return self.estimator.add_sample(event)

    def preview_outline(self) -> OutlinePath:
        """Outline of the stroke so far, using the live pressures."""
        builder = PathBuilder(self.settings.stroke_width, self.settings.is_pressure_brush, self.offset)
        return builder.build(self.estimator.samples)

    def on_stroke_end(self) -> OutlinePath:
        """
        Finish the current stroke.

        Returns:
            Final outline; empty when no stroke was in progress or it was degenerate
        """
        if not self.is_drawing:
            return OutlinePath()

        samples = self.estimator.samples
        path = build_stroke_outline(
            samples,
            self.settings.stroke_width,
            self.settings.is_pressure_brush,
            self.offset,
        )
        if self.logger:
            self.logger.log_stroke_end(samples, len(path))

        self.is_drawing = False
        self.estimator.reset()
        return path
