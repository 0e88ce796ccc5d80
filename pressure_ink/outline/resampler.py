"""
Distance-based resampling of a finished stroke.

Final rendering quality depends more on even spacing than on point density,
so samples closer than a width-derived distance to the last kept sample are
dropped before the outline is built.
"""

from typing import List

from ..config.settings import InkConfig
from ..utils.geometry import Sample, get_distance


class Resampler:
    """Thins a stroke to samples at least stroke_width / 6 apart."""

    def __init__(self, stroke_width: float):
        """
        Initialize the resampler.

        Args:
            stroke_width: Brush width; the minimum spacing is derived from it
        """
        if not stroke_width > 0:
            raise ValueError(f"stroke_width must be positive, got {stroke_width}")
        self.stroke_width = stroke_width
        self.min_distance = stroke_width / InkConfig.RESAMPLE_DIVISOR

    def resample(self, samples: List[Sample]) -> List[Sample]:
        """
        Resample a stroke.

        The first and last samples are always kept, so only interior samples
        are dropped and the last kept pair may be closer than min_distance.

        Args:
            samples: Raw samples of the finished stroke

        Returns:
            Copies of the kept samples in their original order
        """
        if not samples:
            return []

        kept = [samples[0].copy()]
        for sample in samples[1:-1]:
            if get_distance(kept[-1], sample) >= self.min_distance:
                kept.append(sample.copy())

        if len(samples) > 1:
            kept.append(samples[-1].copy())

        return kept

    def get_compression_ratio(self, original: List[Sample], resampled: List[Sample]) -> float:
        """Ratio of raw samples to kept samples."""
        if not original or not resampled:
            return 1.0
        return len(original) / len(resampled)


def resample(samples: List[Sample], stroke_width: float) -> List[Sample]:
    """
    Convenience function for stroke resampling.

    Example:
        >>> pts = [Sample(0, 0, 0), Sample(1, 0, 1), Sample(10, 0, 2), Sample(20, 0, 3)]
        >>> [p.x for p in resample(pts, stroke_width=30)]
        [0.0, 10.0, 20.0]
    """
    return Resampler(stroke_width).resample(samples)
