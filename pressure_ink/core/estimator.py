"""
Live pressure estimation for an in-progress stroke.

Devices without a pressure signal (mice, trackpads, some digitizers) get a
pressure derived from pointer speed: slow motion draws heavy, fast motion
draws light. Each step is clamped and the previous sample is pulled half a
step toward the new estimate so the preview width changes smoothly.
"""

import logging
from typing import Iterator, List, Optional

from ..config.settings import InkConfig
from ..utils.geometry import Sample, get_direction, get_speed
from .events import InputEvent, MouseEvent, PointerEvent, TouchEvent

logger = logging.getLogger(__name__)


class SampleHistory:
    """Accepted samples of one stroke, owned by the estimator."""

    def __init__(self, lookback: int = InkConfig.HISTORY_LOOKBACK):
        self.lookback = lookback
        self._samples: List[Sample] = []

    def __len__(self):
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __getitem__(self, index):
        return self._samples[index]

    @property
    def samples(self) -> List[Sample]:
        """Copy of the sample list."""
        return list(self._samples)

    def append(self, sample: Sample):
        self._samples.append(sample)

    def recent(self) -> List[Sample]:
        """The samples the estimator is allowed to look back at."""
        return self._samples[-self.lookback:]

    def revise_previous(self, pressure: float) -> float:
        """
        Rewrite the pressure of the second-to-last sample.

        Returns:
            The pressure the sample had before the revision
        """
        previous = self._samples[-2]
        old_pressure = previous.pressure
        previous.pressure = pressure
        return old_pressure

    def clear(self):
        self._samples = []


def _sign(value: float) -> float:
    return 1.0 if value > 0 else -1.0


def estimate_motion_pressure(history: Optional[SampleHistory],
                             fallback_value: float = InkConfig.DEFAULT_FALLBACK_PRESSURE,
                             max_pressure_seg: float = InkConfig.MAX_PRESSURE_SEG,
                             max_speed: float = InkConfig.MAX_SPEED) -> float:
    """
    Estimate pressure from the speed of the last samples.

    The newest sample is expected to be the last entry of the history.

    Args:
        history: Samples of the stroke so far
        fallback_value: Value used without enough samples, also the lower clip bound
        max_pressure_seg: Largest pressure change allowed per sample
        max_speed: Speed at which the estimate reaches zero

    Returns:
        Estimated pressure in [0, 1]
    """
    if history is None or len(history) < 2:
        return fallback_value

    recent = history.recent()
    speed1 = get_speed(recent[-3], recent[-2]) if len(recent) > 2 else 0.0
    speed2 = get_speed(recent[-2], recent[-1])
    avg_speed = min(1.0, (speed1 + speed2) / (max_speed * 2))

    last_pressure = recent[-2].pressure
    est_pressure = 1 - avg_speed
    dis_pressure = est_pressure - last_pressure

    if abs(dis_pressure) > max_pressure_seg:
        direction = _sign(dis_pressure)
        pressure = last_pressure + direction * max_pressure_seg
        res_pressure = min(1.0, max(fallback_value, pressure))

        revised = last_pressure - direction * max_pressure_seg * 0.5
        revised = min(1.0, max(0.0, revised))
        history.revise_previous(revised)
        logger.debug(f"Revised previous pressure {last_pressure:.3f} -> {revised:.3f}")

        return res_pressure

    return est_pressure


def get_pressure(event: InputEvent,
                 fallback_value: float = InkConfig.DEFAULT_FALLBACK_PRESSURE,
                 history: Optional[SampleHistory] = None,
                 max_pressure_seg: float = InkConfig.MAX_PRESSURE_SEG,
                 max_speed: float = InkConfig.MAX_SPEED) -> float:
    """
    Get the pressure for a new pointer event.

    Branches are checked in a fixed order: touch force, then motion
    estimation for mice and pressureless events, then the zero-pressure
    touch fallback, then the reported pressure.

    Args:
        event: Pointer event of the new sample
        fallback_value: Pressure used when no signal is available
        history: Samples of the stroke so far, the new one last
        max_pressure_seg: Largest pressure change allowed per sample
        max_speed: Speed at which the motion estimate reaches zero

    Returns:
        Pressure value for the new sample
    """
    # Touch contacts with force
    if isinstance(event, TouchEvent) and event.touches:
        return event.touches[0].force

    # Mouse, or nothing numeric to go by
    is_pointer = isinstance(event, PointerEvent)
    if (isinstance(event, MouseEvent)
            or not is_pointer
            or event.pointer_type == "mouse"
            or not event.has_numeric_pressure):
        return estimate_motion_pressure(history, fallback_value, max_pressure_seg, max_speed)

    # Many touch digitizers report 0 instead of omitting pressure
    if event.pointer_type == "touch" and event.pressure == 0:
        return fallback_value

    return event.pressure


class LivePressureEstimator:
    """
    Assigns pressure to samples as a stroke is drawn.

    One instance serves one stroke at a time; call reset() between strokes.
    """

    def __init__(self, fallback_value: float = InkConfig.DEFAULT_FALLBACK_PRESSURE,
                 max_pressure_seg: float = InkConfig.MAX_PRESSURE_SEG,
                 max_speed: float = InkConfig.MAX_SPEED):
        self.fallback_value = fallback_value
        self.max_pressure_seg = max_pressure_seg
        self.max_speed = max_speed
        self.history = SampleHistory()

    def estimate(self, event: InputEvent) -> float:
        """Estimate pressure for an event against the current history."""
        return get_pressure(event, self.fallback_value, self.history,
                            self.max_pressure_seg, self.max_speed)

    def add_sample(self, event: InputEvent) -> Sample:
        """
        Accept a new event into the stroke.

        Args:
            event: Pointer event at the new position

        Returns:
            The recorded sample with direction and pressure filled in
        """
        sample = Sample(event.x, event.y, event.timestamp, self.fallback_value)
        if len(self.history) > 0:
            previous = self.history[-1]
            sample.direction = get_direction(previous, sample)
            if len(self.history) == 1:
                previous.direction = get_direction(previous, sample)

        self.history.append(sample)
        sample.pressure = self.estimate(event)
        return sample

    @property
    def samples(self) -> List[Sample]:
        return self.history.samples

    def reset(self):
        """Drop the history to start a new stroke."""
        self.history.clear()
