"""
Outline path construction.

Turns a sequence of samples with direction and pressure into one closed loop:
the left rail traced forward, the right rail traced backward, joined by
quadratic curves through the midpoints of neighbouring boundary vertices.
"""

import math
from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from ..config.settings import InkConfig
from ..utils.geometry import (
    GeometryUtils,
    Point,
    Sample,
    get_direction,
    get_point_by_direction_and_radius,
)


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class QuadraticCurveTo:
    cx: float
    cy: float
    x: float
    y: float


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, QuadraticCurveTo, ClosePath]


class OutlinePath:
    """Ordered drawing commands forming a stroke outline."""

    def __init__(self):
        self.commands: List[PathCommand] = []

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __len__(self):
        return len(self.commands)

    def __repr__(self):
        return f"OutlinePath({len(self.commands)} commands)"

    def move_to(self, x: float, y: float):
        self.commands.append(MoveTo(x, y))

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float):
        self.commands.append(QuadraticCurveTo(cx, cy, x, y))

    def close_path(self):
        self.commands.append(ClosePath())

    @property
    def is_empty(self) -> bool:
        return not self.commands

    @property
    def is_closed(self) -> bool:
        return bool(self.commands) and isinstance(self.commands[-1], ClosePath)

    @property
    def start_point(self) -> Optional[Tuple[float, float]]:
        """First explicit coordinate of the path."""
        for command in self.commands:
            if not isinstance(command, ClosePath):
                return command.x, command.y
        return None

    @property
    def end_point(self) -> Optional[Tuple[float, float]]:
        """Last explicit coordinate of the path."""
        for command in reversed(self.commands):
            if not isinstance(command, ClosePath):
                return command.x, command.y
        return None

    def flatten(self, steps: int = 8) -> List[Tuple[float, float]]:
        """
        Approximate the path with a polygon.

        Args:
            steps: Line segments per quadratic curve

        Returns:
            List of (x, y) vertices, for fill routines without curve support
        """
        polygon = []
        current = None
        for command in self.commands:
            if isinstance(command, MoveTo):
                current = (command.x, command.y)
                polygon.append(current)
            elif isinstance(command, QuadraticCurveTo) and current is not None:
                x0, y0 = current
                for step in range(1, steps + 1):
                    t = step / steps
                    u = 1 - t
                    x = u * u * x0 + 2 * u * t * command.cx + t * t * command.x
                    y = u * u * y0 + 2 * u * t * command.cy + t * t * command.y
                    polygon.append((x, y))
                current = (command.x, command.y)
        return polygon


def assign_directions(samples: List[Sample]) -> List[Sample]:
    """
    Set the travel direction of every sample in place.

    The first sample looks forward to the second; every other sample looks
    back to its predecessor.
    """
    count = len(samples)
    if count < 2:
        return samples

    samples[0].direction = get_direction(samples[0], samples[1])
    for i in range(1, count):
        samples[i].direction = get_direction(samples[i-1], samples[i])
    return samples


class PathBuilder:
    """Builds closed outline paths from directed, pressured samples."""

    def __init__(self, stroke_width: float, is_pressure_brush: bool = True,
                 offset: Optional[Point] = None):
        """
        Initialize the path builder.

        Args:
            stroke_width: Full width of the stroke at pressure 1
            is_pressure_brush: Vary the width by pressure; full width otherwise
            offset: Translation applied to every sample, e.g. into surface coordinates
        """
        if not stroke_width > 0:
            raise ValueError(f"stroke_width must be positive, got {stroke_width}")
        self.stroke_width = stroke_width
        self.is_pressure_brush = is_pressure_brush
        self.offset = offset

    def rail_radius(self, sample: Sample) -> float:
        """Half-width of the outline at a sample."""
        pressure = sample.pressure if self.is_pressure_brush else 1
        if not math.isfinite(pressure) or pressure < 0:
            pressure = 0.0
        return pressure * self.stroke_width / 2

    def boundary(self, samples: List[Sample]) -> List[Point]:
        """
        Collect both rails as one loop of vertices.

        Left rail points (direction + 90 degrees) are appended and right rail
        points (direction - 90 degrees) are prepended, so the loop runs back
        along the right rail and forward along the left.
        """
        vertices = deque()
        for sample in samples:
            center = GeometryUtils.translate(sample, self.offset)
            radius = self.rail_radius(sample)
            vertices.append(get_point_by_direction_and_radius(
                sample.direction + math.pi / 2, radius, center))
            vertices.appendleft(get_point_by_direction_and_radius(
                sample.direction - math.pi / 2, radius, center))
        return list(vertices)

    def build(self, samples: List[Sample]) -> OutlinePath:
        """
        Build the outline of a stroke.

        Args:
            samples: Samples with direction and pressure assigned

        Returns:
            Closed OutlinePath, or an empty one for fewer than 2 samples
        """
        path = OutlinePath()
        if len(samples) < 2:
            return path

        vertices = self.boundary(samples)
        first, last = vertices[0], vertices[-1]
        end_mid = GeometryUtils.midpoint(first, last)

        path.move_to(first.x, first.y)
        # The last vertex has no successor; the end cap replaces its curve
        for i in range(1, len(vertices) - 1):
            mid = GeometryUtils.midpoint(vertices[i], vertices[i+1])
            path.quadratic_curve_to(vertices[i].x, vertices[i].y, mid.x, mid.y)

        cap = get_point_by_direction_and_radius(
            samples[-1].direction, self.stroke_width / 2, end_mid)
        path.quadratic_curve_to(cap.x, cap.y, first.x, first.y)
        path.close_path()
        return path


def build_outline(samples: List[Sample], stroke_width: float = InkConfig.DEFAULT_STROKE_WIDTH,
                  is_pressure_brush: bool = True, offset: Optional[Point] = None) -> OutlinePath:
    """Convenience function building an outline from ready samples."""
    return PathBuilder(stroke_width, is_pressure_brush, offset).build(samples)
