"""
Geometry primitives for ink strokes.

This module provides the point types and the distance, speed and direction
math shared by the live pressure estimator and the outline builder.
"""

import math
from typing import List, Optional

from ..config.settings import InkConfig


class Point:
    """Represents a 2D point."""

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return abs(self.x - other.x) < 1e-10 and abs(self.y - other.y) < 1e-10

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return get_distance(self, other)


class Sample(Point):
    """A recorded stroke point with timestamp, pressure and travel direction."""

    def __init__(self, x: float, y: float, time: float = 0.0,
                 pressure: float = InkConfig.DEFAULT_FALLBACK_PRESSURE,
                 direction: float = 0.0):
        super().__init__(x, y)
        self.time = float(time)
        self.pressure = float(pressure)
        self.direction = float(direction)

    def __repr__(self):
        return (f"Sample({self.x:.1f}, {self.y:.1f}, t={self.time:.1f}, "
                f"p={self.pressure:.2f}, dir={self.direction:.2f})")

    def copy(self) -> 'Sample':
        return Sample(self.x, self.y, self.time, self.pressure, self.direction)


def get_distance(p1: Point, p2: Point) -> float:
    """Calculate Euclidean distance between two points."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def get_speed(p1: Sample, p2: Sample) -> float:
    """Calculate speed between two samples; a zero time delta counts as 1."""
    time_diff = abs(p2.time - p1.time) or 1.0
    return get_distance(p1, p2) / time_diff


def get_direction(origin: Point, target: Point) -> float:
    """
    Calculate the direction of travel from origin to target.

    Args:
        origin: Point travel starts from
        target: Point travel goes to

    Returns:
        Angle in radians. The horizontal delta is never exactly zero.
    """
    dx = target.x - origin.x
    dy = target.y - origin.y
    if abs(dx) < InkConfig.MIN_DISTANCE:
        dx = InkConfig.MIN_DISTANCE if dx >= 0 else -InkConfig.MIN_DISTANCE
    return math.atan2(dy, dx)


def get_point_by_direction_and_radius(direction: float, radius: float,
                                      offset: Optional[Point] = None) -> Point:
    """Get the point at a polar offset from an origin (the coordinate origin by default)."""
    ox = offset.x if offset is not None else 0.0
    oy = offset.y if offset is not None else 0.0
    return Point(math.cos(direction) * radius + ox, math.sin(direction) * radius + oy)


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def midpoint(p1: Point, p2: Point) -> Point:
        """Calculate the midpoint of two points."""
        return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)

    @staticmethod
    def translate(point: Point, offset: Optional[Point]) -> Point:
        """Shift a point by an offset."""
        if offset is None:
            return Point(point.x, point.y)
        return Point(point.x + offset.x, point.y + offset.y)

    @staticmethod
    def calculate_path_length(points: List[Point]) -> float:
        """Calculate total path length."""
        if len(points) < 2:
            return 0.0

        length = 0.0
        for i in range(1, len(points)):
            length += get_distance(points[i-1], points[i])
        return length
