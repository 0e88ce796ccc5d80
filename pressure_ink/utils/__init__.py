"""
Utilities package for stroke geometry and logging.
"""

from .geometry import (
    Point,
    Sample,
    GeometryUtils,
    get_distance,
    get_speed,
    get_direction,
    get_point_by_direction_and_radius
)

__all__ = [
    'Point',
    'Sample',
    'GeometryUtils',
    'get_distance',
    'get_speed',
    'get_direction',
    'get_point_by_direction_and_radius'
]
