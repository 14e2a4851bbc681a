"""
Geometry utilities for aircraft encounters
"""

from .bearings import (
    KNOTS_TO_FPS,
    bearing_to_velocity,
    calculate_relative_velocity,
)

from .coordinate_transform import (
    EARTH_RADIUS_FT,
    encounter_origin,
    lonlat_to_xy,
    xy_to_lonlat,
)

__all__ = [
    # bearings
    'KNOTS_TO_FPS',
    'bearing_to_velocity',
    'calculate_relative_velocity',
    # coordinate_transform
    'EARTH_RADIUS_FT',
    'encounter_origin',
    'lonlat_to_xy',
    'xy_to_lonlat',
]
