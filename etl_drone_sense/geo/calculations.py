"""Great-circle bearing and distance between WGS84 coordinates."""

import math

from etl_drone_sense.constants import EARTH_RADIUS_METERS

_FULL_CIRCLE_DEGREES = 360.0


def initial_bearing(
    *,
    latitude_1: float,
    longitude_1: float,
    latitude_2: float,
    longitude_2: float,
) -> float:
    """Compute the initial compass bearing from the first point toward the second.

    Identical points yield 0.0, since ``atan2(0, 0)`` is defined as zero.

    Args:
        latitude_1: Origin latitude in degrees.
        longitude_1: Origin longitude in degrees.
        latitude_2: Target latitude in degrees.
        longitude_2: Target longitude in degrees.

    Returns:
        Bearing in degrees in [0, 360), clockwise from true north.
    """
    latitude_1_radians = math.radians(latitude_1)
    latitude_2_radians = math.radians(latitude_2)
    delta_longitude = math.radians(longitude_2 - longitude_1)

    x = math.sin(delta_longitude) * math.cos(latitude_2_radians)
    y = math.cos(latitude_1_radians) * math.sin(latitude_2_radians) - math.sin(
        latitude_1_radians
    ) * math.cos(latitude_2_radians) * math.cos(delta_longitude)

    bearing = (math.degrees(math.atan2(x, y)) + _FULL_CIRCLE_DEGREES) % _FULL_CIRCLE_DEGREES
    # -1e-15 + 360 rounds to exactly 360.0 in floating point
    if bearing >= _FULL_CIRCLE_DEGREES:
        return 0.0
    return bearing


def haversine_distance(
    *,
    latitude_1: float,
    longitude_1: float,
    latitude_2: float,
    longitude_2: float,
) -> float:
    """Compute the Haversine distance between two GPS coordinates.

    Args:
        latitude_1: First point latitude in degrees.
        longitude_1: First point longitude in degrees.
        latitude_2: Second point latitude in degrees.
        longitude_2: Second point longitude in degrees.

    Returns:
        Surface distance between the two points in meters.
    """
    delta_latitude = math.radians(latitude_2 - latitude_1)
    delta_longitude = math.radians(longitude_2 - longitude_1)

    latitude_1_radians = math.radians(latitude_1)
    latitude_2_radians = math.radians(latitude_2)

    haversine = (
        math.sin(delta_latitude / 2.0) ** 2
        + math.cos(latitude_1_radians)
        * math.cos(latitude_2_radians)
        * math.sin(delta_longitude / 2.0) ** 2
    )
    # Rounding can push antipodal inputs just past 1.0
    haversine = min(haversine, 1.0)
    angular_distance = 2.0 * math.atan2(math.sqrt(haversine), math.sqrt(1.0 - haversine))

    return EARTH_RADIUS_METERS * angular_distance
