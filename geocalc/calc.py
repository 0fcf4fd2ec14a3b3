""" Forward geodesic and great-circle interpolation for Coordinates """

__all__ = [
    'course', 'destination_point', 'route_point'
]

import math
from typing import Iterator

from geocalc._const import ANTIPODAL_EPSILON, EARTH_RADIUS_METERS, POLE_NUDGE
from geocalc.coordinates import Coordinate, normalize_longitude, validate_coordinates
from geocalc.distance import haversine_bearing, haversine_distance
from geocalc.exceptions import BearingOutOfRange


def destination_point(
    start: Coordinate, bearing_degrees: float, distance_meters: float
) -> Coordinate:
    """
    Give a start location, a direction of travel (in degrees clockwise from North), and a
    distance of travel, returns the finish location on a spherical earth.

    A start exactly on a pole is moved 1e-9 of its latitude towards the equator
    first, since longitude is singular there.

    Args:
        start: (Coordinate)
            The starting location

        bearing_degrees: (float)
            The angle of heading, in degrees [0, 360]

        distance_meters: (float)
            The amount of movement, in meters. Negative values move in the
            opposite direction of the bearing.

    Returns:
        (Coordinate)

    Raises:
        CoordinateOutOfRange
        BearingOutOfRange
        ValueError: if distance_meters is NaN or infinite
    """
    validate_coordinates(start)
    if not 0. <= bearing_degrees <= 360.:
        raise BearingOutOfRange(f'Bearing out of range: {bearing_degrees!r}')

    if not math.isfinite(distance_meters):
        raise ValueError(f'Distance must be finite, got {distance_meters!r}')

    lat = start.latitude
    if abs(lat) == 90.:
        lat *= POLE_NUDGE

    _rad = distance_meters / EARTH_RADIUS_METERS
    angle = math.radians(bearing_degrees)
    y0 = math.radians(lat)
    x0 = math.radians(start.longitude)

    # Destination as a unit vector: z is north, (north_comp, east_comp) lie in the
    # equatorial plane relative to the start meridian
    z = math.sin(y0) * math.cos(_rad) + math.cos(y0) * math.sin(_rad) * math.cos(angle)
    north_comp = math.cos(y0) * math.cos(_rad) - math.sin(y0) * math.sin(_rad) * math.cos(angle)
    east_comp = math.sin(angle) * math.sin(_rad)

    final_lat = math.degrees(math.atan2(z, math.hypot(north_comp, east_comp)))
    if 90. - abs(final_lat) < ANTIPODAL_EPSILON:
        # Longitude is meaningless on a pole
        return Coordinate(math.copysign(90., final_lat), 0.)

    final_lon = math.degrees(x0 + math.atan2(east_comp, north_comp))

    return Coordinate(final_lat, normalize_longitude(final_lon))


def route_point(start: Coordinate, end: Coordinate, fraction: float) -> Coordinate:
    """
    Find the point a fraction of the way along the great circle from start to end.

    Args:
        start:
            The start point Coordinate

        end:
            The finish point Coordinate

        fraction:
            0 is the start point, 1 the end point. Values below 0 or above 1
            extrapolate beyond either end.

    Returns:
        (Coordinate)

    Raises:
        CoordinateOutOfRange
        BearingUndefined: if the points are antipodal, so the path is not unique
    """
    initial_bearing = haversine_bearing(start, end)
    total = haversine_distance(start, end)

    return destination_point(start, initial_bearing, total * fraction)


def course(start: Coordinate, end: Coordinate, numpoints: int) -> Iterator[Coordinate]:
    """
    Generate evenly spaced points on the great circle between two locations.

    Args:
        start:
            The start point Coordinate

        end:
            The finish point Coordinate

        numpoints:
            The number of intermediate points. The start and end points are
            always included, so numpoints + 2 Coordinates are produced.

    Returns:
        An iterator of Coordinates. Arguments are checked when called, before
        any point is produced.

    Raises:
        ValueError: if numpoints is negative
        CoordinateOutOfRange
        BearingUndefined: if the points are antipodal
    """
    if numpoints < 0:
        raise ValueError(f'numpoints must be non-negative, got {numpoints}')

    # Raises for invalid or antipodal endpoints
    haversine_bearing(start, end)

    segments = numpoints + 1
    return (route_point(start, end, i / segments) for i in range(segments + 1))
