"""
Representation of a specific point on earth, plus the range checks and
longitude arithmetic every solver relies on
"""

__all__ = ['Coordinate', 'are_antipodal', 'normalize_longitude', 'validate_coordinates']

import math
from typing import Tuple, Union

from geocalc._const import ANTIPODAL_EPSILON
from geocalc.exceptions import CoordinateOutOfRange


def normalize_longitude(longitude: float) -> float:
    """
    Wraps a longitude into the range (-180, 180] using modulo-360 arithmetic.

    Args:
        longitude:
            Any finite value, in degrees

    Returns:
        (float) the equivalent longitude in (-180, 180]
    """
    if not math.isfinite(longitude):
        raise ValueError(f'Cannot normalize non-finite longitude {longitude!r}')

    lon = math.fmod(longitude, 360.0)
    if lon <= -180.0:
        lon += 360.0
    elif lon > 180.0:
        lon -= 360.0

    return lon


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair), in decimal degrees.

    Coordinates are not range-checked on creation; use `is_valid` or let the
    solvers raise CoordinateOutOfRange.
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        self.latitude = float(latitude)
        self.longitude = float(longitude)

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __iter__(self):
        yield self.latitude
        yield self.longitude

    def __repr__(self):
        return f'<Coordinate({self.latitude}, {self.longitude})>'

    @property
    def is_valid(self) -> bool:
        """True if latitude is within [-90, 90] and longitude within [-180, 180]"""
        # Written so that NaN compares as invalid
        return abs(self.latitude) <= 90. and abs(self.longitude) <= 180.

    def antipode(self) -> 'Coordinate':
        """The point diametrically opposite this one"""
        validate_coordinates(self)
        return Coordinate(-self.latitude, normalize_longitude(self.longitude + 180.))

    def is_antipodal_to(self, other: 'Coordinate') -> bool:
        """Convenience wrapper around are_antipodal()"""
        return are_antipodal(self, other)

    @classmethod
    def from_str(cls, coord_str: str) -> 'Coordinate':
        """
        Create a Coordinate from a "lat,lon" string, e.g. "60.39,5.32".

        Args:
            coord_str:
                Latitude and longitude in decimal degrees, separated by a comma.
                The decimal separator must be a period.

        Returns:
            Coordinate
        """
        parts = coord_str.split(',')
        if len(parts) != 2:
            raise ValueError(f'Expected "lat,lon", got {coord_str!r}')

        return Coordinate(*(float(x.strip()) for x in parts))

    def to_float(self) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (latitude, longitude)
        """
        return self.latitude, self.longitude

    def to_str(self, precision: int = 6) -> str:
        """
        Renders the coordinate as a "lat,lon" string with fixed decimals.

        Args:
            precision: (int)
                (Default 6) Number of decimals for both values

        Returns:
            str
        """
        return f'{self.latitude:.{precision}f},{self.longitude:.{precision}f}'


def validate_coordinates(*coords: Coordinate) -> None:
    """
    Raise CoordinateOutOfRange if any of the coordinates is outside
    latitude [-90, 90] / longitude [-180, 180].
    """
    for coord in coords:
        if not coord.is_valid:
            raise CoordinateOutOfRange(f'Coordinate out of range: {coord!r}')


def are_antipodal(coord1: Coordinate, coord2: Coordinate) -> bool:
    """
    Determine whether two points are diametrically opposite each other on a
    sphere, within a tolerance of 1e-10 degrees.

    Args:
        coord1:
            A coordinate

        coord2:
            A second coordinate

    Returns:
        bool
    """
    lat1, lat2 = coord1.latitude, coord2.latitude

    # Pole to pole; longitude is irrelevant
    if (
        (abs(lat1 - 90.) < ANTIPODAL_EPSILON and abs(lat2 + 90.) < ANTIPODAL_EPSILON) or
        (abs(lat1 + 90.) < ANTIPODAL_EPSILON and abs(lat2 - 90.) < ANTIPODAL_EPSILON)
    ):
        return True

    return (
        abs(lat1 + lat2) < ANTIPODAL_EPSILON and
        abs(abs(coord1.longitude - coord2.longitude) - 180.) < ANTIPODAL_EPSILON
    )
