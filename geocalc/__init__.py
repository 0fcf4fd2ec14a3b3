from geocalc._version import __version__  # noqa: F401
from geocalc.utils.logging import LOGGER
from geocalc._const import MAX_EARTH_DISTANCE
from geocalc.coordinates import Coordinate, are_antipodal, normalize_longitude
from geocalc.distance import (
    DistanceFormula, bearing, distance, haversine_bearing, haversine_distance,
    set_distance_formula, vincenty_bearing, vincenty_distance
)
from geocalc.calc import course, destination_point, route_point
from geocalc.sampling import RandomPositionSampler
from geocalc.exceptions import (
    BearingOutOfRange, BearingUndefined, CoordinateOutOfRange, GeocalcError,
    InvalidSamplingArguments, NonConvergence
)

__all__ = [
    'BearingOutOfRange',
    'BearingUndefined',
    'Coordinate',
    'CoordinateOutOfRange',
    'DistanceFormula',
    'GeocalcError',
    'InvalidSamplingArguments',
    'LOGGER',
    'MAX_EARTH_DISTANCE',
    'NonConvergence',
    'RandomPositionSampler',
    'are_antipodal',
    'bearing',
    'course',
    'destination_point',
    'distance',
    'haversine_bearing',
    'haversine_distance',
    'normalize_longitude',
    'route_point',
    'set_distance_formula',
    'vincenty_bearing',
    'vincenty_distance',
]
