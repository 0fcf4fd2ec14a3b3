# geocalc/distance.py
"""
Inverse geodesic solvers and formula dispatch.
Supports switching between Haversine (sphere) and Vincenty (WGS84 ellipsoid) calculations.
"""

__all__ = [
    'DistanceFormula',
    'haversine_bearing', 'haversine_distance',
    'vincenty_bearing', 'vincenty_distance',
    'bearing', 'distance', 'set_distance_formula',
]

from enum import Enum
import math
from typing import NamedTuple, Optional, Union

from geocalc._const import (
    EARTH_RADIUS_METERS, EQUATORIAL_EPSILON, MAX_EARTH_DISTANCE, VINCENTY_MAX_ITER,
    VINCENTY_TOLERANCE, WGS84_A, WGS84_B, WGS84_F,
)
from geocalc.coordinates import (
    Coordinate, are_antipodal, normalize_longitude, validate_coordinates
)
from geocalc.exceptions import BearingUndefined, NonConvergence
from geocalc.utils.logging import LOGGER


class DistanceFormula(str, Enum):
    """Selects which distance/bearing solver pair is used"""
    SPHERICAL = 'spherical'
    ELLIPSOIDAL = 'ellipsoidal'


# -------------------------------------------------------------------------
# Haversine Implementation (Spherical)
# -------------------------------------------------------------------------

def haversine_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate distance in meters using the Haversine formula (spherical earth).

    Antipodal points always return MAX_EARTH_DISTANCE, half the circumference
    of the sphere, since rounding makes the formula indeterminate there.

    Raises:
        CoordinateOutOfRange
    """
    validate_coordinates(coord1, coord2)
    if are_antipodal(coord1, coord2):
        return MAX_EARTH_DISTANCE

    lat1, lat2 = math.radians(coord1.latitude), math.radians(coord2.latitude)
    dlat = math.radians(coord2.latitude - coord1.latitude)
    dlon = math.radians(coord2.longitude - coord1.longitude)

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    dist = EARTH_RADIUS_METERS * c
    if math.isnan(dist):
        return MAX_EARTH_DISTANCE

    return dist


def haversine_bearing(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate initial bearing using spherical trigonometry.

    Args:
        start: The starting Coordinate
        end: The ending Coordinate

    Returns:
        float: Bearing in degrees [0, 360)

    Raises:
        CoordinateOutOfRange
        BearingUndefined: if the points are antipodal
    """
    validate_coordinates(start, end)
    if are_antipodal(start, end):
        raise BearingUndefined('Bearing is undefined between antipodal points')

    lat1, lat2 = math.radians(start.latitude), math.radians(end.latitude)
    dlon = math.radians(end.longitude - start.longitude)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

    initial_bearing = math.atan2(y, x)
    return (math.degrees(initial_bearing) + 360) % 360


# -------------------------------------------------------------------------
# Vincenty Implementation (Ellipsoidal)
# -------------------------------------------------------------------------

def _is_same_point(coord1: Coordinate, coord2: Coordinate) -> bool:
    """
    True if both coordinates name the same place, including a longitude written
    as 180 on one side and -180 on the other, or any longitude on a shared pole
    """
    if coord1.latitude != coord2.latitude:
        return False

    return (
        abs(coord1.latitude) == 90. or
        normalize_longitude(coord2.longitude - coord1.longitude) == 0.
    )


class _InverseSolution(NamedTuple):
    """State of a converged inverse iteration"""
    Lambda: float
    sigma: float
    sinSigma: float
    cosSigma: float
    cos2SigmaM: float
    cosSqAlpha: float
    sinU1: float
    cosU1: float
    sinU2: float
    cosU2: float


def _vincenty_inverse(coord1: Coordinate, coord2: Coordinate) -> Optional[_InverseSolution]:
    """
    Iterate the auxiliary longitude difference (Lambda) of Vincenty's inverse
    formula until it moves less than 1e-12 radians.

    Returns:
        The converged state, or None if the points are coincident

    Raises:
        NonConvergence: if 100 iterations pass without convergence
    """
    lon1, lat1 = math.radians(coord1.longitude), math.radians(coord1.latitude)
    lon2, lat2 = math.radians(coord2.longitude), math.radians(coord2.latitude)

    U1 = math.atan((1 - WGS84_F) * math.tan(lat1))
    U2 = math.atan((1 - WGS84_F) * math.tan(lat2))
    L = lon2 - lon1
    Lambda = L

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    for iteration in range(1, VINCENTY_MAX_ITER + 1):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            return None  # Coincident points

        # eq. 15
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda

        # eq. 16
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18; equatorial line when cosSqAlpha is zero
        if cosSqAlpha == 0:
            cos2SigmaM = 0.
        else:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha

        # eq. 10
        C = WGS84_F / 16 * cosSqAlpha * (4 + WGS84_F * (4 - 3 * cosSqAlpha))

        Lambda_prev = Lambda

        # eq. 11
        Lambda = L + (1 - C) * WGS84_F * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) < VINCENTY_TOLERANCE:
            LOGGER.debug('Vincenty inverse converged after %d iterations', iteration)
            return _InverseSolution(
                Lambda, sigma, sinSigma, cosSigma, cos2SigmaM, cosSqAlpha,
                sinU1, cosU1, sinU2, cosU2
            )

    # Usually (near-)antipodal points
    LOGGER.debug(
        'Vincenty inverse did not converge within %d iterations: %r -> %r',
        VINCENTY_MAX_ITER, coord1, coord2
    )
    raise NonConvergence()


def vincenty_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate distance in meters using Vincenty's inverse formula (WGS84 ellipsoid).

    Raises:
        CoordinateOutOfRange
        NonConvergence: if the iteration fails to converge, which happens for
            nearly antipodal points
    """
    validate_coordinates(coord1, coord2)
    if _is_same_point(coord1, coord2):
        return 0.0

    solution = _vincenty_inverse(coord1, coord2)
    if solution is None:
        return 0.0

    sigma, sinSigma, cosSigma = solution.sigma, solution.sinSigma, solution.cosSigma
    cos2SigmaM = solution.cos2SigmaM

    uSq = solution.cosSqAlpha * (WGS84_A ** 2 - WGS84_B ** 2) / (WGS84_B ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
    )
    )

    return WGS84_B * A * (sigma - deltaSigma)


def vincenty_bearing(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the initial bearing (forward azimuth) using Vincenty's inverse formula.

    Points that both lie on the equator are resolved directly to due east or
    due west, where the iteration is numerically unstable.

    Args:
        start: The starting Coordinate
        end: The ending Coordinate

    Returns:
        float: Bearing in degrees [0, 360)

    Raises:
        CoordinateOutOfRange
        BearingUndefined: for coincident, antipodal or pole-sharing points,
            and when the iteration does not converge
    """
    validate_coordinates(start, end)
    for pole in (90., -90.):
        if start.latitude == pole and end.latitude == pole:
            raise BearingUndefined('Bearing is undefined between points on the same pole')

    if _is_same_point(start, end):
        raise BearingUndefined('Bearing is undefined between coincident points')

    if are_antipodal(start, end):
        raise BearingUndefined('Bearing is undefined between antipodal points')

    if abs(start.latitude) < EQUATORIAL_EPSILON and abs(end.latitude) < EQUATORIAL_EPSILON:
        dlon = normalize_longitude(end.longitude - start.longitude)
        if dlon == 0:
            raise BearingUndefined('Bearing is undefined between coincident points')
        return 90. if dlon > 0 else 270.

    try:
        solution = _vincenty_inverse(start, end)
    except NonConvergence as e:
        raise BearingUndefined('Bearing is undefined; formula did not converge') from e

    if solution is None:
        raise BearingUndefined('Bearing is undefined between coincident points')

    # Once Lambda has converged, calculate the forward azimuth (alpha1)
    # eq. 20
    numerator = solution.cosU2 * math.sin(solution.Lambda)
    denominator = (
        solution.cosU1 * solution.sinU2 -
        solution.sinU1 * solution.cosU2 * math.cos(solution.Lambda)
    )

    alpha1 = math.atan2(numerator, denominator)

    return (math.degrees(alpha1) + 360) % 360


# -------------------------------------------------------------------------
# Dynamic Dispatch & Configuration
# -------------------------------------------------------------------------

_FORMULAS = {
    DistanceFormula.SPHERICAL: (
        haversine_distance,
        haversine_bearing,
    ),
    DistanceFormula.ELLIPSOIDAL: (
        vincenty_distance,
        vincenty_bearing,
    ),
}

# The formula in use when none is specified (default spherical)
_DEFAULT_FORMULA = DistanceFormula.SPHERICAL


def _resolve_formula(formula: Union[DistanceFormula, str, None]) -> DistanceFormula:
    if formula is None:
        return _DEFAULT_FORMULA

    try:
        return DistanceFormula(formula)
    except ValueError as e:
        raise ValueError(
            f"Unknown formula '{formula}'. Options: {[x.value for x in DistanceFormula]}"
        ) from e


def set_distance_formula(formula: Union[DistanceFormula, str]):
    """
    Set the default formula used by distance() and bearing().

    Args:
        formula: DistanceFormula.SPHERICAL or DistanceFormula.ELLIPSOIDAL,
            or their string values 'spherical' / 'ellipsoidal'
    """
    global _DEFAULT_FORMULA

    _DEFAULT_FORMULA = _resolve_formula(formula)


def distance(
        coord1: Coordinate,
        coord2: Coordinate,
        formula: Union[DistanceFormula, str, None] = None,
) -> float:
    """Distance in meters between two coordinates using the selected formula"""
    return _FORMULAS[_resolve_formula(formula)][0](coord1, coord2)


def bearing(
        start: Coordinate,
        end: Coordinate,
        formula: Union[DistanceFormula, str, None] = None,
) -> float:
    """Initial bearing in degrees [0, 360) using the selected formula"""
    return _FORMULAS[_resolve_formula(formula)][1](start, end)
