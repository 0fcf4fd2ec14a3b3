"""
Constants declarations for geocalc
"""

import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A

# Mean Earth Radius (approximate for Haversine)
EARTH_RADIUS_METERS = 6_371_000.0

# Half the circumference of the haversine sphere
MAX_EARTH_DISTANCE = math.pi * EARTH_RADIUS_METERS

# Tolerances, in degrees
ANTIPODAL_EPSILON = 1e-10  # ~1.1 mm at the surface
EQUATORIAL_EPSILON = 1e-13

# Ellipsoidal iteration
VINCENTY_TOLERANCE = 1e-12  # radians
VINCENTY_MAX_ITER = 100

# Latitudes exactly at a pole are scaled by this before the direct solve
POLE_NUDGE = 1 - 1e-9
