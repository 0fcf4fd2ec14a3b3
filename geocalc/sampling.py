"""
Random positions on the globe, either uniformly distributed over the whole
sphere or constrained to an annulus around a center point
"""

__all__ = ['RandomPositionSampler']

import math
from typing import Iterator, Optional, Union

import numpy as np

from geocalc._const import MAX_EARTH_DISTANCE
from geocalc.calc import destination_point
from geocalc.coordinates import Coordinate, validate_coordinates
from geocalc.distance import haversine_distance
from geocalc.exceptions import InvalidSamplingArguments
from geocalc.utils.mixins import LoggingMixin


class RandomPositionSampler(LoggingMixin):
    """
    Draws random positions from its own random stream. Two samplers created
    with the same seed produce identical positions for identical calls.

    Not safe for concurrent use; give each thread its own sampler.

    Args:
        seed:
            Seed for a new numpy Generator. If omitted, fresh entropy from the OS
            is used.

        rng:
            An existing numpy Generator to draw from instead. Cannot be combined
            with seed.
    """

    def __init__(
        self,
        seed: Union[int, None] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        super().__init__()
        if rng is not None and seed is not None:
            raise ValueError('Provide either a seed or a generator, not both')

        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def _uniform(self) -> float:
        """One draw in [0, 1)"""
        return float(self.rng.random())

    def uniform_position(self) -> Coordinate:
        """
        A position uniformly distributed over the sphere's surface.

        Latitude is the arcsine of a uniform value in [-1, 1), which keeps the
        density proportional to area; drawing latitude directly would cluster
        samples at the poles.
        """
        lat = math.degrees(math.asin(2 * self._uniform() - 1))
        lon = self._uniform() * 360 - 180
        return Coordinate(lat, lon)

    @staticmethod
    def _check_arguments(center: Optional[Coordinate], maxdist: float, mindist: float):
        if maxdist < 0 or mindist < 0:
            raise InvalidSamplingArguments(
                f'Distances must be non-negative (maxdist={maxdist}, mindist={mindist})'
            )

        if center is not None:
            validate_coordinates(center)

    def sample(
        self,
        center: Optional[Coordinate] = None,
        maxdist: float = 0.,
        mindist: float = 0.,
    ) -> Coordinate:
        """
        Draw one random position.

        Without a center, or with both distances zero, the position is uniform
        over the whole sphere. Otherwise it lies between mindist and maxdist
        meters from center. A mindist with maxdist 0 means "at least mindist
        meters away, anywhere". If mindist exceeds maxdist the two are swapped;
        the warning about it is logged once per process, shared by all samplers.

        The distance from center is drawn as mindist + sqrt(U) * (maxdist - mindist).
        This is uniform by area over a flat disk, and only approximately so on
        the sphere for large annuli.

        Args:
            center:
                The center of the annulus

            maxdist:
                Outer radius in meters

            mindist:
                Inner radius in meters

        Returns:
            Coordinate

        Raises:
            CoordinateOutOfRange
            InvalidSamplingArguments: for negative distances
        """
        self._check_arguments(center, maxdist, mindist)

        if center is None or (maxdist == 0 and mindist == 0):
            return self.uniform_position()

        maxdist, mindist = min(maxdist, MAX_EARTH_DISTANCE), min(mindist, MAX_EARTH_DISTANCE)

        if mindist > 0 and maxdist == 0:
            # Farther than mindist from center is closer than
            # MAX_EARTH_DISTANCE - mindist from its antipode
            center = center.antipode()
            mindist, maxdist = 0., MAX_EARTH_DISTANCE - mindist

        if mindist > maxdist:
            self.warn_once('mindist is larger than maxdist; the values have been swapped')
            mindist, maxdist = maxdist, mindist

        return self._annulus_position(center, mindist, maxdist)

    def _annulus_position(self, center: Coordinate, mindist: float, maxdist: float) -> Coordinate:
        """Rejection-samples a position until its true distance lands in the annulus"""
        rejected = 0
        while True:
            bearing = self._uniform() * 360
            dist = mindist + math.sqrt(self._uniform()) * (maxdist - mindist)
            dist = min(dist, MAX_EARTH_DISTANCE)
            candidate = destination_point(center, bearing, dist)

            # Exact equality to the target is practically unreachable in floating
            # point, so a zero-width annulus takes the first candidate
            if mindist == maxdist:
                return candidate

            if mindist <= haversine_distance(center, candidate) <= maxdist:
                if rejected:
                    self.logger.debug('Accepted position after %d rejections', rejected)
                return candidate

            rejected += 1

    def samples(
        self,
        count: int,
        center: Optional[Coordinate] = None,
        maxdist: float = 0.,
        mindist: float = 0.,
    ) -> Iterator[Coordinate]:
        """
        Generate `count` random positions; see sample() for the arguments.

        Arguments are checked when called, before any position is drawn.

        Returns:
            An iterator of Coordinates
        """
        if count < 0:
            raise ValueError(f'count must be non-negative, got {count}')

        self._check_arguments(center, maxdist, mindist)

        return (self.sample(center, maxdist, mindist) for _ in range(count))
