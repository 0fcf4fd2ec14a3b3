import re

import numpy as np
import pytest
from pytest import approx

from geocalc import Coordinate, MAX_EARTH_DISTANCE
from geocalc.distance import haversine_distance
from geocalc.exceptions import CoordinateOutOfRange, InvalidSamplingArguments
from geocalc.sampling import RandomPositionSampler
from geocalc.utils.mixins import LoggingMixin

from tests.functions import assert_coordinates_equal


def test_sampler_init():
    sampler = RandomPositionSampler(seed=1)
    assert isinstance(sampler.rng, np.random.Generator)

    rng = np.random.default_rng(1)
    assert RandomPositionSampler(rng=rng).rng is rng

    with pytest.raises(ValueError):
        RandomPositionSampler(seed=1, rng=rng)


def test_sampler_reproducible():
    center = Coordinate(59.91, 10.75)
    s1, s2 = RandomPositionSampler(seed=42), RandomPositionSampler(seed=42)

    for _ in range(20):
        assert s1.sample() == s2.sample()
        assert s1.sample(center, 10_000., 1_000.) == s2.sample(center, 10_000., 1_000.)
        assert s1.sample(center, 0., 5_000_000.) == s2.sample(center, 0., 5_000_000.)

    # An injected generator draws the same stream as the seed
    s3 = RandomPositionSampler(rng=np.random.default_rng(7))
    s4 = RandomPositionSampler(seed=7)
    assert list(s3.samples(10, center, 2_000.)) == list(s4.samples(10, center, 2_000.))

    # Different seeds diverge
    assert RandomPositionSampler(seed=1).sample() != RandomPositionSampler(seed=2).sample()


def test_uniform_position_distribution():
    sampler = RandomPositionSampler(seed=2024)
    positions = [sampler.sample() for _ in range(100_000)]
    lats = np.array([x.latitude for x in positions])
    lons = np.array([x.longitude for x in positions])

    assert np.all(np.abs(lats) <= 90.)
    assert np.all((lons >= -180.) & (lons < 180.))

    # Uniform on the sphere means sin(latitude) is uniform on [-1, 1]
    counts, _ = np.histogram(np.sin(np.radians(lats)), bins=10, range=(-1., 1.))
    assert np.all(np.abs(counts - 10_000) < 500)

    # Area above 60 degrees in either hemisphere is 1 - sin(60)
    polar_fraction = np.mean(np.abs(lats) > 60.)
    assert polar_fraction == approx(1 - np.sin(np.radians(60.)), abs=0.005)

    counts, _ = np.histogram(lons, bins=10, range=(-180., 180.))
    assert np.all(np.abs(counts - 10_000) < 500)


def test_uniform_position_when_distances_zero():
    center = Coordinate(10., 10.)
    s1, s2 = RandomPositionSampler(seed=5), RandomPositionSampler(seed=5)
    assert s1.sample(center, 0., 0.) == s2.sample()
    assert s1.sample(None, 1000., 10.) == s2.sample()


def test_annulus_sample():
    center = Coordinate(60.39, 5.32)
    sampler = RandomPositionSampler(seed=3)
    for point in sampler.samples(500, center, 5_000., 1_000.):
        assert 1_000. <= haversine_distance(center, point) <= 5_000.

    # Only a maximum
    for point in sampler.samples(500, center, 250.):
        assert haversine_distance(center, point) <= 250.


def test_annulus_sample_min_only():
    center = Coordinate(-33.92, 18.42)
    sampler = RandomPositionSampler(seed=11)
    for point in sampler.samples(500, center, 0., 15_000_000.):
        assert haversine_distance(center, point) >= 15_000_000. - 1e-3

    # Further than the whole globe allows collapses onto the antipode
    point = sampler.sample(center, 0., MAX_EARTH_DISTANCE)
    assert_coordinates_equal(point, center.antipode(), abs_tol=1e-6)


@pytest.mark.parametrize(
    'dist', [1., 1_000., 123_456., 5_000_000., 10_000_000., 19_999_999., MAX_EARTH_DISTANCE]
)
def test_annulus_sample_fixed_distance(dist):
    sampler = RandomPositionSampler(seed=99)
    for center in (Coordinate(0., 0.), Coordinate(45., 9.), Coordinate(-60.5, -120.25)):
        for point in sampler.samples(50, center, dist, dist):
            assert round(haversine_distance(center, point)) == round(dist)


def test_annulus_sample_swapped(caplog):
    # The once-only warning registry is shared by every sampler in the process
    LoggingMixin.WARNED_ONCE.discard('mindist is larger than maxdist; the values have been swapped')

    center = Coordinate(1., 2.)
    s1, s2 = RandomPositionSampler(seed=8), RandomPositionSampler(seed=8)

    assert s1.sample(center, 1_000., 3_000.) == s2.sample(center, 3_000., 1_000.)
    assert len(re.findall('swapped', caplog.text)) == 1

    for point in s1.samples(100, center, 1_000., 3_000.):
        assert 1_000. <= haversine_distance(center, point) <= 3_000.


def test_sample_errors():
    sampler = RandomPositionSampler(seed=0)

    with pytest.raises(InvalidSamplingArguments):
        sampler.sample(Coordinate(0., 0.), -1., 0.)

    with pytest.raises(InvalidSamplingArguments):
        sampler.sample(Coordinate(0., 0.), 10., -1.)

    with pytest.raises(CoordinateOutOfRange):
        sampler.sample(Coordinate(0., 190.), 10., 1.)

    # Validated even when the position would be drawn from the whole sphere
    with pytest.raises(CoordinateOutOfRange):
        sampler.sample(Coordinate(0., 190.))

    with pytest.raises(CoordinateOutOfRange):
        sampler.sample(Coordinate(95., 0.), 0., 0.)

    # Checked on the call, before iterating
    with pytest.raises(ValueError):
        sampler.samples(-1)

    with pytest.raises(InvalidSamplingArguments):
        sampler.samples(3, Coordinate(0., 0.), -5.)

    with pytest.raises(CoordinateOutOfRange):
        sampler.samples(3, Coordinate(-91., 0.), 100.)
