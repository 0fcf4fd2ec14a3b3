from pytest import approx

from geocalc import Coordinate


def assert_coordinates_equal(c1: Coordinate, c2: Coordinate, abs_tol=1e-7):
    """
    Asserts that two coordinates are equal within a specified absolute tolerance.

    Args:
        c1: The first Coordinate
        c2: The second Coordinate
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-7 (approx 1.1cm at the equator).
    """
    try:
        assert c1.latitude == approx(c2.latitude, abs=abs_tol)
        assert c1.longitude == approx(c2.longitude, abs=abs_tol)
    except AssertionError as e:
        print(c1.latitude, c1.longitude)
        print(c2.latitude, c2.longitude)
        raise e
