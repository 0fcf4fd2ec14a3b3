

def test_compile():
    import geocalc
    import geocalc.calc
    import geocalc.coordinates
    import geocalc.distance
    import geocalc.exceptions
    import geocalc.sampling

    assert geocalc.MAX_EARTH_DISTANCE == geocalc.distance.MAX_EARTH_DISTANCE


def test_exceptions():
    from geocalc.exceptions import (
        BearingOutOfRange, BearingUndefined, CoordinateOutOfRange, GeocalcError,
        InvalidSamplingArguments, NonConvergence
    )

    for exc in (
        BearingOutOfRange, BearingUndefined, CoordinateOutOfRange,
        InvalidSamplingArguments, NonConvergence
    ):
        assert issubclass(exc, GeocalcError)

    assert issubclass(NonConvergence, ArithmeticError)
    assert not issubclass(BearingUndefined, ValueError)
    assert str(NonConvergence()) == 'Formula did not converge'
