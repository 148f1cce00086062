from pytest import approx

from geoplanar import GeoPoint, PlanarPoint


def assert_geopoints_equal(p1: GeoPoint, p2: GeoPoint, abs_tol=1e-6):
    """
    Asserts that two geographic points are equal within a specified absolute tolerance.

    Args:
        p1: The first GeoPoint
        p2: The second GeoPoint
        abs_tol: The absolute tolerance, in degrees.
                 Default is 1e-6 (approx 11cm at the equator).
    """
    try:
        assert p1.latitude == approx(p2.latitude, abs=abs_tol)
        assert p1.longitude == approx(p2.longitude, abs=abs_tol)
    except AssertionError as e:
        print(p1.latitude, p1.longitude)
        print(p2.latitude, p2.longitude)
        raise e


def assert_planarpoints_equal(p1: PlanarPoint, p2: PlanarPoint, abs_tol=1e-6):
    """Same as assert_geopoints_equal, with a tolerance in meters"""
    try:
        assert p1.x == approx(p2.x, abs=abs_tol)
        assert p1.y == approx(p2.y, abs=abs_tol)
    except AssertionError as e:
        print(p1.x, p1.y)
        print(p2.x, p2.y)
        raise e
