from geodesics import Coordinate
from geodesics.distance import distance_meters


def test_coordinate_init():
    c = Coordinate(10, -20)
    assert c.to_float() == (10., -20.)

    c = Coordinate('-73.78', '40.64')
    assert c.to_float() == (-73.78, 40.64)


def test_coordinate_longitude_range():
    assert Coordinate(180, 0).longitude == -180.
    assert Coordinate(-180, 0).longitude == -180.
    assert Coordinate(190, 5).to_float() == (-170., 5.)
    assert Coordinate(-190, 5).to_float() == (170., 5.)
    assert Coordinate(725, 5).to_float() == (5., 5.)


def test_coordinate_over_the_pole():
    # Continuing north past the pole heads south on the opposite meridian
    assert Coordinate(30, 100).to_float() == (-150., 80.)
    assert Coordinate(-150, -95).to_float() == (30., -85.)

    # Half and full turns of latitude
    assert Coordinate(30, 180).to_float() == (-150., 0.)
    assert Coordinate(30, 360).to_float() == (30., 0.)
    assert Coordinate(30, 270).to_float() == (30., -90.)

    # The poles themselves are kept
    assert Coordinate(30, 90).to_float() == (30., 90.)
    assert Coordinate(30, -90).to_float() == (30., -90.)


def test_coordinate_wrapping_keeps_the_point():
    wrapped = Coordinate(139.6916, 35.6894 + 360)
    assert distance_meters(wrapped, Coordinate(139.6916, 35.6894)) < 1e-6

    wrapped = Coordinate(49.867623, 180 - 40.4349504)
    assert distance_meters(wrapped, Coordinate(49.867623 - 180, 40.4349504)) < 1e-6


def test_coordinate_unbounded():
    assert Coordinate(500000., 4649776., _bounded=False).to_float() == (500000., 4649776.)


def test_coordinate_eq_and_hash():
    assert Coordinate(0., 0.) == Coordinate(360., 0.)
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != (0., 0.)
    assert len({Coordinate(10., 20.), Coordinate(10., 20.), Coordinate(-350., 20.)}) == 1


def test_coordinate_repr():
    assert repr(Coordinate(-73.78, 40.64)) == '<Coordinate(-73.78, 40.64)>'


def test_coordinate_to_float_reverse():
    assert Coordinate(-73.78, 40.64).to_float(reverse=True) == (40.64, -73.78)
