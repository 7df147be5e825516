import math

from pytest import approx

from geodesics import Geodesic, GeodesicLine, GeodesicMask

WGS84 = Geodesic.WGS84


def test_line_init():
    line = GeodesicLine(WGS84, 40.6, -73.8, 51.198882845579)
    assert line.lat1 == 40.6
    assert line.lon1 == -73.8
    assert line.azi1 == 51.198882845579
    assert line.caps == GeodesicMask.ALL

    # Angles are reduced to [-180, 180)
    line = GeodesicLine(WGS84, 0, 540, 370)
    assert line.lon1 == -180.
    assert line.azi1 == 10.

    line = GeodesicLine(WGS84, 0, 0, 180)
    assert line.azi1 == -180.
    assert line.salp1 == 0.
    assert line.calp1 == -1.

    line = GeodesicLine(WGS84, 0, 0, 90)
    assert line.calp1 == 0.


def test_line_caps():
    # 0 means everything
    assert GeodesicLine(WGS84, 0, 0, 0, 0).caps == GeodesicMask.ALL

    # Latitude and azimuth are always available
    line = GeodesicLine(WGS84, 0, 0, 0, GeodesicMask.DISTANCE)
    assert line.caps == GeodesicMask.DISTANCE | GeodesicMask.LATITUDE | GeodesicMask.AZIMUTH
    assert hasattr(line, 'C1a')
    assert not hasattr(line, 'C1pa')
    assert not hasattr(line, 'C3a')
    assert not hasattr(line, 'C4a')


def test_line_repr():
    line = WGS84.line(40.6, -73.8, 51.198882845579)
    assert repr(line) == '<GeodesicLine from (40.6, -73.8) azimuth 51.198882845579>'


def test_line_position():
    line = WGS84.line(40.6, -73.8, 51.198882845579)

    res = line.position(5551759.400319, GeodesicMask.ALL)
    assert res.lat2 == approx(51.6, abs=1e-10)
    assert res.lon2 == approx(-0.5, abs=1e-10)
    assert res.azi1 == 51.198882845579
    assert res.azi2 == approx(107.82177673551743, abs=1e-10)
    assert res.s12 == 5551759.400319
    assert res.a12 == approx(49.94131021790192, abs=1e-10)
    assert res.m12 == approx(4877684.602706404, abs=1e-5)
    assert res.M12 == approx(0.644729692059444, abs=1e-10)
    assert res.M21 == approx(0.6450456785213056, abs=1e-10)
    assert res.S12 == approx(40041368848745.37, rel=1e-9)

    # Backwards along the line
    res = line.position(-2e6, GeodesicMask.ALL)
    assert res.lat2 == approx(28.140893715829755, abs=1e-10)
    assert res.lon2 == approx(-89.60781093575747, abs=1e-10)
    assert res.azi2 == approx(42.182643259171975, abs=1e-10)
    assert res.a12 == approx(-18.007249537541956, abs=1e-10)
    assert res.m12 == approx(-1967307.5130160458, abs=1e-5)
    assert res.S12 == approx(-6368251252550.062, rel=1e-9)

    # Past the antipodal point
    res = line.position(3e7, GeodesicMask.ALL)
    assert res.lat2 == approx(-28.500020304172327, abs=1e-9)
    assert res.lon2 == approx(-136.72499380363462, abs=1e-9)
    assert res.azi2 == approx(42.357648915704715, abs=1e-9)
    assert res.a12 == approx(270.04652975746393, abs=1e-9)
    assert res.M12 == approx(-0.006910381729786448, abs=1e-10)


def test_line_arc_position():
    line = WGS84.line(40.6, -73.8, 51.198882845579)
    res = line.arc_position(50, GeodesicMask.ALL)
    assert res.a12 == 50.
    assert res.s12 == approx(5558284.235985724, abs=1e-6)
    assert res.lat2 == approx(51.582017012728194, abs=1e-10)
    assert res.lon2 == approx(-0.4103850744178885, abs=1e-10)
    assert res.azi2 == approx(107.89199863647828, abs=1e-10)
    assert res.m12 == approx(4881890.870584156, abs=1e-5)
    assert res.S12 == approx(40091029615606.43, rel=1e-9)

    # Whole multiples of 90 degrees are exact
    res = WGS84.line(0, 0, 0).arc_position(180)
    assert res.lat2 == 0.
    assert abs(res.azi2) == 180.


def test_line_arc_and_distance_agree():
    line = WGS84.line(-20, 10, 60)
    by_arc = line.arc_position(81.36)
    by_distance = line.position(by_arc.s12)
    assert by_distance.a12 == approx(81.36, abs=1e-10)
    assert by_distance.lat2 == approx(by_arc.lat2, abs=1e-10)
    assert by_distance.lon2 == approx(by_arc.lon2, abs=1e-10)


def test_line_matches_inverse():
    inv = WGS84.inverse(-41.32, 174.81, 40.96, -5.50)
    line = WGS84.line(-41.32, 174.81, inv.azi1)
    res = line.position(inv.s12)
    assert res.lat2 == approx(40.96, abs=1e-8)
    assert res.lon2 == approx(-5.50, abs=1e-8)
    assert res.azi2 == approx(inv.azi2, abs=1e-8)


def test_line_unavailable_distance():
    line = GeodesicLine(WGS84, 10, 20, 30, GeodesicMask.LATITUDE)
    res = line.position(1000, GeodesicMask.ALL)
    assert math.isnan(res.a12)
    assert not res.available
    assert res.lat2 == 0.
    assert res.lon2 == 0.
    assert res.s12 == 0.

    # Arc lengths need no distance series
    res = line.arc_position(1, GeodesicMask.ALL)
    assert res.available
    assert res.lat2 != 0.
    assert res.lon2 == 0.
    assert res.s12 == 0.


def test_line_unbuilt_outputs_are_zero():
    line = GeodesicLine(WGS84, 40.64, -73.78, 45, GeodesicMask.DISTANCE_IN | GeodesicMask.LONGITUDE)
    res = line.position(1e6, GeodesicMask.ALL)
    assert res.lat2 == approx(46.655636678549634, abs=1e-10)
    assert res.lon2 == approx(-64.53973721897452, abs=1e-10)
    assert res.m12 == 0.
    assert res.M12 == 0.
    assert res.S12 == 0.
