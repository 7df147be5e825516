"""
Geodesic calculations between Coordinates.

A thin layer over Geodesic for callers working with (longitude, latitude)
Coordinates. All calculations run on one shared ellipsoid, WGS84 unless
changed with set_ellipsoid.
"""

__all__ = [
    'bearing_degrees', 'destination_point', 'direct', 'distance_meters',
    'inverse', 'set_ellipsoid',
]

from pydantic import validate_call

from geodesics._const import ELLIPSOIDS
from geodesics._types import InverseSummary
from geodesics.coordinates import Coordinate
from geodesics.geodesic import Geodesic
from geodesics.mask import GeodesicMask

# The ellipsoid in use (default WGS84)
_EARTH = Geodesic.WGS84


@validate_call(config=dict(arbitrary_types_allowed=True))
def inverse(
    coord1: Coordinate,
    coord2: Coordinate,
    outmask: int = GeodesicMask.DISTANCE | GeodesicMask.AZIMUTH,
) -> InverseSummary:
    """
    Solve the inverse problem between two coordinates.

    Args:
        coord1:
            The starting Coordinate

        coord2:
            The ending Coordinate

        outmask:
            The GeodesicMask bits of the quantities to compute; anything not
            requested is reported as 0

    Returns:
        InverseSummary of the distance in meters and the azimuths at both
        ends, in degrees [-180, 180)
    """
    res = _EARTH.gen_inverse(
        coord1.latitude, coord1.longitude,
        coord2.latitude, coord2.longitude,
        outmask
    )
    return InverseSummary(res.s12, res.azi1, res.azi2)


@validate_call(config=dict(arbitrary_types_allowed=True))
def direct(
    coord: Coordinate,
    distance: float,
    bearing: float,
    outmask: int = GeodesicMask.LATITUDE | GeodesicMask.LONGITUDE | GeodesicMask.AZIMUTH,
) -> Coordinate:
    """
    Solve the direct problem from a coordinate.

    Args:
        coord:
            The starting Coordinate

        distance:
            The distance to travel, in meters; may be negative

        bearing:
            The starting azimuth, in degrees clockwise from north

        outmask:
            The GeodesicMask bits of the quantities to compute

    Returns:
        The Coordinate reached
    """
    res = _EARTH.direct(coord.latitude, coord.longitude, bearing, distance, outmask)
    return Coordinate(res.lon2, res.lat2)


def distance_meters(coord1: Coordinate, coord2: Coordinate) -> float:
    """The geodesic distance between two coordinates, in meters"""
    return inverse(coord1, coord2, GeodesicMask.DISTANCE).distance


def bearing_degrees(start: Coordinate, end: Coordinate) -> float:
    """The initial bearing from start towards end, in degrees [0, 360)"""
    azi1 = inverse(start, end, GeodesicMask.AZIMUTH).initial_bearing
    return (azi1 + 360) % 360


def destination_point(start: Coordinate, bearing: float, distance: float) -> Coordinate:
    """The coordinate reached by travelling distance meters along bearing"""
    return direct(start, distance, bearing)


def set_ellipsoid(name: str):
    """
    Set the ellipsoid used by this module's calculations.

    Args:
        name:
            One of the keys of geodesics._const.ELLIPSOIDS, e.g. 'WGS-84'
            or 'GRS-80'
    """
    global _EARTH  # pylint: disable=global-statement

    if name not in ELLIPSOIDS:
        raise ValueError(f"Unknown ellipsoid '{name}'. Options: {list(ELLIPSOIDS.keys())}")

    a, f = ELLIPSOIDS[name]
    _EARTH = Geodesic.WGS84 if name == 'WGS-84' else Geodesic(a, f)
