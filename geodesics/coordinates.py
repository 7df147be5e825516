"""
A point on the ellipsoid given as longitude and latitude, the order used by
the distance helpers
"""

__all__ = ['Coordinate']

import math
from typing import Tuple, Union

from geodesics.geomath import ang_normalize, ang_normalize2


class Coordinate:
    """
    A (longitude, latitude) pair in degrees.

    Bounded coordinates are brought into latitude [-90, 90] and longitude
    [-180, 180), so that every point on the ellipsoid has one representation.
    A latitude past a pole continues down the opposite meridian, i.e.
    (lon, 90 + d) is the point (lon + 180, 90 - d).

    Args:
        longitude:
            Degrees east; anything float() accepts

        latitude:
            Degrees north; anything float() accepts

        _bounded:
            (Default True) Whether to bring the values into range. Unbounded
            coordinates are kept as given, e.g. for projected values.
    """

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
        _bounded: bool = True,
    ):
        lon, lat = float(longitude), float(latitude)
        if _bounded:
            lat = ang_normalize(math.fmod(lat, 360))
            if abs(lat) > 90:
                lat = math.copysign(180, lat) - lat
                lon += 180
            lon = ang_normalize2(lon)

        self.longitude = lon
        self.latitude = lat

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return self.to_float() == other.to_float()

    def __hash__(self):
        return hash(self.to_float())

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude})>'

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        The coordinate as floats, (longitude, latitude), or (latitude,
        longitude) when reverse is set, which is the order Geodesic takes.
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude
