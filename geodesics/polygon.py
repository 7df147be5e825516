"""
Perimeter and area of polygons whose edges are geodesics.

The area of each edge is the area between the geodesic and the equator
(S12 from the inverse solution); the polygon's area is their sum, corrected by
half the area of the ellipsoid for each polygon encircling a pole. The edge
areas are large and nearly cancel, so they are summed in an Accumulator.
"""

__all__ = ['PolygonArea']

import math

from pydantic import validate_call

from geodesics._types import PolygonResult
from geodesics.accumulator import Accumulator
from geodesics.geodesic import Geodesic
from geodesics.geomath import ang_diff, ang_normalize2
from geodesics.mask import GeodesicMask


def transit(lon1: float, lon2: float) -> int:
    """
    Count the crossings of the prime meridian when going from lon1 to lon2
    the short way round.

    Returns:
        1 for an eastward crossing, -1 for a westward crossing, else 0
    """
    lon1 = ang_normalize2(lon1)
    lon2 = ang_normalize2(lon2)
    lon12 = ang_diff(lon1, lon2)
    if lon1 <= 0 < lon2 and lon12 > 0:
        return 1
    if lon2 <= 0 < lon1 and lon12 < 0:
        return -1
    return 0


class PolygonArea:
    """
    Accumulates the vertices of a polygon (or polyline) and reports its
    perimeter and area.

    The polygon is closed implicitly: the edge from the last vertex back to
    the first is included in the results but never stored. Polygons must be
    simple for the area to be meaningful, but may encircle a pole.

    Args:
        earth:
            The Geodesic the polygon lies on

        polyline:
            If True, only the length of the open line is accumulated and
            the area is reported as nan
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, earth: Geodesic, polyline: bool = False):
        self.earth = earth
        self.polyline = polyline
        self.area0 = 4 * math.pi * earth.c2
        self._mask = (
            GeodesicMask.LATITUDE | GeodesicMask.LONGITUDE | GeodesicMask.DISTANCE |
            (GeodesicMask.NONE if polyline else GeodesicMask.AREA)
        )
        self._perimetersum = Accumulator()
        self._areasum = None if polyline else Accumulator()
        self.num = 0
        self._crossings = 0
        self._lat0 = self._lon0 = self._lat1 = self._lon1 = math.nan

    def __repr__(self):
        kind = 'polyline' if self.polyline else 'polygon'
        return f'<PolygonArea {kind} with {self.num} vertices>'

    def clear(self):
        """Forget all vertices"""
        self.num = 0
        self._crossings = 0
        self._perimetersum.set(0)
        if not self.polyline:
            self._areasum.set(0)
        self._lat0 = self._lon0 = self._lat1 = self._lon1 = math.nan

    def add_point(self, lat: float, lon: float):
        """
        Add a vertex.

        Args:
            lat:
                The vertex latitude, in degrees [-90, 90]

            lon:
                The vertex longitude, in degrees
        """
        if self.num == 0:
            self._lat0 = self._lat1 = lat
            self._lon0 = self._lon1 = lon
        else:
            res = self.earth.gen_inverse(self._lat1, self._lon1, lat, lon, self._mask)
            self._perimetersum.add(res.s12)
            if not self.polyline:
                self._areasum.add(res.S12)
                self._crossings += transit(self._lon1, lon)
            self._lat1 = lat
            self._lon1 = lon
        self.num += 1

    def add_edge(self, azi: float, s: float):
        """
        Add a vertex by travelling from the last one. Ignored when there are
        no vertices yet.

        Args:
            azi:
                The azimuth at the current last vertex, in degrees

            s:
                The length of the edge, in meters
        """
        if self.num == 0:
            return

        res = self.earth.direct(self._lat1, self._lon1, azi, s, self._mask)
        self._perimetersum.add(s)
        if not self.polyline:
            self._areasum.add(res.S12)
            self._crossings += transit(self._lon1, res.lon2)
        self._lat1 = res.lat2
        self._lon1 = res.lon2
        self.num += 1

    def compute(self, reverse: bool = False, sign: bool = True) -> PolygonResult:
        """
        The perimeter and area of the polygon, closed back to its first
        vertex. The accumulated state is left unchanged.

        Args:
            reverse:
                Count clockwise traversal as positive area instead of
                counter-clockwise

            sign:
                Report the area signed, in (-area0/2, area0/2]; otherwise
                report it in [0, area0). area0 is the area of the whole
                ellipsoid.

        Returns:
            PolygonResult(num, perimeter, area)
        """
        if self.num < 2:
            return PolygonResult(
                self.num, 0.0, math.nan if self.polyline else 0.0
            )

        if self.polyline:
            return PolygonResult(self.num, self._perimetersum.sum(), math.nan)

        res = self.earth.gen_inverse(
            self._lat1, self._lon1, self._lat0, self._lon0, self._mask
        )
        perimeter = self._perimetersum.sum(res.s12)
        tempsum = Accumulator(self._areasum)
        tempsum.add(res.S12)
        crossings = self._crossings + transit(self._lon1, self._lon0)

        # An odd number of crossings means the polygon encircles a pole
        if crossings & 1:
            tempsum.add((1 if tempsum.sum() < 0 else -1) * self.area0 / 2)

        # Edge areas are counted positive clockwise
        if not reverse:
            tempsum.negate()

        if sign:
            if tempsum.sum() > self.area0 / 2:
                tempsum.add(-self.area0)
            elif tempsum.sum() <= -self.area0 / 2:
                tempsum.add(self.area0)
        else:
            if tempsum.sum() >= self.area0:
                tempsum.add(-self.area0)
            elif tempsum.sum() < 0:
                tempsum.add(self.area0)

        return PolygonResult(self.num, perimeter, 0 + tempsum.sum())
