"""Result records returned by the geodesic solvers"""

__all__ = [
    'GeodesicResult', 'InverseStartResult', 'Lambda12Result', 'LengthsResult',
    'InverseSummary', 'PolygonResult'
]

from dataclasses import asdict, dataclass
import math
from typing import Dict, NamedTuple


@dataclass(frozen=True)
class GeodesicResult:  # pylint: disable=invalid-name,too-many-instance-attributes
    """
    The outcome of an inverse solution or a position along a GeodesicLine.

    Only the fields selected by the output mask of the call are computed; the
    others keep their 0.0 default. The one exception is a12, which is set to
    nan when a distance is given to a line built without DISTANCE_IN.

    Attributes:
        lat2, lon2:
            The second point, in degrees
        azi1, azi2:
            The azimuths at the two points, in degrees clockwise from north
        s12:
            The distance between the points, in meters
        a12:
            The arc length on the auxiliary sphere, in degrees
        m12:
            The reduced length, in meters
        M12, M21:
            The geodesic scales (dimensionless)
        S12:
            The area between the geodesic and the equator, in square meters
    """
    lat2: float = 0.0
    lon2: float = 0.0
    azi1: float = 0.0
    azi2: float = 0.0
    s12: float = 0.0
    a12: float = 0.0
    m12: float = 0.0
    M12: float = 0.0
    M21: float = 0.0
    S12: float = 0.0

    @property
    def available(self) -> bool:
        """False when the query could not be answered (a12 is nan)"""
        return not math.isnan(self.a12)

    def to_dict(self) -> Dict[str, float]:
        """The result as a plain dictionary"""
        return asdict(self)


class LengthsResult(NamedTuple):
    """Distance, reduced length and geodesic scales, scaled to b = 1"""
    s12b: float
    m12b: float
    m0: float
    M12: float
    M21: float


class Lambda12Result(NamedTuple):
    """The longitude difference reached from a trial azimuth at point 1"""
    lam12: float
    salp2: float
    calp2: float
    sig12: float
    ssig1: float
    csig1: float
    ssig2: float
    csig2: float
    eps: float
    domg12: float
    dlam12: float


class InverseStartResult(NamedTuple):
    """
    A starting azimuth for the inverse solver. sig12 is negative unless the
    points are close enough that the solution is already final.
    """
    sig12: float
    salp1: float
    calp1: float
    salp2: float
    calp2: float
    dnm: float


class PolygonResult(NamedTuple):
    """The vertex count, perimeter (meters) and area (square meters) of a polygon"""
    num: int
    perimeter: float
    area: float


class InverseSummary(NamedTuple):
    """Distance (meters) and bearings (degrees) between two coordinates"""
    distance: float
    initial_bearing: float
    final_bearing: float
