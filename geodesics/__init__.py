"""Geodesics on an ellipsoid of revolution"""

from geodesics._version import __version__  # noqa: F401
from geodesics.utils.logging import LOGGER
from geodesics._types import GeodesicResult
from geodesics.accumulator import Accumulator
from geodesics.coordinates import Coordinate
from geodesics.geodesic import Geodesic
from geodesics.geodesicline import GeodesicLine
from geodesics.mask import GeodesicMask
from geodesics.polygon import PolygonArea

__all__ = [
    'Accumulator',
    'Coordinate',
    'Geodesic',
    'GeodesicLine',
    'GeodesicMask',
    'GeodesicResult',
    'PolygonArea',
    'LOGGER',
]
