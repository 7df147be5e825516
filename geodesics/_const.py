"""
Constants declarations for geodesics
"""
import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

#             model             major (m)      flattening
ELLIPSOIDS = {'WGS-84':        (6378137.0,    1 / 298.257223563),
              'GRS-80':        (6378137.0,    1 / 298.257222101),
              'Airy (1830)':   (6377563.396,  1 / 299.3249646),
              'Intl 1924':     (6378388.0,    1 / 297.0),
              'Clarke (1880)': (6378249.145,  1 / 293.465),
              'GRS-67':        (6378160.0,    1 / 298.25),
              }

# IEEE double precision
DIGITS = 53
EPSILON = 0.5 ** (DIGITS - 1)
MIN = 0.5 ** 1022

# Order of the series expansions in the flattening. The coefficient tables in
# geodesics.series are written out for this order.
GEODESIC_ORDER = 6
NC1 = GEODESIC_ORDER
NC1P = GEODESIC_ORDER
NC2 = GEODESIC_ORDER
NA3 = GEODESIC_ORDER
NA3X = NA3
NC3 = GEODESIC_ORDER
NC3X = (NC3 * (NC3 - 1)) // 2
NC4 = GEODESIC_ORDER
NC4X = (NC4 * (NC4 + 1)) // 2

# Inverse solver iteration budget and tolerances
MAXIT1 = 20
MAXIT2 = MAXIT1 + DIGITS + 10
TINY = math.sqrt(MIN)
TOL0 = EPSILON
TOL1 = 200 * TOL0
TOL2 = math.sqrt(TOL0)
TOLB = TOL0 * TOL2
XTHRESH = 1000 * TOL2

# Beyond this the series expansions lose their accuracy guarantees
MAX_VALIDATED_FLATTENING = 0.2
