"""
Bit masks selecting the outputs of the geodesic calculations.

An output flag is the bitwise or of a bit in the range 7-14 naming the
quantity and the CAP_* bits naming the internal series it needs. A
GeodesicLine is built with the union of the flags it will be asked for, and
each query passes the flags it wants back.

    Flag            Implies internal series
    LATITUDE        none
    LONGITUDE       C3
    AZIMUTH         none
    DISTANCE        C1
    DISTANCE_IN     C1, C1'
    REDUCEDLENGTH   C1, C2
    GEODESICSCALE   C1, C2
    AREA            C4
"""

__all__ = ['GeodesicMask']


class GeodesicMask:  # pylint: disable=too-few-public-methods
    """Named capability and output bits for Geodesic and GeodesicLine"""

    CAP_NONE = 0
    CAP_C1 = 1 << 0
    CAP_C1p = 1 << 1
    CAP_C2 = 1 << 2
    CAP_C3 = 1 << 3
    CAP_C4 = 1 << 4
    CAP_ALL = 0x1F
    OUT_ALL = 0x7F80

    NONE = 0
    LATITUDE = 1 << 7 | CAP_NONE
    LONGITUDE = 1 << 8 | CAP_C3
    AZIMUTH = 1 << 9 | CAP_NONE
    DISTANCE = 1 << 10 | CAP_C1
    DISTANCE_IN = 1 << 11 | CAP_C1 | CAP_C1p
    REDUCEDLENGTH = 1 << 12 | CAP_C1 | CAP_C2
    GEODESICSCALE = 1 << 13 | CAP_C1 | CAP_C2
    AREA = 1 << 14 | CAP_C4
    ALL = OUT_ALL | CAP_ALL

    # The outputs of a plain direct or inverse solution
    STANDARD = LATITUDE | LONGITUDE | AZIMUTH | DISTANCE
