"""
Series expansions of the geodesic integrals.

The distance, reduced length, longitude and area integrals are expanded as
Fourier series in the arc length on the auxiliary sphere, whose coefficients
are polynomials in eps, the reduced flattening of the particular geodesic.
The coefficients of the distance (C1, C1'), reduced length (C2) series are
closed form in eps. Those of the longitude (A3, C3) and area (C4) series also
depend on the third flattening n; tables of their n-dependence are built once
per ellipsoid and evaluated at eps per query.

All expansions are carried to GEODESIC_ORDER = 6.

References:
    C. F. F. Karney, Algorithms for geodesics, J. Geodesy 87, 43-55 (2013);
    https://doi.org/10.1007/s00190-012-0578-z
"""

__all__ = [
    'a1m1f', 'a2m1f', 'a3_coeff', 'a3f', 'c1f', 'c1pf', 'c2f', 'c3_coeff',
    'c3f', 'c4_coeff', 'c4f', 'sin_cos_series'
]

from typing import List, Sequence

from geodesics._const import NA3X, NC1, NC1P, NC2, NC3, NC3X, NC4, NC4X
from geodesics.geomath import sq


def sin_cos_series(sinp: bool, sinx: float, cosx: float, c: Sequence[float], n: int) -> float:
    """
    Evaluate a Fourier sine or cosine series by Clenshaw summation.

    With sinp, computes sum(c[i] * sin(2*i*x), i = 1..n); otherwise computes
    sum(c[i] * cos((2*i+1)*x), i = 0..n-1). Only sin(x) and cos(x) are needed;
    the multiple angles are generated by the recurrence with
    ar = 2 * (cos(x)^2 - sin(x)^2).

    Args:
        sinp:
            Whether to sum the sine series (True) or the cosine series (False)

        sinx:
            sin(x)

        cosx:
            cos(x)

        c:
            The series coefficients; c[0] is unused for the sine series

        n:
            The number of terms

    Returns:
        float
    """
    k = n + (1 if sinp else 0)
    ar = 2 * (cosx - sinx) * (cosx + sinx)
    y1 = 0.0
    if n & 1:
        k -= 1
        y0 = c[k]
    else:
        y0 = 0.0

    n //= 2
    while n:
        n -= 1
        k -= 1
        y1 = ar * y0 - y1 + c[k]
        k -= 1
        y0 = ar * y1 - y0 + c[k]

    return 2 * sinx * cosx * y0 if sinp else cosx * (y0 - y1)


def a1m1f(eps: float) -> float:
    """The scale factor A1 - 1 of the distance integral"""
    eps2 = sq(eps)
    t = eps2 * (eps2 * (eps2 + 4) + 64) / 256
    return (t + eps) / (1 - eps)


def c1f(eps: float) -> List[float]:
    """The coefficients C1[l], l = 1..NC1, of the distance integral"""
    c = [0.0] * (NC1 + 1)
    eps2 = sq(eps)
    d = eps
    c[1] = d * ((6 - eps2) * eps2 - 16) / 32
    d *= eps
    c[2] = d * ((64 - 9 * eps2) * eps2 - 128) / 2048
    d *= eps
    c[3] = d * (9 * eps2 - 16) / 768
    d *= eps
    c[4] = d * (3 * eps2 - 5) / 512
    d *= eps
    c[5] = -7 * d / 1280
    d *= eps
    c[6] = -7 * d / 2048
    return c


def c1pf(eps: float) -> List[float]:
    """
    The coefficients C1'[l], l = 1..NC1P, of the reverted distance series,
    which maps distance back to arc length.
    """
    c = [0.0] * (NC1P + 1)
    eps2 = sq(eps)
    d = eps
    c[1] = d * (eps2 * (205 * eps2 - 432) + 768) / 1536
    d *= eps
    c[2] = d * (eps2 * (4005 * eps2 - 4736) + 3840) / 12288
    d *= eps
    c[3] = d * (116 - 225 * eps2) / 384
    d *= eps
    c[4] = d * (2695 - 7173 * eps2) / 7680
    d *= eps
    c[5] = 3467 * d / 7680
    d *= eps
    c[6] = 38081 * d / 61440
    return c


def a2m1f(eps: float) -> float:
    """The scale factor A2 - 1 of the reduced length integral"""
    eps2 = sq(eps)
    t = eps2 * (eps2 * (25 * eps2 + 36) + 64) / 256
    return t * (1 - eps) - eps


def c2f(eps: float) -> List[float]:
    """The coefficients C2[l], l = 1..NC2, of the reduced length integral"""
    c = [0.0] * (NC2 + 1)
    eps2 = sq(eps)
    d = eps
    c[1] = d * (eps2 * (eps2 + 2) + 16) / 32
    d *= eps
    c[2] = d * (eps2 * (35 * eps2 + 64) + 384) / 2048
    d *= eps
    c[3] = d * (15 * eps2 + 80) / 768
    d *= eps
    c[4] = d * (7 * eps2 + 35) / 512
    d *= eps
    c[5] = 63 * d / 1280
    d *= eps
    c[6] = 77 * d / 2048
    return c


def a3_coeff(n: float) -> List[float]:
    """
    The n-dependence of A3, the scale factor of the longitude integral.

    Returns:
        NA3X values; entry j multiplies eps^j
    """
    return [
        1.0,
        (n - 1) / 2,
        (n * (3 * n - 1) - 2) / 8,
        ((-n - 3) * n - 1) / 16,
        (-2 * n - 3) / 64,
        -3 / 128,
    ][:NA3X]


def c3_coeff(n: float) -> List[float]:
    """
    The n-dependence of C3[l], the coefficients of the longitude integral.

    Returns:
        NC3X values grouped by l = 1..NC3-1; within a group the entries
        multiply increasing powers of eps
    """
    return [
        # C3[1]
        (1 - n) / 4,
        (1 - n * n) / 8,
        ((3 - n) * n + 3) / 64,
        (2 * n + 5) / 128,
        3 / 128,
        # C3[2]
        ((n - 3) * n + 2) / 32,
        ((-3 * n - 2) * n + 3) / 64,
        (n + 3) / 128,
        5 / 256,
        # C3[3]
        (n * (5 * n - 9) + 5) / 192,
        (9 - 10 * n) / 384,
        7 / 512,
        # C3[4]
        (7 - 14 * n) / 512,
        7 / 512,
        # C3[5]
        21 / 2560,
    ]


def c4_coeff(n: float) -> List[float]:
    """
    The n-dependence of C4[l], the coefficients of the area integral.

    Returns:
        NC4X values grouped by l = 0..NC4-1; within a group the entries
        multiply increasing powers of eps
    """
    return [
        # C4[0]
        (n * (n * (n * (n * (100 * n + 208) + 572) + 3432) - 12012) + 30030) / 45045,
        (n * (n * (n * (64 * n + 624) - 4576) + 6864) - 3003) / 15015,
        (n * ((14144 - 10656 * n) * n - 4576) - 858) / 45045,
        ((-224 * n - 4784) * n + 1573) / 45045,
        (1088 * n + 156) / 45045,
        97 / 15015,
        # C4[1]
        (n * (n * ((-64 * n - 624) * n + 4576) - 6864) + 3003) / 135135,
        (n * (n * (5952 * n - 11648) + 9152) - 2574) / 135135,
        (n * (5792 * n + 1040) - 1287) / 135135,
        (468 - 2944 * n) / 135135,
        1 / 9009,
        # C4[2]
        (n * ((4160 - 1440 * n) * n - 4576) + 1716) / 225225,
        ((4992 - 8448 * n) * n - 1144) / 225225,
        (1856 * n - 936) / 225225,
        8 / 10725,
        # C4[3]
        (n * (3584 * n - 3328) + 1144) / 315315,
        (1024 * n - 208) / 105105,
        -136 / 63063,
        # C4[4]
        (832 - 2560 * n) / 405405,
        -128 / 135135,
        # C4[5]
        128 / 99099,
    ]


def a3f(eps: float, a3x: Sequence[float]) -> float:
    """Evaluate A3 at eps from the table built by a3_coeff"""
    v = 0.0
    for coeff in reversed(a3x[:NA3X]):
        v = eps * v + coeff
    return v


def c3f(eps: float, c3x: Sequence[float]) -> List[float]:
    """
    Evaluate C3[l], l = 1..NC3-1, at eps from the table built by c3_coeff.

    Returns:
        NC3 values; index 0 is unused
    """
    c = [0.0] * NC3
    j = NC3X
    for k in range(NC3 - 1, 0, -1):
        t = 0.0
        for _ in range(NC3 - k):
            j -= 1
            t = eps * t + c3x[j]
        c[k] = t

    mult = 1.0
    for k in range(1, NC3):
        mult *= eps
        c[k] *= mult
    return c


def c4f(eps: float, c4x: Sequence[float]) -> List[float]:
    """
    Evaluate C4[l], l = 0..NC4-1, at eps from the table built by c4_coeff.

    Returns:
        NC4 values
    """
    c = [0.0] * NC4
    j = NC4X
    for k in range(NC4, 0, -1):
        t = 0.0
        for _ in range(NC4 - k + 1):
            j -= 1
            t = eps * t + c4x[j]
        c[k - 1] = t

    mult = 1.0
    for k in range(1, NC4):
        mult *= eps
        c[k] *= mult
    return c
