"""
Floating point primitives shared by the geodesic solvers.

These mirror functions from the math module but pin down the behaviours the
solvers depend on: odd symmetry of atanh and cbrt, accuracy of log1p near
zero, an error-free sum, and angle reductions that stay exact in degrees.
"""

__all__ = [
    'ang_diff', 'ang_normalize', 'ang_normalize2', 'ang_round', 'atanh',
    'cbrt', 'hypot', 'log1p', 'sq', 'two_sum'
]

import math
from typing import Tuple


def sq(x: float) -> float:
    """Square a number"""
    return x * x


def hypot(x: float, y: float) -> float:
    """
    The hypotenuse sqrt(x^2 + y^2), computed by factoring out the larger
    magnitude so that neither overflow nor underflow can occur.
    """
    x, y = abs(x), abs(y)
    a = max(x, y)
    b = min(x, y) / (a if a else 1)
    return a * math.sqrt(1 + b * b)


def log1p(x: float) -> float:
    """
    log(1 + x), accurate near x = 0.

    Taken from D. Goldberg, "What every computer scientist should know about
    floating-point arithmetic" (1991), Theorem 4.
    """
    y = 1 + x
    z = y - 1
    # z is exactly representable, so x * log(y) / z cancels the rounding in y
    return x if z == 0 else x * math.log(y) / z


def atanh(x: float) -> float:
    """Inverse hyperbolic tangent, built on log1p, with odd parity enforced"""
    y = abs(x)
    y = log1p(2 * y / (1 - y)) / 2
    return -y if x < 0 else y


def cbrt(x: float) -> float:
    """Real cube root, with odd parity enforced"""
    y = math.pow(abs(x), 1 / 3)
    return -y if x < 0 else y


def two_sum(u: float, v: float) -> Tuple[float, float]:
    """
    Error-free transformation of a sum.

    Args:
        u:
            The first addend

        v:
            The second addend

    Returns:
        (s, t) where s = round(u + v) and t is the exact rounding error,
        i.e. s + t == u + v exactly
    """
    s = u + v
    up = s - v
    vpp = s - up
    up -= u
    vpp -= v
    t = -(up + vpp)
    return s, t


def ang_normalize(x: float) -> float:
    """Reduce an angle in [-540, 540) degrees to [-180, 180)"""
    if x >= 180:
        return x - 360
    if x < -180:
        return x + 360
    return x


def ang_normalize2(x: float) -> float:
    """Reduce an arbitrary angle in degrees to [-180, 180)"""
    return ang_normalize(math.fmod(x, 360))


def ang_diff(x: float, y: float) -> float:
    """
    The difference y - x of two angles in degrees, reduced to [-180, 180].

    The subtraction is compensated, so the result keeps full precision even
    when x and y differ by an amount close to +/- 360.
    """
    d, t = two_sum(-x, y)
    if (d - 180) + t > 0:
        d -= 360
    elif (d + 180) + t <= 0:
        d += 360
    return d + t


def ang_round(x: float) -> float:
    """
    Round tiny angles onto a coarser grid.

    Values smaller than 1/16 degree are snapped so that the solvers see the
    same number for inputs which differ only in their last few bits, which
    also turns -0 into +0 for zero inputs.
    """
    z = 1 / 16
    y = abs(x)
    # The compiler must not "simplify" z - (z - y) to y
    y = z - (z - y) if y < z else y
    return -y if x < 0 else y
