"""
Extended precision running sums.

Area computations add up many large terms which nearly cancel; a plain float
running total loses most of its significant digits doing so. The Accumulator
carries the total as an unevaluated pair (s, t) of floats instead.
"""

__all__ = ['Accumulator']

from typing import Optional, Union

from geodesics.geomath import two_sum


class Accumulator:
    """
    A running sum held as two non-overlapping doubles, s + t, with s the
    leading part and |t| of the order of one ulp of s.

    Each addition costs about one ulp of the smaller word in accuracy, which is
    far better than naive accumulation but not exact.

    Args:
        s:
            The initial value, or another Accumulator to copy

        t:
            The initial residual, ignored when copying an Accumulator
    """

    def __init__(self, s: Union[float, 'Accumulator'] = 0.0, t: float = 0.0):
        self._s = 0.0
        self._t = 0.0
        self.set(s, t)

    def __repr__(self):
        return f'<Accumulator({self._s}, {self._t})>'

    def set(self, s: Union[float, 'Accumulator'], t: float = 0.0):
        """Reset the running sum to s (plus residual t)"""
        if isinstance(s, Accumulator):
            self._s, self._t = s._s, s._t
        else:
            self._s, self._t = float(s), float(t)

    def add(self, y: float):
        """
        Add y to the running sum.

        The new pair is produced by two error-free sums, first y with the
        residual and then that result with the leading word. When the leading
        word cancels to exactly zero the residual is promoted in its place.
        """
        u, v = two_sum(y, self._t)
        self._s, self._t = two_sum(u, self._s)
        if self._s == 0:
            self._s = v
        else:
            self._t += v

    def sum(self, y: Optional[float] = None) -> float:
        """
        The current total, or the total the Accumulator would hold after
        adding y. The Accumulator itself is never modified.
        """
        if y is None:
            return self._s

        scratch = Accumulator(self)
        scratch.add(y)
        return scratch._s  # pylint: disable=protected-access

    def negate(self):
        """Flip the sign of the running sum"""
        self._s *= -1
        self._t *= -1
