# pylint: disable=invalid-name
"""
A single geodesic, fixed by its starting point and azimuth, with positions
along it computed on demand.

Solving the direct problem for many points on one geodesic shares most of the
work: the auxiliary sphere quantities at the starting point and the series
coefficients are computed once when the line is built. Only the series named
by the line's capabilities are prepared, so a line can only answer queries for
outputs it was built with.
"""

__all__ = ['GeodesicLine']

import math
from typing import TYPE_CHECKING

from geodesics._const import NC1, NC1P, NC2, NC3, NC4, TINY
from geodesics._types import GeodesicResult
from geodesics.geomath import ang_normalize, ang_normalize2, ang_round, hypot, sq
from geodesics.mask import GeodesicMask
from geodesics.series import a1m1f, a2m1f, c1f, c1pf, c2f, sin_cos_series

if TYPE_CHECKING:  # pragma: no cover
    from geodesics.geodesic import Geodesic


class GeodesicLine:  # pylint: disable=too-many-instance-attributes
    """
    A geodesic starting at (lat1, lon1) with azimuth azi1.

    Args:
        geod:
            The Geodesic (ellipsoid) the line lies on

        lat1:
            The latitude of the starting point, in degrees [-90, 90]

        lon1:
            The longitude of the starting point, in degrees

        azi1:
            The azimuth at the starting point, in degrees

        caps:
            The GeodesicMask flags the line must be able to answer. 0 means
            all of them; LATITUDE and AZIMUTH are always included.
    """

    def __init__(
        self,
        geod: 'Geodesic',
        lat1: float,
        lon1: float,
        azi1: float,
        caps: int = GeodesicMask.ALL,
    ):
        self.a = geod.a
        self.f = geod.f
        self.b = geod.b
        self.c2 = geod.c2
        self.f1 = geod.f1
        self.caps = (
            GeodesicMask.ALL if not caps
            else caps | GeodesicMask.LATITUDE | GeodesicMask.AZIMUTH
        )

        # Rounding keeps salp0 from underflowing
        azi1 = ang_round(ang_normalize2(azi1))
        self.lat1 = lat1
        self.lon1 = ang_normalize2(lon1)
        self.azi1 = azi1

        alp1 = math.radians(azi1)
        # sin(pi) and cos(pi/2) must come out exactly 0
        self.salp1 = 0.0 if azi1 == -180 else math.sin(alp1)
        self.calp1 = 0.0 if abs(azi1) == 90 else math.cos(alp1)

        phi = math.radians(lat1)
        sbet1 = self.f1 * math.sin(phi)
        cbet1 = TINY if abs(lat1) == 90 else math.cos(phi)
        t = hypot(sbet1, cbet1)
        sbet1 /= t
        cbet1 /= t
        self.dn1 = math.sqrt(1 + geod.ep2 * sq(sbet1))

        # Azimuth at the equator crossing, alp0 in [0, pi/2 - |bet1|]
        self.salp0 = self.salp1 * cbet1
        self.calp0 = hypot(self.calp1, self.salp1 * sbet1)

        # Arc length sig1 and spherical longitude omg1, both measured from the
        # northward equator crossing. cbet1 > 0 so atan2 is never (0, 0).
        self.ssig1 = sbet1
        self.somg1 = self.salp0 * sbet1
        self.csig1 = self.comg1 = (
            cbet1 * self.calp1 if sbet1 != 0 or self.calp1 != 0 else 1.0
        )
        t = hypot(self.ssig1, self.csig1)
        self.ssig1 /= t
        self.csig1 /= t

        self.k2 = sq(self.calp0) * geod.ep2
        eps = self.k2 / (2 * (1 + math.sqrt(1 + self.k2)) + self.k2)

        if self.caps & GeodesicMask.CAP_C1:
            self.A1m1 = a1m1f(eps)
            self.C1a = c1f(eps)
            self.B11 = sin_cos_series(True, self.ssig1, self.csig1, self.C1a, NC1)
            s = math.sin(self.B11)
            c = math.cos(self.B11)
            # tau1 = sig1 + B11
            self.stau1 = self.ssig1 * c + self.csig1 * s
            self.ctau1 = self.csig1 * c - self.ssig1 * s

        if self.caps & GeodesicMask.CAP_C1p:
            self.C1pa = c1pf(eps)

        if self.caps & GeodesicMask.CAP_C2:
            self.A2m1 = a2m1f(eps)
            self.C2a = c2f(eps)
            self.B21 = sin_cos_series(True, self.ssig1, self.csig1, self.C2a, NC2)

        if self.caps & GeodesicMask.CAP_C3:
            self.C3a = geod.c3f(eps)
            self.A3c = -self.f * self.salp0 * geod.a3f(eps)
            self.B31 = sin_cos_series(True, self.ssig1, self.csig1, self.C3a, NC3 - 1)

        if self.caps & GeodesicMask.CAP_C4:
            self.C4a = geod.c4f(eps)
            # a^2 e^2 cos(alp0) sin(alp0)
            self.A4 = sq(self.a) * self.calp0 * self.salp0 * geod.e2
            self.B41 = sin_cos_series(False, self.ssig1, self.csig1, self.C4a, NC4)

    def __repr__(self):
        return f'<GeodesicLine from ({self.lat1}, {self.lon1}) azimuth {self.azi1}>'

    def _arc_from_distance(self, s12: float):
        """sig12 and its sine and cosine for a distance s12 along the line"""
        tau12 = s12 / (self.b * (1 + self.A1m1))
        s = math.sin(tau12)
        c = math.cos(tau12)
        B12 = -sin_cos_series(
            True,
            self.stau1 * c + self.ctau1 * s,
            self.ctau1 * c - self.stau1 * s,
            self.C1pa, NC1P
        )
        sig12 = tau12 - (B12 - self.B11)
        ssig12 = math.sin(sig12)
        csig12 = math.cos(sig12)
        if abs(self.f) > 0.01:
            # The reverted series alone loses accuracy quickly beyond
            # |f| = 1/100; one Newton step on the forward series restores it
            ssig2 = self.ssig1 * csig12 + self.csig1 * ssig12
            csig2 = self.csig1 * csig12 - self.ssig1 * ssig12
            B12 = sin_cos_series(True, ssig2, csig2, self.C1a, NC1)
            serr = (1 + self.A1m1) * (sig12 + (B12 - self.B11)) - s12 / self.b
            sig12 = sig12 - serr / math.sqrt(1 + self.k2 * sq(ssig2))
            ssig12 = math.sin(sig12)
            csig12 = math.cos(sig12)

        return sig12, ssig12, csig12, B12

    def gen_position(  # pylint: disable=too-many-locals,too-many-branches,too-many-statements
        self,
        arcmode: bool,
        s12_a12: float,
        outmask: int,
    ) -> GeodesicResult:
        """
        The point a given distance or arc length along the line.

        Outputs the line was not built for are silently left at 0. Asking for
        a position by distance from a line built without DISTANCE_IN cannot
        be answered; the result then carries a12 = nan and nothing else.

        Args:
            arcmode:
                Whether s12_a12 is an arc length in degrees (True) or a
                distance in meters (False)

            s12_a12:
                The distance or arc length from the starting point; may be
                negative

            outmask:
                The GeodesicMask bits of the quantities to compute

        Returns:
            GeodesicResult
        """
        lat2 = lon2 = azi1 = azi2 = s12 = m12 = M12 = M21 = S12 = 0.0
        outmask &= self.caps & GeodesicMask.OUT_ALL
        if not (arcmode or (self.caps & GeodesicMask.DISTANCE_IN & GeodesicMask.OUT_ALL)):
            return GeodesicResult(a12=math.nan)

        B12 = AB1 = 0.0
        if arcmode:
            sig12 = math.radians(s12_a12)
            # Exact zeros at whole multiples of 90 degrees
            s12a = abs(s12_a12)
            s12a -= 180 * math.floor(s12a / 180)
            ssig12 = 0.0 if s12a == 0 else math.sin(sig12)
            csig12 = 0.0 if s12a == 90 else math.cos(sig12)
        else:
            sig12, ssig12, csig12, B12 = self._arc_from_distance(s12_a12)

        # sig2 = sig1 + sig12
        ssig2 = self.ssig1 * csig12 + self.csig1 * ssig12
        csig2 = self.csig1 * csig12 - self.ssig1 * ssig12
        dn2 = math.sqrt(1 + self.k2 * sq(ssig2))
        if outmask & (GeodesicMask.DISTANCE | GeodesicMask.REDUCEDLENGTH | GeodesicMask.GEODESICSCALE):
            if arcmode or abs(self.f) > 0.01:
                B12 = sin_cos_series(True, ssig2, csig2, self.C1a, NC1)
            AB1 = (1 + self.A1m1) * (B12 - self.B11)

        sbet2 = self.calp0 * ssig2
        cbet2 = hypot(self.salp0, self.calp0 * csig2)
        if cbet2 == 0:
            # Meridian through a pole; nudge off it
            cbet2 = csig2 = TINY
        salp2 = self.salp0
        calp2 = self.calp0 * csig2

        if outmask & GeodesicMask.DISTANCE:
            s12 = (
                self.b * ((1 + self.A1m1) * sig12 + AB1) if arcmode
                else s12_a12
            )

        if outmask & GeodesicMask.LONGITUDE:
            somg2 = self.salp0 * ssig2
            comg2 = csig2
            omg12 = math.atan2(
                somg2 * self.comg1 - comg2 * self.somg1,
                comg2 * self.comg1 + somg2 * self.somg1
            )
            lam12 = omg12 + self.A3c * (
                sig12 + (sin_cos_series(True, ssig2, csig2, self.C3a, NC3 - 1) - self.B31)
            )
            # lon12 may have wrapped any number of times
            lon2 = ang_normalize(self.lon1 + ang_normalize2(math.degrees(lam12)))

        if outmask & GeodesicMask.LATITUDE:
            lat2 = math.degrees(math.atan2(sbet2, self.f1 * cbet2))

        if outmask & GeodesicMask.AZIMUTH:
            azi1 = self.azi1
            # 0 - x turns -0 into 0
            azi2 = 0 - math.degrees(math.atan2(-salp2, calp2))

        if outmask & (GeodesicMask.REDUCEDLENGTH | GeodesicMask.GEODESICSCALE):
            B22 = sin_cos_series(True, ssig2, csig2, self.C2a, NC2)
            AB2 = (1 + self.A2m1) * (B22 - self.B21)
            J12 = (self.A1m1 - self.A2m1) * sig12 + (AB1 - AB2)
            if outmask & GeodesicMask.REDUCEDLENGTH:
                # Products grouped so coincident points cancel exactly
                m12 = self.b * (
                    (dn2 * (self.csig1 * ssig2) - self.dn1 * (self.ssig1 * csig2)) -
                    self.csig1 * csig2 * J12
                )
            if outmask & GeodesicMask.GEODESICSCALE:
                t = self.k2 * (ssig2 - self.ssig1) * (ssig2 + self.ssig1) / (self.dn1 + dn2)
                M12 = csig12 + (t * ssig2 - csig2 * J12) * self.ssig1 / self.dn1
                M21 = csig12 - (t * self.ssig1 - self.csig1 * J12) * ssig2 / dn2

        if outmask & GeodesicMask.AREA:
            B42 = sin_cos_series(False, ssig2, csig2, self.C4a, NC4)
            if self.calp0 == 0 or self.salp0 == 0:
                # alp12 = alp2 - alp1
                salp12 = salp2 * self.calp1 - calp2 * self.salp1
                calp12 = calp2 * self.calp1 + salp2 * self.salp1
                # Give alp12 = +/-180 the sign of calp1
                if salp12 == 0 and calp12 < 0:
                    salp12 = TINY * self.calp1
                    calp12 = -1.0
            else:
                # tan(alp2 - alp1) from tan(alp) = tan(alp0) sec(sig), with
                # csig1 - csig2 rewritten to avoid cancellation
                salp12 = self.calp0 * self.salp0 * (
                    self.csig1 * (1 - csig12) + ssig12 * self.ssig1 if csig12 <= 0
                    else ssig12 * (self.csig1 * ssig12 / (1 + csig12) + self.ssig1)
                )
                calp12 = sq(self.salp0) + sq(self.calp0) * self.csig1 * csig2
            S12 = self.c2 * math.atan2(salp12, calp12) + self.A4 * (B42 - self.B41)

        a12 = s12_a12 if arcmode else math.degrees(sig12)
        return GeodesicResult(
            lat2=lat2, lon2=lon2, azi1=azi1, azi2=azi2, s12=s12, a12=a12,
            m12=m12, M12=M12, M21=M21, S12=S12
        )

    def position(self, s12: float, outmask: int = GeodesicMask.STANDARD) -> GeodesicResult:
        """The point s12 meters along the line"""
        return self.gen_position(False, s12, outmask)

    def arc_position(self, a12: float, outmask: int = GeodesicMask.STANDARD) -> GeodesicResult:
        """The point a12 degrees of arc along the line"""
        return self.gen_position(True, a12, outmask)
