# pylint: disable=invalid-name
"""
Geodesics on an ellipsoid of revolution.

The shortest path between two points on the ellipsoid is the geodesic. Given
the first point, the azimuth there and the length s12, finding the second
point is the direct problem (see GeodesicLine). Given both points, finding
s12 and the azimuths azi1 and azi2 is the inverse problem, solved here by
Geodesic.gen_inverse. Azimuths are measured clockwise from north and azi2 is
the forward azimuth at the second point.

Besides distance and azimuths the solvers can report:

    m12, the reduced length: rotating azi1 by dazi1 radians displaces the
        second point by m12 * dazi1, at right angles to the geodesic.
    M12, M21, the geodesic scales: two geodesics which are parallel at one
        point and dt apart are M12 * dt (or M21 * dt) apart at the other.
    S12, the area of the quadrilateral bounded by the geodesic, the two
        meridians through its end points and the equator, counted positive
        counter-clockwise.

For three points on one geodesic, s13 = s12 + s23, a13 = a12 + a23 and
S13 = S12 + S23.

The series in geodesics.series are carried to sixth order in the flattening,
which makes the solutions accurate to about 15 nanometers for the WGS84
ellipsoid. They remain usable, with degraded accuracy, for |f| up to 0.2.

References:
    C. F. F. Karney, Algorithms for geodesics, J. Geodesy 87, 43-55 (2013);
    https://doi.org/10.1007/s00190-012-0578-z
"""

__all__ = ['Geodesic']

import math

from pydantic import validate_call

from geodesics._const import (
    MAX_VALIDATED_FLATTENING, MAXIT1, MAXIT2, NC1, NC2, NC3, NC4, TINY,
    TOL0, TOL1, TOL2, TOLB, WGS84_A, WGS84_F, XTHRESH
)
from geodesics._types import GeodesicResult, InverseStartResult, Lambda12Result, LengthsResult
from geodesics.geodesicline import GeodesicLine
from geodesics.geomath import ang_diff, ang_normalize2, ang_round, atanh, cbrt, hypot, sq
from geodesics.mask import GeodesicMask
from geodesics.series import (
    a1m1f, a2m1f, a3_coeff, a3f, c1f, c2f, c3_coeff, c3f, c4_coeff, c4f,
    sin_cos_series
)
from geodesics.utils.mixins import LoggingMixin


def _reduced_latitude(f1: float, lat: float):
    """sine and cosine of the reduced latitude, with cos kept positive at the poles"""
    phi = math.radians(lat)
    sbet = f1 * math.sin(phi)
    cbet = TINY if abs(lat) == 90 else math.cos(phi)
    t = hypot(sbet, cbet)
    return sbet / t, cbet / t


class Geodesic(LoggingMixin):
    """
    An ellipsoid of revolution, and the solution of the inverse geodesic
    problem on it.

    Instances are read-only once built and may be shared freely, including
    across threads.

    Args:
        a:
            The equatorial radius, in meters

        f:
            The flattening; 0 gives a sphere, negative values a prolate
            ellipsoid. Values greater than 1 are taken to be the inverse
            flattening.

    Raises:
        ValueError:
            When the equatorial or polar radius is not finite and positive
    """

    WGS84: 'Geodesic'

    @validate_call
    def __init__(self, a: float, f: float):
        super().__init__()
        self.a = a
        self.f = f if f <= 1 else 1 / f
        self.f1 = 1 - self.f
        self.b = self.a * self.f1

        if not (math.isfinite(self.a) and self.a > 0):
            raise ValueError(f'Equatorial radius {self.a} must be finite and positive')

        if not (math.isfinite(self.b) and self.b > 0):
            raise ValueError(f'Polar radius {self.b} must be finite and positive')

        if abs(self.f) > MAX_VALIDATED_FLATTENING:
            self.warn_once(
                'Flattening beyond +/-%s is outside the range for which the geodesic '
                'series are accurate; results will be degraded (this warning will not repeat)',
                MAX_VALIDATED_FLATTENING
            )

        self.e2 = self.f * (2 - self.f)
        self.ep2 = self.e2 / sq(self.f1)  # second eccentricity squared
        self.n = self.f / (2 - self.f)  # third flattening

        # Authalic radius squared
        if self.e2 == 0:
            ratio = 1.0
        elif self.e2 > 0:
            ratio = atanh(math.sqrt(self.e2)) / math.sqrt(self.e2)
        else:
            ratio = math.atan(math.sqrt(-self.e2)) / math.sqrt(-self.e2)
        self.c2 = (sq(self.a) + sq(self.b) * ratio) / 2

        # Below this arc length the mean-latitude spherical solution is
        # accurate to roundoff
        self.etol2 = 0.1 * TOL2 / math.sqrt(
            max(0.001, abs(self.f)) * min(1.0, 1 - self.f / 2) / 2
        )

        self._A3x = a3_coeff(self.n)
        self._C3x = c3_coeff(self.n)
        self._C4x = c4_coeff(self.n)

    def __repr__(self):
        return f'<Geodesic(a={self.a}, f={self.f})>'

    def a3f(self, eps: float) -> float:
        """The scale factor A3 of the longitude integral at eps"""
        return a3f(eps, self._A3x)

    def c3f(self, eps: float):
        """The coefficients C3[l] of the longitude integral at eps"""
        return c3f(eps, self._C3x)

    def c4f(self, eps: float):
        """The coefficients C4[l] of the area integral at eps"""
        return c4f(eps, self._C4x)

    @staticmethod
    def astroid(x: float, y: float) -> float:
        """
        The positive root k of k^4 + 2k^3 - (x^2 + y^2 - 1)k^2 - 2y^2 k - y^2 = 0,
        which fixes the starting azimuth for nearly antipodal points.

        For y = 0 with x^2 <= 1 the root is 0.

        Args:
            x:
                The scaled longitude offset from antipodal

            y:
                The scaled latitude offset from antipodal

        Returns:
            float
        """
        p = sq(x)
        q = sq(y)
        r = (p + q - 1) / 6
        if q == 0 and r <= 0:
            return 0.0

        S = p * q / 4
        r2 = sq(r)
        r3 = r * r2
        # Vanishes on the evolute p^(1/3) + q^(1/3) = 1
        disc = S * (S + 2 * r3)
        u = r
        if disc >= 0:
            T3 = S + r3
            # Sign chosen to maximize |T3|
            T3 += -math.sqrt(disc) if T3 < 0 else math.sqrt(disc)
            T = cbrt(T3)
            u += T + (r2 / T if T != 0 else 0)
        else:
            # Complex T; take the cube root which leaves u in [r, 3r]
            ang = math.atan2(math.sqrt(-disc), -(S + r3))
            u += 2 * r * math.cos(ang / 3)

        v = math.sqrt(sq(u) + q)
        uv = q / (v - u) if u < 0 else u + v
        w = (uv - q) / (2 * v)
        return uv / (math.sqrt(uv + sq(w)) + w)

    def lengths(  # pylint: disable=too-many-arguments
        self,
        eps: float,
        sig12: float,
        ssig1: float,
        csig1: float,
        dn1: float,
        ssig2: float,
        csig2: float,
        dn2: float,
        cbet1: float,
        cbet2: float,
        scalep: bool,
    ) -> LengthsResult:
        """
        Distance, reduced length and geodesic scales for an arc of the
        auxiliary sphere, in units of the polar radius b.

        Args:
            eps:
                The reduced flattening of the geodesic

            sig12:
                The arc length between the points, in radians

            ssig1, csig1, ssig2, csig2:
                sine and cosine of the arc length of each point from the
                geodesic's equator crossing

            dn1, dn2:
                The normal radius factors sqrt(1 + ep2 sin(beta)^2) at
                each point

            cbet1, cbet2:
                The cosines of the reduced latitudes

            scalep:
                Whether to compute M12 and M21

        Returns:
            LengthsResult (M12 and M21 are 0 unless scalep)
        """
        c1a = c1f(eps)
        c2a = c2f(eps)
        a1m1 = a1m1f(eps)
        ab1 = (1 + a1m1) * (
            sin_cos_series(True, ssig2, csig2, c1a, NC1) -
            sin_cos_series(True, ssig1, csig1, c1a, NC1)
        )
        a2m1 = a2m1f(eps)
        ab2 = (1 + a2m1) * (
            sin_cos_series(True, ssig2, csig2, c2a, NC2) -
            sin_cos_series(True, ssig1, csig1, c2a, NC2)
        )
        m0 = a1m1 - a2m1
        j12 = m0 * sig12 + (ab1 - ab2)
        # Products grouped so coincident points cancel exactly
        m12b = dn2 * (csig1 * ssig2) - dn1 * (ssig1 * csig2) - csig1 * csig2 * j12
        s12b = (1 + a1m1) * sig12 + ab1

        M12 = M21 = 0.0
        if scalep:
            csig12 = csig1 * csig2 + ssig1 * ssig2
            t = self.ep2 * (cbet1 - cbet2) * (cbet1 + cbet2) / (dn1 + dn2)
            M12 = csig12 + (t * ssig2 - csig2 * j12) * ssig1 / dn1
            M21 = csig12 - (t * ssig1 - csig1 * j12) * ssig2 / dn2

        return LengthsResult(s12b, m12b, m0, M12, M21)

    def inverse_start(  # pylint: disable=too-many-arguments,too-many-locals
        self,
        sbet1: float,
        cbet1: float,
        dn1: float,
        sbet2: float,
        cbet2: float,
        dn2: float,
        lam12: float,
    ) -> InverseStartResult:
        """
        A starting azimuth for the iterative inverse solution.

        Short lines are solved outright on the auxiliary sphere with the
        normal radius taken at the mean latitude; in that case the returned
        sig12 is non-negative and the azimuths at both ends are final.
        Otherwise, for nearly antipodal points, the starting guess comes from
        the astroid approximation; everything else starts from the spherical
        solution.

        Args:
            sbet1, cbet1, sbet2, cbet2:
                sine and cosine of the reduced latitudes, with
                0 >= beta1 and |beta1| >= |beta2|

            dn1, dn2:
                The normal radius factors at each point

            lam12:
                The longitude difference, in radians, in [0, pi]

        Returns:
            InverseStartResult
        """
        sig12 = -1.0
        salp2 = calp2 = dnm = 0.0

        # bet12 = bet2 - bet1 in [0, pi); bet12a = bet2 + bet1 in (-pi, 0]
        sbet12 = sbet2 * cbet1 - cbet2 * sbet1
        cbet12 = cbet2 * cbet1 + sbet2 * sbet1
        sbet12a = sbet2 * cbet1 + cbet2 * sbet1

        shortline = cbet12 >= 0 and sbet12 < 0.5 and cbet2 * lam12 < 0.5
        omg12 = lam12
        if shortline:
            # sin^2 of the mean reduced latitude
            sbetm2 = sq(sbet1 + sbet2)
            sbetm2 /= sbetm2 + sq(cbet1 + cbet2)
            dnm = math.sqrt(1 + self.ep2 * sbetm2)
            omg12 /= self.f1 * dnm

        somg12 = math.sin(omg12)
        comg12 = math.cos(omg12)

        salp1 = cbet2 * somg12
        if comg12 >= 0:
            calp1 = sbet12 + cbet2 * sbet1 * sq(somg12) / (1 + comg12)
        else:
            calp1 = sbet12a - cbet2 * sbet1 * sq(somg12) / (1 - comg12)

        ssig12 = hypot(salp1, calp1)
        csig12 = sbet1 * sbet2 + cbet1 * cbet2 * comg12

        if shortline and ssig12 < self.etol2:
            salp2 = cbet1 * somg12
            calp2 = sbet12 - cbet1 * sbet2 * (
                sq(somg12) / (1 + comg12) if comg12 >= 0 else 1 - comg12
            )
            t = hypot(salp2, calp2)
            salp2 /= t
            calp2 /= t
            sig12 = math.atan2(ssig12, csig12)
        elif (
            abs(self.n) > 0.1 or
            csig12 >= 0 or
            ssig12 >= 6 * abs(self.n) * math.pi * sq(cbet1)
        ):
            # Spherical estimate is good enough
            pass
        else:
            # Nearly antipodal: rescale so the antipode sits at the origin and
            # the singular point at (x, y) = (-1, 0)
            if self.f >= 0:
                k2 = sq(sbet1) * self.ep2
                eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)
                lamscale = self.f * cbet1 * self.a3f(eps) * math.pi
                betscale = lamscale * cbet1
                x = (lam12 - math.pi) / lamscale
                y = sbet12a / betscale
            else:
                cbet12a = cbet2 * cbet1 - sbet2 * sbet1
                bet12a = math.atan2(sbet12a, cbet12a)
                res = self.lengths(
                    self.n, math.pi + bet12a,
                    sbet1, -cbet1, dn1, sbet2, cbet2, dn2,
                    cbet1, cbet2, False
                )
                x = -1 + res.m12b / (cbet1 * cbet2 * res.m0 * math.pi)
                betscale = sbet12a / x if x < -0.01 else -self.f * sq(cbet1) * math.pi
                lamscale = betscale / cbet1
                y = (lam12 - math.pi) / lamscale

            if y > -TOL1 and x > -1 - XTHRESH:
                if self.f >= 0:
                    salp1 = min(1.0, -x)
                    calp1 = -math.sqrt(1 - sq(salp1))
                else:
                    calp1 = max(0.0 if x > -TOL1 else -1.0, x)
                    salp1 = math.sqrt(1 - sq(calp1))
            else:
                # Estimate omg12 from the astroid root, then alp1 from the
                # spherical formula
                k = self.astroid(x, y)
                omg12a = lamscale * (-x * k / (1 + k) if self.f >= 0 else -y * (1 + k) / k)
                somg12 = math.sin(omg12a)
                comg12 = -math.cos(omg12a)
                salp1 = cbet2 * somg12
                calp1 = sbet12a - cbet2 * sbet1 * sq(somg12) / (1 - comg12)

        # Written so that nan falls through to the fallback
        if salp1 > 0:
            t = hypot(salp1, calp1)
            salp1 /= t
            calp1 /= t
        else:
            salp1 = 1.0
            calp1 = 0.0

        return InverseStartResult(sig12, salp1, calp1, salp2, calp2, dnm)

    def lambda12(  # pylint: disable=too-many-arguments,too-many-locals
        self,
        sbet1: float,
        cbet1: float,
        dn1: float,
        sbet2: float,
        cbet2: float,
        dn2: float,
        salp1: float,
        calp1: float,
        diffp: bool,
    ) -> Lambda12Result:
        """
        The longitude difference lam12 reached by the geodesic leaving point 1
        with azimuth alp1 and running to the latitude of point 2.

        Args:
            sbet1, cbet1, sbet2, cbet2:
                sine and cosine of the reduced latitudes

            dn1, dn2:
                The normal radius factors at each point

            salp1, calp1:
                sine and cosine of the trial azimuth at point 1

            diffp:
                Whether to also compute the derivative dlam12/dalp1

        Returns:
            Lambda12Result (dlam12 is 0 unless diffp)
        """
        if sbet1 == 0 and calp1 == 0:
            # Equatorial lines are handled before this; keep alp1 off pi/2
            calp1 = -TINY

        salp0 = salp1 * cbet1
        calp0 = hypot(calp1, salp1 * sbet1)

        ssig1 = sbet1
        somg1 = salp0 * sbet1
        csig1 = comg1 = calp1 * cbet1
        t = hypot(ssig1, csig1)
        ssig1 /= t
        csig1 /= t

        # bet2 = -bet1 is special cased to keep the derivative finite
        salp2 = salp0 / cbet2 if cbet2 != cbet1 else salp1
        if cbet2 != cbet1 or abs(sbet2) != -sbet1:
            calp2 = math.sqrt(
                sq(calp1 * cbet1) + (
                    (cbet2 - cbet1) * (cbet1 + cbet2) if cbet1 < -sbet1
                    else (sbet1 - sbet2) * (sbet1 + sbet2)
                )
            ) / cbet2
        else:
            calp2 = abs(calp1)

        ssig2 = sbet2
        somg2 = salp0 * sbet2
        csig2 = comg2 = calp2 * cbet2
        t = hypot(ssig2, csig2)
        ssig2 /= t
        csig2 /= t

        # sig12 and omg12 both in [0, pi]
        sig12 = math.atan2(max(0.0, csig1 * ssig2 - ssig1 * csig2), csig1 * csig2 + ssig1 * ssig2)
        omg12 = math.atan2(max(0.0, comg1 * somg2 - somg1 * comg2), comg1 * comg2 + somg1 * somg2)

        k2 = sq(calp0) * self.ep2
        eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)
        c3a = self.c3f(eps)
        b312 = (
            sin_cos_series(True, ssig2, csig2, c3a, NC3 - 1) -
            sin_cos_series(True, ssig1, csig1, c3a, NC3 - 1)
        )
        domg12 = -self.f * self.a3f(eps) * salp0 * (sig12 + b312)
        lam12 = omg12 + domg12

        dlam12 = 0.0
        if diffp:
            if calp2 == 0:
                dlam12 = -2 * self.f1 * dn1 / sbet1
            else:
                res = self.lengths(
                    eps, sig12, ssig1, csig1, dn1, ssig2, csig2, dn2,
                    cbet1, cbet2, False
                )
                dlam12 = res.m12b * self.f1 / (calp2 * cbet2)

        return Lambda12Result(
            lam12, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2, eps, domg12, dlam12
        )

    def _solve_azimuth(  # pylint: disable=too-many-arguments,too-many-locals
        self,
        sbet1: float,
        cbet1: float,
        dn1: float,
        sbet2: float,
        cbet2: float,
        dn2: float,
        lam12: float,
        salp1: float,
        calp1: float,
    ):
        """
        Find alp1 such that lambda12(alp1) = lam12.

        The residual lambda12(alp1) - lam12 has a single root in (0, pi) and
        increases through it. Newton steps are taken while they stay inside
        (0, pi) and the slope is positive; otherwise the bracket kept around
        the root is bisected. After MAXIT1 evaluations only bisection is used
        and after MAXIT2 the search gives up with its best estimate.

        Returns:
            (salp1, calp1, Lambda12Result at the final evaluation)
        """
        # f < 0 at alp1a and f > 0 at alp1b
        salp1a, calp1a = TINY, 1.0
        salp1b, calp1b = TINY, -1.0
        near_convergence = bracket_tight = False

        for numit in range(MAXIT2):
            newton = numit < MAXIT1
            res = self.lambda12(
                sbet1, cbet1, dn1, sbet2, cbet2, dn2, salp1, calp1, newton
            )
            v = res.lam12 - lam12

            # 2 * TOL0 is about 1 ulp in [0, pi]; nan escapes too
            if bracket_tight or not abs(v) >= (8 if near_convergence else 2) * TOL0:
                break

            if v > 0 and (newton or calp1 / salp1 > calp1b / salp1b):
                salp1b, calp1b = salp1, calp1
            elif v < 0 and (newton or calp1 / salp1 < calp1a / salp1a):
                salp1a, calp1a = salp1, calp1

            if newton and res.dlam12 > 0:
                dalp1 = -v / res.dlam12
                sdalp1, cdalp1 = math.sin(dalp1), math.cos(dalp1)
                nsalp1 = salp1 * cdalp1 + calp1 * sdalp1
                if nsalp1 > 0 and abs(dalp1) < math.pi:
                    calp1 = calp1 * cdalp1 - salp1 * sdalp1
                    salp1 = max(0.0, nsalp1)
                    t = hypot(salp1, calp1)
                    salp1 /= t
                    calp1 /= t
                    # Convergence may be linear when the slope goes to 0, so
                    # accept a slightly looser residual after a small step
                    near_convergence = abs(v) <= 16 * TOL0
                    continue

            salp1 = (salp1a + salp1b) / 2
            calp1 = (calp1a + calp1b) / 2
            t = hypot(salp1, calp1)
            salp1 /= t
            calp1 /= t
            near_convergence = False
            bracket_tight = (
                abs(salp1a - salp1) + (calp1a - calp1) < TOLB or
                abs(salp1 - salp1b) + (calp1 - calp1b) < TOLB
            )
        else:
            self.logger.debug(
                'Inverse solution exhausted its %d iterations at residual %s; '
                'returning the best estimate',
                MAXIT2, v
            )

        return salp1, calp1, res

    def gen_inverse(  # pylint: disable=too-many-arguments,too-many-locals,too-many-branches,too-many-statements
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        outmask: int,
    ) -> GeodesicResult:
        """
        Solve the inverse geodesic problem.

        The solution always terminates: a fixed budget of Newton and
        bisection steps bounds the iteration, and if it runs out the best
        estimate found is returned. Poles, coincident and antipodal points are
        all handled as ordinary cases.

        Args:
            lat1, lon1:
                The first point, in degrees; lat1 in [-90, 90]

            lat2, lon2:
                The second point, in degrees; lat2 in [-90, 90]

            outmask:
                The GeodesicMask bits of the quantities to compute; a12 is
                always returned

        Returns:
            GeodesicResult with azi1, azi2, s12, a12, m12, M12, M21 and S12
            as requested
        """
        a12 = s12 = azi1 = azi2 = m12 = M12 = M21 = S12 = 0.0
        outmask &= GeodesicMask.OUT_ALL
        want_scale = bool(outmask & GeodesicMask.GEODESICSCALE)

        # lon12 in [-180, 180], with 180 for east-going and meridional lines;
        # points very nearly on the same meridian are put on it
        lon12 = ang_round(ang_diff(ang_normalize2(lon1), ang_normalize2(lon2)))
        lonsign = 1 if lon12 >= 0 else -1
        lon12 *= lonsign

        lat1 = ang_round(lat1)
        lat2 = ang_round(lat2)
        # Point 1 takes the larger |lat|
        swapp = 1 if abs(lat1) >= abs(lat2) else -1
        if swapp < 0:
            lonsign *= -1
            lat1, lat2 = lat2, lat1

        latsign = 1 if lat1 < 0 else -1
        lat1 *= latsign
        lat2 *= latsign
        # Canonical form, undone on output through lonsign, swapp and latsign:
        #     0 <= lon12 <= 180
        #     -90 <= lat1 <= 0
        #     lat1 <= lat2 <= -lat1

        sbet1, cbet1 = _reduced_latitude(self.f1, lat1)
        sbet2, cbet2 = _reduced_latitude(self.f1, lat2)

        # Make bet2 = +/- bet1 exact when the difference has been lost
        if cbet1 < -sbet1:
            if cbet2 == cbet1:
                sbet2 = sbet1 if sbet2 < 0 else -sbet1
        elif abs(sbet2) == -sbet1:
            cbet2 = cbet1

        dn1 = math.sqrt(1 + self.ep2 * sq(sbet1))
        dn2 = math.sqrt(1 + self.ep2 * sq(sbet2))

        lam12 = math.radians(lon12)
        slam12 = 0.0 if lon12 == 180 else math.sin(lam12)
        clam12 = math.cos(lam12)

        sig12 = calp1 = salp1 = calp2 = salp2 = omg12 = 0.0
        s12x = m12x = 0.0

        meridian = lat1 == -90 or slam12 == 0

        if meridian:
            # Head towards the other point's longitude, arriving northwards
            calp1, salp1 = clam12, slam12
            if lat2 == -90:
                # The same pole twice; any one meridian through it leaves only
                # the TINY stand-ins for cos(bet), which then cancel exactly
                calp1, salp1 = 1.0, 0.0
            calp2, salp2 = 1.0, 0.0

            ssig1, csig1 = sbet1, calp1 * cbet1
            ssig2, csig2 = sbet2, calp2 * cbet2

            sig12 = math.atan2(max(0.0, csig1 * ssig2 - ssig1 * csig2), csig1 * csig2 + ssig1 * ssig2)
            res = self.lengths(
                self.n, sig12, ssig1, csig1, dn1, ssig2, csig2, dn2,
                cbet1, cbet2, want_scale
            )
            s12x, m12x = res.s12b, res.m12b
            if want_scale:
                M12, M21 = res.M12, res.M21

            # m12 < 0 past a conjugate point means the meridian is not the
            # shortest path (prolate, nearly antipodal). Tiny sig12 may give
            # m12 < 0 from roundoff alone.
            if sig12 < 1 or m12x >= 0:
                m12x *= self.b
                s12x *= self.b
                a12 = math.degrees(sig12)
            else:
                meridian = False

        if not meridian and sbet1 == 0 and (
            self.f <= 0 or lam12 <= math.pi - self.f * math.pi
        ):
            # Along the equator
            calp1 = calp2 = 0.0
            salp1 = salp2 = 1.0
            s12x = self.a * lam12
            sig12 = omg12 = lam12 / self.f1
            m12x = self.b * math.sin(sig12)
            if want_scale:
                M12 = M21 = math.cos(sig12)
            a12 = lon12 / self.f1

        elif not meridian:
            start = self.inverse_start(sbet1, cbet1, dn1, sbet2, cbet2, dn2, lam12)
            sig12, salp1, calp1 = start.sig12, start.salp1, start.calp1

            if sig12 >= 0:
                # Short line, already solved
                salp2, calp2 = start.salp2, start.calp2
                dnm = start.dnm
                s12x = sig12 * self.b * dnm
                m12x = sq(dnm) * self.b * math.sin(sig12 / dnm)
                if want_scale:
                    M12 = M21 = math.cos(sig12 / dnm)
                a12 = math.degrees(sig12)
                omg12 = lam12 / (self.f1 * dnm)

            else:
                salp1, calp1, res = self._solve_azimuth(
                    sbet1, cbet1, dn1, sbet2, cbet2, dn2, lam12, salp1, calp1
                )
                salp2, calp2 = res.salp2, res.calp2
                sig12 = res.sig12

                lengths = self.lengths(
                    res.eps, sig12, res.ssig1, res.csig1, dn1, res.ssig2, res.csig2, dn2,
                    cbet1, cbet2, want_scale
                )
                s12x, m12x = lengths.s12b * self.b, lengths.m12b * self.b
                if want_scale:
                    M12, M21 = lengths.M12, lengths.M21

                a12 = math.degrees(sig12)
                omg12 = lam12 - res.domg12

        if outmask & GeodesicMask.DISTANCE:
            s12 = 0 + s12x

        if outmask & GeodesicMask.REDUCEDLENGTH:
            m12 = 0 + m12x

        if outmask & GeodesicMask.AREA:
            S12 = self._area(
                sbet1, cbet1, sbet2, cbet2, salp1, calp1, salp2, calp2,
                omg12, meridian
            )
            S12 = 0 + S12 * swapp * lonsign * latsign

        # Back out of the canonical form
        if swapp < 0:
            salp1, salp2 = salp2, salp1
            calp1, calp2 = calp2, calp1
            if want_scale:
                M12, M21 = M21, M12

        salp1 *= swapp * lonsign
        calp1 *= swapp * latsign
        salp2 *= swapp * lonsign
        calp2 *= swapp * latsign

        if outmask & GeodesicMask.AZIMUTH:
            # [-180, 180), with 0 - x turning -0 into 0
            azi1 = 0 - math.degrees(math.atan2(-salp1, calp1))
            azi2 = 0 - math.degrees(math.atan2(-salp2, calp2))

        return GeodesicResult(
            azi1=azi1, azi2=azi2, s12=s12, a12=a12, m12=m12, M12=M12, M21=M21, S12=S12
        )

    def _area(  # pylint: disable=too-many-arguments,too-many-locals
        self,
        sbet1: float,
        cbet1: float,
        sbet2: float,
        cbet2: float,
        salp1: float,
        calp1: float,
        salp2: float,
        calp2: float,
        omg12: float,
        meridian: bool,
    ) -> float:
        """S12 for the canonical (unswapped, unsigned) inverse solution"""
        salp0 = salp1 * cbet1
        calp0 = hypot(calp1, salp1 * sbet1)
        if calp0 != 0 and salp0 != 0:
            ssig1, csig1 = sbet1, calp1 * cbet1
            ssig2, csig2 = sbet2, calp2 * cbet2
            k2 = sq(calp0) * self.ep2
            eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)
            # a^2 e^2 cos(alp0) sin(alp0)
            A4 = sq(self.a) * calp0 * salp0 * self.e2
            t = hypot(ssig1, csig1)
            ssig1 /= t
            csig1 /= t
            t = hypot(ssig2, csig2)
            ssig2 /= t
            csig2 /= t
            c4a = self.c4f(eps)
            B41 = sin_cos_series(False, ssig1, csig1, c4a, NC4)
            B42 = sin_cos_series(False, ssig2, csig2, c4a, NC4)
            S12 = A4 * (B42 - B41)
        else:
            # sig1 and sig2 are indeterminate on the equator
            S12 = 0.0

        if not meridian and omg12 < 0.75 * math.pi and sbet2 - sbet1 < 1.75:
            # tan(alp12/2) from the half angle formulas, accurate for short
            # lines
            somg12 = math.sin(omg12)
            domg12 = 1 + math.cos(omg12)
            dbet1 = 1 + cbet1
            dbet2 = 1 + cbet2
            alp12 = 2 * math.atan2(
                somg12 * (sbet1 * dbet2 + sbet2 * dbet1),
                domg12 * (sbet1 * sbet2 + dbet1 * dbet2)
            )
        else:
            salp12 = salp2 * calp1 - calp2 * salp1
            calp12 = calp2 * calp1 + salp2 * salp1
            # Give alp12 = +/-180 the sign of calp1
            if salp12 == 0 and calp12 < 0:
                salp12 = TINY * calp1
                calp12 = -1.0
            alp12 = math.atan2(salp12, calp12)

        return S12 + self.c2 * alp12

    def inverse(
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        outmask: int = GeodesicMask.STANDARD,
    ) -> GeodesicResult:
        """Solve the inverse problem; see gen_inverse"""
        return self.gen_inverse(lat1, lon1, lat2, lon2, outmask)

    def line(
        self,
        lat1: float,
        lon1: float,
        azi1: float,
        caps: int = GeodesicMask.ALL,
    ) -> GeodesicLine:
        """The geodesic starting at (lat1, lon1) with azimuth azi1"""
        return GeodesicLine(self, lat1, lon1, azi1, caps)

    def _gen_direct(self, lat1, lon1, azi1, arcmode, s12_a12, outmask) -> GeodesicResult:
        # A one-shot line only needs the series for this query's outputs
        caps = outmask | (GeodesicMask.NONE if arcmode else GeodesicMask.DISTANCE_IN)
        return GeodesicLine(self, lat1, lon1, azi1, caps).gen_position(arcmode, s12_a12, outmask)

    def direct(
        self,
        lat1: float,
        lon1: float,
        azi1: float,
        s12: float,
        outmask: int = GeodesicMask.STANDARD,
    ) -> GeodesicResult:
        """
        Solve the direct problem: the point s12 meters from (lat1, lon1)
        along azimuth azi1.

        Args:
            lat1, lon1:
                The starting point, in degrees

            azi1:
                The starting azimuth, in degrees

            s12:
                The distance to travel, in meters; may be negative

            outmask:
                The GeodesicMask bits of the quantities to compute

        Returns:
            GeodesicResult
        """
        return self._gen_direct(lat1, lon1, azi1, False, s12, outmask)

    def arc_direct(
        self,
        lat1: float,
        lon1: float,
        azi1: float,
        a12: float,
        outmask: int = GeodesicMask.STANDARD,
    ) -> GeodesicResult:
        """As direct, but with the length given as an arc length a12 in degrees"""
        return self._gen_direct(lat1, lon1, azi1, True, a12, outmask)


Geodesic.WGS84 = Geodesic(WGS84_A, WGS84_F)
