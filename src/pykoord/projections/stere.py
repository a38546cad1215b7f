"""Stereographic projection in polar, equatorial and oblique aspects."""

from __future__ import annotations

import math

from pykoord.core.common import EPSLN, FORTPI, HALF_PI, adjust_lon, tsfnz
from pykoord.core.point import Point
from pykoord.errors import ConvergenceError, DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry

S_POLE = 0
N_POLE = 1
OBLIQ = 2
EQUIT = 3

TOL = 1.0e-8
NITER = 8
CONV = 1.0e-10


def ssfn(phit: float, sinphi: float, eccen: float) -> float:
    sinphi *= eccen
    return math.tan(0.5 * (HALF_PI + phit)) * math.pow(
        (1.0 - sinphi) / (1.0 + sinphi), 0.5 * eccen
    )


class Stereographic(Projection):
    """Stereographic; ``lat_ts`` sets the latitude of true scale for polar
    aspects and defaults to the pole."""

    def init(self) -> None:
        c = self.crs
        phits = abs(c.lat_ts if c.lat_ts else HALF_PI)
        t = abs(c.lat0)
        if abs(t - HALF_PI) < EPSLN:
            c.mode = S_POLE if c.lat0 < 0 else N_POLE
        elif t > EPSLN:
            c.mode = OBLIQ
        else:
            c.mode = EQUIT

        if c.sphere:
            if c.mode in (OBLIQ, EQUIT):
                c.sinph0 = math.sin(c.lat0)
                c.cosph0 = math.cos(c.lat0)
                c.akm1 = 2.0 * c.k0
            elif abs(phits - HALF_PI) >= EPSLN:
                c.akm1 = math.cos(phits) / math.tan(FORTPI - 0.5 * phits)
            else:
                c.akm1 = 2.0 * c.k0
            return

        if c.mode in (N_POLE, S_POLE):
            if abs(phits - HALF_PI) < EPSLN:
                c.akm1 = 2.0 * c.k0 / math.sqrt(
                    math.pow(1.0 + c.e, 1.0 + c.e) * math.pow(1.0 - c.e, 1.0 - c.e)
                )
            else:
                t = math.sin(phits)
                c.akm1 = math.cos(phits) / tsfnz(c.e, phits, t)
                t *= c.e
                c.akm1 /= math.sqrt(1.0 - t * t)
        else:
            t = math.sin(c.lat0)
            x = 2.0 * math.atan(ssfn(c.lat0, t, c.e)) - HALF_PI
            t *= c.e
            c.akm1 = 2.0 * c.k0 * math.cos(c.lat0) / math.sqrt(1.0 - t * t)
            c.sinX1 = math.sin(x)
            c.cosX1 = math.cos(x)

    def forward(self, p: Point) -> Point:
        c = self.crs
        lam = adjust_lon(p.x - c.long0)
        phi = p.y
        coslam = math.cos(lam)
        sinlam = math.sin(lam)
        sinphi = math.sin(phi)

        if c.sphere:
            cosphi = math.cos(phi)
            if c.mode == EQUIT:
                y = 1.0 + cosphi * coslam
                if y <= EPSLN:
                    raise DomainError("stere: point is the antipode of the center")
                y = c.akm1 / y
                x = y * cosphi * sinlam
                y *= sinphi
            elif c.mode == OBLIQ:
                y = 1.0 + c.sinph0 * sinphi + c.cosph0 * cosphi * coslam
                if y <= EPSLN:
                    raise DomainError("stere: point is the antipode of the center")
                y = c.akm1 / y
                x = y * cosphi * sinlam
                y *= c.cosph0 * sinphi - c.sinph0 * cosphi * coslam
            else:
                if c.mode == N_POLE:
                    coslam = -coslam
                    phi = -phi
                if abs(phi - HALF_PI) < TOL:
                    raise DomainError("stere: point is the opposite pole")
                y = c.akm1 * math.tan(FORTPI + 0.5 * phi)
                x = sinlam * y
                y *= coslam
        else:
            if c.mode in (OBLIQ, EQUIT):
                chi = 2.0 * math.atan(ssfn(phi, sinphi, c.e)) - HALF_PI
                sin_x = math.sin(chi)
                cos_x = math.cos(chi)
            if c.mode == OBLIQ:
                denom = c.cosX1 * (1.0 + c.sinX1 * sin_x + c.cosX1 * cos_x * coslam)
                if abs(denom) <= EPSLN:
                    raise DomainError("stere: point is the antipode of the center")
                a = c.akm1 / denom
                y = a * (c.cosX1 * sin_x - c.sinX1 * cos_x * coslam)
                x = a * cos_x
            elif c.mode == EQUIT:
                denom = 1.0 + cos_x * coslam
                if denom <= EPSLN:
                    raise DomainError("stere: point is the antipode of the center")
                a = c.akm1 / denom
                y = a * sin_x
                x = a * cos_x
            else:
                if c.mode == S_POLE:
                    phi = -phi
                    coslam = -coslam
                    sinphi = -sinphi
                if abs(phi + HALF_PI) < TOL:
                    raise DomainError("stere: point is the opposite pole")
                x = c.akm1 * tsfnz(c.e, phi, sinphi)
                y = -x * coslam
            x *= sinlam

        p.x = x * c.a + c.x0
        p.y = y * c.a + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / c.a
        y = (p.y - c.y0) / c.a

        if c.sphere:
            rh = math.sqrt(x * x + y * y)
            z = 2.0 * math.atan(rh / c.akm1)
            sinz = math.sin(z)
            cosz = math.cos(z)
            lam = 0.0
            if c.mode == EQUIT:
                phi = 0.0 if abs(rh) <= EPSLN else math.asin(y * sinz / rh)
                if cosz != 0 or x != 0:
                    lam = math.atan2(x * sinz, cosz * rh)
            elif c.mode == OBLIQ:
                if abs(rh) <= EPSLN:
                    phi = c.lat0
                else:
                    phi = math.asin(cosz * c.sinph0 + y * sinz * c.cosph0 / rh)
                cosz -= c.sinph0 * math.sin(phi)
                if cosz != 0 or x != 0:
                    lam = math.atan2(x * sinz * c.cosph0, cosz * rh)
            else:
                if c.mode == N_POLE:
                    y = -y
                if abs(rh) <= EPSLN:
                    phi = c.lat0
                else:
                    phi = math.asin(-cosz if c.mode == S_POLE else cosz)
                lam = 0.0 if x == 0 and y == 0 else math.atan2(x, y)
            p.x = adjust_lon(lam + c.long0)
            p.y = phi
            return p

        rho = math.sqrt(x * x + y * y)
        if c.mode in (OBLIQ, EQUIT):
            sin_x1 = c.sinX1
            cos_x1 = c.cosX1
            tp = 2.0 * math.atan2(rho * cos_x1, c.akm1)
            cosphi = math.cos(tp)
            sinphi = math.sin(tp)
            if rho == 0.0:
                phi_l = math.asin(cosphi * sin_x1)
            else:
                phi_l = math.asin(cosphi * sin_x1 + y * sinphi * cos_x1 / rho)
            tp = math.tan(0.5 * (HALF_PI + phi_l))
            x *= sinphi
            y = rho * cos_x1 * cosphi - y * sin_x1 * sinphi
            halfpi = HALF_PI
            halfe = 0.5 * c.e
        else:
            if c.mode == N_POLE:
                y = -y
            tp = -rho / c.akm1
            phi_l = HALF_PI - 2.0 * math.atan(tp)
            halfpi = -HALF_PI
            halfe = -0.5 * c.e

        for _ in range(NITER):
            sinphi = c.e * math.sin(phi_l)
            phi = 2.0 * math.atan(tp * math.pow((1.0 + sinphi) / (1.0 - sinphi), halfe)) - halfpi
            if abs(phi_l - phi) < CONV:
                if c.mode == S_POLE:
                    phi = -phi
                p.x = adjust_lon((0.0 if x == 0 and y == 0 else math.atan2(x, y)) + c.long0)
                p.y = phi
                return p
            phi_l = phi
        raise ConvergenceError("stere: inverse did not converge")

    @classmethod
    def type_name(cls) -> str:
        return "stere"


projection_registry.register(Stereographic)
