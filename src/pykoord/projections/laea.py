"""Lambert Azimuthal Equal Area projection."""

from __future__ import annotations

import math

from pykoord.core.common import EPSLN, FORTPI, HALF_PI, adjust_lon, qsfnz
from pykoord.core.point import Point
from pykoord.errors import DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry

S_POLE = 1
N_POLE = 2
EQUIT = 3
OBLIQ = 4

# Authalic latitude series
P00 = 0.33333333333333333333
P01 = 0.17222222222222222222
P02 = 0.10257936507936507936
P10 = 0.06388888888888888888
P11 = 0.06640211640211640211
P20 = 0.01641501294219154443


def authset(es: float) -> list[float]:
    t = es * es
    apa = [es * P00 + t * P01, t * P10, 0.0]
    t *= es
    apa[0] += t * P02
    apa[1] += t * P11
    apa[2] = t * P20
    return apa


def authlat(beta: float, apa: list[float]) -> float:
    t = beta + beta
    return beta + apa[0] * math.sin(t) + apa[1] * math.sin(t + t) + apa[2] * math.sin(t + t + t)


class LambertAzimuthalEqualArea(Projection):
    """Lambert Azimuthal Equal Area in polar, equatorial and oblique aspects."""

    def init(self) -> None:
        c = self.crs
        t = abs(c.lat0)
        if abs(t - HALF_PI) < EPSLN:
            c.mode = S_POLE if c.lat0 < 0 else N_POLE
        elif abs(t) < EPSLN:
            c.mode = EQUIT
        else:
            c.mode = OBLIQ

        if c.sphere:
            if c.mode == OBLIQ:
                c.sinph0 = math.sin(c.lat0)
                c.cosph0 = math.cos(c.lat0)
            return

        c.qp = qsfnz(c.e, 1.0)
        c.mmf = 0.5 / (1.0 - c.es)
        c.apa = authset(c.es)
        if c.mode in (N_POLE, S_POLE):
            c.dd = 1.0
        elif c.mode == EQUIT:
            c.rq = math.sqrt(0.5 * c.qp)
            c.dd = 1.0 / c.rq
            c.xmf = 1.0
            c.ymf = 0.5 * c.qp
        else:
            c.rq = math.sqrt(0.5 * c.qp)
            sinphi = math.sin(c.lat0)
            c.sinb1 = qsfnz(c.e, sinphi) / c.qp
            c.cosb1 = math.sqrt(1.0 - c.sinb1 * c.sinb1)
            c.dd = math.cos(c.lat0) / (math.sqrt(1.0 - c.es * sinphi * sinphi) * c.rq * c.cosb1)
            c.ymf = c.rq / c.dd
            c.xmf = c.rq * c.dd

    def forward(self, p: Point) -> Point:
        c = self.crs
        lam = adjust_lon(p.x - c.long0)
        phi = p.y

        if c.sphere:
            sinphi = math.sin(phi)
            cosphi = math.cos(phi)
            coslam = math.cos(lam)
            if c.mode in (OBLIQ, EQUIT):
                if c.mode == EQUIT:
                    y = 1.0 + cosphi * coslam
                else:
                    y = 1.0 + c.sinph0 * sinphi + c.cosph0 * cosphi * coslam
                if y <= EPSLN:
                    raise DomainError("laea: point is the antipode of the center")
                y = math.sqrt(2.0 / y)
                x = y * cosphi * math.sin(lam)
                if c.mode == EQUIT:
                    y *= sinphi
                else:
                    y *= c.cosph0 * sinphi - c.sinph0 * cosphi * coslam
            else:
                if c.mode == N_POLE:
                    coslam = -coslam
                if abs(phi + c.lat0) < EPSLN:
                    raise DomainError("laea: point is the antipode of the pole")
                y = FORTPI - 0.5 * phi
                y = 2.0 * (math.cos(y) if c.mode == S_POLE else math.sin(y))
                x = y * math.sin(lam)
                y *= coslam
        else:
            coslam = math.cos(lam)
            sinlam = math.sin(lam)
            q = qsfnz(c.e, math.sin(phi))
            sinb = cosb = 0.0
            if c.mode in (OBLIQ, EQUIT):
                sinb = q / c.qp
                cosb = math.sqrt(1.0 - sinb * sinb)
            if c.mode == OBLIQ:
                b = 1.0 + c.sinb1 * sinb + c.cosb1 * cosb * coslam
            elif c.mode == EQUIT:
                b = 1.0 + cosb * coslam
            elif c.mode == N_POLE:
                b = HALF_PI + phi
                q = c.qp - q
            else:
                b = phi - HALF_PI
                q = c.qp + q
            if abs(b) < EPSLN:
                raise DomainError("laea: point is the antipode of the center")

            if c.mode == OBLIQ:
                b = math.sqrt(2.0 / b)
                y = c.ymf * b * (c.cosb1 * sinb - c.sinb1 * cosb * coslam)
                x = c.xmf * b * cosb * sinlam
            elif c.mode == EQUIT:
                b = math.sqrt(2.0 / (1.0 + cosb * coslam))
                y = b * sinb * c.ymf
                x = c.xmf * b * cosb * sinlam
            elif q >= 0:
                b = math.sqrt(q)
                x = b * sinlam
                y = coslam * (b if c.mode == S_POLE else -b)
            else:
                x = y = 0.0

        p.x = c.a * x + c.x0
        p.y = c.a * y + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / c.a
        y = (p.y - c.y0) / c.a

        if c.sphere:
            rh = math.sqrt(x * x + y * y)
            phi = 0.5 * rh
            if phi > 1.0:
                raise DomainError("laea: point outside the projection domain")
            phi = 2.0 * math.asin(phi)
            sinz = cosz = 0.0
            if c.mode in (OBLIQ, EQUIT):
                sinz = math.sin(phi)
                cosz = math.cos(phi)
            if c.mode == EQUIT:
                phi = 0.0 if abs(rh) <= EPSLN else math.asin(y * sinz / rh)
                x *= sinz
                y = cosz * rh
            elif c.mode == OBLIQ:
                if abs(rh) <= EPSLN:
                    phi = c.lat0
                else:
                    phi = math.asin(cosz * c.sinph0 + y * sinz * c.cosph0 / rh)
                x *= sinz * c.cosph0
                y = (cosz - math.sin(phi) * c.sinph0) * rh
            elif c.mode == N_POLE:
                y = -y
                phi = HALF_PI - phi
            else:
                phi -= HALF_PI
            if y == 0 and c.mode in (EQUIT, OBLIQ):
                lam = 0.0
            else:
                lam = math.atan2(x, y)
        else:
            ab = 0.0
            if c.mode in (EQUIT, OBLIQ):
                x /= c.dd
                y *= c.dd
                rho = math.sqrt(x * x + y * y)
                if rho < EPSLN:
                    p.x = c.long0
                    p.y = c.lat0
                    return p
                sce = 0.5 * rho / c.rq
                if sce > 1.0 + EPSLN:
                    raise DomainError("laea: point outside the projection domain")
                sce = 2.0 * math.asin(min(sce, 1.0))
                cce = math.cos(sce)
                sce = math.sin(sce)
                x *= sce
                if c.mode == OBLIQ:
                    ab = cce * c.sinb1 + y * sce * c.cosb1 / rho
                    y = rho * c.cosb1 * cce - y * c.sinb1 * sce
                else:
                    ab = y * sce / rho
                    y = rho * cce
            else:
                if c.mode == N_POLE:
                    y = -y
                q = x * x + y * y
                if not q:
                    p.x = c.long0
                    p.y = c.lat0
                    return p
                ab = 1.0 - q / c.qp
                if ab < -1.0 - EPSLN:
                    raise DomainError("laea: point outside the projection domain")
                if c.mode == S_POLE:
                    ab = -ab
            lam = math.atan2(x, y)
            phi = authlat(math.asin(max(-1.0, min(1.0, ab))), c.apa)

        p.x = adjust_lon(c.long0 + lam)
        p.y = phi
        return p

    @classmethod
    def type_name(cls) -> str:
        return "laea"


projection_registry.register(LambertAzimuthalEqualArea)
