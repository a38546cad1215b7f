"""Azimuthal Equidistant projection."""

from __future__ import annotations

import math

from pykoord.core.common import (
    EPSLN,
    HALF_PI,
    PI,
    adjust_lon,
    asinz,
    pj_enfn,
    pj_inv_mlfn,
    pj_mlfn,
)
from pykoord.core.point import Point
from pykoord.errors import DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry

N_POLE = 0
S_POLE = 1
EQUIT = 2
OBLIQ = 3

TOL = 1.0e-14


class AzimuthalEquidistant(Projection):
    """Azimuthal Equidistant.

    Polar aspects on an ellipsoid measure meridian arc length exactly.
    Equatorial and oblique aspects use great-circle distance on the
    sphere of radius ``a``.
    """

    def init(self) -> None:
        c = self.crs
        if abs(abs(c.lat0) - HALF_PI) < EPSLN:
            c.mode = S_POLE if c.lat0 < 0 else N_POLE
        elif abs(c.lat0) < EPSLN:
            c.mode = EQUIT
        else:
            c.mode = OBLIQ
        c.sinph0 = math.sin(c.lat0)
        c.cosph0 = math.cos(c.lat0)
        c.polar_ellipsoid = not c.sphere and c.mode in (N_POLE, S_POLE)
        if c.polar_ellipsoid:
            c.en = pj_enfn(c.es)
            if c.mode == N_POLE:
                c.Mp = pj_mlfn(HALF_PI, 1.0, 0.0, c.en)
            else:
                c.Mp = pj_mlfn(-HALF_PI, -1.0, 0.0, c.en)

    def forward(self, p: Point) -> Point:
        c = self.crs
        lam = adjust_lon(p.x - c.long0)
        phi = p.y
        sinphi = math.sin(phi)
        cosphi = math.cos(phi)
        coslam = math.cos(lam)

        if c.polar_ellipsoid:
            if c.mode == N_POLE:
                coslam = -coslam
            rho = abs(c.Mp - pj_mlfn(phi, sinphi, cosphi, c.en))
            x = rho * math.sin(lam)
            y = rho * coslam
        elif c.mode in (EQUIT, OBLIQ):
            if c.mode == EQUIT:
                y = cosphi * coslam
            else:
                y = c.sinph0 * sinphi + c.cosph0 * cosphi * coslam
            if abs(abs(y) - 1.0) < TOL:
                if y < 0.0:
                    raise DomainError("aeqd: point is the antipode of the center")
                x = y = 0.0
            else:
                y = math.acos(y)
                y /= math.sin(y)
                x = y * cosphi * math.sin(lam)
                if c.mode == EQUIT:
                    y *= sinphi
                else:
                    y *= c.cosph0 * sinphi - c.sinph0 * cosphi * coslam
        else:
            if c.mode == N_POLE:
                phi = -phi
                coslam = -coslam
            if abs(phi - HALF_PI) < EPSLN:
                raise DomainError("aeqd: point is the opposite pole")
            y = HALF_PI + phi
            x = y * math.sin(lam)
            y *= coslam

        p.x = c.a * x + c.x0
        p.y = c.a * y + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / c.a
        y = (p.y - c.y0) / c.a
        c_rh = math.hypot(x, y)

        if c.polar_ellipsoid:
            if c_rh < EPSLN:
                p.x = c.long0
                p.y = c.lat0
                return p
            if c.mode == N_POLE:
                phi = pj_inv_mlfn(c.Mp - c_rh, c.es, c.en)
                lam = math.atan2(x, -y)
            else:
                phi = pj_inv_mlfn(c.Mp + c_rh, c.es, c.en)
                lam = math.atan2(x, y)
            p.x = adjust_lon(c.long0 + lam)
            p.y = phi
            return p

        if c_rh > PI:
            if c_rh - EPSLN > PI:
                raise DomainError("aeqd: point outside the projection domain")
            c_rh = PI
        elif c_rh < EPSLN:
            p.x = c.long0
            p.y = c.lat0
            return p

        if c.mode in (EQUIT, OBLIQ):
            sinc = math.sin(c_rh)
            cosc = math.cos(c_rh)
            if c.mode == EQUIT:
                phi = asinz(y * sinc / c_rh)
                x *= sinc
                y = cosc * c_rh
            else:
                phi = asinz(cosc * c.sinph0 + y * sinc * c.cosph0 / c_rh)
                y = (cosc - c.sinph0 * math.sin(phi)) * c_rh
                x *= sinc * c.cosph0
            lam = 0.0 if y == 0.0 else math.atan2(x, y)
        elif c.mode == N_POLE:
            phi = HALF_PI - c_rh
            lam = math.atan2(x, -y)
        else:
            phi = c_rh - HALF_PI
            lam = math.atan2(x, y)
        p.x = adjust_lon(c.long0 + lam)
        p.y = phi
        return p

    @classmethod
    def type_name(cls) -> str:
        return "aeqd"


projection_registry.register(AzimuthalEquidistant)
