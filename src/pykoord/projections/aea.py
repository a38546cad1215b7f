"""Albers Equal-Area Conic projection."""

from __future__ import annotations

import math

from pykoord.core.common import EPSLN, HALF_PI, adjust_lon, asinz, msfnz, qsfnz
from pykoord.core.point import Point
from pykoord.errors import ConfigError, ConvergenceError, DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry

PHI1Z_MAX_ITER = 25
PHI1Z_TOL = 1.0e-7


def phi1z(eccent: float, qs: float) -> float:
    """Latitude from the authalic ``qs`` value by Newton iteration."""
    phi = asinz(0.5 * qs)
    if eccent < EPSLN:
        return phi
    eccnts = eccent * eccent
    for _ in range(PHI1Z_MAX_ITER):
        sinphi = math.sin(phi)
        cosphi = math.cos(phi)
        con = eccent * sinphi
        com = 1.0 - con * con
        dphi = 0.5 * com * com / cosphi * (
            qs / (1.0 - eccnts)
            - sinphi / com
            + 0.5 / eccent * math.log((1.0 - con) / (1.0 + con))
        )
        phi += dphi
        if abs(dphi) <= PHI1Z_TOL:
            return phi
    raise ConvergenceError("aea: phi1z did not converge")


class AlbersEqualArea(Projection):
    """Albers conic with standard parallels ``lat1`` and ``lat2``.

    On a sphere the authalic value ``qs`` reduces to ``2 sin(phi)`` and the
    inverse needs no iteration.
    """

    def _qs(self, sinphi: float) -> float:
        c = self.crs
        if c.sphere:
            return 2.0 * sinphi
        return qsfnz(c.e3, sinphi)

    def init(self) -> None:
        c = self.crs
        lat1 = c.lat1 or 0.0
        lat2 = c.lat2 or 0.0
        if abs(lat1 + lat2) < EPSLN:
            raise ConfigError("aea: standard parallels are equal and opposite")
        c.e3 = c.e
        sin_po = math.sin(lat1)
        cos_po = math.cos(lat1)
        ms1 = msfnz(c.e3, sin_po, cos_po)
        qs1 = self._qs(sin_po)
        con = sin_po

        sin_po = math.sin(lat2)
        cos_po = math.cos(lat2)
        ms2 = msfnz(c.e3, sin_po, cos_po)
        qs2 = self._qs(sin_po)

        qs0 = self._qs(math.sin(c.lat0))

        if abs(lat1 - lat2) > EPSLN:
            c.ns0 = (ms1 * ms1 - ms2 * ms2) / (qs2 - qs1)
        else:
            c.ns0 = con
        c.c = ms1 * ms1 + c.ns0 * qs1
        c.rh = c.a * math.sqrt(c.c - c.ns0 * qs0) / c.ns0

    def forward(self, p: Point) -> Point:
        c = self.crs
        qs = self._qs(math.sin(p.y))
        rh1 = c.a * math.sqrt(c.c - c.ns0 * qs) / c.ns0
        theta = c.ns0 * adjust_lon(p.x - c.long0)
        p.x = rh1 * math.sin(theta) + c.x0
        p.y = c.rh - rh1 * math.cos(theta) + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = p.x - c.x0
        y = c.rh - p.y + c.y0
        if c.ns0 >= 0:
            rh1 = math.sqrt(x * x + y * y)
            con = 1.0
        else:
            rh1 = -math.sqrt(x * x + y * y)
            con = -1.0
        theta = 0.0
        if rh1 != 0.0:
            theta = math.atan2(con * x, con * y)
        con = rh1 * c.ns0 / c.a
        qs = (c.c - con * con) / c.ns0
        if c.sphere:
            if abs(qs) > 2.0 + EPSLN:
                raise DomainError("aea: point outside the projection domain")
            lat = asinz(0.5 * qs)
        elif c.e3 >= 1.0e-10:
            con = 1.0 - 0.5 * (1.0 - c.es) * math.log((1.0 - c.e3) / (1.0 + c.e3)) / c.e3
            if abs(abs(con) - abs(qs)) > 1.0e-10:
                lat = phi1z(c.e3, qs)
            else:
                lat = HALF_PI if qs >= 0 else -HALF_PI
        else:
            lat = phi1z(c.e3, qs)
        p.x = adjust_lon(theta / c.ns0 + c.long0)
        p.y = lat
        return p

    @classmethod
    def type_name(cls) -> str:
        return "aea"


projection_registry.register(AlbersEqualArea)
