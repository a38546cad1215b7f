"""Equidistant Conic projection."""

from __future__ import annotations

import math

from pykoord.core.common import (
    EPSLN,
    HALF_PI,
    adjust_lon,
    msfnz,
    pj_enfn,
    pj_inv_mlfn,
    pj_mlfn,
)
from pykoord.core.point import Point
from pykoord.errors import ConfigError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry


class EquidistantConic(Projection):
    """Equidistant Conic with standard parallels ``lat1`` and ``lat2``.

    With only ``lat_1`` given the cone is tangent at that parallel.
    """

    def init(self) -> None:
        c = self.crs
        lat1 = c.lat1 or 0.0
        lat2 = lat1 if c.lat2 is None else c.lat2
        if abs(lat1 + lat2) < EPSLN:
            raise ConfigError("eqdc: standard parallels are equal and opposite")
        sinphi = math.sin(lat1)
        cosphi = math.cos(lat1)
        secant = abs(lat1 - lat2) >= EPSLN
        c.ns = sinphi

        if c.sphere:
            if secant:
                c.ns = (cosphi - math.cos(lat2)) / (lat2 - lat1)
            c.g = lat1 + cosphi / c.ns
            c.rho0 = c.g - c.lat0
            return

        c.en = pj_enfn(c.es)
        m1 = msfnz(c.e, sinphi, cosphi)
        ml1 = pj_mlfn(lat1, sinphi, cosphi, c.en)
        if secant:
            sinphi = math.sin(lat2)
            cosphi = math.cos(lat2)
            c.ns = (m1 - msfnz(c.e, sinphi, cosphi)) / (pj_mlfn(lat2, sinphi, cosphi, c.en) - ml1)
        c.g = ml1 + m1 / c.ns
        c.rho0 = c.g - pj_mlfn(c.lat0, math.sin(c.lat0), math.cos(c.lat0), c.en)

    def _meridian(self, phi: float) -> float:
        c = self.crs
        if c.sphere:
            return phi
        return pj_mlfn(phi, math.sin(phi), math.cos(phi), c.en)

    def forward(self, p: Point) -> Point:
        c = self.crs
        rho = c.g - self._meridian(p.y)
        theta = c.ns * adjust_lon(p.x - c.long0)
        p.x = c.a * rho * math.sin(theta) + c.x0
        p.y = c.a * (c.rho0 - rho * math.cos(theta)) + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / c.a
        y = c.rho0 - (p.y - c.y0) / c.a
        rho = math.hypot(x, y)
        if rho != 0.0:
            if c.ns < 0:
                rho = -rho
                x = -x
                y = -y
            phi = c.g - rho
            if not c.sphere:
                phi = pj_inv_mlfn(phi, c.es, c.en)
            lam = math.atan2(x, y) / c.ns
        else:
            lam = 0.0
            phi = HALF_PI if c.ns > 0 else -HALF_PI
        p.x = adjust_lon(c.long0 + lam)
        p.y = phi
        return p

    @classmethod
    def type_name(cls) -> str:
        return "eqdc"


projection_registry.register(EquidistantConic)
