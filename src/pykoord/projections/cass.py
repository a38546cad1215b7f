"""Cassini-Soldner projection."""

from __future__ import annotations

import math

from pykoord.core.common import adjust_lon, pj_enfn, pj_inv_mlfn, pj_mlfn
from pykoord.core.point import Point
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry

C1 = 1.0 / 6.0
C2 = 1.0 / 120.0
C3 = 1.0 / 24.0
C4 = 1.0 / 3.0
C5 = 1.0 / 15.0


class CassiniSoldner(Projection):
    """Cassini-Soldner; the ellipsoidal form is a series in the longitude
    difference and is accurate within a few degrees of the central meridian."""

    def init(self) -> None:
        c = self.crs
        if not c.sphere:
            c.en = pj_enfn(c.es)
            c.m0 = pj_mlfn(c.lat0, math.sin(c.lat0), math.cos(c.lat0), c.en)

    def forward(self, p: Point) -> Point:
        c = self.crs
        lam = adjust_lon(p.x - c.long0)
        phi = p.y
        if c.sphere:
            x = math.asin(math.cos(phi) * math.sin(lam))
            y = math.atan2(math.tan(phi), math.cos(lam)) - c.lat0
        else:
            n = math.sin(phi)
            cc = math.cos(phi)
            y = pj_mlfn(phi, n, cc, c.en)
            n = 1.0 / math.sqrt(1.0 - c.es * n * n)
            tn = math.tan(phi)
            t = tn * tn
            a1 = lam * cc
            cc *= c.es * cc / (1.0 - c.es)
            a2 = a1 * a1
            x = n * a1 * (1.0 - a2 * t * (C1 - (8.0 - t + 8.0 * cc) * a2 * C2))
            y -= c.m0 - n * tn * a2 * (0.5 + (5.0 - t + 6.0 * cc) * a2 * C3)
        p.x = c.a * x + c.x0
        p.y = c.a * y + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / c.a
        y = (p.y - c.y0) / c.a
        if c.sphere:
            dd = y + c.lat0
            phi = math.asin(math.sin(dd) * math.cos(x))
            lam = math.atan2(math.tan(x), math.cos(dd))
        else:
            ph1 = pj_inv_mlfn(c.m0 + y, c.es, c.en)
            tn = math.tan(ph1)
            t = tn * tn
            n = math.sin(ph1)
            r = 1.0 / (1.0 - c.es * n * n)
            n = math.sqrt(r)
            r *= (1.0 - c.es) * n
            dd = x / n
            d2 = dd * dd
            phi = ph1 - (n * tn / r) * d2 * (0.5 - (1.0 + 3.0 * t) * d2 * C3)
            lam = dd * (1.0 + t * d2 * (-C4 + (1.0 + 3.0 * t) * d2 * C5)) / math.cos(ph1)
        p.x = adjust_lon(c.long0 + lam)
        p.y = phi
        return p

    @classmethod
    def type_name(cls) -> str:
        return "cass"


projection_registry.register(CassiniSoldner)
