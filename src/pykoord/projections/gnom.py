"""Gnomonic projection (spherical): great circles map to straight lines."""

from __future__ import annotations

import math

from pykoord.core.common import EPSLN, adjust_lon, asinz
from pykoord.core.point import Point
from pykoord.errors import DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry


class Gnomonic(Projection):
    def init(self) -> None:
        c = self.crs
        c.sin_p14 = math.sin(c.lat0)
        c.cos_p14 = math.cos(c.lat0)
        c.rc = 1.0

    def forward(self, p: Point) -> Point:
        c = self.crs
        dlon = adjust_lon(p.x - c.long0)
        sinphi = math.sin(p.y)
        cosphi = math.cos(p.y)
        coslon = math.cos(dlon)
        g = c.sin_p14 * sinphi + c.cos_p14 * cosphi * coslon
        if g <= EPSLN:
            raise DomainError("gnom: point is 90 degrees or more from the center")
        p.x = c.x0 + c.a * c.k0 * cosphi * math.sin(dlon) / g
        p.y = c.y0 + c.a * c.k0 * (c.cos_p14 * sinphi - c.sin_p14 * cosphi * coslon) / g
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / (c.a * c.k0)
        y = (p.y - c.y0) / (c.a * c.k0)
        rh = math.sqrt(x * x + y * y)
        if rh:
            z = math.atan2(rh, c.rc)
            sinz = math.sin(z)
            cosz = math.cos(z)
            lat = asinz(cosz * c.sin_p14 + y * sinz * c.cos_p14 / rh)
            lon = math.atan2(x * sinz, rh * c.cos_p14 * cosz - y * c.sin_p14 * sinz)
            lon = adjust_lon(c.long0 + lon)
        else:
            lat = c.lat0
            lon = c.long0
        p.x = lon
        p.y = lat
        return p

    @classmethod
    def type_name(cls) -> str:
        return "gnom"


projection_registry.register(Gnomonic)
