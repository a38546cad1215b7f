"""Orthographic projection (spherical): the globe seen from infinity."""

from __future__ import annotations

import math

from pykoord.core.common import EPSLN, HALF_PI, adjust_lon, asinz
from pykoord.core.point import Point
from pykoord.errors import DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry


class Orthographic(Projection):
    def init(self) -> None:
        c = self.crs
        c.sin_p14 = math.sin(c.lat0)
        c.cos_p14 = math.cos(c.lat0)

    def forward(self, p: Point) -> Point:
        c = self.crs
        dlon = adjust_lon(p.x - c.long0)
        sinphi = math.sin(p.y)
        cosphi = math.cos(p.y)
        coslon = math.cos(dlon)
        g = c.sin_p14 * sinphi + c.cos_p14 * cosphi * coslon
        if g < 0 and abs(g) > EPSLN:
            raise DomainError("ortho: point is on the far side of the globe")
        p.x = c.x0 + c.a * cosphi * math.sin(dlon)
        p.y = c.y0 + c.a * (c.cos_p14 * sinphi - c.sin_p14 * cosphi * coslon)
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = p.x - c.x0
        y = p.y - c.y0
        rh = math.sqrt(x * x + y * y)
        if rh > c.a + 1.0e-7:
            raise DomainError("ortho: point is outside the projected disc")
        z = asinz(rh / c.a)
        sinz = math.sin(z)
        cosz = math.cos(z)

        lon = c.long0
        if abs(rh) <= EPSLN:
            p.x = lon
            p.y = c.lat0
            return p
        lat = asinz(cosz * c.sin_p14 + y * sinz * c.cos_p14 / rh)
        if abs(abs(c.lat0) - HALF_PI) <= EPSLN:
            if c.lat0 >= 0:
                lon = adjust_lon(c.long0 + math.atan2(x, -y))
            else:
                lon = adjust_lon(c.long0 - math.atan2(-x, y))
        else:
            lon = adjust_lon(
                c.long0
                + math.atan2(x * sinz, rh * c.cos_p14 * cosz - y * c.sin_p14 * sinz)
            )
        p.x = lon
        p.y = lat
        return p

    @classmethod
    def type_name(cls) -> str:
        return "ortho"


projection_registry.register(Orthographic)
