"""Miller Cylindrical projection (spherical)."""

from __future__ import annotations

import math

from pykoord.core.common import FORTPI, adjust_lon
from pykoord.core.point import Point
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry


class MillerCylindrical(Projection):
    def forward(self, p: Point) -> Point:
        c = self.crs
        x = c.x0 + c.a * adjust_lon(p.x - c.long0)
        y = c.y0 + c.a * 1.25 * math.log(math.tan(FORTPI + p.y / 2.5))
        p.x = x
        p.y = y
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = p.x - c.x0
        y = p.y - c.y0
        p.x = adjust_lon(c.long0 + x / c.a)
        p.y = 2.5 * (math.atan(math.exp(0.8 * y / c.a)) - FORTPI)
        return p

    @classmethod
    def type_name(cls) -> str:
        return "mill"


projection_registry.register(MillerCylindrical)
