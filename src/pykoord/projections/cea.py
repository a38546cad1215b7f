"""Cylindrical Equal Area (Lambert, Behrmann, Gall-Peters via ``lat_ts``)."""

from __future__ import annotations

import math

from pykoord.core.common import adjust_lon
from pykoord.core.point import Point
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry


class CylindricalEqualArea(Projection):
    """Spherical form; ellipsoidal CRSs use their semi-major axis as radius."""

    def init(self) -> None:
        self.crs.cos_ts = math.cos(self.crs.lat_ts or 0.0)

    def forward(self, p: Point) -> Point:
        c = self.crs
        x = c.x0 + c.a * adjust_lon(p.x - c.long0) * c.cos_ts
        y = c.y0 + c.a * math.sin(p.y) / c.cos_ts
        p.x = x
        p.y = y
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = p.x - c.x0
        y = p.y - c.y0
        p.x = adjust_lon(c.long0 + x / c.a / c.cos_ts)
        p.y = math.asin(y / c.a * c.cos_ts)
        return p

    @classmethod
    def type_name(cls) -> str:
        return "cea"


projection_registry.register(CylindricalEqualArea)
