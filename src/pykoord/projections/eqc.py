"""Equidistant Cylindrical (Plate Carree)."""

from __future__ import annotations

import math

from pykoord.core.common import adjust_lat, adjust_lon
from pykoord.core.point import Point
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry


class EquidistantCylindrical(Projection):
    def init(self) -> None:
        c = self.crs
        if not c.title:
            c.title = "Equidistant Cylindrical (Plate Carre)"
        c.rc = math.cos(c.lat_ts or 0.0)

    def forward(self, p: Point) -> Point:
        c = self.crs
        dlon = adjust_lon(p.x - c.long0)
        dlat = adjust_lat(p.y - c.lat0)
        p.x = c.x0 + c.a * dlon * c.rc
        p.y = c.y0 + c.a * dlat
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        p.x = adjust_lon(c.long0 + (p.x - c.x0) / (c.a * c.rc))
        p.y = adjust_lat(c.lat0 + (p.y - c.y0) / c.a)
        return p

    @classmethod
    def type_name(cls) -> str:
        return "eqc"


projection_registry.register(EquidistantCylindrical)
