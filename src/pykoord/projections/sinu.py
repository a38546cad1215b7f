"""Sinusoidal (Sanson-Flamsteed) equal-area projection."""

from __future__ import annotations

import math

from pykoord.core.common import (
    EPSLN,
    HALF_PI,
    adjust_lon,
    pj_enfn,
    pj_inv_mlfn,
    pj_mlfn,
)
from pykoord.core.point import Point
from pykoord.errors import DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry


class Sinusoidal(Projection):
    def init(self) -> None:
        c = self.crs
        if c.sphere:
            c.n = 1.0
            c.m = 0.0
            c.C_y = math.sqrt((c.m + 1.0) / c.n)
            c.C_x = c.C_y / (c.m + 1.0)
        else:
            c.en = pj_enfn(c.es)

    def forward(self, p: Point) -> Point:
        c = self.crs
        lon = adjust_lon(p.x - c.long0)
        lat = p.y
        if c.sphere:
            if c.n != 1.0:
                lat = math.asin(c.n * math.sin(lat))
            x = c.a * c.C_x * lon * (c.m + math.cos(lat))
            y = c.a * c.C_y * lat
        else:
            s = math.sin(lat)
            cs = math.cos(lat)
            y = c.a * pj_mlfn(lat, s, cs, c.en)
            x = c.a * lon * cs / math.sqrt(1.0 - c.es * s * s)
        p.x = x + c.x0
        p.y = y + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = p.x - c.x0
        y = p.y - c.y0
        if c.sphere:
            y /= c.a * c.C_y
            lat = math.asin(math.sin(y) / c.n) if c.n != 1.0 else y
            lon = adjust_lon(c.long0 + x / (c.a * c.C_x * (c.m + math.cos(y))))
        else:
            lat = pj_inv_mlfn(y / c.a, c.es, c.en)
            s = abs(lat)
            if s < HALF_PI:
                s = math.sin(lat)
                lon = adjust_lon(
                    c.long0 + x * math.sqrt(1.0 - c.es * s * s) / (c.a * math.cos(lat))
                )
            elif s - EPSLN < HALF_PI:
                lon = c.long0
            else:
                raise DomainError("sinu: point outside the projection domain")
        p.x = lon
        p.y = lat
        return p

    @classmethod
    def type_name(cls) -> str:
        return "sinu"


projection_registry.register(Sinusoidal)
